"""Server-side HTML rendering.

All handlers go through ``render`` so the template directory and the
globals every page can rely on are configured in one place.
"""

from collections.abc import Mapping
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from chatter.config import settings

templates = Jinja2Templates(directory=settings.templates_dir)

# Shown on the 500 page when a list query fails; driver text only goes to the log.
LIST_UNAVAILABLE = "This page could not be loaded right now. Please try again later."


def render(
    request: Request,
    template: str,
    context: Mapping[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """Render ``template`` (e.g. ``"chat/index.html"``) with ``context``."""
    return templates.TemplateResponse(
        request,
        template,
        dict(context or {}),
        status_code=status_code,
    )
