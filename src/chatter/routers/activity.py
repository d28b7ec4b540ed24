"""Activity feed endpoints."""

from fastapi import APIRouter, Request
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from chatter.config import settings
from chatter.dependencies import DB
from chatter.logging import get_logger
from chatter.pagination import create_pagination, page_index
from chatter.services.activity import get_activity_page
from chatter.views import LIST_UNAVAILABLE, render

logger = get_logger(__name__)

router = APIRouter()


@router.get("/activities")
async def index(request: Request, db: DB, page: str | None = None) -> Response:
    """Paged activity feed, newest first."""
    try:
        result = await get_activity_page(db, page_index(page), settings.per_page)
    except SQLAlchemyError as exc:
        logger.error("activity_index_failed", error=str(exc))
        return render(request, "pages/500.html", {"errors": [LIST_UNAVAILABLE]}, status_code=500)

    pagination = create_pagination(
        result.number, result.pages, request.query_params.multi_items()
    )
    return render(
        request,
        "activity/index.html",
        {
            "title": "Activities",
            "activities": result.items,
            "page": result.number,
            "pagination": pagination,
            "pages": result.pages,
        },
    )
