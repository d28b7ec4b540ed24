"""Page arithmetic and page-link construction for list views.

Pure functions only: no database, no request objects. Routers turn the
incoming ``?page=`` value into a zero-based index with ``page_index``;
services turn a row count into a page count with ``total_pages``; templates
render the ``Pagination`` that ``create_pagination`` returns.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from math import ceil
from urllib.parse import urlencode

from chatter.config import settings


@dataclass(frozen=True)
class PageLink:
    """One numbered link in the pager."""

    number: int
    href: str
    active: bool = False


@dataclass(frozen=True)
class Pagination:
    """Everything a template needs to draw a pager."""

    current: int
    total_pages: int
    links: list[PageLink] = field(default_factory=list)
    previous: str | None = None
    next: str | None = None


def page_index(raw_page: str | int | None) -> int:
    """Return the zero-based page index for a raw ``page`` query value.

    Missing, non-numeric, zero and negative values all select the first page.
    """
    try:
        page = int(raw_page) if raw_page is not None else 1
    except (TypeError, ValueError):
        page = 1
    return (page if page > 0 else 1) - 1


def total_pages(count: int, per_page: int) -> int:
    """Number of pages needed to show ``count`` rows, ``per_page`` at a time."""
    if count <= 0 or per_page <= 0:
        return 0
    return ceil(count / per_page)


def _href(query_params: list[tuple[str, str]], page: int) -> str:
    pairs = [(key, value) for key, value in query_params if key != "page"]
    pairs.append(("page", str(page)))
    return "?" + urlencode(pairs)


def create_pagination(
    current_page: int,
    pages: int,
    query_params: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    window: int | None = None,
) -> Pagination:
    """Build the pager for ``current_page`` (1-based) out of ``pages``.

    Links cover ``window`` pages on either side of the current one, clipped
    to ``[1, pages]``. The current page is not clamped: asking for a page past
    the end yields whatever part of the window still falls inside the range,
    and no ``next`` link. Other query parameters, repeated keys included, are
    carried into every href; pass ``request.query_params.multi_items()`` to keep
    them all.
    """
    if query_params is None:
        params: list[tuple[str, str]] = []
    elif isinstance(query_params, Mapping):
        params = list(query_params.items())
    else:
        params = list(query_params)
    span = settings.pagination_window if window is None else max(window, 0)

    first = max(1, current_page - span)
    last = min(pages, current_page + span)
    links = [
        PageLink(number=number, href=_href(params, number), active=number == current_page)
        for number in range(first, last + 1)
    ]

    previous = _href(params, current_page - 1) if 1 < current_page <= pages else None
    next_ = _href(params, current_page + 1) if 1 <= current_page < pages else None

    return Pagination(
        current=current_page,
        total_pages=max(pages, 0),
        links=links,
        previous=previous,
        next=next_,
    )
