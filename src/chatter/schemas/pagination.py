"""Paged query results shared by the list services.

Paginated[T] is a plain dataclass: services return it, routers hand its
fields to a template. It knows nothing about serialization.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from chatter.pagination import total_pages

T = TypeVar("T")


@dataclass
class Paginated(Generic[T]):
    """One page of rows plus the count used to size the pager.

    ``page`` is the zero-based index that was queried. ``total`` comes from a
    separate count query and is not required to match the list filter::

        # services/chat.py
        users = await list_users(db, criteria, page, per_page)
        total = await count_users(db)
        return Paginated(items=users, total=total, page=page, per_page=per_page)
    """

    items: list[T]
    total: int
    page: int
    per_page: int

    @property
    def number(self) -> int:
        """The 1-based page number shown to the user."""
        return self.page + 1

    @property
    def pages(self) -> int:
        return total_pages(self.total, self.per_page)
