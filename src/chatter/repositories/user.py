"""User data-access layer.

Pure query functions with no business logic and no HTTP concerns.
Each function takes a session and returns models or scalars.
"""

from dataclasses import dataclass

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.models import User


@dataclass(frozen=True)
class UserCriteria:
    """Filter for user lists. ``has_github`` keeps only users with a GitHub login."""

    has_github: bool = False


def _filtered(stmt: Select[tuple[User]], criteria: UserCriteria) -> Select[tuple[User]]:
    if criteria.has_github:
        stmt = stmt.where(User.github.is_not(None))
    return stmt


async def list_users(
    db: AsyncSession, criteria: UserCriteria, page: int, per_page: int
) -> list[User]:
    """Return page ``page`` (zero-based) of users matching ``criteria``."""
    stmt = (
        _filtered(select(User), criteria)
        .order_by(User.id)
        .offset(page * per_page)
        .limit(per_page)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_users(db: AsyncSession) -> int:
    """Return total number of users, regardless of any list filter."""
    result = await db.execute(select(func.count(User.id)))
    return result.scalar_one()
