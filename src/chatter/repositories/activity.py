"""Activity feed data-access layer."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.models import Activity


async def list_activities(db: AsyncSession, page: int, per_page: int) -> list[Activity]:
    """Return page ``page`` (zero-based) of the feed, newest first."""
    stmt = (
        select(Activity)
        .order_by(Activity.created_at.desc(), Activity.id.desc())
        .offset(page * per_page)
        .limit(per_page)
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def count_activities(db: AsyncSession) -> int:
    """Return total number of activities."""
    result = await db.execute(select(func.count(Activity.id)))
    return result.scalar_one()


async def save_activity(db: AsyncSession, activity: Activity) -> Activity:
    """Insert ``activity`` inside its own savepoint."""
    async with db.begin_nested():
        db.add(activity)
    return activity
