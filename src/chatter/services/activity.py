"""Activity feed business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from chatter.models import Activity
from chatter.repositories.activity import count_activities, list_activities
from chatter.schemas.pagination import Paginated


async def get_activity_page(db: AsyncSession, page: int, per_page: int) -> Paginated[Activity]:
    """Fetch page ``page`` (zero-based) of the feed plus the total activity count."""
    activities = await list_activities(db, page, per_page)
    total = await count_activities(db)
    return Paginated(items=activities, total=total, page=page, per_page=per_page)
