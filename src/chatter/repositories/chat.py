"""Chat data-access layer."""

from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.models import Chat


@dataclass(frozen=True)
class ChatCriteria:
    """Filter for chat lists."""

    receiver_id: int | None = None


async def get_chat(db: AsyncSession, chat_id: int) -> Chat | None:
    """Return the chat with ``chat_id``, or None."""
    result = await db.execute(select(Chat).where(Chat.id == chat_id))
    return result.scalar_one_or_none()


async def list_chats(db: AsyncSession, criteria: ChatCriteria) -> list[Chat]:
    """Return every chat matching ``criteria``, oldest first. No paging."""
    stmt = select(Chat).order_by(Chat.created_at, Chat.id)
    if criteria.receiver_id is not None:
        stmt = stmt.where(Chat.receiver_id == criteria.receiver_id)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def save_chat(db: AsyncSession, chat: Chat) -> Chat:
    """Insert ``chat`` inside its own savepoint and return it with its id set.

    A failure rolls back only this savepoint, so the request's session stays
    usable for the writes that follow.
    """
    async with db.begin_nested():
        db.add(chat)
    return chat
