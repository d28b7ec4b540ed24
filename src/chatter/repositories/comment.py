"""Tweet lookup and comment data-access layer."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.models import Comment, Tweet


async def get_tweet(db: AsyncSession, tweet_id: int) -> Tweet | None:
    """Return the tweet with ``tweet_id``, or None."""
    result = await db.execute(select(Tweet).where(Tweet.id == tweet_id))
    return result.scalar_one_or_none()


async def get_comment(db: AsyncSession, tweet_id: int, comment_id: int) -> Comment | None:
    """Return comment ``comment_id`` if it belongs to tweet ``tweet_id``."""
    stmt = select(Comment).where(Comment.id == comment_id, Comment.tweet_id == tweet_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def save_comment(db: AsyncSession, comment: Comment) -> Comment:
    """Insert ``comment`` inside its own savepoint."""
    async with db.begin_nested():
        db.add(comment)
    return comment


async def delete_comment(db: AsyncSession, comment: Comment) -> None:
    """Delete ``comment`` inside its own savepoint."""
    async with db.begin_nested():
        await db.delete(comment)
