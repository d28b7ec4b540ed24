"""Comment business logic.

Adding a comment also records an "added a comment" activity addressed to
the tweet's author. Unlike chats, the activity is only attempted once the
comment is stored, and a failure in either write is raised to the caller.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.logging import get_logger
from chatter.models import Activity, Comment, Tweet
from chatter.repositories.activity import save_activity
from chatter.repositories.comment import delete_comment, save_comment

logger = get_logger(__name__)

ADDED_COMMENT = "added a comment"


async def add_comment(db: AsyncSession, tweet: Tweet, user_id: int, body: str) -> Comment:
    comment = Comment(body=body, tweet_id=tweet.id, user_id=user_id)
    try:
        await save_comment(db, comment)
    except SQLAlchemyError as exc:
        logger.error("comment_save_failed", tweet_id=tweet.id, error=str(exc))
        raise

    activity = Activity(
        activity_stream=ADDED_COMMENT,
        activity_key=tweet.id,
        sender_id=user_id,
        receiver_id=tweet.user_id,
    )
    logger.info("activity_instance", activity_stream=ADDED_COMMENT, activity_key=tweet.id)
    try:
        await save_activity(db, activity)
    except SQLAlchemyError as exc:
        logger.error("activity_save_failed", activity_key=tweet.id, error=str(exc))
        raise
    return comment


async def remove_comment(db: AsyncSession, comment: Comment) -> None:
    await delete_comment(db, comment)
    logger.info("comment_deleted", comment_id=comment.id, tweet_id=comment.tweet_id)
