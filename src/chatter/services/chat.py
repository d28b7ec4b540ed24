"""Chat business logic.

Orchestrates repository calls for the chat pages: the paged list of
people you can message, a receiver's conversation, and sending a message
together with the activity-feed entry that announces it.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.logging import get_logger
from chatter.models import Activity, Chat, User
from chatter.repositories.activity import save_activity
from chatter.repositories.chat import ChatCriteria, list_chats, save_chat
from chatter.repositories.user import UserCriteria, count_users, list_users
from chatter.schemas.pagination import Paginated

logger = get_logger(__name__)

SENT_MESSAGE = "sent a message to"


async def get_user_page(db: AsyncSession, page: int, per_page: int) -> Paginated[User]:
    """Fetch page ``page`` (zero-based) of users that have a GitHub login.

    Two dependent queries on the request's session:
    1. The filtered page of users
    2. Total user count, unfiltered
    """
    users = await list_users(db, UserCriteria(has_github=True), page, per_page)
    total = await count_users(db)
    return Paginated(items=users, total=total, page=page, per_page=per_page)


async def get_conversation(db: AsyncSession, receiver_id: int) -> list[Chat]:
    """Every chat addressed to ``receiver_id``."""
    return await list_chats(db, ChatCriteria(receiver_id=receiver_id))


async def send_chat(db: AsyncSession, sender_id: int, receiver_id: int, message: str) -> Chat:
    """Store a chat and the activity that announces it.

    The two writes are independent: the activity is recorded even when the
    chat fails (its ``activity_key`` is then NULL), and an activity failure
    is only logged. A chat failure is re-raised after the activity attempt.
    """
    chat = Chat(message=message, receiver_id=receiver_id, sender_id=sender_id)
    logger.info("chat_instance", sender_id=sender_id, receiver_id=receiver_id)

    chat_error: SQLAlchemyError | None = None
    try:
        await save_chat(db, chat)
    except SQLAlchemyError as exc:
        chat_error = exc
        logger.error("chat_save_failed", error=str(exc))

    activity = Activity(
        activity_stream=SENT_MESSAGE,
        activity_key=chat.id,
        receiver_id=receiver_id,
        sender_id=sender_id,
    )
    try:
        await save_activity(db, activity)
    except SQLAlchemyError as exc:
        logger.error("activity_save_failed", activity_key=chat.id, error=str(exc))

    if chat_error is not None:
        raise chat_error
    logger.info("chat_created", chat_id=chat.id)
    return chat
