"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Loaders (load_chat, load_tweet, load_comment) resolve path ids into
models before the handler runs; an unknown id raises NotFoundError, which
main.py renders as the 404 page.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.db.session import get_db
from chatter.exceptions import NotFoundError
from chatter.models import Chat, Comment, Tweet
from chatter.repositories.chat import get_chat
from chatter.repositories.comment import get_comment, get_tweet

DB = Annotated[AsyncSession, Depends(get_db)]


@dataclass(frozen=True)
class CurrentUser:
    """The signed-in user making the request."""

    id: int


async def get_current_user(
    x_user_id: Annotated[int | None, Header()] = None,
) -> CurrentUser:
    """Resolve the signed-in user from the X-User-ID header.

    The session layer in front of the app sets this header after login.
    """
    if x_user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return CurrentUser(id=x_user_id)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]


async def load_chat(chat_id: int, db: DB) -> Chat:
    chat = await get_chat(db, chat_id)
    if chat is None:
        raise NotFoundError("chat", chat_id)
    return chat


async def load_tweet(tweet_id: int, db: DB) -> Tweet:
    tweet = await get_tweet(db, tweet_id)
    if tweet is None:
        raise NotFoundError("tweet", tweet_id)
    return tweet


LoadedChat = Annotated[Chat, Depends(load_chat)]
LoadedTweet = Annotated[Tweet, Depends(load_tweet)]


async def load_comment(comment_id: int, tweet: LoadedTweet, db: DB) -> Comment:
    comment = await get_comment(db, tweet.id, comment_id)
    if comment is None:
        raise NotFoundError("comment", comment_id)
    return comment


LoadedComment = Annotated[Comment, Depends(load_comment)]
