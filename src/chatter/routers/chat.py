"""Chat endpoints."""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from chatter.config import settings
from chatter.dependencies import DB, CurrentUserDep, LoadedChat
from chatter.logging import get_logger
from chatter.pagination import create_pagination, page_index
from chatter.schemas.chat import ChatForm, ChatResponse
from chatter.services.chat import get_conversation, get_user_page, send_chat
from chatter.views import LIST_UNAVAILABLE, render

logger = get_logger(__name__)

router = APIRouter()


@router.get("/chat")
async def index(request: Request, db: DB, page: str | None = None) -> Response:
    """List the users with a GitHub login, ten per page."""
    try:
        result = await get_user_page(db, page_index(page), settings.per_page)
    except SQLAlchemyError as exc:
        logger.error("chat_index_failed", error=str(exc))
        return render(request, "pages/500.html", {"errors": [LIST_UNAVAILABLE]}, status_code=500)

    pagination = create_pagination(
        result.number, result.pages, request.query_params.multi_items()
    )
    return render(
        request,
        "chat/index.html",
        {
            "title": "Chat User List",
            "users": result.items,
            "page": result.number,
            "pagination": pagination,
            "pages": result.pages,
        },
    )


@router.get("/chat/get/{user_id}")
async def get_chat(request: Request, db: DB, user_id: int) -> Response:
    """Show every message addressed to ``user_id``."""
    chats = await get_conversation(db, user_id)
    return render(request, "chat/chat.html", {"chats": chats})


@router.get("/chat/{chat_id}", response_model=ChatResponse)
async def show(chat: LoadedChat) -> ChatResponse:
    """Dump a single chat as JSON."""
    return ChatResponse.model_validate(chat)


@router.post("/chats")
async def create(
    request: Request,
    db: DB,
    user: CurrentUserDep,
    form: Annotated[ChatForm, Form()],
) -> Response:
    """Send a message, then go back to the page it was sent from."""
    try:
        await send_chat(db, sender_id=user.id, receiver_id=form.receiver, message=form.body)
    except SQLAlchemyError:
        return render(request, "pages/500.html", status_code=500)
    return RedirectResponse(request.headers.get("referer", "/"), status_code=302)
