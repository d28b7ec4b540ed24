"""Comment endpoints."""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from chatter.dependencies import DB, CurrentUserDep, LoadedComment, LoadedTweet
from chatter.services.comment import add_comment, remove_comment
from chatter.views import render

router = APIRouter()


@router.post("/tweets/{tweet_id}/comments")
async def create(
    request: Request,
    db: DB,
    tweet: LoadedTweet,
    user: CurrentUserDep,
    body: Annotated[str, Form()] = "",
) -> Response:
    if not body:
        return RedirectResponse("/", status_code=302)
    try:
        await add_comment(db, tweet, user.id, body)
    except SQLAlchemyError:
        return render(request, "pages/500.html", status_code=500)
    return RedirectResponse("/", status_code=302)


@router.delete("/tweets/{tweet_id}/comments/{comment_id}")
async def destroy(db: DB, comment: LoadedComment) -> Response:
    try:
        await remove_comment(db, comment)
    except SQLAlchemyError:
        return Response(status_code=400)
    return Response(status_code=200)
