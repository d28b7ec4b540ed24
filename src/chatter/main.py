from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from chatter.db.session import shutdown
from chatter.dependencies import DB, get_current_user
from chatter.exceptions import NotFoundError
from chatter.logging import get_logger
from chatter.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from chatter.routers import activity, chat, comment
from chatter.schemas.error import ErrorDetail, ErrorResponse
from chatter.views import render

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close database connections gracefully on shutdown."""
    yield
    await shutdown()


app = FastAPI(lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)

# Every page route requires a signed-in user; /health does not.
signed_in = [Depends(get_current_user)]
app.include_router(activity.router, dependencies=signed_in)
app.include_router(chat.router, dependencies=signed_in)
app.include_router(comment.router, dependencies=signed_in)


def _error_json(code: str, message: str) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message)).model_dump()


def _not_found_page(request: Request, message: str) -> Response:
    return render(
        request,
        "pages/404.html",
        {"url": str(request.url.path), "error": message},
        status_code=404,
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    """Render the 404 page for ids the loaders could not resolve."""
    logger.info("not_found", entity=exc.entity, identifier=str(exc.identifier))
    return _not_found_page(request, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Unmatched routes get the 404 page; other HTTP errors get the JSON envelope."""
    if exc.status_code == 404:
        return _not_found_page(request, "Not found")
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_json("http_error", str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=_error_json("validation_error", "Invalid request parameters"),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> Response:
    """Log unhandled exceptions and render the generic error page.

    - Logs full exception with traceback (includes request_id from context)
    - No stack trace reaches the client
    - Keeps the X-Request-ID header that RequestIDMiddleware could not add
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    response = render(request, "pages/500.html", status_code=500)
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


@app.get("/health")
async def health(db: DB) -> dict[str, str]:
    """Health check endpoint: verifies database connectivity."""
    await db.execute(text("SELECT 1"))
    return {"status": "ok"}
