"""Error envelope for non-HTML error responses.

Page-level failures render templates; protocol-level ones (401, 422, other
HTTP errors) answer with {"error": {"code": "...", "message": "..."}}.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Inner error object with a machine-readable code and human-readable message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Top-level error envelope."""

    error: ErrorDetail
