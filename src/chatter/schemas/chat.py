"""Chat schemas.

ChatResponse is the JSON body of GET /chat/{chat_id}. ChatForm is the
form posted to /chats.
"""

from datetime import datetime

from pydantic import BaseModel


class ChatResponse(BaseModel):
    """A single chat message as stored."""

    model_config = {"from_attributes": True}

    id: int
    message: str
    sender_id: int
    receiver_id: int
    created_at: datetime


class ChatForm(BaseModel):
    """Fields of the "send message" form."""

    body: str
    receiver: int
