"""ORM models package exports."""

from app.models.chat_message import ChatMessage, MessageType
from app.models.pet import Pet

__all__ = [
    "ChatMessage",
    "MessageType",
    "Pet",
]
