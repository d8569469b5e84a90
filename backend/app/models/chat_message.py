"""Chat message ORM model."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, Enum, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base, IdMixin


class MessageType(str, enum.Enum):
    """Kind of chat message; only CHAT is conversational."""

    CHAT = "CHAT"
    JOIN = "JOIN"
    LEAVE = "LEAVE"
    SYSTEM = "SYSTEM"


class ChatMessage(Base, IdMixin):
    """Stored chat room message. Rows are append-only."""

    __tablename__ = "chat_messages"

    # Stamped by the producer, never by the store.
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
    type: Mapped[MessageType] = mapped_column(
        Enum(MessageType, name="message_type", native_enum=False, length=16),
        nullable=False,
        index=True,
    )
    sender: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
