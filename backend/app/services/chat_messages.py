"""Chat message persistence and time-window queries.

Timestamps are normalized to UTC before they reach the database, since some
backends (SQLite, MySQL) store the wall-clock value and drop the offset.
Naive datetimes are taken to already be UTC.
"""

from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from app.models.chat_message import ChatMessage, MessageType
from app.schemas.chat_message import ChatMessageCreate


def to_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def create_message(db: Session, message_input: ChatMessageCreate) -> ChatMessage:
    """Persist a single message, stamping the current time when the producer did not."""

    message = ChatMessage(
        sender=message_input.sender,
        type=message_input.type,
        content=message_input.content,
        timestamp=to_utc(message_input.timestamp or datetime.now(timezone.utc)),
    )
    db.add(message)
    db.commit()
    db.refresh(message)
    return message


def find_messages_since(db: Session, since: datetime) -> list[ChatMessage]:
    """Return every message strictly newer than ``since``, oldest first.

    No limit is applied, so the result grows with the window.
    """

    stmt = (
        select(ChatMessage)
        .where(ChatMessage.timestamp > to_utc(since))
        .order_by(ChatMessage.timestamp.asc(), ChatMessage.id.asc())
    )
    return list(db.scalars(stmt).all())


def count_chat_messages_since(db: Session, since: datetime) -> int:
    """Count CHAT messages at or after ``since`` (inclusive bound)."""

    stmt = (
        select(func.count())
        .select_from(ChatMessage)
        .where(ChatMessage.timestamp >= to_utc(since), ChatMessage.type == MessageType.CHAT)
    )
    return int(db.scalar(stmt) or 0)


def delete_messages_older_than(db: Session, before: datetime) -> int:
    """Delete messages of any type strictly older than ``before``; return rows removed."""

    stmt = (
        delete(ChatMessage)
        .where(ChatMessage.timestamp < to_utc(before))
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount or 0
