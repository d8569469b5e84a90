"""Chat message request/response schemas."""

from datetime import datetime, timezone

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from app.models.chat_message import MessageType


class ChatMessageCreate(BaseModel):
    """Single message payload for ingestion."""

    sender: str = Field(min_length=1, max_length=255)
    type: MessageType = MessageType.CHAT
    content: str | None = None
    timestamp: AwareDatetime | None = None

    @field_validator("timestamp")
    @classmethod
    def _timestamp_to_utc(cls, value: datetime | None) -> datetime | None:
        return value.astimezone(timezone.utc) if value is not None else None


class ChatMessageRead(BaseModel):
    """Serialized chat message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    timestamp: datetime
    type: MessageType
    sender: str
    content: str | None


class ChatCountRead(BaseModel):
    since: datetime
    count: int


class RetentionRequest(BaseModel):
    """Cutoff for a bulk delete; rows strictly older are removed."""

    before: AwareDatetime

    @field_validator("before")
    @classmethod
    def _before_to_utc(cls, value: datetime) -> datetime:
        return value.astimezone(timezone.utc)


class RetentionResult(BaseModel):
    before: datetime
    deleted: int


class RetentionSweepScheduled(BaseModel):
    retention_hours: int
