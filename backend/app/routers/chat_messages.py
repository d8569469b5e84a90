"""Chat message ingestion, window query and retention routes."""

from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, BackgroundTasks, Depends, Query
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.db.dependencies import get_db
from app.schemas.chat_message import (
    ChatCountRead,
    ChatMessageCreate,
    ChatMessageRead,
    RetentionRequest,
    RetentionResult,
    RetentionSweepScheduled,
)
from app.schemas.common import ApiResponse
from app.services.chat_messages import (
    count_chat_messages_since,
    create_message,
    delete_messages_older_than,
    find_messages_since,
    to_utc,
)
from app.services.retention import run_retention_sweep


router = APIRouter(prefix="/messages")


def _window_start(since: datetime | None, settings: Settings) -> datetime:
    if since is not None:
        return to_utc(since)
    return datetime.now(timezone.utc) - timedelta(hours=settings.message_window_hours)


@router.post("", response_model=ApiResponse[ChatMessageRead], status_code=201)
def ingest_message(
    payload: ChatMessageCreate,
    db: Session = Depends(get_db),
) -> ApiResponse[ChatMessageRead]:
    """Store a single chat message."""

    return ApiResponse(data=ChatMessageRead.model_validate(create_message(db, payload)))


@router.get("", response_model=ApiResponse[list[ChatMessageRead]])
def get_messages_since(
    since: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[list[ChatMessageRead]]:
    """List messages newer than ``since`` (default: the configured recent window)."""

    records = find_messages_since(db, _window_start(since, settings))
    return ApiResponse(data=[ChatMessageRead.model_validate(message) for message in records])


@router.get("/chat-count", response_model=ApiResponse[ChatCountRead])
def get_chat_count(
    since: datetime | None = Query(default=None),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ApiResponse[ChatCountRead]:
    """Count CHAT messages at or after ``since``."""

    start = _window_start(since, settings)
    return ApiResponse(data=ChatCountRead(since=start, count=count_chat_messages_since(db, start)))


@router.post("/retention", response_model=ApiResponse[RetentionResult])
def purge_old_messages(
    payload: RetentionRequest,
    db: Session = Depends(get_db),
) -> ApiResponse[RetentionResult]:
    """Delete every message older than the given cutoff."""

    deleted = delete_messages_older_than(db, payload.before)
    return ApiResponse(data=RetentionResult(before=payload.before, deleted=deleted))


@router.post("/retention/sweep", response_model=ApiResponse[RetentionSweepScheduled], status_code=202)
def schedule_retention_sweep(
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
) -> ApiResponse[RetentionSweepScheduled]:
    """Queue a sweep of messages outside the configured retention window."""

    background_tasks.add_task(run_retention_sweep, settings.message_retention_hours)
    return ApiResponse(data=RetentionSweepScheduled(retention_hours=settings.message_retention_hours))
