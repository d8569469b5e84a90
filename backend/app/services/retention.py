"""Retention sweep for chat messages."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from time import perf_counter

from app.config import get_settings
from app.db.session import SessionLocal
from app.services.chat_messages import delete_messages_older_than

logger = logging.getLogger(__name__)


def run_retention_sweep(retention_hours: int | None = None, now: datetime | None = None) -> int:
    """Delete messages older than the retention window in a job-owned session."""

    if retention_hours is None:
        retention_hours = get_settings().message_retention_hours
    cutoff = (now or datetime.now(timezone.utc)) - timedelta(hours=retention_hours)

    started = perf_counter()
    db = SessionLocal()
    try:
        deleted = delete_messages_older_than(db, cutoff)
        logger.info(
            "chat.retention_sweep cutoff=%s retention_hours=%d deleted=%d total_ms=%.2f",
            cutoff.isoformat(),
            retention_hours,
            deleted,
            (perf_counter() - started) * 1000.0,
        )
        return deleted
    except Exception:
        logger.exception(
            "chat.retention_sweep_failed cutoff=%s elapsed_ms=%.2f",
            cutoff.isoformat(),
            (perf_counter() - started) * 1000.0,
        )
        raise
    finally:
        db.close()
