"""Seed demo pets and a short chat room history.

Usage (from repository root):
    python backend/scripts/seed_demo.py

Usage (from backend directory):
    python scripts/seed_demo.py
    # or
    python -m scripts.seed_demo
"""

from __future__ import annotations

import argparse
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from sqlalchemy import delete

# Make `app` imports work whether the script is run from repo root or backend/.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.chat_message import ChatMessage, MessageType
from app.models.pet import Pet
from app.schemas.chat_message import ChatMessageCreate
from app.services.chat_messages import count_chat_messages_since, create_message


DEMO_PETS = [
    ("Leo", "cat"),
    ("Basil", "dog"),
    ("Pixel", "parrot"),
    ("Nemo", "fish"),
]


def build_demo_messages(now: datetime) -> list[ChatMessageCreate]:
    """Return a deterministic chat room history ending shortly before ``now``."""

    payloads = [
        (MessageType.JOIN, "alice", None),
        (MessageType.CHAT, "alice", "Morning! Anyone around?"),
        (MessageType.JOIN, "bob", None),
        (MessageType.CHAT, "bob", "Hi Alice, just got in."),
        (MessageType.SYSTEM, "system", "Scheduled maintenance at 22:00 UTC."),
        (MessageType.CHAT, "alice", "Thanks for the heads up."),
        (MessageType.LEAVE, "bob", None),
    ]
    start = now - timedelta(minutes=len(payloads))
    return [
        ChatMessageCreate(
            type=message_type,
            sender=sender,
            content=content,
            timestamp=start + timedelta(minutes=idx),
        )
        for idx, (message_type, sender, content) in enumerate(payloads)
    ]


def reset_tables(db) -> None:
    """Remove existing demo records."""

    db.execute(delete(ChatMessage))
    db.execute(delete(Pet))
    db.commit()


def parse_args() -> argparse.Namespace:
    """Parse script CLI arguments."""

    parser = argparse.ArgumentParser(description="Seed demo pets and chat messages.")
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Do not delete existing pets and messages before seeding.",
    )
    return parser.parse_args()


def main() -> None:
    """Seed demo data and print a short summary."""

    args = parse_args()
    now = datetime.now(timezone.utc)
    Base.metadata.create_all(engine)

    with SessionLocal() as db:
        if not args.no_reset:
            reset_tables(db)

        db.add_all([Pet(name=name, species=species) for name, species in DEMO_PETS])
        db.commit()

        created_messages = [create_message(db, payload) for payload in build_demo_messages(now)]
        chat_count = count_chat_messages_since(db, now - timedelta(days=1))

    print("Seed complete")
    print(f"pets_created={len(DEMO_PETS)}")
    print(f"messages_created={len(created_messages)}")
    print(f"chat_messages_last_24h={chat_count}")
    print()
    print("Inspect:")
    print("  GET /info")
    print("  GET /messages")
    print("  GET /messages/chat-count")


if __name__ == "__main__":
    main()
