"""HTTP tests for chat message and info page routes."""

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete, select
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings, get_settings
from app.db.dependencies import get_db
from app.main import app
from app.models.base import Base
from app.models.chat_message import ChatMessage, MessageType
from app.models.pet import Pet
from app.services import retention

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


class RouteTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)

        def override_get_db():
            db = cls.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        cls.settings = Settings(
            database_url="postgresql+psycopg://chat:chat@db:5432/chat",
            app_uuid="route-test-uuid",
            app_version="9.9.9",
            deployment_color="blue",
        )
        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: cls.settings
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        app.dependency_overrides.clear()
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        with self.SessionLocal() as db:
            db.execute(delete(ChatMessage))
            db.execute(delete(Pet))
            db.commit()

    def _post(self, minutes: int, message_type: str = "CHAT", sender: str = "alice") -> dict:
        response = self.client.post(
            "/messages",
            json={
                "sender": sender,
                "type": message_type,
                "content": "hello",
                "timestamp": _iso(T0 + timedelta(minutes=minutes)),
            },
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["data"]

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})

    def test_ingest_and_list_messages_since(self) -> None:
        first = self._post(0)
        second = self._post(1, "SYSTEM", "system")
        third = self._post(2)

        self.assertEqual(first["type"], "CHAT")
        self.assertEqual(second["sender"], "system")

        response = self.client.get("/messages", params={"since": _iso(T0)})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([m["id"] for m in response.json()["data"]], [second["id"], third["id"]])

    def test_default_window_excludes_old_messages(self) -> None:
        stale = datetime.now(timezone.utc) - timedelta(hours=48)
        self.client.post(
            "/messages",
            json={"sender": "alice", "type": "CHAT", "content": "old news", "timestamp": _iso(stale)},
        )
        recent = self.client.post(
            "/messages",
            json={"sender": "bob", "type": "CHAT", "content": "just now"},
        ).json()["data"]

        response = self.client.get("/messages")

        self.assertEqual([m["id"] for m in response.json()["data"]], [recent["id"]])

    def test_chat_count_is_inclusive(self) -> None:
        self._post(0)
        self._post(1, "SYSTEM", "system")
        self._post(2)

        response = self.client.get("/messages/chat-count", params={"since": _iso(T0 + timedelta(minutes=1))})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["count"], 1)

        response = self.client.get("/messages/chat-count", params={"since": _iso(T0)})
        self.assertEqual(response.json()["data"]["count"], 2)

    def test_retention_deletes_older_messages(self) -> None:
        self._post(0)
        self._post(1, "JOIN", "bob")
        kept = self._post(2, "LEAVE", "bob")

        response = self.client.post("/messages/retention", json={"before": _iso(T0 + timedelta(minutes=2))})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["deleted"], 2)
        remaining = self.client.get("/messages", params={"since": _iso(T0 - timedelta(days=1))}).json()["data"]
        self.assertEqual([m["id"] for m in remaining], [kept["id"]])

    def test_invalid_payloads_are_rejected(self) -> None:
        self.assertEqual(self.client.post("/messages", json={"type": "CHAT"}).status_code, 422)
        self.assertEqual(self.client.post("/messages", json={"sender": "a", "type": "SHOUT"}).status_code, 422)
        self.assertEqual(self.client.get("/messages", params={"since": "yesterday"}).status_code, 422)

    def test_info_page(self) -> None:
        with self.SessionLocal() as db:
            db.add(Pet(name="Pixel", species="parrot"))
            db.commit()

        response = self.client.get("/info")

        self.assertEqual(response.status_code, 200)
        data = response.json()["data"]
        self.assertEqual(data["uuid"], "route-test-uuid")
        self.assertEqual(data["version"], "9.9.9")
        self.assertEqual(data["deploymentColor"], "blue")
        self.assertEqual(data["database"], "PostgreSQL")
        self.assertEqual(data["language"], "Python")
        self.assertEqual([pet["name"] for pet in data["pets"]], ["Pixel"])

    def test_offset_timestamps_are_stored_as_utc(self) -> None:
        created = self.client.post(
            "/messages",
            json={"sender": "carol", "type": "CHAT", "content": "hi", "timestamp": "2026-03-01T14:00:00+02:00"},
        ).json()["data"]

        later = self.client.get("/messages", params={"since": "2026-03-01T13:00:00Z"}).json()["data"]
        earlier = self.client.get("/messages", params={"since": "2026-03-01T11:00:00Z"}).json()["data"]
        count = self.client.get("/messages/chat-count", params={"since": "2026-03-01T12:00:00Z"}).json()["data"]

        self.assertEqual(later, [])
        self.assertEqual([m["id"] for m in earlier], [created["id"]])
        self.assertEqual(count["count"], 1)

    def test_naive_timestamps_are_rejected_in_payloads(self) -> None:
        response = self.client.post(
            "/messages",
            json={"sender": "alice", "type": "CHAT", "timestamp": "2026-03-01T12:00:00"},
        )
        self.assertEqual(response.status_code, 422)

        response = self.client.post("/messages/retention", json={"before": "2026-03-01T12:00:00"})
        self.assertEqual(response.status_code, 422)

    def test_retention_with_future_cutoff_clears_every_type(self) -> None:
        self._post(0)
        self._post(1, "SYSTEM", "system")
        self._post(2, "JOIN", "bob")
        self._post(3, "LEAVE", "bob")

        future = datetime.now(timezone.utc) + timedelta(days=365)
        response = self.client.post("/messages/retention", json={"before": _iso(future)})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["deleted"], 4)
        remaining = self.client.get("/messages", params={"since": _iso(T0 - timedelta(days=1))}).json()["data"]
        self.assertEqual(remaining, [])

    def test_retention_sweep_runs_in_background(self) -> None:
        now = datetime.now(timezone.utc)
        with self.SessionLocal() as db:
            db.add_all(
                [
                    ChatMessage(sender="alice", type=MessageType.CHAT, content="stale", timestamp=now - timedelta(hours=30)),
                    ChatMessage(sender="system", type=MessageType.SYSTEM, timestamp=now - timedelta(hours=25)),
                    ChatMessage(sender="bob", type=MessageType.CHAT, content="fresh", timestamp=now - timedelta(hours=1)),
                ]
            )
            db.commit()

        with patch.object(retention, "SessionLocal", self.SessionLocal):
            response = self.client.post("/messages/retention/sweep")

        self.assertEqual(response.status_code, 202)
        self.assertEqual(response.json()["data"]["retention_hours"], 24)
        with self.SessionLocal() as db:
            remaining = [m.sender for m in db.scalars(select(ChatMessage))]
        self.assertEqual(remaining, ["bob"])


if __name__ == "__main__":
    unittest.main()
