"""Shared fixtures: environment, an in-memory directory and a fresh database."""

from __future__ import annotations

import os
from collections import Counter
from pathlib import Path

import anyio
import pytest

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ.setdefault("DATABASE_URL", f"sqlite:///{TEST_DB_PATH}")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from gigchat.domain.entities import (  # noqa: E402
    Event,
    Notification,
    Participant,
    ParticipantProfileRow,
    ProfileRecord,
)
from gigchat.domain.ports import DirectoryUnavailableError  # noqa: E402


class InMemoryDirectory:
    """Fake implementing every store port, with failure and latency switches."""

    def __init__(self) -> None:
        self.events: dict[str, Event] = {}
        self.profiles: dict[str, ProfileRecord] = {}
        self.participants: list[Participant] = []
        self.notifications: list[Notification] = []
        self.batches: list[list[Notification]] = []
        self.calls: Counter[str] = Counter()

        self.aggregate_error: Exception | None = None
        self.listing_error: Exception | None = None
        self.title_error: Exception | None = None
        self.notification_error: Exception | None = None
        self.upsert_error: Exception | None = None
        self.profile_errors: dict[str, Exception] = {}
        self.profile_delays: dict[str, float] = {}
        self.aggregate_delay: float = 0.0
        self.profiles_in_flight = 0
        self.peak_profiles_in_flight = 0

    # seeding helpers

    def add_event(self, event_id: str, title: str | None = None, promoter_id: str | None = None) -> None:
        self.events[event_id] = Event(id=event_id, title=title, promoter_id=promoter_id)

    def add_profile(self, user_id: str, **fields: str | None) -> None:
        self.profiles[user_id] = ProfileRecord(id=user_id, **fields)

    def add_participant(self, event_id: str, user_id: str) -> None:
        self.participants.append(
            Participant(id=len(self.participants) + 1, event_id=event_id, user_id=user_id)
        )

    def participant_ids(self, event_id: str) -> list[str]:
        return [p.user_id for p in self.participants if p.event_id == event_id]

    # EventStore

    async def get_event(self, event_id: str) -> Event | None:
        self.calls["get_event"] += 1
        return self.events.get(event_id)

    async def get_event_title(self, event_id: str) -> str | None:
        self.calls["get_event_title"] += 1
        if self.title_error is not None:
            raise self.title_error
        event = self.events.get(event_id)
        return event.title if event else None

    # ParticipantDirectory

    async def get_participants_with_profiles(self, event_id: str) -> list[ParticipantProfileRow]:
        self.calls["get_participants_with_profiles"] += 1
        if self.aggregate_delay:
            await anyio.sleep(self.aggregate_delay)
        if self.aggregate_error is not None:
            raise self.aggregate_error
        rows = []
        for participant in self.participants:
            if participant.event_id != event_id:
                continue
            profile = self.profiles.get(participant.user_id)
            rows.append(
                ParticipantProfileRow(
                    user_id=participant.user_id,
                    full_name=profile.full_name if profile else None,
                    email=profile.email if profile else None,
                    avatar_url=profile.avatar_url if profile else None,
                )
            )
        return rows

    async def list_participants(self, event_id: str) -> list[Participant]:
        self.calls["list_participants"] += 1
        if self.listing_error is not None:
            raise self.listing_error
        return [p for p in self.participants if p.event_id == event_id]

    async def upsert_participant(self, event_id, user_id, *, joined_at=None, last_read_at=None):
        self.calls["upsert_participant"] += 1
        if self.upsert_error is not None:
            raise self.upsert_error
        for participant in self.participants:
            if participant.event_id == event_id and participant.user_id == user_id:
                if joined_at is not None:
                    participant.joined_at = joined_at
                if last_read_at is not None:
                    participant.last_read_at = last_read_at
                return participant
        participant = Participant(
            id=len(self.participants) + 1,
            event_id=event_id,
            user_id=user_id,
            joined_at=joined_at,
            last_read_at=last_read_at,
        )
        self.participants.append(participant)
        return participant

    async def touch_last_read(self, event_id, user_id, read_at) -> bool:
        self.calls["touch_last_read"] += 1
        for participant in self.participants:
            if participant.event_id == event_id and participant.user_id == user_id:
                participant.last_read_at = read_at
                return True
        return False

    # ProfileDirectory

    async def get_profile(self, user_id: str) -> ProfileRecord | None:
        self.calls["get_profile"] += 1
        delay = self.profile_delays.get(user_id)
        if delay:
            self.profiles_in_flight += 1
            self.peak_profiles_in_flight = max(
                self.peak_profiles_in_flight, self.profiles_in_flight
            )
            try:
                await anyio.sleep(delay)
            finally:
                self.profiles_in_flight -= 1
        if user_id in self.profile_errors:
            raise self.profile_errors[user_id]
        return self.profiles.get(user_id)

    # NotificationSink

    async def create_notifications(self, batch):
        self.calls["create_notifications"] += 1
        if self.notification_error is not None:
            raise self.notification_error
        saved = []
        for notification in batch:
            notification.id = len(self.notifications) + 1
            self.notifications.append(notification)
            saved.append(notification)
        self.batches.append(saved)
        return saved

    async def list_by_type(self, user_id: str, event_type: str) -> list[Notification]:
        self.calls["list_by_type"] += 1
        return [
            n for n in self.notifications
            if n.recipient_id == user_id and n.event_type == event_type
        ]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def directory() -> InMemoryDirectory:
    return InMemoryDirectory()


@pytest.fixture
def unavailable() -> DirectoryUnavailableError:
    return DirectoryUnavailableError("roster function missing")


@pytest.fixture
def database():
    """Recreate every table on the shared SQLite test database."""

    from gigchat.infrastructure import database as db

    db.initialize_database()
    db.Base.metadata.drop_all(bind=db.engine, checkfirst=True)
    db.Base.metadata.create_all(bind=db.engine)
    yield db
    db.Base.metadata.drop_all(bind=db.engine, checkfirst=True)
    db.engine.dispose()
    if TEST_DB_PATH.exists():
        TEST_DB_PATH.unlink()
