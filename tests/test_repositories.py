"""Integration tests for the SQLAlchemy repositories and async directories."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from gigchat.application.use_cases.mentions import notify_mentions, resolve_roster
from gigchat.domain.entities import Event, Notification, ProfileRecord
from gigchat.infrastructure.directories import (
    SqlEventStore,
    SqlNotificationSink,
    SqlParticipantDirectory,
    SqlProfileDirectory,
)
from gigchat.infrastructure.repositories import (
    EventRepository,
    NotificationRepository,
    ParticipantRepository,
    ProfileRepository,
)


@pytest.fixture
def session(database):
    db_session = database.SessionLocal()
    try:
        yield db_session
    finally:
        db_session.close()


@pytest.fixture
def seeded(session):
    EventRepository(session).create(Event(id="e1", title="Gig Night", promoter_id="p1"))
    profiles = ProfileRepository(session)
    profiles.create(ProfileRecord(id="p1", full_name="Paula Promoter"))
    profiles.create(ProfileRecord(id="u1", full_name="Alice Smith", avatar_url="https://cdn/a.png"))
    profiles.create(ProfileRecord(id="u2", full_name="Bob", email="bob@x.com"))
    start = datetime(2024, 5, 1, 20, 0, tzinfo=timezone.utc)
    participants = ParticipantRepository(session)
    for offset, user_id in enumerate(("p1", "u1", "u2", "no-profile")):
        participants.upsert("e1", user_id, joined_at=start + timedelta(minutes=offset))
    return session


def test_upsert_keeps_one_row_per_event_and_user(seeded) -> None:
    repository = ParticipantRepository(seeded)
    read_at = datetime(2024, 5, 2, 9, 30, tzinfo=timezone.utc)

    updated = repository.upsert("e1", "u1", last_read_at=read_at)

    rows = [p for p in repository.list_for_event("e1") if p.user_id == "u1"]
    assert len(rows) == 1
    assert updated.last_read_at == read_at
    assert updated.joined_at == datetime(2024, 5, 1, 20, 1, tzinfo=timezone.utc)


def test_list_with_profiles_keeps_participants_without_profile(seeded) -> None:
    rows = ParticipantRepository(seeded).list_with_profiles("e1")

    assert [row.user_id for row in rows] == ["p1", "u1", "u2", "no-profile"]
    assert rows[1].avatar_url == "https://cdn/a.png"
    assert rows[3].full_name is None
    assert rows[3].email is None


def test_touch_last_read(seeded) -> None:
    repository = ParticipantRepository(seeded)
    now = datetime(2024, 5, 3, tzinfo=timezone.utc)

    assert repository.touch_last_read("e1", "u2", now) is True
    assert repository.touch_last_read("e1", "stranger", now) is False
    assert repository.get("e1", "u2").last_read_at == now


def test_create_many_and_list_by_type(session) -> None:
    repository = NotificationRepository(session)
    batch = [
        Notification(
            id=None,
            recipient_id=user_id,
            event_type="new_message",
            title="You were mentioned",
            message="Bob mentioned you in Gig Night",
            event_id="e1",
            sender_id="u2",
            payload={"mention": True},
        )
        for user_id in ("u1", "p1")
    ]

    saved = repository.create_many(batch)

    assert [n.recipient_id for n in saved] == ["u1", "p1"]
    assert all(n.id is not None and n.created_at is not None for n in saved)
    assert [n.payload for n in repository.list_by_type("u1", "new_message")] == [{"mention": True}]
    assert repository.list_by_type("u1", "offer_received") == []
    assert repository.create_many([]) == []

    repository.mark_as_read([saved[0].id], user_id="u1")
    assert repository.list_unread_for_user("u1") == []
    assert len(repository.list_unread_for_user("p1")) == 1


@pytest.mark.anyio
async def test_sql_directories_resolve_roster(seeded) -> None:
    participants = SqlParticipantDirectory()
    profiles = SqlProfileDirectory()

    roster = await resolve_roster(participants, profiles, "e1")
    direct = await resolve_roster(participants, profiles, "e1", aggregate_enabled=False)

    assert [(i.id, i.display_name) for i in roster] == [
        ("p1", "Paula Promoter"),
        ("u1", "Alice Smith"),
        ("u2", "Bob"),
        ("no-profile", "Unknown"),
    ]
    assert {i.id for i in direct} == {i.id for i in roster}


@pytest.mark.anyio
async def test_sql_directories_notify_mentions(seeded) -> None:
    directory = SqlParticipantDirectory()
    observed = []

    await notify_mentions(
        "e1",
        "Hey @alice and @bob check this",
        "u2",
        "Bob",
        events=SqlEventStore(),
        participants=directory,
        profiles=SqlProfileDirectory(),
        notifications=SqlNotificationSink(),
        on_created=observed.append,
    )

    stored = NotificationRepository(seeded).list_for_user("u1")
    assert [n.message for n in stored] == ["Bob mentioned you in Gig Night"]
    assert NotificationRepository(seeded).list_for_user("u2") == []
    assert [n.recipient_id for n in observed[0]] == ["u1"]


@pytest.mark.anyio
async def test_sql_event_store(seeded) -> None:
    store = SqlEventStore()

    assert await store.get_event_title("e1") == "Gig Night"
    assert await store.get_event_title("missing") is None
    assert (await store.get_event("e1")).promoter_id == "p1"
