"""Async directory adapters backed by the SQLAlchemy repositories.

Each call opens its own short-lived session in a worker thread, so concurrent
lookups issued by the roster resolver never share a session.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

import anyio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from gigchat.domain.entities import (
    Event,
    Notification,
    Participant,
    ParticipantProfileRow,
    ProfileRecord,
)
from gigchat.domain.ports import DirectoryUnavailableError

from .database import SessionLocal
from .repositories import (
    EventRepository,
    NotificationRepository,
    ParticipantRepository,
    ProfileRepository,
)

T = TypeVar("T")

SessionFactory = Callable[[], Session]


class _SessionRunner:
    def __init__(self, session_factory: SessionFactory = SessionLocal) -> None:
        self._session_factory = session_factory

    async def _run(self, work: Callable[[Session], T]) -> T:
        def call() -> T:
            session = self._session_factory()
            try:
                return work(session)
            finally:
                session.close()

        return await anyio.to_thread.run_sync(call)


class SqlEventStore(_SessionRunner):
    async def get_event(self, event_id: str) -> Event | None:
        return await self._run(lambda session: EventRepository(session).get(event_id))

    async def get_event_title(self, event_id: str) -> str | None:
        event = await self.get_event(event_id)
        return event.title if event else None


class SqlParticipantDirectory(_SessionRunner):
    async def get_participants_with_profiles(
        self, event_id: str
    ) -> Sequence[ParticipantProfileRow]:
        try:
            return await self._run(
                lambda session: ParticipantRepository(session).list_with_profiles(event_id)
            )
        except SQLAlchemyError as exc:
            raise DirectoryUnavailableError(
                f"Participant roster query unavailable for event {event_id}"
            ) from exc

    async def list_participants(self, event_id: str) -> Sequence[Participant]:
        return await self._run(
            lambda session: ParticipantRepository(session).list_for_event(event_id)
        )

    async def upsert_participant(
        self,
        event_id: str,
        user_id: str,
        *,
        joined_at: datetime | None = None,
        last_read_at: datetime | None = None,
    ) -> Participant:
        return await self._run(
            lambda session: ParticipantRepository(session).upsert(
                event_id, user_id, joined_at=joined_at, last_read_at=last_read_at
            )
        )

    async def touch_last_read(
        self, event_id: str, user_id: str, read_at: datetime
    ) -> bool:
        return await self._run(
            lambda session: ParticipantRepository(session).touch_last_read(
                event_id, user_id, read_at
            )
        )


class SqlProfileDirectory(_SessionRunner):
    async def get_profile(self, user_id: str) -> ProfileRecord | None:
        return await self._run(lambda session: ProfileRepository(session).get(user_id))


class SqlNotificationSink(_SessionRunner):
    async def create_notifications(
        self, batch: Sequence[Notification]
    ) -> Sequence[Notification]:
        return await self._run(
            lambda session: NotificationRepository(session).create_many(batch)
        )

    async def list_by_type(
        self, user_id: str, event_type: str
    ) -> Sequence[Notification]:
        return await self._run(
            lambda session: NotificationRepository(session).list_by_type(user_id, event_type)
        )


__all__ = [
    "SqlEventStore",
    "SqlNotificationSink",
    "SqlParticipantDirectory",
    "SqlProfileDirectory",
]
