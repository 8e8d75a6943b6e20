"""Capabilities the group chat use cases need from the outside world.

Every use case receives these as parameters so that the SQLAlchemy-backed
implementations can be swapped for in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol

from .entities import (
    Event,
    Notification,
    Participant,
    ParticipantProfileRow,
    ProfileRecord,
)


class DirectoryUnavailableError(RuntimeError):
    """Raised when a directory capability cannot currently be used."""


class EventStore(Protocol):
    async def get_event(self, event_id: str) -> Event | None: ...

    async def get_event_title(self, event_id: str) -> str | None: ...


class ParticipantDirectory(Protocol):
    async def get_participants_with_profiles(
        self, event_id: str
    ) -> Sequence[ParticipantProfileRow]: ...

    async def list_participants(self, event_id: str) -> Sequence[Participant]: ...

    async def upsert_participant(
        self,
        event_id: str,
        user_id: str,
        *,
        joined_at: datetime | None = None,
        last_read_at: datetime | None = None,
    ) -> Participant: ...

    async def touch_last_read(
        self, event_id: str, user_id: str, read_at: datetime
    ) -> bool: ...


class ProfileDirectory(Protocol):
    async def get_profile(self, user_id: str) -> ProfileRecord | None: ...


class NotificationSink(Protocol):
    async def create_notifications(
        self, batch: Sequence[Notification]
    ) -> Sequence[Notification]: ...

    async def list_by_type(
        self, user_id: str, event_type: str
    ) -> Sequence[Notification]: ...


__all__ = [
    "DirectoryUnavailableError",
    "EventStore",
    "NotificationSink",
    "ParticipantDirectory",
    "ProfileDirectory",
]
