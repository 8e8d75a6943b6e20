"""Domain entity representing membership in an event group chat."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Participant:
    """A user entitled to see and be addressed in an event's group chat.

    At most one participant exists per ``(event_id, user_id)`` pair.
    """

    id: int | None
    event_id: str
    user_id: str
    joined_at: datetime | None = None
    last_read_at: datetime | None = None


__all__ = ["Participant"]
