"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

NOTIFICATION_TYPE_NEW_MESSAGE = "new_message"
NOTIFICATION_TYPE_OFFER_RECEIVED = "offer_received"


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    recipient_id: str
    event_type: str
    title: str
    message: str
    event_id: str | None = None
    sender_id: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    read_at: datetime | None = None

    @property
    def is_read(self) -> bool:
        return self.read_at is not None


__all__ = [
    "NOTIFICATION_TYPE_NEW_MESSAGE",
    "NOTIFICATION_TYPE_OFFER_RECEIVED",
    "Notification",
]
