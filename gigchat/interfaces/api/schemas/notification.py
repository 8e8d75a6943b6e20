"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class NotificationMarkReadRequest(BaseModel):
    """Payload used to mark a batch of notifications as read."""

    ids: list[int] = Field(..., min_length=1, description="Notification identifiers")

    def unique_ids(self) -> list[int]:
        """Return the list of identifiers without duplicates preserving order."""

        return list(dict.fromkeys(self.ids))


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: str
    type: str
    title: str
    message: str
    event_id: str | None = None
    sender_id: str | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    is_read: bool = False
    created_at: datetime
    read_at: datetime | None = None


__all__ = ["NotificationMarkReadRequest", "NotificationRead"]
