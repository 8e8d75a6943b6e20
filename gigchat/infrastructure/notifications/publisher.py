"""Utility helpers to push notifications to websocket subscribers."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

from anyio import from_thread

from gigchat.domain.entities import Notification

from .manager import NotificationConnectionManager, notification_manager


class NotificationPublisher:
    """Serialize notifications and schedule their delivery."""

    def __init__(self, manager: NotificationConnectionManager) -> None:
        self._manager = manager
        self._pending: set[asyncio.Task[None]] = set()

    def dispatch(self, notification: Notification) -> None:
        """Schedule ``notification`` to be delivered to its recipient."""

        message = {"type": "notification", "data": self._serialize(notification)}
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            from_thread.run(
                self._manager.send_to_user, notification.recipient_id, message
            )
        else:
            task = loop.create_task(
                self._manager.send_to_user(notification.recipient_id, message)
            )
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)

    @property
    def pending_deliveries(self) -> int:
        return len(self._pending)

    def dispatch_many(self, notifications: Sequence[Notification]) -> None:
        for notification in notifications:
            self.dispatch(notification)

    @staticmethod
    def _serialize(notification: Notification) -> dict[str, Any]:
        return {
            "id": notification.id,
            "user_id": notification.recipient_id,
            "type": notification.event_type,
            "title": notification.title,
            "message": notification.message,
            "event_id": notification.event_id,
            "sender_id": notification.sender_id,
            "data": notification.payload or {},
            "is_read": notification.is_read,
            "created_at": notification.created_at.isoformat()
            if notification.created_at
            else None,
            "read_at": notification.read_at.isoformat() if notification.read_at else None,
        }


notification_publisher = NotificationPublisher(notification_manager)


def dispatch_notifications(notifications: Sequence[Notification]) -> None:
    """Announce a freshly written notification batch to connected clients."""

    notification_publisher.dispatch_many(notifications)


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return NotificationPublisher._serialize(notification)


__all__ = [
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notifications",
    "serialize_notification",
]
