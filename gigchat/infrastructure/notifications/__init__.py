"""Realtime notification helpers for the infrastructure layer."""

from .manager import NotificationConnectionManager, notification_manager
from .publisher import (
    NotificationPublisher,
    dispatch_notifications,
    notification_publisher,
    serialize_notification,
)

__all__ = [
    "NotificationConnectionManager",
    "notification_manager",
    "NotificationPublisher",
    "notification_publisher",
    "dispatch_notifications",
    "serialize_notification",
]
