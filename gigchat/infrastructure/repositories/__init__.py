"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .notification_repository import NotificationRepository
from .participant_repository import ParticipantRepository
from .profile_repository import ProfileRepository

__all__ = [
    "EventRepository",
    "NotificationRepository",
    "ParticipantRepository",
    "ProfileRepository",
]
