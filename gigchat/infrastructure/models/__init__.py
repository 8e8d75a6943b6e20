"""ORM models used by the application infrastructure."""

from .event import EventModel
from .notification import NotificationModel
from .participant import ParticipantModel
from .profile import ProfileModel

__all__ = [
    "EventModel",
    "NotificationModel",
    "ParticipantModel",
    "ProfileModel",
]
