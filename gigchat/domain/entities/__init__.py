"""Domain entities exposed by the application."""

from .event import Event
from .group_chat import GroupChatMember, GroupChatVerification
from .lookup import Lookup, LookupStatus
from .notification import (
    NOTIFICATION_TYPE_NEW_MESSAGE,
    NOTIFICATION_TYPE_OFFER_RECEIVED,
    Notification,
)
from .participant import Participant
from .profile import ParticipantProfileRow, ProfileRecord, ResolvedIdentity

__all__ = [
    "Event",
    "GroupChatMember",
    "GroupChatVerification",
    "Lookup",
    "LookupStatus",
    "NOTIFICATION_TYPE_NEW_MESSAGE",
    "NOTIFICATION_TYPE_OFFER_RECEIVED",
    "Notification",
    "Participant",
    "ParticipantProfileRow",
    "ProfileRecord",
    "ResolvedIdentity",
]
