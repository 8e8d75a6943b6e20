from .group_chat import (
    GroupChatMemberRead,
    GroupChatMessageCreate,
    GroupChatVerificationRead,
    MembershipResult,
    MentionsAccepted,
    ParticipantRead,
    RecoveredParticipationRead,
)
from .notification import NotificationMarkReadRequest, NotificationRead

__all__ = [
    "GroupChatMemberRead",
    "GroupChatMessageCreate",
    "GroupChatVerificationRead",
    "MembershipResult",
    "MentionsAccepted",
    "NotificationMarkReadRequest",
    "NotificationRead",
    "ParticipantRead",
    "RecoveredParticipationRead",
]
