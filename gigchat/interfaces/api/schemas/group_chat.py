"""Pydantic models describing group chat payloads."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParticipantRead(BaseModel):
    """Participant entry shown in the ``@`` mention picker."""

    id: str
    name: str
    avatar: str | None = None


class GroupChatMessageCreate(BaseModel):
    """Message that was just sent to an event group chat."""

    message_text: str = Field(..., min_length=1, max_length=4000)
    sender_name: str | None = Field(
        default=None,
        max_length=120,
        description="Display name used in the notification; resolved from the profile when omitted",
    )


class MentionsAccepted(BaseModel):
    status: str = "accepted"
    mentions: list[str] = Field(default_factory=list)


class MembershipResult(BaseModel):
    success: bool


class GroupChatMemberRead(BaseModel):
    user_id: str
    user_name: str


class GroupChatVerificationRead(BaseModel):
    exists: bool
    promoter_participating: bool
    participant_count: int
    participants: list[GroupChatMemberRead] = Field(default_factory=list)


class RecoveredParticipationRead(BaseModel):
    event_ids: list[str] = Field(default_factory=list)


__all__ = [
    "GroupChatMemberRead",
    "GroupChatMessageCreate",
    "GroupChatVerificationRead",
    "MembershipResult",
    "MentionsAccepted",
    "ParticipantRead",
    "RecoveredParticipationRead",
]
