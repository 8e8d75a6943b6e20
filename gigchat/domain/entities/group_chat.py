"""Domain entity summarising the state of an event group chat."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class GroupChatMember:
    user_id: str
    display_name: str


@dataclass(frozen=True)
class GroupChatVerification:
    """Snapshot used to check that a group chat was set up correctly."""

    exists: bool = False
    promoter_participating: bool = False
    participant_count: int = 0
    participants: list[GroupChatMember] = field(default_factory=list)


__all__ = ["GroupChatMember", "GroupChatVerification"]
