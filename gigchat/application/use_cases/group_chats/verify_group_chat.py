"""Use case for checking that an event group chat is set up."""

from __future__ import annotations

from gigchat.domain.entities import GroupChatMember, GroupChatVerification
from gigchat.domain.ports import ParticipantDirectory, ProfileDirectory

from ..mentions import resolve_roster


async def verify_group_chat(
    participants: ParticipantDirectory,
    profiles: ProfileDirectory,
    event_id: str,
    expected_promoter_id: str,
    *,
    aggregate_enabled: bool = True,
) -> GroupChatVerification:
    roster = await resolve_roster(
        participants, profiles, event_id, aggregate_enabled=aggregate_enabled
    )
    return GroupChatVerification(
        exists=bool(roster),
        promoter_participating=any(
            identity.id == expected_promoter_id for identity in roster
        ),
        participant_count=len(roster),
        participants=[
            GroupChatMember(user_id=identity.id, display_name=identity.display_name)
            for identity in roster
        ],
    )


__all__ = ["verify_group_chat"]
