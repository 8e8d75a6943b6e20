"""Shared helpers for group chat membership use cases."""

from __future__ import annotations

from gigchat.domain.ports import ParticipantDirectory


async def is_participant(
    participants: ParticipantDirectory, event_id: str, user_id: str
) -> bool:
    records = await participants.list_participants(event_id)
    return any(record.user_id == user_id for record in records)


__all__ = ["is_participant"]
