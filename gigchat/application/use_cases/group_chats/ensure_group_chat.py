"""Use cases that add the promoter and talents to an event group chat."""

from __future__ import annotations

import logging

from gigchat.domain.ports import EventStore, ParticipantDirectory
from gigchat.utils import now_in_app_timezone

from .membership import is_participant

logger = logging.getLogger(__name__)


async def _add_if_missing(
    participants: ParticipantDirectory, event_id: str, user_id: str
) -> None:
    if await is_participant(participants, event_id, user_id):
        return
    await participants.upsert_participant(
        event_id, user_id, joined_at=now_in_app_timezone()
    )


async def ensure_group_chat_for_event(
    participants: ParticipantDirectory, event_id: str, promoter_id: str
) -> bool:
    """Make sure the event promoter participates in the group chat.

    Called right after an event is created; existing participation is kept
    untouched.
    """

    try:
        await _add_if_missing(participants, event_id, promoter_id)
    except Exception:
        logger.exception("Error ensuring group chat for event %s", event_id)
        return False
    return True


async def add_talent_to_group_chat(
    participants: ParticipantDirectory,
    events: EventStore,
    event_id: str,
    talent_id: str,
) -> bool:
    """Add ``talent_id`` and the event promoter to the group chat.

    The event must exist. Failing to add the promoter is logged but does not
    undo the talent's participation.
    """

    try:
        event = await events.get_event(event_id)
    except Exception:
        logger.exception("Error loading event %s", event_id)
        return False
    if event is None:
        logger.warning("Cannot add talent %s to unknown event %s", talent_id, event_id)
        return False

    try:
        await _add_if_missing(participants, event_id, talent_id)
    except Exception:
        logger.exception("Error adding talent %s to group chat %s", talent_id, event_id)
        return False

    if event.promoter_id:
        try:
            await _add_if_missing(participants, event_id, event.promoter_id)
        except Exception:
            logger.exception("Error adding promoter to group chat %s", event_id)
    return True


__all__ = ["add_talent_to_group_chat", "ensure_group_chat_for_event"]
