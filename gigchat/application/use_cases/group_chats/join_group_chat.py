"""Use case for joining an event group chat."""

from __future__ import annotations

import logging

from gigchat.domain.ports import ParticipantDirectory
from gigchat.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


async def join_group_chat(
    participants: ParticipantDirectory, event_id: str, user_id: str
) -> bool:
    """Insert or refresh the participant record for ``user_id``."""

    try:
        await participants.upsert_participant(
            event_id, user_id, joined_at=now_in_app_timezone()
        )
    except Exception:
        logger.exception("Error joining group chat for event %s", event_id)
        return False
    logger.info("User %s joined group chat for event %s", user_id, event_id)
    return True
