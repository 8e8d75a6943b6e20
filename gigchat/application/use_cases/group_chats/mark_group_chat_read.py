"""Use case for updating the read marker of a group chat participant."""

from __future__ import annotations

import logging

from gigchat.domain.ports import ParticipantDirectory
from gigchat.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


async def mark_group_chat_read(
    participants: ParticipantDirectory, event_id: str, user_id: str
) -> bool:
    """Set ``last_read_at`` to now; ``False`` if the user is not a participant."""

    try:
        updated = await participants.touch_last_read(
            event_id, user_id, now_in_app_timezone()
        )
    except Exception:
        logger.exception("Error updating last read marker for event %s", event_id)
        return False
    if not updated:
        logger.warning("User %s is not a participant of event %s", user_id, event_id)
    return updated
