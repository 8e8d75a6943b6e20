"""Rebuild missing group chat participation from offer notifications."""

from __future__ import annotations

import logging

from gigchat.domain.entities import NOTIFICATION_TYPE_OFFER_RECEIVED
from gigchat.domain.ports import NotificationSink, ParticipantDirectory
from gigchat.utils import now_in_app_timezone

from ..lookups import attempt

logger = logging.getLogger(__name__)


async def recover_group_chat_participation(
    participants: ParticipantDirectory,
    notifications: NotificationSink,
    user_id: str,
) -> list[str]:
    """Join ``user_id`` to every event they received an offer for.

    Returns the event identifiers whose participation was written.
    """

    offers = await attempt(
        notifications.list_by_type(user_id, NOTIFICATION_TYPE_OFFER_RECEIVED),
        description=f"Offer history lookup for user {user_id}",
    )

    event_ids: list[str] = []
    for notification in offers.value_or([]):
        event_id = notification.event_id or notification.payload.get("event_id")
        if event_id and event_id not in event_ids:
            event_ids.append(str(event_id))

    recovered: list[str] = []
    for event_id in event_ids:
        now = now_in_app_timezone()
        try:
            await participants.upsert_participant(
                event_id, user_id, joined_at=now, last_read_at=now
            )
        except Exception:
            logger.exception(
                "Error recovering participation of user %s in event %s", user_id, event_id
            )
            continue
        recovered.append(event_id)

    if recovered:
        logger.info("Recovered %d group chats for user %s", len(recovered), user_id)
    return recovered


__all__ = ["recover_group_chat_participation"]
