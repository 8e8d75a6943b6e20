"""Notify the participants addressed by ``@`` mentions in a group message."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import Final

import anyio

from gigchat.domain.entities import (
    NOTIFICATION_TYPE_NEW_MESSAGE,
    Notification,
    ResolvedIdentity,
)
from gigchat.domain.ports import (
    EventStore,
    NotificationSink,
    ParticipantDirectory,
    ProfileDirectory,
)
from gigchat.utils import now_in_app_timezone

from ..lookups import attempt
from .parser import parse_mentions
from .roster import ParticipantRosterResolver

MENTION_TITLE: Final[str] = "You were mentioned"
MENTION_BUTTON_TEXT: Final[str] = "View Message"
MENTION_ICON: Final[str] = "🔔"
DEFAULT_EVENT_TITLE: Final[str] = "Event"

NotificationObserver = Callable[[Sequence[Notification]], None]

logger = logging.getLogger(__name__)


def match_mentioned(
    roster: Iterable[ResolvedIdentity], tokens: Sequence[str], sender_id: str
) -> list[ResolvedIdentity]:
    """Return the roster members addressed by ``tokens``, excluding the sender.

    A member matches when any token is a case-insensitive substring of the
    display name, so ``"jo"`` matches ``"Jordan"``. Each member appears once.
    """

    needles = [token.lower() for token in tokens if token]
    if not needles:
        return []

    matched: list[ResolvedIdentity] = []
    seen: set[str] = set()
    for identity in roster:
        if identity.id == sender_id or identity.id in seen:
            continue
        name = identity.display_name.lower()
        if any(needle in name for needle in needles):
            seen.add(identity.id)
            matched.append(identity)
    return matched


def build_mention_notifications(
    recipients: Sequence[ResolvedIdentity],
    *,
    event_id: str,
    event_title: str,
    sender_id: str,
    sender_name: str,
    created_at: datetime | None = None,
) -> list[Notification]:
    created_at = created_at or now_in_app_timezone()
    message = f"{sender_name} mentioned you in {event_title}"
    return [
        Notification(
            id=None,
            recipient_id=recipient.id,
            event_type=NOTIFICATION_TYPE_NEW_MESSAGE,
            title=MENTION_TITLE,
            message=message,
            event_id=event_id,
            sender_id=sender_id,
            payload={
                "event_id": event_id,
                "sender_id": sender_id,
                "message_type": "group",
                "mention": True,
                "button_text": MENTION_BUTTON_TEXT,
                "icon": MENTION_ICON,
            },
            created_at=created_at,
            read_at=None,
        )
        for recipient in recipients
    ]


class MentionNotifier:
    """Resolve mentions against the event roster and write one notification batch."""

    def __init__(
        self,
        *,
        events: EventStore,
        roster: ParticipantRosterResolver,
        notifications: NotificationSink,
        on_created: NotificationObserver | None = None,
    ) -> None:
        self._events = events
        self._roster = roster
        self._notifications = notifications
        self._on_created = on_created

    async def notify(
        self,
        event_id: str,
        message_text: str,
        sender_id: str,
        sender_name: str,
        *,
        timeout: float | None = None,
    ) -> None:
        """Best-effort: every failure is logged and swallowed."""

        try:
            if timeout is None:
                await self._notify(event_id, message_text, sender_id, sender_name)
            else:
                with anyio.fail_after(timeout):
                    await self._notify(event_id, message_text, sender_id, sender_name)
        except TimeoutError:
            logger.warning(
                "Mention notifications for event %s timed out after %.1fs",
                event_id,
                timeout,
            )
        except Exception:
            logger.exception("Error creating mention notifications for event %s", event_id)

    async def _notify(
        self, event_id: str, message_text: str, sender_id: str, sender_name: str
    ) -> None:
        tokens = parse_mentions(message_text)
        if not tokens:
            return

        roster = await self._roster.resolve(event_id)
        if not roster.ok:
            logger.warning(
                "Skipping mention notifications for event %s: participants unavailable",
                event_id,
            )
            return

        recipients = match_mentioned(roster.value_or([]), tokens, sender_id)
        if not recipients:
            logger.debug("No participants matched %d mentions in event %s", len(tokens), event_id)
            return

        title = await attempt(
            self._events.get_event_title(event_id),
            description=f"Title lookup for event {event_id}",
        )
        event_title = (title.value_or("") or "").strip() or DEFAULT_EVENT_TITLE

        batch = build_mention_notifications(
            recipients,
            event_id=event_id,
            event_title=event_title,
            sender_id=sender_id,
            sender_name=sender_name,
        )
        written = await attempt(
            self._notifications.create_notifications(batch),
            description=f"Mention notification batch for event {event_id}",
        )
        if not written.ok:
            logger.error("Error creating mention notifications for event %s", event_id)
            return

        saved = list(written.value_or(batch))
        logger.info("Mention notifications created for %d users", len(saved))
        if self._on_created is not None:
            self._on_created(saved)


async def notify_mentions(
    event_id: str,
    message_text: str,
    sender_id: str,
    sender_name: str,
    *,
    events: EventStore,
    participants: ParticipantDirectory,
    profiles: ProfileDirectory,
    notifications: NotificationSink,
    on_created: NotificationObserver | None = None,
    aggregate_enabled: bool = True,
    timeout: float | None = None,
) -> None:
    """Create mention notifications for ``message_text``. Never raises."""

    notifier = MentionNotifier(
        events=events,
        roster=ParticipantRosterResolver.for_directories(
            participants, profiles, aggregate_enabled=aggregate_enabled
        ),
        notifications=notifications,
        on_created=on_created,
    )
    await notifier.notify(
        event_id, message_text, sender_id, sender_name, timeout=timeout
    )


__all__ = [
    "DEFAULT_EVENT_TITLE",
    "MENTION_TITLE",
    "MentionNotifier",
    "NotificationObserver",
    "build_mention_notifications",
    "match_mentioned",
    "notify_mentions",
]
