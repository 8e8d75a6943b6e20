"""Mention parsing, roster resolution and mention notifications."""

from .identity import UNKNOWN_DISPLAY_NAME, choose_display_name, resolve_identity
from .notifier import (
    MentionNotifier,
    build_mention_notifications,
    match_mentioned,
    notify_mentions,
)
from .parser import parse_mentions
from .roster import (
    AggregateRosterStrategy,
    DirectRosterStrategy,
    ParticipantRosterResolver,
    resolve_roster,
)

__all__ = [
    "AggregateRosterStrategy",
    "DirectRosterStrategy",
    "MentionNotifier",
    "ParticipantRosterResolver",
    "UNKNOWN_DISPLAY_NAME",
    "build_mention_notifications",
    "choose_display_name",
    "match_mentioned",
    "notify_mentions",
    "parse_mentions",
    "resolve_identity",
    "resolve_roster",
]
