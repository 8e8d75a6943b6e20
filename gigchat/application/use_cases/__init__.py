"""Aggregate application use cases."""

from .group_chats import join_group_chat
from .mentions import notify_mentions, parse_mentions, resolve_roster

__all__ = [
    "join_group_chat",
    "notify_mentions",
    "parse_mentions",
    "resolve_roster",
]
