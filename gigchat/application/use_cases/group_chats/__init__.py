"""Use cases for managing event group chat membership."""

from .ensure_group_chat import add_talent_to_group_chat, ensure_group_chat_for_event
from .join_group_chat import join_group_chat
from .mark_group_chat_read import mark_group_chat_read
from .membership import is_participant
from .recover_participation import recover_group_chat_participation
from .verify_group_chat import verify_group_chat

__all__ = [
    "add_talent_to_group_chat",
    "ensure_group_chat_for_event",
    "is_participant",
    "join_group_chat",
    "mark_group_chat_read",
    "recover_group_chat_participation",
    "verify_group_chat",
]
