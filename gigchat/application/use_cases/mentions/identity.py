"""Resolve bare user identifiers into display-ready identities."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from gigchat.domain.entities import ProfileRecord, ResolvedIdentity
from gigchat.domain.ports import ProfileDirectory

from ..lookups import attempt

R = TypeVar("R")

NameSource = tuple[str, Callable[[Any], str | None]]

UNKNOWN_DISPLAY_NAME = "Unknown"

logger = logging.getLogger(__name__)


def email_local_part(email: str | None) -> str | None:
    """Return the part of ``email`` before ``@``."""

    if not email:
        return None
    return email.split("@", 1)[0]


# Evaluated in order; the first non-blank value wins.
PROFILE_NAME_CHAIN: tuple[NameSource, ...] = (
    ("full_name", lambda profile: profile.full_name),
    ("username", lambda profile: profile.username),
    ("email", lambda profile: email_local_part(profile.email)),
)

# Aggregate roster rows only carry the full name and email inline.
INLINE_NAME_CHAIN: tuple[NameSource, ...] = (
    ("full_name", lambda row: row.full_name),
    ("email", lambda row: email_local_part(row.email)),
)


def choose_display_name(record: R, chain: Sequence[NameSource]) -> str | None:
    """Return the first non-blank trimmed name produced by ``chain``."""

    for _source, extract in chain:
        value = extract(record)
        if value and value.strip():
            return value.strip()
    return None


def identity_from_profile(user_id: str, profile: ProfileRecord | None) -> ResolvedIdentity:
    if profile is None:
        return ResolvedIdentity(id=user_id, display_name=UNKNOWN_DISPLAY_NAME)
    display_name = choose_display_name(profile, PROFILE_NAME_CHAIN) or UNKNOWN_DISPLAY_NAME
    return ResolvedIdentity(
        id=user_id,
        display_name=display_name,
        avatar_url=profile.avatar_url or None,
    )


async def resolve_identity(profiles: ProfileDirectory, user_id: str) -> ResolvedIdentity:
    """Return the display identity for ``user_id``; never raises.

    A missing profile and a failed lookup both resolve to the ``"Unknown"``
    fallback identity.
    """

    lookup = await attempt(
        profiles.get_profile(user_id),
        description=f"Profile lookup for user {user_id}",
    )
    return identity_from_profile(user_id, lookup.value)


__all__ = [
    "INLINE_NAME_CHAIN",
    "PROFILE_NAME_CHAIN",
    "UNKNOWN_DISPLAY_NAME",
    "choose_display_name",
    "email_local_part",
    "identity_from_profile",
    "resolve_identity",
]
