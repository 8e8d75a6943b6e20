"""Domain entities describing user profile data and resolved identities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfileRecord:
    """Raw profile fields as stored by the profile directory."""

    id: str
    full_name: str | None = None
    username: str | None = None
    email: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True)
class ParticipantProfileRow:
    """Participant row already joined with the inline profile columns."""

    user_id: str
    full_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None


@dataclass(frozen=True)
class ResolvedIdentity:
    """Display-ready identity of a participant. Never persisted."""

    id: str
    display_name: str
    avatar_url: str | None = None


__all__ = ["ParticipantProfileRow", "ProfileRecord", "ResolvedIdentity"]
