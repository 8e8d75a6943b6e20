"""Domain entity representing a gig event."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Event:
    """Event (gig/posting) that anchors one group conversation."""

    id: str
    title: str | None = None
    promoter_id: str | None = None


__all__ = ["Event"]
