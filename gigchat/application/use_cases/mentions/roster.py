"""Resolve the ordered participant roster of an event group chat.

Two strategies produce the same roster. The aggregate strategy reads
participant rows already joined with profile columns; the direct strategy
lists participants and looks every profile up on its own. The resolver tries
them in order and only falls back when a strategy fails outright.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Protocol

from gigchat.domain.entities import Lookup, ParticipantProfileRow, ResolvedIdentity
from gigchat.domain.ports import ParticipantDirectory, ProfileDirectory

from ..lookups import attempt
from .identity import INLINE_NAME_CHAIN, choose_display_name, resolve_identity

logger = logging.getLogger(__name__)


class RosterStrategy(Protocol):
    name: str

    async def resolve(self, event_id: str) -> list[ResolvedIdentity]: ...


class AggregateRosterStrategy:
    """Use the joined participant/profile query, fetching profiles only when needed."""

    name = "aggregate"

    def __init__(
        self, participants: ParticipantDirectory, profiles: ProfileDirectory
    ) -> None:
        self._participants = participants
        self._profiles = profiles

    async def resolve(self, event_id: str) -> list[ResolvedIdentity]:
        rows = await self._participants.get_participants_with_profiles(event_id)
        rows = [row for row in rows if row.user_id]
        return list(await asyncio.gather(*(self._identity_for_row(row) for row in rows)))

    async def _identity_for_row(self, row: ParticipantProfileRow) -> ResolvedIdentity:
        inline_name = choose_display_name(row, INLINE_NAME_CHAIN)
        if inline_name:
            return ResolvedIdentity(
                id=row.user_id,
                display_name=inline_name,
                avatar_url=row.avatar_url or None,
            )
        return await resolve_identity(self._profiles, row.user_id)


class DirectRosterStrategy:
    """Rebuild the roster from participant records plus one profile lookup each."""

    name = "direct"

    def __init__(
        self, participants: ParticipantDirectory, profiles: ProfileDirectory
    ) -> None:
        self._participants = participants
        self._profiles = profiles

    async def resolve(self, event_id: str) -> list[ResolvedIdentity]:
        records = await self._participants.list_participants(event_id)
        user_ids = [record.user_id for record in records if record.user_id]
        # gather keeps the input order regardless of completion order
        return list(
            await asyncio.gather(
                *(resolve_identity(self._profiles, user_id) for user_id in user_ids)
            )
        )


class ParticipantRosterResolver:
    """Try each roster strategy in turn until one succeeds."""

    def __init__(self, strategies: Sequence[RosterStrategy]) -> None:
        if not strategies:
            raise ValueError("At least one roster strategy is required")
        self._strategies = tuple(strategies)

    @classmethod
    def for_directories(
        cls,
        participants: ParticipantDirectory,
        profiles: ProfileDirectory,
        *,
        aggregate_enabled: bool = True,
    ) -> "ParticipantRosterResolver":
        strategies: list[RosterStrategy] = []
        if aggregate_enabled:
            strategies.append(AggregateRosterStrategy(participants, profiles))
        strategies.append(DirectRosterStrategy(participants, profiles))
        return cls(strategies)

    @property
    def strategy_names(self) -> list[str]:
        return [strategy.name for strategy in self._strategies]

    async def resolve(self, event_id: str) -> Lookup[list[ResolvedIdentity]]:
        failure: Lookup[list[ResolvedIdentity]] | None = None
        for strategy in self._strategies:
            lookup = await attempt(
                strategy.resolve(event_id),
                description=f"{strategy.name.capitalize()} roster lookup for event {event_id}",
            )
            if lookup.ok:
                roster = lookup.value_or([])
                logger.debug(
                    "Resolved %d participants for event %s using %s roster",
                    len(roster),
                    event_id,
                    strategy.name,
                )
                return Lookup.found(roster)
            failure = lookup

        logger.error("Unable to resolve group chat participants for event %s", event_id)
        return failure if failure is not None else Lookup.failed(
            RuntimeError("No roster strategy available")
        )


async def resolve_roster(
    participants: ParticipantDirectory,
    profiles: ProfileDirectory,
    event_id: str,
    *,
    aggregate_enabled: bool = True,
) -> list[ResolvedIdentity]:
    """Return the display-ready roster for ``event_id``; empty when unresolvable."""

    resolver = ParticipantRosterResolver.for_directories(
        participants, profiles, aggregate_enabled=aggregate_enabled
    )
    lookup = await resolver.resolve(event_id)
    return lookup.value_or([])


__all__ = [
    "AggregateRosterStrategy",
    "DirectRosterStrategy",
    "ParticipantRosterResolver",
    "RosterStrategy",
    "resolve_roster",
]
