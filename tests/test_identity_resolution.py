"""Tests for the profile display-name fallback chain."""

from __future__ import annotations

import pytest

from gigchat.application.use_cases.mentions import (
    UNKNOWN_DISPLAY_NAME,
    choose_display_name,
    resolve_identity,
)
from gigchat.application.use_cases.mentions.identity import (
    INLINE_NAME_CHAIN,
    PROFILE_NAME_CHAIN,
)
from gigchat.domain.entities import ParticipantProfileRow, ProfileRecord



@pytest.mark.parametrize(
    ("fields", "expected"),
    [
        ({"full_name": "Alice Smith", "username": "alice", "email": "a@x.com"}, "Alice Smith"),
        ({"full_name": "  Alice Smith  "}, "Alice Smith"),
        ({"full_name": "   ", "username": "dj_bob"}, "dj_bob"),
        ({"full_name": "", "username": "", "email": "j.doe@x.com"}, "j.doe"),
        ({"email": "no-at-sign"}, "no-at-sign"),
        ({"email": "@x.com"}, None),
        ({}, None),
    ],
)
def test_profile_name_chain(fields, expected) -> None:
    profile = ProfileRecord(id="u1", **fields)
    assert choose_display_name(profile, PROFILE_NAME_CHAIN) == expected


def test_inline_chain_skips_username() -> None:
    row = ParticipantProfileRow(user_id="u1", full_name=None, email="sam@x.com")
    assert choose_display_name(row, INLINE_NAME_CHAIN) == "sam"


@pytest.mark.anyio
async def test_resolve_identity_uses_profile(directory) -> None:
    directory.add_profile("u1", full_name="Alice Smith", avatar_url="https://cdn/a.png")

    identity = await resolve_identity(directory, "u1")

    assert identity.id == "u1"
    assert identity.display_name == "Alice Smith"
    assert identity.avatar_url == "https://cdn/a.png"


@pytest.mark.anyio
async def test_resolve_identity_email_local_part(directory) -> None:
    directory.add_profile("u1", full_name="", username="", email="j.doe@x.com")

    identity = await resolve_identity(directory, "u1")

    assert identity.display_name == "j.doe"
    assert identity.avatar_url is None


@pytest.mark.anyio
async def test_resolve_identity_all_fields_empty(directory) -> None:
    directory.add_profile("u1", full_name="", username=None, email="")

    identity = await resolve_identity(directory, "u1")

    assert identity.display_name == UNKNOWN_DISPLAY_NAME


@pytest.mark.anyio
async def test_resolve_identity_missing_profile(directory) -> None:
    identity = await resolve_identity(directory, "ghost")

    assert identity.display_name == "Unknown"
    assert identity.id == "ghost"


@pytest.mark.anyio
async def test_resolve_identity_lookup_failure_does_not_raise(directory, caplog) -> None:
    directory.profile_errors["u1"] = ConnectionError("directory offline")

    with caplog.at_level("WARNING"):
        identity = await resolve_identity(directory, "u1")

    assert identity.display_name == "Unknown"
    assert "Profile lookup for user u1 failed" in caplog.text
