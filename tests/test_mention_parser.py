"""Tests for ``@`` mention token extraction."""

import pytest

from gigchat.application.use_cases.mentions import parse_mentions


def test_parse_keeps_order_and_duplicates() -> None:
    assert parse_mentions("Hello @Alice and @bob, cc @Alice") == ["Alice", "bob", "Alice"]


def test_parse_without_mentions_returns_empty() -> None:
    assert parse_mentions("see you at soundcheck") == []


@pytest.mark.parametrize("text", ["", None, "@", "@ nobody", "@@"])
def test_parse_degenerate_input(text) -> None:
    assert parse_mentions(text) == []


def test_parse_stops_at_non_word_characters() -> None:
    assert parse_mentions("@dj_max! @mc-2 @ana.") == ["dj_max", "mc", "ana"]


def test_parse_adjacent_mentions() -> None:
    assert parse_mentions("@a@b") == ["a", "b"]


def test_parse_email_address_yields_domain_token() -> None:
    # the pattern has no word-boundary check before "@"
    assert parse_mentions("mail me at jo@venue.com") == ["venue"]


def test_parse_includes_digits_and_underscores() -> None:
    assert parse_mentions("thanks @band_2024") == ["band_2024"]


def test_parse_keeps_decomposed_accents_in_token() -> None:
    text = "hola @Jose\u0301 y @a\u0301b"

    assert parse_mentions(text) == ["Jos\u00e9", "\u00e1b"]
