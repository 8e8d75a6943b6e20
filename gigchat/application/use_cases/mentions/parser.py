"""Extract ``@name`` mention tokens from chat messages."""

from __future__ import annotations

import re
import unicodedata
from typing import Final

MENTION_PATTERN: Final[re.Pattern[str]] = re.compile(r"@(\w+)")


def parse_mentions(text: str | None) -> list[str]:
    """Return mention tokens in order of appearance, without the leading ``@``.

    Duplicates are kept. Text is NFC-normalized first so decomposed accents
    stay inside the token.

    >>> parse_mentions("Hello @Alice and @bob, cc @Alice")
    ['Alice', 'bob', 'Alice']
    """

    if not text:
        return []
    return MENTION_PATTERN.findall(unicodedata.normalize("NFC", text))


__all__ = ["MENTION_PATTERN", "parse_mentions"]
