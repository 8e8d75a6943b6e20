"""Turn directory calls into :class:`Lookup` results."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

from gigchat.domain.entities import Lookup

T = TypeVar("T")

logger = logging.getLogger(__name__)


async def attempt(call: Awaitable[T | None], *, description: str) -> Lookup[T]:
    """Await ``call`` and wrap its outcome instead of letting it raise.

    ``None`` means the store had nothing for the request. Errors are logged
    here so callers only have to pick a fallback.
    """

    try:
        value = await call
    except Exception as exc:
        logger.warning("%s failed: %s", description, exc, exc_info=True)
        return Lookup.failed(exc)
    if value is None:
        return Lookup.empty()
    return Lookup.found(value)


__all__ = ["attempt"]
