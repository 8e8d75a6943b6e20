"""Process-wide logging configuration."""

from __future__ import annotations

import logging


class MessageTextFilter(logging.Filter):
    """Redact chat message bodies attached to log records through ``extra``."""

    BLOCKED_KEYS = {"message_text", "text"}

    def filter(self, record: logging.LogRecord) -> bool:
        for key in self.BLOCKED_KEYS:
            if hasattr(record, key):
                setattr(record, key, "[REDACTED]")
        return True


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    # Handler filters also see records propagated from module loggers.
    for handler in logging.getLogger().handlers:
        if not any(isinstance(existing, MessageTextFilter) for existing in handler.filters):
            handler.addFilter(MessageTextFilter())


__all__ = ["MessageTextFilter", "configure_logging"]
