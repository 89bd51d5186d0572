"""Structured event logging utilities.

Responsibilities:
- Emit concise, deterministic one-line events for document operations.
- Let applications opt in to syml logs through a plain `loguru` sink.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger

_PACKAGE = "syml"


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


def format_event(operation: str, event: str, **context: object) -> str:
    """Return the log line for one operation event."""

    return f"[syml] op={operation} event={event}{_format_context(context)}"


def log_event(level: str, operation: str, event: str, **context: object) -> None:
    """Emit one structured operation event."""

    logger.log(level, format_event(operation, event, **context))


def configure_logging(sink: TextIO | None = None, level: str = "INFO") -> int:
    """Route syml events to `sink` with plain formatting and return the handler id."""

    logger.remove()
    handler_id = logger.add(sink or sys.stderr, format="{message}", level=level, colorize=False)
    logger.enable(_PACKAGE)
    return handler_id
