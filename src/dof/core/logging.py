"""Structured logging for the depth-of-field calculator.

Log records carry an optional dict of structured data that the console
formatter renders as trailing ``key=value`` pairs. Logs go to stderr so that
stdout carries only computed results.
"""

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "dof"


class KeyValueFormatter(logging.Formatter):
    """Format log records with structured data appended as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record, appending its structured data."""
        message = super().format(record)

        # Add extra fields if present
        data = getattr(record, "extra_data", None)
        if data:
            pairs = " ".join(f"{key}={value}" for key, value in data.items())
            message = f"{message} {pairs}"

        return message


def setup_logging(level: int = logging.WARNING, stream: TextIO | None = None) -> None:
    """Setup console logging for the ``dof`` logger hierarchy.

    Args:
        level: Logging level
        stream: Output stream, defaults to stderr
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Clear existing handlers
    logger.handlers.clear()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(
        KeyValueFormatter("%(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(console_handler)


def get_logger(name: str) -> "StructuredLogger":
    """Get a structured logger for a module (usually ``__name__``)."""
    return StructuredLogger(logging.getLogger(name))


class StructuredLogger:
    """Debug logger that merges bound context into each record's data.

    ``bind`` returns a child carrying extra fields, so a computation can
    attach the format name once and have it rendered on every line.
    """

    def __init__(self, logger: logging.Logger, context: dict[str, Any] | None = None):
        self.logger = logger
        self.context = dict(context or {})

    def bind(self, **context: Any) -> "StructuredLogger":
        """Return a logger whose records also carry ``context``."""
        return StructuredLogger(self.logger, {**self.context, **context})

    def debug(self, msg: str, data: dict[str, Any] | None = None) -> None:
        """Debug level log with bound context and structured data."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        merged = {**self.context, **(data or {})}
        extra = {"extra_data": merged} if merged else {}
        self.logger.debug(msg, extra=extra)

__all__ = [
    "LOGGER_NAME",
    "KeyValueFormatter",
    "setup_logging",
    "get_logger",
    "StructuredLogger",
]
