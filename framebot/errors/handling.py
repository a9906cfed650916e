from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .internal import (
    ConfigError,
    DataLoadError,
    InternalError,
    NetworkError,
    ParsingError,
)


@dataclass(slots=True)
class ErrorCount:
    count: int = 0
    last_message: str = ""


class ErrorTally:
    """Counts failures per category so the exit summary stays short.

    A bot that reconnects forever can fail the same way thousands of times.
    """

    def __init__(self) -> None:
        self.counts: dict[str, ErrorCount] = {}

    def record(self, category: str, message: str) -> None:
        entry = self.counts.setdefault(category, ErrorCount())
        entry.count += 1
        entry.last_message = message

    def summary(self) -> dict[str, ErrorCount]:
        return dict(self.counts)

    def log_summary(self) -> None:
        if not self.counts:
            logging.info("No errors recorded in current session")
            return
        logging.warning("🚨 ERROR SUMMARY REPORT")
        for category, entry in self.counts.items():
            logging.warning(f"  {category}: {entry.count} total")
            logging.warning(f"    Last: {entry.last_message}")

    def reset(self) -> None:
        self.counts.clear()


error_tally = ErrorTally()


def categorize(error: Exception) -> str:
    if isinstance(error, NetworkError | OSError | ConnectionError):
        return "network"
    if isinstance(error, ConfigError):
        return "config"
    if isinstance(error, DataLoadError):
        return "data"
    if isinstance(error, ParsingError):
        return "parsing"
    if isinstance(error, InternalError):
        return "internal"
    return "unknown"


def log_error(
    message: str,
    error: Exception,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Logs an error message with the associated exception details.

    The exception type picks the category the failure is counted under in
    ``error_tally``.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
        level: Logging level (default: ERROR).
    """
    category = categorize(error)
    line = f"[{category.upper()}] {message} | Exception: {type(error).__name__}: {error}"
    if context:
        line += " | Context: " + " | ".join(f"{k}={v}" for k, v in context.items())
    logging.log(level, line)
    error_tally.record(category, f"{message}: {error}")
