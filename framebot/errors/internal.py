"""Centralized internal error hierarchy.

These exceptions give the process-level failure domains a name. Raw
websockets / aiohttp / OS errors are wrapped at the boundary that sees them
so callers only have to catch these types.

Classes:
  InternalError   – Base for all internal errors.
  NetworkError    – Transient network/IO issues (safe to retry).
  TransportError  – The chat websocket failed; ends the current session.
  ParsingError    – Remote payload did not have the expected shape.
  DataLoadError   – Frame data could not be loaded after all retries.
  ConfigError     – Required settings missing or invalid; fatal at startup.

Command-level outcomes (unknown character, bad arguments, ...) are not
exceptions; see ``framebot.bot.dispatcher``.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors."""


class TransportError(NetworkError):
    """Exception raised when the chat websocket fails.

    Carries the operation that failed (``connect``, ``send`` or ``receive``)
    so the reconnect loop can log it.
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        data: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message, data=data)
        self.operation = operation


class ParsingError(InternalError):
    """Exception raised for response parsing or schema validation errors."""


class DataLoadError(InternalError):
    """Exception raised when the frame-data source cannot be loaded."""


class ConfigError(InternalError):
    """Exception raised when required configuration is missing or invalid."""


__all__ = [
    "InternalError",
    "NetworkError",
    "TransportError",
    "ParsingError",
    "DataLoadError",
    "ConfigError",
]
