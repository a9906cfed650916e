"""Error types and error logging helpers."""

from .handling import log_error
from .internal import (
    ConfigError,
    DataLoadError,
    InternalError,
    NetworkError,
    ParsingError,
    TransportError,
)

__all__ = [
    "log_error",
    "ConfigError",
    "DataLoadError",
    "InternalError",
    "NetworkError",
    "ParsingError",
    "TransportError",
]
