"""Bot command handling."""

from .dispatcher import CommandDispatcher, format_error, format_move
from .models import (
    DispatchError,
    DispatchResult,
    Reply,
    UnknownCharacter,
    UnknownMove,
    WrongArguments,
)

__all__ = [
    "CommandDispatcher",
    "format_error",
    "format_move",
    "DispatchError",
    "DispatchResult",
    "Reply",
    "UnknownCharacter",
    "UnknownMove",
    "WrongArguments",
]
