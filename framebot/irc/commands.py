"""Bot command extraction from channel messages."""

from __future__ import annotations

from ..constants import COMMAND_PREFIX
from .models import Command


def _strip_cr(value: str) -> str:
    return value[:-1] if value.endswith("\r") else value


def extract(channel: str, text: str) -> Command | None:
    """Turn chat text into a ``Command`` when it starts with the command marker.

    The text is split once on the first space: the root token is the command
    name (marker removed, no case folding) and the remainder is split on
    single spaces into the arguments.
    """
    if not text.startswith(COMMAND_PREFIX):
        return None

    root, sep, remainder = text.partition(" ")
    name = _strip_cr(root)[len(COMMAND_PREFIX) :]
    if not sep:
        return Command(channel=channel, name=name, args=())
    args = tuple(_strip_cr(token) for token in remainder.split(" "))
    return Command(channel=channel, name=name, args=args)


__all__ = ["extract"]
