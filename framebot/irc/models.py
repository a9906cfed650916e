"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    AUTHENTICATING = auto()
    JOINED = auto()
    LISTENING = auto()


@dataclass(frozen=True, slots=True)
class Keepalive:
    """Server liveness probe; ``payload`` is echoed back unchanged."""

    payload: str


@dataclass(frozen=True, slots=True)
class ChannelMessage:
    channel: str
    text: str


@dataclass(frozen=True, slots=True)
class Ignored:
    """Any line shape the bot does not act on."""


Frame = Keepalive | ChannelMessage | Ignored


@dataclass(frozen=True, slots=True)
class Command:
    """A bot command parsed from one chat line.

    Attributes:
        channel: Channel the command was typed in, without the ``#``.
        name: Command name without the ``!`` marker, case preserved.
        args: Space-separated arguments; empty when none were given.
    """

    channel: str
    name: str
    args: tuple[str, ...] = ()


__all__ = [
    "ConnectionState",
    "Keepalive",
    "ChannelMessage",
    "Ignored",
    "Frame",
    "Command",
]
