"""Twitch IRC over websocket: codec, command extraction and connection loop."""

from .codec import classify, pong_line, privmsg_line, setup_lines, split_frame
from .commands import extract
from .connection import ConnectionManager
from .models import (
    ChannelMessage,
    Command,
    ConnectionState,
    Frame,
    Ignored,
    Keepalive,
)
from .transport import IRCWebSocketTransport

__all__ = [
    "classify",
    "pong_line",
    "privmsg_line",
    "setup_lines",
    "split_frame",
    "extract",
    "ConnectionManager",
    "IRCWebSocketTransport",
    "ChannelMessage",
    "Command",
    "ConnectionState",
    "Frame",
    "Ignored",
    "Keepalive",
]
