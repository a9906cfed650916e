"""Line-level codec for Twitch IRC over websocket.

Inbound lines are classified into keepalives, channel messages and noise;
outbound lines are built here so the wire format lives in one module.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .models import ChannelMessage, Frame, Ignored, Keepalive

KEEPALIVE_MARKER = "PING"
LINE_TERMINATOR = "\r\n"

# Compiled once at import; shared read-only by every session.
PRIVMSG_PATTERN = re.compile(r"PRIVMSG #([^ ]*) :(.*)")

_IGNORED = Ignored()


def _strip_cr(value: str) -> str:
    return value[:-1] if value.endswith("\r") else value


def classify(line: str) -> Frame:
    """Classify one raw inbound line.

    Returns ``Keepalive`` for ``PING`` lines (payload is everything after the
    first space, verbatim), ``ChannelMessage`` for ``PRIVMSG #chan :text``
    lines and ``Ignored`` for everything else.
    """
    if line.startswith(KEEPALIVE_MARKER):
        _, _, payload = line.partition(" ")
        return Keepalive(payload)

    match = PRIVMSG_PATTERN.search(line)
    if match is None:
        return _IGNORED
    channel, text = match.group(1, 2)
    return ChannelMessage(channel=_strip_cr(channel), text=_strip_cr(text))


def split_frame(data: str) -> Iterator[str]:
    """Yield the IRC lines carried by one websocket text frame, in order.

    Twitch batches several ``\\r\\n``-terminated lines into a single frame.
    """
    for line in data.split(LINE_TERMINATOR):
        if line:
            yield line


def pong_line(payload: str) -> str:
    return f"PONG {payload}"


def privmsg_line(channel: str, text: str) -> str:
    return f"PRIVMSG #{channel.lstrip('#')} :{text}"


def setup_lines(token: str, nick: str, channels: Iterable[str]) -> list[str]:
    """Return the handshake lines in the order the server expects them."""
    return [
        f"PASS {token}",
        f"NICK {nick}",
        f"JOIN {','.join(channels)}",
    ]


__all__ = [
    "PRIVMSG_PATTERN",
    "classify",
    "split_frame",
    "pong_line",
    "privmsg_line",
    "setup_lines",
]
