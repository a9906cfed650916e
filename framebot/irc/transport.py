"""WebSocket transport carrying Twitch IRC lines."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

import websockets
from websockets.exceptions import WebSocketException

from ..constants import TWITCH_IRC_WS_URL, WS_OPEN_TIMEOUT
from ..errors.internal import TransportError
from ..logs.logger import logger
from .codec import split_frame

TRANSPORT_ERRORS = (WebSocketException, OSError, TimeoutError)


class IRCWebSocketTransport:
    """Handles connection establishment, line I/O and cleanup.

    Every failure of the underlying websocket surfaces as ``TransportError``
    so the connection manager has a single exception to recover from.

    Attributes:
        ws_url (str): Chat gateway URL.
        ws: Active websocket connection, or None.
    """

    def __init__(
        self, ws_url: str = TWITCH_IRC_WS_URL, open_timeout: float = WS_OPEN_TIMEOUT
    ) -> None:
        self.ws_url = ws_url
        self.open_timeout = open_timeout
        self.ws = None

    async def connect(self) -> None:
        await self._cleanup_connection()
        try:
            # Keepalive is the IRC PING/PONG exchange, not websocket pings.
            self.ws = await websockets.connect(
                self.ws_url, ping_interval=None, open_timeout=self.open_timeout
            )
        except TRANSPORT_ERRORS as e:
            raise TransportError(
                f"WebSocket connection failed: {str(e)}", operation="connect"
            ) from e

    async def send_line(self, line: str) -> None:
        if self.ws is None:
            raise TransportError("WebSocket is not connected", operation="send")
        try:
            await self.ws.send(line)
        except TRANSPORT_ERRORS as e:
            raise TransportError(
                f"WebSocket send failed: {str(e)}", operation="send"
            ) from e

    async def lines(self) -> AsyncIterator[str]:
        """Yield inbound IRC lines until the server closes the stream cleanly."""
        if self.ws is None:
            raise TransportError("WebSocket is not connected", operation="receive")
        try:
            async for message in self.ws:
                if isinstance(message, bytes):
                    message = message.decode("utf-8", errors="replace")
                for line in split_frame(message):
                    yield line
        except TRANSPORT_ERRORS as e:
            raise TransportError(
                f"WebSocket receive failed: {str(e)}", operation="receive"
            ) from e

    async def disconnect(self) -> None:
        await self._cleanup_connection()

    async def _cleanup_connection(self) -> None:
        ws, self.ws = self.ws, None
        if ws is None:
            return
        try:
            await ws.close(code=1000)
        except TRANSPORT_ERRORS as e:
            logger.log_event(
                "irc", "disconnect_error", level=logging.WARNING, error=str(e)
            )


__all__ = ["IRCWebSocketTransport", "TRANSPORT_ERRORS"]
