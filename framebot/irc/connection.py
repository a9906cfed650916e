"""Connection lifecycle: handshake, receive loop and the reconnect loop."""

from __future__ import annotations

import asyncio
import logging
from contextlib import aclosing
from typing import TYPE_CHECKING, assert_never

from ..constants import RECONNECT_DELAY
from ..errors.internal import TransportError
from ..errors.handling import error_tally
from ..logs.logger import logger
from .codec import classify, pong_line, privmsg_line, setup_lines
from .commands import extract
from .models import ChannelMessage, ConnectionState, Ignored, Keepalive
from .transport import IRCWebSocketTransport

if TYPE_CHECKING:  # pragma: no cover
    from ..bot.dispatcher import CommandDispatcher
    from ..config.model import BotConfig


class ConnectionManager:
    """Owns the single chat session and restarts it whenever it fails.

    One inbound line is fully handled, including an awaited reply, before the
    next one is read. The manager never gives up: every transport failure
    tears the session down and a new one starts right away (after
    ``reconnect_delay`` seconds when that is non-zero).
    """

    def __init__(
        self,
        config: BotConfig,
        dispatcher: CommandDispatcher,
        transport: IRCWebSocketTransport | None = None,
        reconnect_delay: float = RECONNECT_DELAY,
    ) -> None:
        self.config = config
        self.dispatcher = dispatcher
        self.transport = transport or IRCWebSocketTransport()
        self.reconnect_delay = reconnect_delay
        self.state = ConnectionState.DISCONNECTED
        self.session_count = 0

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                user=self.config.nick,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    async def run_forever(self) -> None:
        """Run sessions back to back and never return.

        Only ``TransportError`` is caught here. The transport wraps every
        websockets, OS and timeout failure into it, so any other exception
        escaping a session is a bug and propagates to the caller.
        """
        while True:
            try:
                await self.run_session()
                logger.log_event(
                    "irc", "session_ended", level=logging.WARNING, user=self.config.nick
                )
            except TransportError as e:
                error_tally.record("network", f"{e.operation}: {e}")
                logger.log_event(
                    "irc",
                    "session_failed",
                    level=logging.WARNING,
                    user=self.config.nick,
                    operation=e.operation,
                    error=str(e),
                )
            if self.reconnect_delay > 0:
                logger.log_event(
                    "irc",
                    "reconnect_wait",
                    user=self.config.nick,
                    delay=self.reconnect_delay,
                )
                await asyncio.sleep(self.reconnect_delay)

    async def run_session(self) -> None:
        """Connect, authenticate, join and process lines until the stream ends.

        Raises:
            TransportError: The websocket failed at any point of the session.
        """
        self.session_count += 1
        self._set_state(ConnectionState.CONNECTING)
        try:
            logger.log_event(
                "irc", "connect_start", user=self.config.nick, url=self.transport.ws_url
            )
            await self.transport.connect()
            logger.log_event("irc", "connected", level=logging.DEBUG, user=self.config.nick)

            self._set_state(ConnectionState.AUTHENTICATING)
            for line in setup_lines(
                self.config.token, self.config.nick, self.config.channels
            ):
                await self.transport.send_line(line)
            logger.log_event(
                "irc",
                "auth_sent",
                level=logging.DEBUG,
                user=self.config.nick,
                channels=self.config.join_target,
            )

            # No acknowledgement is awaited; a rejected login shows up as a
            # closed stream on the next read.
            self._set_state(ConnectionState.JOINED)
            self._set_state(ConnectionState.LISTENING)
            logger.log_event("irc", "listening", user=self.config.nick)
            async with aclosing(self.transport.lines()) as lines:
                async for line in lines:
                    await self.handle_line(line)
        finally:
            await self.transport.disconnect()
            self._set_state(ConnectionState.DISCONNECTED)

    async def handle_line(self, line: str) -> None:
        frame = classify(line)
        if isinstance(frame, Keepalive):
            await self.transport.send_line(pong_line(frame.payload))
            logger.log_event("irc", "pong", level=logging.DEBUG, user=self.config.nick)
            return

        logger.log_event(
            "irc", "raw", level=logging.DEBUG, user=self.config.nick, raw=line
        )
        if isinstance(frame, Ignored):
            return
        if isinstance(frame, ChannelMessage):
            await self._handle_channel_message(frame)
            return
        assert_never(frame)

    async def _handle_channel_message(self, message: ChannelMessage) -> None:
        command = extract(message.channel, message.text)
        if command is None:
            return
        logger.log_event(
            "command",
            "received",
            user=self.config.nick,
            channel=command.channel,
            text=message.text,
        )
        try:
            reply = self.dispatcher.respond(command)
        except Exception as e:  # noqa: BLE001
            logger.log_event(
                "irc",
                "handler_error",
                level=logging.ERROR,
                user=self.config.nick,
                channel=command.channel,
                error=str(e),
                error_type=type(e).__name__,
            )
            return
        if reply is None:
            return
        await self.transport.send_line(privmsg_line(command.channel, reply))
        logger.log_event(
            "irc", "reply_sent", level=logging.DEBUG, user=self.config.nick, channel=command.channel
        )


__all__ = ["ConnectionManager"]
