"""Test doubles for the lookup collaborator and the chat transport."""

import asyncio

from framebot.errors.internal import TransportError


class FakeLookup:
    """Lookup double returning a fixed outcome and recording queries."""

    def __init__(self, result) -> None:
        self.result = result
        self.calls: list[tuple[str, str]] = []

    def find(self, character_query: str, move_query: str):
        self.calls.append((character_query, move_query))
        return self.result


class FakeTransport:
    """Scripted transport.

    Each entry of ``sessions`` is the list of inbound lines for one
    connection; an exception instance in that list is raised from the read.
    Once the script and ``connect_failures`` are used up, ``connect`` raises
    CancelledError so ``run_forever`` returns control to the test.
    """

    ws_url = "ws://irc.test"

    def __init__(self, sessions=None, connect_failures: int = 0, fail_send_on=None):
        self.sessions = list(sessions or [])
        self.connect_failures = connect_failures
        self.fail_send_on = fail_send_on
        self.sent: list[str] = []
        self.events: list[str] = []
        self.connect_calls = 0
        self._current: list = []

    async def connect(self) -> None:
        self.connect_calls += 1
        self.events.append("connect")
        if self.connect_failures:
            self.connect_failures -= 1
            raise TransportError("connection refused", operation="connect")
        if not self.sessions:
            raise asyncio.CancelledError()
        self._current = self.sessions.pop(0)

    async def send_line(self, line: str) -> None:
        if self.fail_send_on is not None and line.startswith(self.fail_send_on):
            raise TransportError("send failed", operation="send")
        self.sent.append(line)
        self.events.append(f"send:{line}")

    async def lines(self):
        for item in self._current:
            if isinstance(item, BaseException):
                raise item
            yield item

    async def disconnect(self) -> None:
        self.events.append("disconnect")
