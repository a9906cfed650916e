"""Command dispatch: argument validation, lookup and reply formatting."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import assert_never

from ..constants import FRAMES_COMMANDS, USAGE_HINT
from ..frames.models import CharacterNotFound, MoveNotFound, MoveRecord
from ..frames.protocols import FrameDataLookup
from ..irc.models import Command
from ..logs.logger import logger
from .models import (
    DispatchError,
    DispatchResult,
    Reply,
    UnknownCharacter,
    UnknownMove,
    WrongArguments,
)

# (label, MoveRecord attribute) in display order; input leads the line.
MOVE_FIELDS: tuple[tuple[str, str], ...] = (
    ("dmg", "damage"),
    ("guard", "guard"),
    ("startup", "startup"),
    ("active", "active"),
    ("recov", "recovery"),
    ("block", "on_block"),
    ("hit", "on_hit"),
    ("atklvl", "level"),
)


def format_move(move: MoveRecord) -> str:
    fields = " ".join(f"{label}=({getattr(move, attr)})" for label, attr in MOVE_FIELDS)
    return f"{move.input}: {fields}"


def format_error(error: DispatchError) -> str:
    if isinstance(error, UnknownCharacter):
        return f"Currently unknown character: '{error.query}'"
    if isinstance(error, UnknownMove):
        return f"Currently unknown move: '{error.query}'"
    if isinstance(error, WrongArguments):
        return USAGE_HINT
    assert_never(error)


class CommandDispatcher:
    """Answers frame-data commands using an injected lookup.

    Attributes:
        lookup: Collaborator resolving (character, move) queries.
        verbs: Lowercased command names this dispatcher answers.
    """

    def __init__(
        self, lookup: FrameDataLookup, verbs: Iterable[str] = FRAMES_COMMANDS
    ) -> None:
        self.lookup = lookup
        self.verbs = frozenset(v.lower() for v in verbs)

    def is_recognized(self, command: Command) -> bool:
        return command.name.lower() in self.verbs

    def dispatch(self, command: Command) -> DispatchResult:
        """Validate arguments, query the lookup and format the match.

        The first argument is the character query; the rest, joined by single
        spaces, is the move query. Queries are echoed back in errors exactly
        as the user typed them.
        """
        if not command.args:
            return WrongArguments()
        character_query, *move_tokens = command.args
        move_query = " ".join(move_tokens)
        if not move_query:
            return WrongArguments()

        result = self.lookup.find(character_query, move_query)
        if isinstance(result, CharacterNotFound):
            return UnknownCharacter(character_query)
        if isinstance(result, MoveNotFound):
            return UnknownMove(move_query)
        if isinstance(result, MoveRecord):
            return Reply(format_move(result))
        assert_never(result)

    def respond(self, command: Command) -> str | None:
        """Return the chat reply for ``command``, or None when it is not ours."""
        if not self.is_recognized(command):
            logger.log_event(
                "command",
                "ignored",
                level=logging.DEBUG,
                channel=command.channel,
                name=command.name,
            )
            return None

        outcome = self.dispatch(command)
        if isinstance(outcome, Reply):
            return outcome.text
        logger.log_event(
            "command",
            "dispatch_error",
            level=logging.DEBUG,
            channel=command.channel,
            error=type(outcome).__name__,
        )
        return format_error(outcome)


__all__ = ["CommandDispatcher", "MOVE_FIELDS", "format_error", "format_move"]
