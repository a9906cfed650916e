"""In-memory frame-data index with fuzzy character and move matching."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..constants import MIN_PREFIX_MATCH_LENGTH
from .models import (
    CharacterData,
    CharacterNotFound,
    LookupResult,
    MoveNotFound,
    MoveRecord,
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")

# Community nicknames that a name-prefix match would not catch.
CHARACTER_ALIASES: dict[str, tuple[str, ...]] = {
    "Goldlewis Dickinson": ("gl", "gold"),
    "Happy Chaos": ("hc", "chaos"),
    "Ramlethal Valentine": ("ram",),
    "Nagoriyuki": ("nago",),
    "Potemkin": ("pot", "pots"),
    "Giovanna": ("gio",),
    "Elphelt Valentine": ("elph",),
    "Sin Kiske": ("sin",),
    "Bedman?": ("bedman",),
    "Asuka R♯": ("asuka",),
    "Jack-O'": ("jacko", "jack"),
    "Zato-1": ("zato",),
    "A.B.A": ("aba",),
}


def normalize(text: str) -> str:
    """Lowercase and drop everything but ASCII letters and digits."""
    return _NON_ALNUM.sub("", text.lower())


class FrameDataIndex:
    """Frame-data lookup over a fixed roster.

    Characters are tried in roster order at each step: exact name or alias,
    then a name or alias found anywhere in the query (``GiovannaDL``), then a
    name prefix. Moves follow the same steps within one character, with an
    exact input (``5K``, ``c.S``) tried before an exact move name.
    """

    def __init__(self, characters: Iterable[CharacterData]) -> None:
        self.characters: list[CharacterData] = list(characters)

    def __len__(self) -> int:
        return len(self.characters)

    @property
    def move_count(self) -> int:
        return sum(len(c.moves) for c in self.characters)

    def find(self, character_query: str, move_query: str) -> LookupResult:
        character = self.find_character(character_query)
        if character is None:
            return CharacterNotFound(character_query)
        move = self.find_move(character, move_query)
        if move is None:
            return MoveNotFound(character.name, move_query)
        return move

    def find_character(self, query: str) -> CharacterData | None:
        key = normalize(query)
        if not key:
            return None
        for character in self.characters:
            if key == normalize(character.name) or key in character.aliases:
                return character
        for character in self.characters:
            terms = (normalize(character.name), *character.aliases)
            if any(_contained(term, key) for term in terms):
                return character
        if len(key) < MIN_PREFIX_MATCH_LENGTH:
            return None
        for character in self.characters:
            if normalize(character.name).startswith(key):
                return character
        return None

    @staticmethod
    def find_move(character: CharacterData, query: str) -> MoveRecord | None:
        key = normalize(query)
        if not key:
            return None
        for move in character.moves:
            if normalize(move.input) == key:
                return move
        for move in character.moves:
            if move.name and normalize(move.name) == key:
                return move
        for move in character.moves:
            if _contained(normalize(move.input), key) or _contained(
                normalize(move.name), key
            ):
                return move
        if len(key) < MIN_PREFIX_MATCH_LENGTH:
            return None
        for move in character.moves:
            if move.name and normalize(move.name).startswith(key):
                return move
        return None


def _contained(term: str, key: str) -> bool:
    return len(term) >= MIN_PREFIX_MATCH_LENGTH and term in key


__all__ = ["CHARACTER_ALIASES", "FrameDataIndex", "normalize"]
