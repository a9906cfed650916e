"""Frame-data records and lookup outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One move's frame data, values kept exactly as the source wrote them."""

    input: str
    name: str = ""
    damage: str = ""
    guard: str = ""
    startup: str = ""
    active: str = ""
    recovery: str = ""
    on_block: str = ""
    on_hit: str = ""
    level: str = ""


@dataclass(slots=True)
class CharacterData:
    name: str
    aliases: tuple[str, ...] = ()
    moves: list[MoveRecord] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class CharacterNotFound:
    query: str


@dataclass(frozen=True, slots=True)
class MoveNotFound:
    character: str
    query: str


LookupResult = MoveRecord | CharacterNotFound | MoveNotFound


__all__ = [
    "MoveRecord",
    "CharacterData",
    "CharacterNotFound",
    "MoveNotFound",
    "LookupResult",
]
