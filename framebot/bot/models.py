"""Dispatch outcomes.

``dispatch`` returns either a ``Reply`` or one of the ``DispatchError``
variants; both are plain values, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Reply:
    text: str


@dataclass(frozen=True, slots=True)
class UnknownCharacter:
    query: str


@dataclass(frozen=True, slots=True)
class UnknownMove:
    query: str


@dataclass(frozen=True, slots=True)
class WrongArguments:
    pass


DispatchError = UnknownCharacter | UnknownMove | WrongArguments
DispatchResult = Reply | DispatchError


__all__ = [
    "Reply",
    "UnknownCharacter",
    "UnknownMove",
    "WrongArguments",
    "DispatchError",
    "DispatchResult",
]
