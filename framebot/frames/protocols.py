"""Protocol definitions for frame-data lookups.

The dispatcher only depends on this interface so tests can hand it a
deterministic double instead of the Dustloop-backed index.
"""

from __future__ import annotations

from typing import Protocol

from .models import LookupResult


class FrameDataLookup(Protocol):
    """Resolves a character query and a move query to a move record."""

    def find(self, character_query: str, move_query: str) -> LookupResult:
        """Return the matched move or a classified miss."""
        ...
