"""Frame-data lookup: models, in-memory index and the Dustloop loader."""

from .dustloop import DustloopClient
from .index import FrameDataIndex
from .models import (
    CharacterData,
    CharacterNotFound,
    LookupResult,
    MoveNotFound,
    MoveRecord,
)
from .protocols import FrameDataLookup

__all__ = [
    "DustloopClient",
    "FrameDataIndex",
    "FrameDataLookup",
    "CharacterData",
    "CharacterNotFound",
    "LookupResult",
    "MoveNotFound",
    "MoveRecord",
]
