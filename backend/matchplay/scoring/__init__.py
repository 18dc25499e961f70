"""Golf scoring engines: handicaps, Stableford and match play."""

from . import handicap, match_play, stableford
from .undo import UndoManager

__all__ = [
    "handicap",
    "match_play",
    "stableford",
    "UndoManager",
]
