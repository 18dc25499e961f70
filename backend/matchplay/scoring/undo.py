"""Bounded undo history for a single match's scoring session."""

from collections import deque
from typing import Deque, Optional

from .. import config
from ..schemas import UndoAction


class UndoManager:
    """Remember the last few scoring actions for one match.

    Create one per match being scored and throw it away with the match.
    Once the history is full the oldest action is dropped.
    """

    def __init__(self, max_history: Optional[int] = None) -> None:
        limit = max_history if max_history is not None else config.UNDO_HISTORY_LIMIT
        if limit < 1:
            raise ValueError("max_history must be at least 1")
        self._history: Deque[UndoAction] = deque(maxlen=limit)

    @property
    def max_history(self) -> int:
        return self._history.maxlen or 0

    def record_action(self, action: UndoAction) -> None:
        self._history.append(action)

    def can_undo(self) -> bool:
        return bool(self._history)

    def pop_last_action(self) -> Optional[UndoAction]:
        if not self._history:
            return None
        return self._history.pop()

    @property
    def last_action(self) -> Optional[UndoAction]:
        return self._history[-1] if self._history else None

    def clear(self) -> None:
        self._history.clear()

    def __len__(self) -> int:
        return len(self._history)
