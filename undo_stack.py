#!/usr/bin/env python3
"""
Undo Stack v1.0.0
=================
Bounded linear history of document snapshots.

Pushing after an undo discards the redo branch; once the history
exceeds its limit the oldest snapshot is dropped.
"""

import threading
from typing import List, Optional

from config_logging import DEFAULT_UNDO_LIMIT

__version__ = "1.0.0"


class UndoStack:
    """History of document text with a movable cursor."""

    def __init__(self, initial: str = '', limit: int = DEFAULT_UNDO_LIMIT):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._history: List[str] = [initial]
        self._index = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> str:
        return self._history[self._index]

    @property
    def can_undo(self) -> bool:
        return self._index > 0

    @property
    def can_redo(self) -> bool:
        return self._index < len(self._history) - 1

    def __len__(self) -> int:
        return len(self._history)

    def push(self, value: str):
        """Record a new snapshot after the current one."""
        with self._lock:
            del self._history[self._index + 1:]
            self._history.append(value)
            if len(self._history) > self.limit:
                del self._history[0]
            self._index = len(self._history) - 1

    def undo(self) -> Optional[str]:
        """Step back one snapshot; None when already at the oldest."""
        with self._lock:
            if self._index == 0:
                return None
            self._index -= 1
            return self._history[self._index]

    def redo(self) -> Optional[str]:
        with self._lock:
            if self._index >= len(self._history) - 1:
                return None
            self._index += 1
            return self._history[self._index]

    def reset(self, value: str = ''):
        """Drop all history and start again from value."""
        with self._lock:
            self._history = [value]
            self._index = 0
