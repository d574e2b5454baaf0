"""Undo and redo stacks of edited images."""

from __future__ import annotations

from typing import Any

__all__ = ["History"]


class History:
    """Two stacks of snapshots; pushing a new snapshot discards redo."""

    def __init__(self) -> None:
        self._undo: list[Any] = []
        self._redo: list[Any] = []

    def push(self, image) -> None:
        """Record a snapshot; ``None`` (no image) is ignored."""
        if image is None:
            return
        self._undo.append(image)
        self._redo.clear()

    def undo(self, current):
        """Return the last snapshot, keeping ``current`` for redo."""
        if not self._undo:
            raise IndexError("nothing to undo")
        self._redo.append(current)
        return self._undo.pop()

    def redo(self, current):
        """Return the last undone snapshot, keeping ``current`` for undo."""
        if not self._redo:
            raise IndexError("nothing to redo")
        self._undo.append(current)
        return self._redo.pop()

    def can_undo(self) -> bool:
        return bool(self._undo)

    def can_redo(self) -> bool:
        return bool(self._redo)