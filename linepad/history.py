"""Bounded undo/redo history of document snapshots."""

MAX_HISTORY = 10


class History:
    """Undo and redo stacks of line snapshots.

    At most ``MAX_HISTORY`` snapshots are kept for undo; once the undo stack
    is full, further saves are ignored.
    """

    def __init__(self):
        self._undo: list[tuple[str, ...]] = []
        self._redo: list[tuple[str, ...]] = []

    def save(self, lines):
        """Record a snapshot of ``lines`` and discard any redo states."""
        if len(self._undo) >= MAX_HISTORY:
            return
        self._undo.append(tuple(lines))
        self._redo.clear()

    def can_undo(self):
        return bool(self._undo)

    def can_redo(self):
        return bool(self._redo)

    def undo(self, lines):
        """Return the previous snapshot, remembering ``lines`` for redo.

        Returns None when there is nothing to undo.
        """
        if not self._undo:
            return None
        self._redo.append(tuple(lines))
        return list(self._undo.pop())

    def redo(self, lines):
        """Return the next snapshot, remembering ``lines`` for undo.

        Returns None when there is nothing to redo.
        """
        if not self._redo:
            return None
        self._undo.append(tuple(lines))
        return list(self._redo.pop())