"""Linear undo/redo history over full hold-set snapshots.

Snapshots are pushed with the state from *before* each mutation, so the
live hold set is never stored by :meth:`EditHistory.push`. When undoing
or redoing, the caller passes the live set in and it is exchanged into
the slot being restored. This keeps ``undo`` followed by ``redo``
returning to the post-mutation state without ever storing it eagerly.

Example:
    >>> history = EditHistory()
    >>> history.push(())                # state before adding a hold
    >>> history.undo(current=(hold,))   # back to the empty set
    ()
    >>> history.redo(current=())
    (Hold(...),)
"""

from typing import Optional

from climbset.models import HoldSet


class EditHistory:
    """Stack of hold-set snapshots with a cursor.

    ``cursor`` is the index of the snapshot the next :meth:`undo` will
    restore; ``-1`` means there is nothing to undo. Entries after the
    cursor form the redo branch and are discarded by the next
    :meth:`push`.
    """

    def __init__(self) -> None:
        """Initialize an empty history."""
        self._snapshots: list[HoldSet] = []
        self._cursor: int = -1

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def snapshots(self) -> tuple[HoldSet, ...]:
        return tuple(self._snapshots)

    @property
    def can_undo(self) -> bool:
        return self._cursor >= 0 and len(self._snapshots) > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    def push(self, snapshot: HoldSet) -> None:
        """Record a pre-mutation snapshot, discarding any redo branch.

        Args:
            snapshot: The hold set as it was before the mutation.
        """
        del self._snapshots[self._cursor + 1 :]
        self._snapshots.append(snapshot)
        self._cursor = len(self._snapshots) - 1

    def undo(self, current: HoldSet) -> Optional[HoldSet]:
        """Step back one snapshot.

        Args:
            current: The live hold set, kept so it can be redone.

        Returns:
            The restored hold set, or None if there is nothing to undo.
        """
        if not self.can_undo:
            return None

        restored = self._snapshots[self._cursor]
        self._snapshots[self._cursor] = current
        self._cursor -= 1
        return restored

    def redo(self, current: HoldSet) -> Optional[HoldSet]:
        """Step forward one snapshot.

        Args:
            current: The live hold set, kept so it can be undone again.

        Returns:
            The restored hold set, or None if there is nothing to redo.
        """
        if not self.can_redo:
            return None

        self._cursor += 1
        restored = self._snapshots[self._cursor]
        self._snapshots[self._cursor] = current
        return restored

    def reset(self) -> None:
        """Forget all snapshots."""
        self._snapshots.clear()
        self._cursor = -1

    def __len__(self) -> int:
        return len(self._snapshots)
