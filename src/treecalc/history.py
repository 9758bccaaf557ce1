"""Linear undo/redo index over the branching history tree."""

from __future__ import annotations

from typing import TYPE_CHECKING

from treecalc.exceptions import CannotGoBackwardsError, CannotGoForwardsError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from treecalc.tree import HistoryNode


class LinearHistory:
    """
    An ordered list of visited nodes with a cursor.

    The entry under the cursor is always the calculator's current node.
    Pushing after an undo drops everything past the cursor, the same way an
    editor forgets its redo stack.
    """

    def __init__(self, start: HistoryNode) -> None:
        self._entries: list[HistoryNode] = [start]
        self._cursor = 0

    @classmethod
    def from_entries(cls, entries: Iterable[HistoryNode], cursor: int) -> LinearHistory:
        history = cls.__new__(cls)
        history._entries = list(entries)
        if not 0 <= cursor < len(history._entries):
            raise ValueError(f"cursor {cursor} outside history of {len(history._entries)}")
        history._cursor = cursor
        return history

    @property
    def entries(self) -> tuple[HistoryNode, ...]:
        return tuple(self._entries)

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def current(self) -> HistoryNode:
        return self._entries[self._cursor]

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, node: HistoryNode) -> None:
        """Discard entries past the cursor, append node and move to it."""
        del self._entries[self._cursor + 1 :]
        self._entries.append(node)
        self._cursor = len(self._entries) - 1

    def back(self) -> HistoryNode:
        """
        Move the cursor one step towards the start.

        Raises:
            CannotGoBackwardsError: If the cursor is already at the start
        """
        if self._cursor == 0:
            raise CannotGoBackwardsError()
        self._cursor -= 1
        return self.current

    def forward(self) -> HistoryNode:
        """
        Move the cursor one step towards the end.

        Raises:
            CannotGoForwardsError: If the cursor is already at the end
        """
        if self._cursor + 1 >= len(self._entries):
            raise CannotGoForwardsError()
        self._cursor += 1
        return self.current

    def mark(self) -> tuple[tuple[HistoryNode, ...], int]:
        """Capture entries and cursor so a failed operation can be undone."""
        return tuple(self._entries), self._cursor

    def restore(self, mark: tuple[tuple[HistoryNode, ...], int]) -> None:
        entries, cursor = mark
        self._entries = list(entries)
        self._cursor = cursor

    def __repr__(self) -> str:
        return f"LinearHistory(len={len(self._entries)}, cursor={self._cursor})"
