"""Saved calculator states for recovery after a reset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from treecalc.exceptions import NoSnapshotAvailableError

if TYPE_CHECKING:
    from treecalc.tree import HistoryNode


@dataclass(frozen=True)
class CalculatorSnapshot:
    """Immutable structural copy of a calculator state.

    Nodes are shared with the state the snapshot was taken from, not copied.
    """

    root: HistoryNode
    current: HistoryNode
    entries: tuple[HistoryNode, ...]
    cursor: int

    def __str__(self) -> str:
        return f"snapshot(value={self.current.value}, history_len={len(self.entries)})"


class SnapshotStore:
    """LIFO stack of snapshots."""

    def __init__(self) -> None:
        self._stack: list[CalculatorSnapshot] = []

    def push(self, snapshot: CalculatorSnapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> CalculatorSnapshot:
        """
        Remove and return the newest snapshot.

        Raises:
            NoSnapshotAvailableError: If the stack is empty
        """
        if not self._stack:
            raise NoSnapshotAvailableError()
        return self._stack.pop()

    def peek(self) -> CalculatorSnapshot | None:
        if self._stack:
            return self._stack[-1]
        return None

    def clear(self) -> None:
        self._stack.clear()

    def __len__(self) -> int:
        return len(self._stack)
