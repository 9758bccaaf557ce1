"""Calculator engine recording every value in a navigable history tree."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treecalc import operations
from treecalc.config import CalculatorConfig
from treecalc.exceptions import CalculatorError
from treecalc.history import LinearHistory
from treecalc.snapshots import CalculatorSnapshot, SnapshotStore
from treecalc.tree import HistoryTree
from treecalc.validators import check_value, validate_number

if TYPE_CHECKING:
    from collections.abc import Callable

    from treecalc.tree import HistoryNode

logger = logging.getLogger(__name__)


class Calculator:
    """
    A stateful calculator with a history tree, undo/redo and snapshots.

    Every operation adds a node below the current one. Undo and redo walk a
    linear index over the path that led to the current node; a new operation
    after an undo starts a new branch and forgets the old redo entries.
    ``reset`` saves the whole state so ``recover_cache`` can bring it back.

    Failed operations raise and leave the tree, the current node and the
    linear history exactly as they were.

    Example:
        >>> calc = Calculator()
        >>> calc.add(5).multiply(3).value
        15.0
        >>> calc.go_backwards().value
        5.0
        >>> calc.go_forwards().value
        15.0
    """

    def __init__(
        self, initial_value: float | None = None, *, config: CalculatorConfig | None = None
    ) -> None:
        """
        Initialize calculator with a starting value.

        Args:
            initial_value: Root value (default taken from config)
            config: Validator limits and reset value

        Raises:
            OutOfBoundsError: If the starting or reset value is NaN or infinite
        """
        self._config = config or CalculatorConfig()
        validate_number(self._config.initial_value)
        if initial_value is None:
            initial_value = self._config.initial_value
        validate_number(initial_value)
        self._tree = HistoryTree(initial_value)
        self._history = LinearHistory(self._tree.root)
        self._snapshots = SnapshotStore()

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def value(self) -> float:
        """Current calculator value."""
        return self._tree.current.value

    @property
    def root(self) -> HistoryNode:
        return self._tree.root

    @property
    def current(self) -> HistoryNode:
        return self._tree.current

    @property
    def history(self) -> tuple[HistoryNode, ...]:
        """Nodes on the undo/redo path, oldest first."""
        return self._history.entries

    @property
    def cursor(self) -> int:
        return self._history.cursor

    @property
    def snapshot_count(self) -> int:
        return len(self._snapshots)

    def node_count(self) -> int:
        return self._tree.node_count()

    def _apply(
        self, operation: Callable[..., float], label: str, *operands: float
    ) -> Calculator:
        """Insert the operation's result, rolling back if it fails validation."""
        previous = self._tree.current.value
        candidate = operation(previous, *operands)

        mark = self._history.mark()
        node = self._tree.insert(candidate, label)
        self._history.push(node)

        try:
            node.value = check_value(
                previous,
                candidate,
                max_digits=self._config.max_digits,
                max_magnitude=self._config.max_magnitude,
            )
        except CalculatorError as e:
            self._tree.delete()
            self._history.restore(mark)
            logger.info("Rolled back %s on %s: %s", label, previous, e)
            raise

        logger.debug("%s %s %s -> %s", previous, label, operands, candidate)
        return self

    def add(self, value: float) -> Calculator:
        """Add value to current result."""
        return self._apply(operations.add, operations.LABELS["add"], value)

    def subtract(self, value: float) -> Calculator:
        """Subtract value from current result."""
        return self._apply(operations.subtract, operations.LABELS["subtract"], value)

    def multiply(self, value: float) -> Calculator:
        """Multiply current result by value."""
        return self._apply(operations.multiply, operations.LABELS["multiply"], value)

    def divide(self, value: float) -> Calculator:
        """Divide current result by value."""
        return self._apply(operations.divide, operations.LABELS["divide"], value)

    def power(self, exponent: float) -> Calculator:
        """Raise current result to power."""
        return self._apply(operations.power, operations.LABELS["power"], exponent)

    def square(self) -> Calculator:
        return self._apply(operations.square, operations.LABELS["square"])

    def square_root(self) -> Calculator:
        return self._apply(operations.square_root, operations.LABELS["square_root"])

    def natural_log(self) -> Calculator:
        return self._apply(operations.natural_log, operations.LABELS["natural_log"])

    def input(self, value: float) -> Calculator:
        """Enter a value directly, without validation or an operation label."""
        node = self._tree.insert(value)
        self._history.push(node)
        logger.debug("input %s", node.value)
        return self

    def result(self) -> float:
        return self._tree.current.value

    def output(self) -> str:
        """Current value formatted for display."""
        return f"{self._tree.current.value}"

    def go_backwards(self) -> Calculator:
        """
        Undo: move to the previous entry of the linear history.

        Raises:
            CannotGoBackwardsError: If already at the first entry
        """
        self._tree.current = self._history.back()
        return self

    def go_forwards(self) -> Calculator:
        """
        Redo: move to the next entry of the linear history.

        Raises:
            CannotGoForwardsError: If already at the last entry
        """
        self._tree.current = self._history.forward()
        return self

    def snapshot(self) -> Calculator:
        """Save the complete state (tree, current node, history, cursor)."""
        entries, cursor = self._history.mark()
        self._snapshots.push(
            CalculatorSnapshot(
                root=self._tree.root,
                current=self._tree.current,
                entries=entries,
                cursor=cursor,
            )
        )
        return self

    def reset(self) -> Calculator:
        """Snapshot the session, then start over from a fresh root."""
        self.snapshot()
        self._tree = HistoryTree(self._config.initial_value)
        self._history = LinearHistory(self._tree.root)
        logger.info(
            "Calculator reset to %s, %d snapshot(s) saved",
            self._tree.root.value,
            len(self._snapshots),
        )
        return self

    def recover_cache(self) -> Calculator:
        """
        Replace the live state with the most recent snapshot.

        Raises:
            NoSnapshotAvailableError: If no snapshot has been saved
        """
        snapshot = self._snapshots.pop()
        tree = HistoryTree.from_nodes(snapshot.root, snapshot.current)
        history = LinearHistory.from_entries(snapshot.entries, snapshot.cursor)
        self._tree, self._history = tree, history
        logger.info("Recovered cached state with value %s", self.value)
        return self

    def clear_cache(self) -> Calculator:
        """Discard all saved snapshots."""
        self._snapshots.clear()
        logger.info("All cached snapshots deleted")
        return self

    def show_history(self) -> str:
        """Render the history tree, marking the current node."""
        return self._tree.render()

    def __repr__(self) -> str:
        return (
            f"Calculator(value={self.value}, history_len={len(self._history)}, "
            f"cursor={self._history.cursor}, snapshots={len(self._snapshots)})"
        )
