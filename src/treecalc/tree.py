"""History tree recording every value the calculator has held."""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING

from treecalc.exceptions import CannotDeleteRootError, InvalidChildIndexError

if TYPE_CHECKING:
    from collections.abc import Iterator

TITLE = "--- Calculator History Tree ---"
CURRENT_MARKER = "↑ (current)"


class HistoryNode:
    """
    A single value in the history tree.

    Children are owned by their parent; the parent link is a weak reference
    so that a pruned subtree is reclaimed once nothing else refers to it.
    """

    __slots__ = ("value", "label", "children", "_parent", "__weakref__")

    def __init__(
        self, value: float, label: str | None = None, parent: HistoryNode | None = None
    ) -> None:
        self.value = float(value)
        self.label = label
        self.children: list[HistoryNode] = []
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> HistoryNode | None:
        """Parent node, or None for a root or a parent that no longer exists."""
        if self._parent is None:
            return None
        return self._parent()

    @property
    def is_root(self) -> bool:
        return self._parent is None

    def child(self, index: int) -> HistoryNode:
        """
        Return the child at a zero-based index.

        Raises:
            InvalidChildIndexError: If index is out of range
        """
        if not 0 <= index < len(self.children):
            raise InvalidChildIndexError(index, len(self.children))
        return self.children[index]

    def describe(self) -> str:
        """Value followed by the operation label, when there is one."""
        if self.label is None:
            return f"{self.value}"
        return f"{self.value} | {self.label}"

    def __repr__(self) -> str:
        return (
            f"HistoryNode(value={self.value}, label={self.label!r}, "
            f"children={len(self.children)})"
        )


class HistoryTree:
    """
    Owns a root node and tracks the current position.

    Example:
        >>> tree = HistoryTree(0.0)
        >>> node = tree.insert(5.0, "+")
        >>> tree.current is node
        True
        >>> tree.delete() is node
        True
        >>> tree.current is tree.root
        True
    """

    def __init__(self, value: float = 0.0) -> None:
        self.root = HistoryNode(value)
        self.current = self.root

    @classmethod
    def from_nodes(cls, root: HistoryNode, current: HistoryNode) -> HistoryTree:
        """Rebuild a tree around existing nodes, e.g. from a snapshot."""
        tree = cls.__new__(cls)
        tree.root = root
        tree.current = current
        return tree

    def insert(self, value: float, label: str | None = None) -> HistoryNode:
        """Add a child below the current node and move to it."""
        node = HistoryNode(value, label, parent=self.current)
        self.current.children.append(node)
        self.current = node
        return node

    def delete(self) -> HistoryNode:
        """
        Prune the current node and move back to its parent.

        Returns:
            The detached node

        Raises:
            CannotDeleteRootError: If the current node has no parent
        """
        node = self.current
        parent = node.parent
        if parent is None:
            raise CannotDeleteRootError()

        parent.children = [child for child in parent.children if child is not node]
        self.current = parent
        return node

    def walk(self) -> Iterator[HistoryNode]:
        """Iterate depth-first over every node, children in insertion order."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def node_count(self) -> int:
        return sum(1 for _ in self.walk())

    def render(self) -> str:
        """Draw the tree with box-drawing connectors, marking the current node."""
        lines = [TITLE]
        # Explicit stack so long sessions don't hit the recursion limit
        stack: list[tuple[HistoryNode, str, bool]] = [(self.root, "", True)]
        while stack:
            node, prefix, is_last = stack.pop()
            connector = "└── " if is_last else "├── "
            lines.append(f"{prefix}{connector}{node.describe()}")
            if node is self.current:
                lines.append(f"{prefix}    {CURRENT_MARKER}")

            child_prefix = prefix + ("    " if is_last else "│   ")
            last = len(node.children) - 1
            for i in range(last, -1, -1):
                stack.append((node.children[i], child_prefix, i == last))
        return "\n".join(lines)
