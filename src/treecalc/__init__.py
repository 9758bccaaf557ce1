"""
Calculator that keeps every computed value in a navigable history tree.

This package provides:
- A history tree with weak parent links and owned children
- Linear undo/redo over the branching tree
- Snapshot and recovery of whole calculator sessions
- Validation-driven rollback of failed operations
"""

from treecalc.config import CalculatorConfig
from treecalc.core import Calculator
from treecalc.exceptions import (
    CalculatorError,
    CannotDeleteRootError,
    CannotGoBackwardsError,
    CannotGoForwardsError,
    DivisionByZeroError,
    InvalidChildIndexError,
    NoSnapshotAvailableError,
    OutOfBoundsError,
    ParseError,
    PrecisionLossError,
)
from treecalc.history import LinearHistory
from treecalc.operations import (
    LABELS,
    add,
    divide,
    multiply,
    natural_log,
    power,
    square,
    square_root,
    subtract,
)
from treecalc.snapshots import CalculatorSnapshot, SnapshotStore
from treecalc.tree import HistoryNode, HistoryTree
from treecalc.validators import (
    MAX_DIGITS,
    MAX_MAGNITUDE,
    check_value,
    order_of_magnitude,
    validate_number,
)

__all__ = [
    "LABELS",
    "MAX_DIGITS",
    "MAX_MAGNITUDE",
    "Calculator",
    "CalculatorConfig",
    "CalculatorError",
    "CalculatorSnapshot",
    "CannotDeleteRootError",
    "CannotGoBackwardsError",
    "CannotGoForwardsError",
    "DivisionByZeroError",
    "HistoryNode",
    "HistoryTree",
    "InvalidChildIndexError",
    "LinearHistory",
    "NoSnapshotAvailableError",
    "OutOfBoundsError",
    "ParseError",
    "PrecisionLossError",
    "SnapshotStore",
    "add",
    "check_value",
    "divide",
    "multiply",
    "natural_log",
    "order_of_magnitude",
    "power",
    "square",
    "square_root",
    "subtract",
    "validate_number",
]

__version__ = "0.1.0"
