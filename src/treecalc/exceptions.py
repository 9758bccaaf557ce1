"""Custom exceptions for the treecalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class OutOfBoundsError(CalculatorError):
    """Raised for a domain violation or a non-finite result."""

    def __init__(self, value: Any, reason: str = "Value out of bounds") -> None:
        super().__init__(reason, value)
        self.reason = reason


class PrecisionLossError(CalculatorError):
    """Raised when a result is too large to keep its precision."""

    def __init__(self, previous: float, candidate: float) -> None:
        super().__init__("Precision loss detected", candidate)
        self.previous = previous
        self.candidate = candidate


class CannotDeleteRootError(CalculatorError):
    """Raised when pruning is attempted on a node without a parent."""

    def __init__(self) -> None:
        super().__init__("Cannot delete root node")


class CannotGoBackwardsError(CalculatorError):
    """Raised when undo is attempted at the start of the history."""

    def __init__(self) -> None:
        super().__init__("Cannot go backwards")


class CannotGoForwardsError(CalculatorError):
    """Raised when redo is attempted at the end of the history."""

    def __init__(self) -> None:
        super().__init__("Cannot go forwards")


class InvalidChildIndexError(CalculatorError):
    """Raised when a child index is out of range."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__(f"Invalid child index (node has {count} children)", index)
        self.index = index
        self.count = count


class NoSnapshotAvailableError(CalculatorError):
    """Raised when recovery is requested with an empty snapshot stack."""

    def __init__(self) -> None:
        super().__init__("No snapshot available")


class ParseError(CalculatorError):
    """Raised when external input cannot be parsed."""

    def __init__(self, message: str, text: str | None = None) -> None:
        super().__init__(message, text)
        self.text = text
