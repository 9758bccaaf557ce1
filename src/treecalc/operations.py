"""Pure arithmetic operations applied to the current calculator value.

Operations only raise for domain errors. Results that overflow or lose
precision are returned as-is and rejected later by ``check_value``.
"""

import math

from treecalc.exceptions import DivisionByZeroError, OutOfBoundsError

# Short symbolic tags stored on history nodes
LABELS = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
    "power": "^",
    "square": "sqr",
    "square_root": "√",
    "natural_log": "ln",
}


def add(a: float, b: float) -> float:
    """
    Add b to a.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a
    """
    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0
    """
    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply a by b.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0
    """
    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        DivisionByZeroError: If b is exactly zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    return a / b


def power(base: float, exponent: float) -> float:
    """
    Raise base to the power of exponent.

    Args:
        base: The base number
        exponent: The exponent

    Returns:
        base raised to the power of exponent

    Raises:
        OutOfBoundsError: If the result is not a real number or overflows
    """
    try:
        return math.pow(base, exponent)
    except ValueError as e:
        raise OutOfBoundsError((base, exponent), "Power has no real result") from e
    except OverflowError as e:
        raise OutOfBoundsError((base, exponent), "Power overflows") from e


def square(a: float) -> float:
    """Return a multiplied by itself."""
    return a * a


def square_root(a: float) -> float:
    """
    Return the square root of a.

    Raises:
        OutOfBoundsError: If a is negative
    """
    if a < 0:
        raise OutOfBoundsError(a, "Square root of a negative value")

    return math.sqrt(a)


def natural_log(a: float) -> float:
    """
    Return the natural logarithm of a.

    Raises:
        OutOfBoundsError: If a is zero or negative
    """
    if a <= 0:
        raise OutOfBoundsError(a, "Logarithm of a non-positive value")

    return math.log(a)
