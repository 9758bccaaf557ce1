"""Result validation for values entering the history tree."""

import math
import sys

from treecalc.exceptions import OutOfBoundsError, PrecisionLossError

# Constants for numerical limits
MAX_DIGITS = 15
MAX_MAGNITUDE = sys.float_info.max / 2


def order_of_magnitude(value: float) -> int:
    """
    Return the base-10 order of magnitude of a finite value.

    Zero has magnitude 0.

    Example:
        >>> order_of_magnitude(12345.0)
        4
        >>> order_of_magnitude(-0.01)
        -2
    """
    if value == 0:
        return 0
    return math.floor(math.log10(abs(value)))


def validate_number(value: float) -> float:
    """
    Validate that a value is a finite number.

    Raises:
        OutOfBoundsError: If value is NaN or infinite
    """
    if math.isnan(value):
        raise OutOfBoundsError(value, "NaN is not allowed")
    if math.isinf(value):
        raise OutOfBoundsError(value, "Infinity is not allowed")

    return value


def check_value(
    previous: float,
    candidate: float,
    *,
    max_digits: int = MAX_DIGITS,
    max_magnitude: float = MAX_MAGNITUDE,
) -> float:
    """
    Check that a computed result may be stored.

    Args:
        previous: The value the result was computed from
        candidate: The computed result
        max_digits: Largest allowed order of magnitude
        max_magnitude: Largest allowed absolute value

    Returns:
        The candidate, unchanged

    Raises:
        OutOfBoundsError: If candidate is NaN or infinite
        PrecisionLossError: If candidate is too large to stay precise
    """
    if not math.isfinite(candidate):
        raise OutOfBoundsError(candidate, "Result is not finite")

    if order_of_magnitude(candidate) > max_digits or abs(candidate) > max_magnitude:
        raise PrecisionLossError(previous, candidate)

    return candidate
