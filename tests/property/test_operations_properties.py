"""
Property-based tests for arithmetic operations and result validation.

These tests verify properties that should hold for all inputs,
not just specific examples.
"""

import math

import pytest
from hypothesis import example, given
from hypothesis import strategies as st

from treecalc import (
    DivisionByZeroError,
    OutOfBoundsError,
    PrecisionLossError,
    add,
    check_value,
    divide,
    multiply,
    natural_log,
    order_of_magnitude,
    power,
    square,
    square_root,
    subtract,
)

safe_floats = st.floats(
    min_value=-1e100,
    max_value=1e100,
    allow_nan=False,
    allow_infinity=False,
)

positive_floats = st.floats(
    min_value=1e-10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
)

non_zero_floats = st.floats(
    min_value=-1e10,
    max_value=1e10,
    allow_nan=False,
    allow_infinity=False,
).filter(lambda x: abs(x) > 1e-10)


@pytest.mark.property
class TestArithmeticProperties:
    """Algebraic identities of the binary operations."""

    @given(a=safe_floats, b=safe_floats)
    def test_add_commutative(self, a: float, b: float):
        assert add(a, b) == add(b, a)

    @given(a=safe_floats)
    def test_add_identity(self, a: float):
        assert add(a, 0) == a

    @given(a=safe_floats)
    def test_subtract_self(self, a: float):
        assert subtract(a, a) == 0

    @given(a=safe_floats, b=safe_floats)
    def test_multiply_commutative(self, a: float, b: float):
        assert multiply(a, b) == multiply(b, a)

    @given(a=safe_floats)
    def test_divide_by_zero_always_raises(self, a: float):
        with pytest.raises(DivisionByZeroError):
            divide(a, 0)

    @given(a=non_zero_floats)
    def test_divide_self(self, a: float):
        assert divide(a, a) == 1

    @given(a=safe_floats)
    def test_power_one(self, a: float):
        assert power(a, 1) == a


@pytest.mark.property
class TestUnaryProperties:
    """Domain and inverse properties of the unary operations."""

    @given(a=positive_floats)
    def test_square_root_inverts_square(self, a: float):
        assert math.isclose(square_root(square(a)), a, rel_tol=1e-12)

    @given(a=st.floats(max_value=-1e-300, allow_nan=False, allow_infinity=False))
    def test_square_root_domain(self, a: float):
        with pytest.raises(OutOfBoundsError):
            square_root(a)

    @given(a=st.floats(max_value=0, allow_nan=False, allow_infinity=False))
    @example(a=0.0)
    @example(a=-0.0)
    def test_natural_log_domain(self, a: float):
        with pytest.raises(OutOfBoundsError):
            natural_log(a)

    @given(a=positive_floats, b=positive_floats)
    def test_natural_log_of_product(self, a: float, b: float):
        assert math.isclose(
            natural_log(a * b), natural_log(a) + natural_log(b), rel_tol=1e-9, abs_tol=1e-9
        )


@pytest.mark.property
class TestValidatorProperties:
    """Properties of check_value."""

    @given(value=st.floats(min_value=-9.9e15, max_value=9.9e15))
    def test_accepts_values_within_fifteen_digits(self, value: float):
        assert check_value(0.0, value) == value

    @given(value=st.floats(min_value=1e16, allow_infinity=False))
    def test_rejects_large_values(self, value: float):
        with pytest.raises(PrecisionLossError):
            check_value(0.0, value)
        with pytest.raises(PrecisionLossError):
            check_value(0.0, -value)

    @given(value=st.sampled_from([math.inf, -math.inf, math.nan]))
    def test_rejects_non_finite(self, value: float):
        with pytest.raises(OutOfBoundsError):
            check_value(0.0, value)

    @given(value=st.floats(min_value=1e-300, max_value=1e300))
    def test_magnitude_bounds_value(self, value: float):
        exponent = order_of_magnitude(value)
        assert 10.0**exponent <= abs(value) * (1 + 1e-12)
