"""Unit tests for arithmetic operations."""

import math

import pytest

from treecalc import (
    LABELS,
    DivisionByZeroError,
    OutOfBoundsError,
    add,
    divide,
    multiply,
    natural_log,
    power,
    square,
    square_root,
    subtract,
)


class TestBinaryOperations:
    """Tests for the two-operand functions."""

    def test_add(self):
        assert add(2, 3) == 5
        assert add(-2, 3) == 1

    def test_add_floats(self):
        assert abs(add(0.1, 0.2) - 0.3) < 1e-10

    def test_subtract(self):
        assert subtract(5, 3) == 2
        assert subtract(3, 5) == -2

    def test_multiply(self):
        assert multiply(3, 4) == 12
        assert multiply(-3, 4) == -12
        assert multiply(1000, 0) == 0

    def test_multiply_overflow_is_left_to_validation(self):
        assert math.isinf(multiply(1e308, 10))


class TestDivide:
    """Tests for the divide function."""

    def test_divide_evenly(self):
        assert divide(10, 2) == 5

    def test_divide_with_remainder(self):
        assert divide(7, 2) == 3.5

    def test_divide_by_zero_raises(self):
        with pytest.raises(DivisionByZeroError) as exc_info:
            divide(10, 0)
        assert exc_info.value.numerator == 10

    def test_divide_by_negative_zero_raises(self):
        with pytest.raises(DivisionByZeroError):
            divide(10, -0.0)

    def test_divide_by_tiny_value_is_allowed(self):
        assert divide(1, 1e-300) == pytest.approx(1e300)


class TestPower:
    """Tests for the power function."""

    def test_power_positive_exponent(self):
        assert power(2, 3) == 8

    def test_power_zero_exponent(self):
        assert power(5, 0) == 1

    def test_power_negative_exponent(self):
        assert power(2, -1) == 0.5

    def test_power_fractional_exponent(self):
        assert abs(power(4, 0.5) - 2) < 1e-10

    def test_power_negative_base_integer_exponent(self):
        assert power(-2, 3) == -8

    def test_power_zero_base_negative_exp_raises(self):
        with pytest.raises(OutOfBoundsError):
            power(0, -1)

    def test_power_negative_base_non_integer_raises(self):
        with pytest.raises(OutOfBoundsError):
            power(-2, 0.5)

    def test_power_overflow_raises(self):
        with pytest.raises(OutOfBoundsError):
            power(10, 400)


class TestUnaryOperations:
    """Tests for the single-operand functions."""

    def test_square(self):
        assert square(3) == 9
        assert square(-4) == 16

    def test_square_root(self):
        assert square_root(16) == 4
        assert square_root(0) == 0

    def test_square_root_of_negative_raises(self):
        with pytest.raises(OutOfBoundsError) as exc_info:
            square_root(-1)
        assert exc_info.value.value == -1

    def test_natural_log(self):
        assert natural_log(1) == 0
        assert abs(natural_log(math.e) - 1) < 1e-12

    def test_natural_log_of_zero_raises(self):
        with pytest.raises(OutOfBoundsError):
            natural_log(0)

    def test_natural_log_of_negative_raises(self):
        with pytest.raises(OutOfBoundsError):
            natural_log(-5)


def test_labels():
    assert LABELS == {
        "add": "+",
        "subtract": "-",
        "multiply": "*",
        "divide": "/",
        "power": "^",
        "square": "sqr",
        "square_root": "√",
        "natural_log": "ln",
    }
