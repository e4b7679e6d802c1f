from fractions import Fraction

import numpy as np
import pytest

from safecalc import ValidationError, divide


def test_divides():
    assert divide(10, 2) == 5


def test_negative_and_fractional():
    assert divide(-7.5, 2.5) == -3.0


def test_numpy_scalars():
    assert divide(np.float64(9), np.int64(3)) == 3.0


def test_fractions():
    assert divide(Fraction(1, 2), Fraction(1, 4)) == 2.0


def test_same_input_same_output():
    assert divide(1, 3) == divide(1, 3)


@pytest.mark.parametrize("dividend", [None, "10", float("nan"), float("inf"), True, 10**400])
def test_rejects_bad_dividend(dividend):
    with pytest.raises(ValidationError, match="Dividend must be a finite number"):
        divide(dividend, 2)


@pytest.mark.parametrize("divisor", [None, "2", float("nan"), float("-inf"), False])
def test_rejects_bad_divisor(divisor):
    with pytest.raises(ValidationError, match="Divisor must be a finite number"):
        divide(10, divisor)


@pytest.mark.parametrize("divisor", [0, 0.0, -0.0])
def test_rejects_zero(divisor):
    with pytest.raises(ValidationError, match="Cannot divide by zero"):
        divide(10, divisor)


def test_float_overflow_rejected():
    with pytest.raises(ValidationError, match="Division result is not a finite number"):
        divide(1e308, 1e-10)
