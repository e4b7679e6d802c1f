from __future__ import annotations

import numpy as np

from safecalc.core.errors import ValidationError
from safecalc.core.validators import is_finite_number


def divide(dividend: float, divisor: float) -> float:
    """Divide two finite numbers, rejecting a zero divisor and non-finite results."""
    if not is_finite_number(dividend):
        raise ValidationError("Dividend must be a finite number")
    if not is_finite_number(divisor):
        raise ValidationError("Divisor must be a finite number")
    if divisor == 0:
        raise ValidationError("Cannot divide by zero")

    # numpy scalars warn instead of raising on overflow
    with np.errstate(over="ignore"):
        result = dividend / divisor

    # Fraction / Fraction stays a Fraction, so check through float()
    if not is_finite_number(result):
        raise ValidationError("Division result is not a finite number")
    return float(result)
