"""
Guarded integer division.
"""

from .exceptions import ValidationFailed
from .results import Err, Ok, Result

DIVISOR_IS_ZERO = "The divisor cannot be zero"


def divide(a: int, b: int) -> Result[int]:
    """
    Divide two integers, truncating toward zero.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Ok with the quotient, or Err if the divisor is zero
    """
    if b == 0:
        return Err(ValidationFailed(DIVISOR_IS_ZERO))

    # Floor division rounds toward negative infinity; work on magnitudes
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return Ok(quotient)
