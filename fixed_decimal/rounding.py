"""Scale and rounding kernel.

Every change of scale in the library goes through the functions in this
module. They operate on raw (magnitude, scale) integers so the value type,
the parser and the arithmetic operators all share one rounding rule:

- DOWN never bumps.
- UP bumps on any non-zero remainder.
- HALF_UP bumps when the remainder is at least half the divisor.

Bumps always move away from zero, in the direction of the value's sign.
"""

from __future__ import annotations

from enum import Enum

from fixed_decimal.errors import DivideByZero

__all__ = [
    "RoundingMode",
    "div_trunc",
    "rounding_bump",
    "quantize_magnitude",
    "floor_magnitude",
    "ceil_magnitude",
    "divide_magnitudes",
    "pow10",
]


class RoundingMode(Enum):
    """How discarded digits affect the kept ones."""

    DOWN = "down"  # toward zero
    UP = "up"  # away from zero on any remainder
    HALF_UP = "half_up"  # nearest, ties away from zero


def pow10(exponent: int) -> int:
    """Return 10**exponent for a non-negative exponent."""
    if exponent < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {exponent}")
    return 10**exponent


def div_trunc(a: int, b: int) -> tuple[int, int]:
    """Divide with truncation toward zero.

    Python's divmod floors toward negative infinity. Here the quotient is
    truncated and the remainder takes the sign of the dividend, so that
    ``a == q * b + r`` and ``abs(r) < abs(b)``.

    Args:
        a: Dividend (can be negative)
        b: Divisor (must be non-zero)

    Returns:
        Tuple of (quotient, remainder)

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        divmod(-7, 3) = (-3, 2)
        div_trunc(-7, 3) = (-2, -1)
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def rounding_bump(remainder: int, divisor: int, mode: RoundingMode) -> int:
    """Return 1 if the kept quotient must move one unit away from zero, else 0.

    Remainder and divisor are compared by magnitude, so callers may pass
    signed values.
    """
    if remainder == 0:
        return 0
    if mode is RoundingMode.DOWN:
        return 0
    if mode is RoundingMode.UP:
        return 1
    if mode is RoundingMode.HALF_UP:
        return 1 if 2 * abs(remainder) >= abs(divisor) else 0
    raise TypeError(f"Unknown rounding mode: {mode!r}")


def quantize_magnitude(magnitude: int, scale: int, target: int, mode: RoundingMode) -> int:
    """Rescale a magnitude from ``scale`` to ``target`` fractional digits.

    Widening is exact and ignores the mode. Narrowing truncates and then
    applies the mode's bump with the sign of the original magnitude.
    """
    if target == scale:
        return magnitude
    if target > scale:
        return magnitude * pow10(target - scale)

    divisor = pow10(scale - target)
    quotient, remainder = div_trunc(magnitude, divisor)
    bump = rounding_bump(remainder, divisor, mode)
    if bump and magnitude < 0:
        return quotient - bump
    return quotient + bump


def floor_magnitude(magnitude: int, scale: int, target: int) -> int:
    """Rescale toward negative infinity. Widening stays exact."""
    if target >= scale:
        return magnitude * pow10(target - scale)
    quotient, remainder = div_trunc(magnitude, pow10(scale - target))
    if remainder != 0 and magnitude < 0:
        return quotient - 1
    return quotient


def ceil_magnitude(magnitude: int, scale: int, target: int) -> int:
    """Rescale toward positive infinity. Widening stays exact."""
    if target >= scale:
        return magnitude * pow10(target - scale)
    quotient, remainder = div_trunc(magnitude, pow10(scale - target))
    if remainder != 0 and magnitude >= 0:
        return quotient + 1
    return quotient


def divide_magnitudes(
    dividend: int,
    dividend_scale: int,
    divisor: int,
    divisor_scale: int,
    target: int,
    mode: RoundingMode,
) -> int:
    """Divide two fixed-point values and return the magnitude at ``target`` scale.

    The quotient magnitude is ``dividend * 10**(target + divisor_scale -
    dividend_scale) / divisor``. A non-negative exponent pads the numerator,
    a negative one pads the denominator, so the integer division is always
    exact up to its remainder. The result's sign is the XOR of the operand
    signs and the remainder is rounded by magnitude.

    Raises:
        DivideByZero: If the divisor (after alignment) is zero
    """
    if divisor == 0:
        raise DivideByZero(f"Division by zero (dividend scale {dividend_scale})")

    shift = target + divisor_scale - dividend_scale
    numerator = abs(dividend)
    denominator = abs(divisor)
    if shift >= 0:
        numerator *= pow10(shift)
    else:
        denominator *= pow10(-shift)

    if denominator == 0:
        raise DivideByZero("Division by zero after scale alignment")

    quotient, remainder = divmod(numerator, denominator)
    quotient += rounding_bump(remainder, denominator, mode)

    negative = (dividend < 0) != (divisor < 0)
    return -quotient if negative else quotient
