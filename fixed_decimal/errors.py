"""Fixed-point decimal error classes.

Every fallible operation raises exactly one of these. They cover expected
failures caused by input data; programmer errors (wrong argument types,
negative scales) raise the built-in TypeError/ValueError instead.
"""


class DecimalError(ArithmeticError):
    """Base error for fixed-point decimal operations."""

    pass


class DivideByZero(DecimalError):
    """Divisor's effective magnitude is zero."""

    pass


class InvalidFormat(DecimalError, ValueError):
    """Text input is empty, malformed, or a lone sign."""

    pass


class TooManyFractionDigits(InvalidFormat):
    """Text input has more fractional digits than an exact target scale allows."""

    pass


class NegativeValue(DecimalError):
    """Conversion to a natural number produced a negative result."""

    pass


class InvalidFloat(DecimalError):
    """Floating-point input is NaN or infinite."""

    pass


class ZeroToNegativePower(DecimalError):
    """Zero base raised to a negative exponent."""

    pass
