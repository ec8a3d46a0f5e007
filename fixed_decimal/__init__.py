"""Fixed-point decimal arithmetic.

This package provides an immutable decimal type for currency-style amounts:
- FixedDecimal: arbitrary-precision magnitude with a fixed scale
- RoundingMode: DOWN, UP, HALF_UP
- checked_* helpers returning DecimalResult instead of raising
"""

from fixed_decimal.config import DEFAULT_CONFIG, DIVISION_EXTRA_SCALE, DecimalConfig
from fixed_decimal.errors import (
    DecimalError,
    DivideByZero,
    InvalidFloat,
    InvalidFormat,
    NegativeValue,
    TooManyFractionDigits,
    ZeroToNegativePower,
)
from fixed_decimal.number import FixedDecimal
from fixed_decimal.result import (
    DecimalErrorKind,
    DecimalResult,
    checked_divide,
    checked_from_float,
    checked_from_text,
    checked_power,
    checked_to_natural,
)
from fixed_decimal.rounding import RoundingMode
from fixed_decimal.types import FixedDecimalField

__all__ = [
    # Classes
    "FixedDecimal",
    "RoundingMode",
    "DecimalConfig",
    "DecimalResult",
    "DecimalErrorKind",
    "FixedDecimalField",
    # Errors
    "DecimalError",
    "DivideByZero",
    "InvalidFormat",
    "TooManyFractionDigits",
    "NegativeValue",
    "InvalidFloat",
    "ZeroToNegativePower",
    # Functions
    "checked_from_text",
    "checked_from_float",
    "checked_divide",
    "checked_power",
    "checked_to_natural",
    # Constants
    "DEFAULT_CONFIG",
    "DIVISION_EXTRA_SCALE",
]
