"""Result types for fallible decimal operations.

The methods on FixedDecimal raise a DecimalError subclass on failure. The
checked_* functions here run the same operations but return a DecimalResult,
for callers that prefer explicit success/failure handling over exceptions.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

import structlog

from fixed_decimal.config import DecimalConfig
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
from fixed_decimal.rounding import RoundingMode

logger = structlog.get_logger()

T = TypeVar("T")


class DecimalErrorKind(Enum):
    """Closed set of decimal failure kinds."""

    DIVIDE_BY_ZERO = "divide_by_zero"
    INVALID_FORMAT = "invalid_format"
    TOO_MANY_FRACTION_DIGITS = "too_many_fraction_digits"
    NEGATIVE_VALUE = "negative_value"
    INVALID_FLOAT = "invalid_float"
    ZERO_TO_NEGATIVE_POWER = "zero_to_negative_power"


# Most specific first: TooManyFractionDigits is an InvalidFormat
_ERROR_KINDS: tuple[tuple[type[DecimalError], DecimalErrorKind], ...] = (
    (DivideByZero, DecimalErrorKind.DIVIDE_BY_ZERO),
    (TooManyFractionDigits, DecimalErrorKind.TOO_MANY_FRACTION_DIGITS),
    (InvalidFormat, DecimalErrorKind.INVALID_FORMAT),
    (NegativeValue, DecimalErrorKind.NEGATIVE_VALUE),
    (InvalidFloat, DecimalErrorKind.INVALID_FLOAT),
    (ZeroToNegativePower, DecimalErrorKind.ZERO_TO_NEGATIVE_POWER),
)


def error_kind(err: DecimalError) -> DecimalErrorKind:
    """Map a DecimalError instance to its DecimalErrorKind."""
    for cls, kind in _ERROR_KINDS:
        if isinstance(err, cls):
            return kind
    raise TypeError(f"Unmapped decimal error: {type(err).__name__}")


@dataclass(frozen=True)
class DecimalResult(Generic[T]):
    """Result of a fallible decimal operation.

    Exactly one of ``value`` and ``error`` is set.

    Attributes:
        value: The result on success, else None.
        error: The failure kind, else None.
        error_detail: Optional human-readable detail about the error.

    Examples:
        result = checked_divide(FixedDecimal(567, 1), FixedDecimal.zero())
        assert result.is_error
        assert result.error is DecimalErrorKind.DIVIDE_BY_ZERO
    """

    value: T | None
    error: DecimalErrorKind | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    @property
    def is_error(self) -> bool:
        """True if the operation failed."""
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise ValueError if this is an error result."""
        if self.error is not None:
            raise ValueError(f"Called unwrap() on error result: {self.error.value}")
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T) -> DecimalResult[T]:
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def with_error(cls, error: DecimalErrorKind, detail: str | None = None) -> DecimalResult[T]:
        """Create an error result."""
        return cls(value=None, error=error, error_detail=detail)


def _run(operation: str, fn: Callable[[], T]) -> DecimalResult[T]:
    try:
        return DecimalResult.ok(fn())
    except DecimalError as err:
        kind = error_kind(err)
        logger.debug("decimal_checked_operation_failed", operation=operation, error=kind.value)
        return DecimalResult.with_error(kind, str(err))


def checked_from_text(
    text: str,
    scale: int | None = None,
    mode: RoundingMode | None = None,
    *,
    strict: bool | None = None,
    config: DecimalConfig | None = None,
) -> DecimalResult[FixedDecimal]:
    """FixedDecimal.from_text() returning a result instead of raising."""
    return _run(
        "from_text",
        lambda: FixedDecimal.from_text(text, scale, mode, strict=strict, config=config),
    )


def checked_from_float(
    value: float, scale: int, mode: RoundingMode = RoundingMode.DOWN
) -> DecimalResult[FixedDecimal]:
    """FixedDecimal.from_float() returning a result instead of raising."""
    return _run("from_float", lambda: FixedDecimal.from_float(value, scale, mode))


def checked_divide(
    a: FixedDecimal,
    b: FixedDecimal,
    scale: int | None = None,
    mode: RoundingMode = RoundingMode.DOWN,
    *,
    config: DecimalConfig | None = None,
) -> DecimalResult[FixedDecimal]:
    """FixedDecimal.divide() returning a result instead of raising."""
    return _run("divide", lambda: a.divide(b, scale, mode, config=config))


def checked_power(
    x: FixedDecimal,
    n: int,
    scale: int | None = None,
    mode: RoundingMode = RoundingMode.DOWN,
    *,
    config: DecimalConfig | None = None,
) -> DecimalResult[FixedDecimal]:
    """FixedDecimal.power() returning a result instead of raising."""
    return _run("power", lambda: x.power(n, scale, mode, config=config))


def checked_to_natural(
    x: FixedDecimal, mode: RoundingMode = RoundingMode.DOWN
) -> DecimalResult[int]:
    """FixedDecimal.to_natural() returning a result instead of raising."""
    return _run("to_natural", lambda: x.to_natural(mode))
