"""Fixed-point decimal value type.

A FixedDecimal is an arbitrary-precision signed integer magnitude paired with
a non-negative scale; its value is ``magnitude * 10**-scale``. Values are
immutable and every operation returns a new value.

Example: 12.345 is stored as FixedDecimal(magnitude=12345, scale=3)

All rescaling goes through fixed_decimal.rounding, so parsing, arithmetic and
conversions agree on one rounding rule.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from fixed_decimal import formatting
from fixed_decimal.config import DEFAULT_CONFIG, DecimalConfig
from fixed_decimal.errors import InvalidFormat, NegativeValue, ZeroToNegativePower
from fixed_decimal.models import BigDecimalJson, DecimalJson
from fixed_decimal.parsing import parse_float, parse_text, signed_digits_to_int
from fixed_decimal.rounding import (
    RoundingMode,
    ceil_magnitude,
    divide_magnitudes,
    floor_magnitude,
    pow10,
    quantize_magnitude,
)

__all__ = ["FixedDecimal"]

logger = structlog.get_logger()


def _check_int(name: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    return value


def _check_scale(scale: Any) -> int:
    _check_int("scale", scale)
    if scale < 0:
        raise ValueError(f"Scale must be non-negative, got {scale}")
    return scale


class FixedDecimal:
    """Signed fixed-point decimal: ``magnitude * 10**-scale``.

    Two values with different (magnitude, scale) pairs can denote the same
    number, e.g. (1230, 3) and (123, 2). ``equal``/``==`` compare numerically;
    ``equal_exact`` compares the stored pair.

    Attributes:
        magnitude: The unscaled signed integer (read-only)
        scale: Number of implied fraction digits, never negative (read-only)
    """

    __slots__ = ("_magnitude", "_scale")
    _magnitude: int
    _scale: int

    def __init__(self, magnitude: int, scale: int = 0) -> None:
        """Create from a raw magnitude and scale (no multiplication).

        Raises:
            TypeError: If magnitude or scale is not an int
            ValueError: If scale is negative
        """
        self._magnitude = _check_int("magnitude", magnitude)
        self._scale = _check_scale(scale)

    @property
    def magnitude(self) -> int:
        """The unscaled signed integer."""
        return self._magnitude

    @property
    def scale(self) -> int:
        """Number of implied fraction digits."""
        return self._scale

    # --- Constructors ---

    @classmethod
    def zero(cls, scale: int = 0) -> FixedDecimal:
        """Create zero at the given scale."""
        return cls(0, scale)

    @classmethod
    def one(cls, scale: int = 0) -> FixedDecimal:
        """Create one at the given scale."""
        return cls(pow10(_check_scale(scale)), scale)

    @classmethod
    def from_int(cls, n: int, scale: int = 0) -> FixedDecimal:
        """Create from an integer, preserving its value: magnitude = n * 10**scale."""
        _check_int("n", n)
        return cls(n * pow10(_check_scale(scale)), scale)

    @classmethod
    def from_natural(cls, n: int, scale: int = 0) -> FixedDecimal:
        """Create from a non-negative integer, preserving its value.

        Raises:
            NegativeValue: If n is negative
        """
        if _check_int("n", n) < 0:
            raise NegativeValue("Natural number cannot be negative")
        return cls.from_int(n, scale)

    @classmethod
    def from_unscaled_int(cls, n: int, scale: int) -> FixedDecimal:
        """Create from a raw magnitude, e.g. a ledger's native e8s count."""
        return cls(n, scale)

    @classmethod
    def from_unscaled_natural(cls, n: int, scale: int) -> FixedDecimal:
        """Create from a non-negative raw magnitude.

        Raises:
            NegativeValue: If n is negative
        """
        if _check_int("n", n) < 0:
            raise NegativeValue("Natural number cannot be negative")
        return cls(n, scale)

    @classmethod
    def from_float(
        cls, value: float, scale: int, mode: RoundingMode = RoundingMode.DOWN
    ) -> FixedDecimal:
        """Create from a float scaled by 10**scale and rounded by ``mode``.

        Raises:
            InvalidFloat: If value is NaN, infinite, or out of float range
            TypeError: If value is not a float or int
        """
        return cls(parse_float(value, _check_scale(scale), mode), scale)

    @classmethod
    def from_text(
        cls,
        text: str,
        scale: int | None = None,
        mode: RoundingMode | None = None,
        *,
        strict: bool | None = None,
        config: DecimalConfig | None = None,
    ) -> FixedDecimal:
        """Parse ``[-]digits[.digits]``.

        Without ``scale`` the scale is inferred from the fraction length and
        ``mode`` is ignored. With ``scale``, short fractions are zero-padded
        and long ones are rounded by ``mode`` (DOWN when omitted), or rejected
        when ``strict`` is set.

        Raises:
            InvalidFormat: If text is empty, a lone "-", or malformed
            TooManyFractionDigits: If strict and text has too many fraction digits
        """
        cfg = config or DEFAULT_CONFIG
        if strict is None:
            strict = cfg.strict_fraction_digits
        magnitude, parsed_scale = parse_text(text, scale, mode, strict=strict)
        return cls(magnitude, parsed_scale)

    @classmethod
    def from_json(cls, text: str | bytes) -> FixedDecimal:
        """Parse the to_json() rendering.

        Raises:
            InvalidFormat: If text does not match the template
        """
        try:
            payload = DecimalJson.model_validate_json(text)
        except ValidationError as err:
            raise InvalidFormat(f"Invalid decimal JSON: {err.error_count()} error(s)") from err
        return cls(signed_digits_to_int(payload.magnitude), payload.scale)

    @classmethod
    def from_json_big_decimal(cls, text: str | bytes) -> FixedDecimal:
        """Parse the to_json_big_decimal() rendering.

        Raises:
            InvalidFormat: If text does not match the template
        """
        try:
            payload = BigDecimalJson.model_validate_json(text)
        except ValidationError as err:
            raise InvalidFormat(f"Invalid BigDecimal JSON: {err.error_count()} error(s)") from err
        return cls(signed_digits_to_int(payload.unscaled_value), payload.scale)

    @classmethod
    def of(cls, value: FixedDecimal | int | str, scale: int | None = None) -> FixedDecimal:
        """Coerce an int, decimal text or FixedDecimal into a FixedDecimal.

        Floats are rejected: use from_float() with an explicit rounding mode.
        """
        if isinstance(value, FixedDecimal):
            return value if scale is None else value.quantize(scale, RoundingMode.HALF_UP)
        if isinstance(value, str):
            return cls.from_text(value, scale, RoundingMode.HALF_UP)
        if isinstance(value, int):
            return cls.from_int(value, scale or 0)
        raise TypeError(f"Cannot convert {type(value).__name__} to FixedDecimal")

    # --- Scale and rounding ---

    def quantize(self, scale: int, mode: RoundingMode = RoundingMode.DOWN) -> FixedDecimal:
        """Rescale to exactly ``scale`` digits.

        Widening is exact. Narrowing rounds the discarded digits by ``mode``.
        """
        _check_scale(scale)
        if scale == self._scale:
            return self
        return FixedDecimal(quantize_magnitude(self._magnitude, self._scale, scale, mode), scale)

    def trunc_to(self, scale: int) -> FixedDecimal:
        """Rescale, rounding toward zero."""
        return self.quantize(scale, RoundingMode.DOWN)

    def floor_to(self, scale: int) -> FixedDecimal:
        """Rescale, rounding toward negative infinity."""
        _check_scale(scale)
        return FixedDecimal(floor_magnitude(self._magnitude, self._scale, scale), scale)

    def ceil_to(self, scale: int) -> FixedDecimal:
        """Rescale, rounding toward positive infinity."""
        _check_scale(scale)
        return FixedDecimal(ceil_magnitude(self._magnitude, self._scale, scale), scale)

    # --- Arithmetic ---

    def add(self, other: FixedDecimal, scale: int | None = None) -> FixedDecimal:
        """Add two values.

        Default scale is the larger operand scale. Both operands are quantized
        to the target with HALF_UP before adding.
        """
        target = max(self._scale, other._scale) if scale is None else _check_scale(scale)
        a = self.quantize(target, RoundingMode.HALF_UP)
        b = other.quantize(target, RoundingMode.HALF_UP)
        return FixedDecimal(a._magnitude + b._magnitude, target)

    def subtract(self, other: FixedDecimal, scale: int | None = None) -> FixedDecimal:
        """Subtract other from self. Same scale rule as add()."""
        target = max(self._scale, other._scale) if scale is None else _check_scale(scale)
        a = self.quantize(target, RoundingMode.HALF_UP)
        b = other.quantize(target, RoundingMode.HALF_UP)
        return FixedDecimal(a._magnitude - b._magnitude, target)

    def multiply(
        self,
        other: FixedDecimal,
        scale: int | None = None,
        mode: RoundingMode = RoundingMode.DOWN,
    ) -> FixedDecimal:
        """Multiply two values.

        The natural product (scale = sum of scales) is exact. It is quantized
        by ``mode`` only when a target scale is given.
        """
        product = FixedDecimal(self._magnitude * other._magnitude, self._scale + other._scale)
        if scale is None:
            return product
        return product.quantize(scale, mode)

    def divide(
        self,
        other: FixedDecimal,
        scale: int | None = None,
        mode: RoundingMode = RoundingMode.DOWN,
        *,
        config: DecimalConfig | None = None,
    ) -> FixedDecimal:
        """Divide self by other.

        Default scale is max(operand scales) + config.division_extra_scale
        (12 by default). The remainder is rounded by ``mode``.

        Raises:
            DivideByZero: If other is zero
        """
        if scale is None:
            cfg = config or DEFAULT_CONFIG
            target = max(self._scale, other._scale) + cfg.division_extra_scale
        else:
            target = _check_scale(scale)

        if other._magnitude == 0:
            logger.debug(
                "decimal_divide_by_zero",
                dividend_scale=self._scale,
                divisor_scale=other._scale,
            )
        magnitude = divide_magnitudes(
            self._magnitude, self._scale, other._magnitude, other._scale, target, mode
        )
        return FixedDecimal(magnitude, target)

    def power(
        self,
        n: int,
        scale: int | None = None,
        mode: RoundingMode = RoundingMode.DOWN,
        *,
        config: DecimalConfig | None = None,
    ) -> FixedDecimal:
        """Raise to an integer power.

        Positive exponents use square-and-multiply on the magnitude with the
        scale accumulated exactly; rounding happens once, at the end, and only
        when ``scale`` is given. Negative exponents divide one by the positive
        power and follow divide()'s scale and rounding rules.

        Raises:
            ZeroToNegativePower: If self is zero and n is negative
            DivideByZero: Propagated from divide()
        """
        _check_int("n", n)
        if n == 0:
            one = FixedDecimal(1, 0)
            return one if scale is None else one.quantize(scale, mode)

        if n < 0:
            if self._magnitude == 0:
                logger.debug("decimal_zero_to_negative_power", exponent=n)
                raise ZeroToNegativePower(f"Cannot raise zero to negative power {n}")
            return FixedDecimal(1, 0).divide(self.power(-n), scale, mode, config=config)

        base_magnitude, base_scale = self._magnitude, self._scale
        acc_magnitude, acc_scale = 1, 0
        e = n
        while e:
            if e & 1:
                acc_magnitude *= base_magnitude
                acc_scale += base_scale
            e >>= 1
            if e:
                base_magnitude *= base_magnitude
                base_scale *= 2

        result = FixedDecimal(acc_magnitude, acc_scale)
        return result if scale is None else result.quantize(scale, mode)

    # --- Conversions ---

    def to_int(self, mode: RoundingMode = RoundingMode.DOWN) -> int:
        """Round to scale 0 and return the integer."""
        return quantize_magnitude(self._magnitude, self._scale, 0, mode)

    def to_natural(self, mode: RoundingMode = RoundingMode.DOWN) -> int:
        """Round to scale 0 and return the non-negative integer.

        Raises:
            NegativeValue: If the rounded value is negative
        """
        value = self.to_int(mode)
        if value < 0:
            logger.debug("decimal_negative_natural", scale=self._scale, mode=mode.value)
            raise NegativeValue(f"Negative value cannot be natural (rounded {mode.value})")
        return value

    def to_float(self) -> float:
        """Convert to float. Lossy: for display or interop only."""
        return self._magnitude / pow10(self._scale)

    def to_base_units(self) -> int:
        """Return the raw magnitude, without any scale change."""
        return self._magnitude

    # --- Comparison ---

    def compare(self, other: FixedDecimal) -> int:
        """Three-way numeric comparison: -1, 0 or 1."""
        target = max(self._scale, other._scale)
        a = quantize_magnitude(self._magnitude, self._scale, target, RoundingMode.DOWN)
        b = quantize_magnitude(other._magnitude, other._scale, target, RoundingMode.DOWN)
        return (a > b) - (a < b)

    def equal(self, other: FixedDecimal) -> bool:
        """Numeric equality: 1.20 equals 1.2000."""
        return self.compare(other) == 0

    def equal_exact(self, other: FixedDecimal) -> bool:
        """Structural equality: same magnitude and same scale."""
        return self._magnitude == other._magnitude and self._scale == other._scale

    def min(self, other: FixedDecimal) -> FixedDecimal:
        """Return the smaller of self and other (self on ties)."""
        return self if self.compare(other) <= 0 else other

    def max(self, other: FixedDecimal) -> FixedDecimal:
        """Return the larger of self and other (self on ties)."""
        return self if self.compare(other) >= 0 else other

    def clamp(self, lo: FixedDecimal, hi: FixedDecimal) -> FixedDecimal:
        """Clamp to [lo, hi]: max(lo, min(self, hi))."""
        return lo.max(self.min(hi))

    def abs(self) -> FixedDecimal:
        """Absolute value, same scale."""
        return FixedDecimal(abs(self._magnitude), self._scale)

    def neg(self) -> FixedDecimal:
        """Negated value, same scale."""
        return FixedDecimal(-self._magnitude, self._scale)

    def signum(self) -> int:
        """Sign of the value: -1, 0 or 1."""
        return (self._magnitude > 0) - (self._magnitude < 0)

    def is_zero(self) -> bool:
        """True if the magnitude is zero, at any scale."""
        return self._magnitude == 0

    def is_positive(self) -> bool:
        """True if strictly greater than zero."""
        return self._magnitude > 0

    def is_negative(self) -> bool:
        """True if strictly less than zero."""
        return self._magnitude < 0

    # --- Normalization and rendering ---

    def normalize(self) -> FixedDecimal:
        """Strip trailing fraction zeros without changing the value.

        Zero is returned unchanged, keeping its scale.
        """
        magnitude, scale = self._magnitude, self._scale
        if magnitude == 0:
            return self
        for digits, factor in ((3, 1000), (2, 100), (1, 10)):
            while scale >= digits and magnitude % factor == 0:
                magnitude //= factor
                scale -= digits
        if scale == self._scale:
            return self
        return FixedDecimal(magnitude, scale)

    def to_text(self) -> str:
        """Plain text with exactly ``scale`` fraction digits, e.g. "-0.005"."""
        return formatting.to_text(self._magnitude, self._scale)

    def format(
        self,
        thousands_sep: str | None = None,
        decimal_sep: str | None = None,
        *,
        config: DecimalConfig | None = None,
    ) -> str:
        """Text with grouped integer digits, e.g. "1,234,567.89"."""
        cfg = config or DEFAULT_CONFIG
        return formatting.format_text(
            self._magnitude,
            self._scale,
            cfg.thousands_separator if thousands_sep is None else thousands_sep,
            cfg.decimal_separator if decimal_sep is None else decimal_sep,
        )

    def to_debug_text(self) -> str:
        return formatting.debug_text(self._magnitude, self._scale)

    def to_json(self) -> str:
        """Render as ``{"magnitude":"12345","scale":3}``."""
        payload = DecimalJson(magnitude=formatting.int_text(self._magnitude), scale=self._scale)
        return payload.model_dump_json()

    def to_json_big_decimal(self) -> str:
        """Render as ``{"unscaledValue":"12345","scale":3}``."""
        payload = BigDecimalJson(
            unscaled_value=formatting.int_text(self._magnitude), scale=self._scale
        )
        return payload.model_dump_json(by_alias=True)

    # --- Python protocol ---

    def __repr__(self) -> str:
        return self.to_debug_text()

    def __str__(self) -> str:
        return self.to_text()

    def __hash__(self) -> int:
        # Numerically equal values must hash alike, whatever their scale
        normalized = self.normalize()
        if normalized._magnitude == 0:
            return hash(0)
        if normalized._scale == 0:
            return hash(normalized._magnitude)
        return hash((normalized._magnitude, normalized._scale))

    def __eq__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) < 0

    def __le__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) <= 0

    def __gt__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) > 0

    def __ge__(self, other: object) -> bool:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.compare(operand) >= 0

    def __add__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.add(operand)

    def __radd__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.add(self)

    def __sub__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.subtract(operand)

    def __rsub__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.subtract(self)

    def __mul__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.multiply(operand)

    def __rmul__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.multiply(self)

    def __truediv__(self, other: object) -> FixedDecimal:
        """Divide with the default scale and DOWN rounding.

        Raises:
            DivideByZero: If other is zero
        """
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return self.divide(operand)

    def __rtruediv__(self, other: object) -> FixedDecimal:
        operand = _coerce_operand(other)
        if operand is None:
            return NotImplemented
        return operand.divide(self)

    def __pow__(self, n: object) -> FixedDecimal:
        if not isinstance(n, int):
            return NotImplemented
        return self.power(n)

    def __neg__(self) -> FixedDecimal:
        return self.neg()

    def __pos__(self) -> FixedDecimal:
        return self

    def __abs__(self) -> FixedDecimal:
        return self.abs()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._magnitude != 0

    def __int__(self) -> int:
        """Truncate toward zero, like int(float)."""
        return self.to_int(RoundingMode.DOWN)

    def __float__(self) -> float:
        return self.to_float()


def _coerce_operand(x: object) -> FixedDecimal | None:
    """Return x as a FixedDecimal for operators, or None if unsupported."""
    if isinstance(x, FixedDecimal):
        return x
    if isinstance(x, int) and not isinstance(x, bool):
        return FixedDecimal(x, 0)
    return None
