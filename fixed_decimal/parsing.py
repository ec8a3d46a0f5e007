"""Parsing of text and floating-point input into (magnitude, scale) pairs.

Text is accepted in the form ``[-]digits[.digits]``. Only ASCII digits are
allowed: Python's int() also accepts underscores, surrounding whitespace and
non-ASCII digits, none of which are valid here.
"""

from __future__ import annotations

import math
import re

import structlog

from fixed_decimal.errors import InvalidFloat, InvalidFormat, TooManyFractionDigits
from fixed_decimal.formatting import CHUNK_DIGITS
from fixed_decimal.rounding import RoundingMode, pow10

logger = structlog.get_logger()

_DIGITS = re.compile(r"[0-9]*")


def _reject(text: str, reason: str) -> InvalidFormat:
    logger.debug("decimal_parse_rejected", text=text[:64], reason=reason)
    return InvalidFormat(f"Invalid decimal text {text[:64]!r}: {reason}")


def digits_to_int(digits: str) -> int:
    """Convert a run of ASCII digits of any length to int.

    int() refuses strings past sys.get_int_max_str_digits(), so long runs are
    converted in chunks.
    """
    if len(digits) <= CHUNK_DIGITS:
        return int(digits)
    value = 0
    for start in range(0, len(digits), CHUNK_DIGITS):
        chunk = digits[start : start + CHUNK_DIGITS]
        value = value * pow10(len(chunk)) + int(chunk)
    return value


def signed_digits_to_int(text: str) -> int:
    """Convert ``[-]digits`` (already validated) to int."""
    if text.startswith("-"):
        return -digits_to_int(text[1:])
    return digits_to_int(text)


def dropped_digits_bump(dropped: str, mode: RoundingMode) -> int:
    """Return the 0/1 bump for digits removed from the end of a fraction.

    Args:
        dropped: The discarded fractional digits, most significant first
        mode: Rounding mode

    Returns:
        1 if the kept digits must move one unit away from zero, else 0
    """
    if not dropped:
        return 0
    if mode is RoundingMode.DOWN:
        return 0
    if mode is RoundingMode.UP:
        return 1 if dropped.strip("0") else 0
    if mode is RoundingMode.HALF_UP:
        return 1 if dropped[0] >= "5" else 0
    raise TypeError(f"Unknown rounding mode: {mode!r}")


def parse_text(
    text: str,
    scale: int | None = None,
    mode: RoundingMode | None = None,
    *,
    strict: bool = False,
) -> tuple[int, int]:
    """Parse decimal text into a (magnitude, scale) pair.

    Without a target scale, the scale is the number of digits after the
    decimal point and ``mode`` is ignored. With a target scale, shorter
    fractions are zero-padded and longer ones are cut and rounded by
    ``mode`` (DOWN when omitted).

    Args:
        text: Decimal text such as "-12.345" or ".5"
        scale: Optional target scale
        mode: Optional rounding mode for narrowing
        strict: Raise TooManyFractionDigits instead of rounding

    Returns:
        Tuple of (magnitude, scale)

    Raises:
        InvalidFormat: If text is empty, a lone sign, or malformed
        TooManyFractionDigits: If strict and the fraction exceeds scale
    """
    if not isinstance(text, str):
        raise TypeError(f"Decimal text must be str, got {type(text).__name__}")
    if scale is not None and scale < 0:
        raise ValueError(f"Scale must be non-negative, got {scale}")
    if not text:
        raise _reject(text, "empty input")

    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not body:
        raise _reject(text, "sign without digits")

    parts = body.split(".")
    if len(parts) > 2:
        raise _reject(text, "more than one decimal point")

    int_part = parts[0]
    frac_part = parts[1] if len(parts) == 2 else ""
    if not _DIGITS.fullmatch(int_part) or not _DIGITS.fullmatch(frac_part):
        raise _reject(text, "non-digit characters")
    if not int_part and not frac_part:
        raise _reject(text, "no digits")
    int_part = int_part or "0"

    if scale is None:
        target = len(frac_part)
        magnitude = digits_to_int(int_part + frac_part)
    elif len(frac_part) <= scale:
        target = scale
        magnitude = digits_to_int(int_part + frac_part.ljust(scale, "0"))
    else:
        if strict:
            logger.debug(
                "decimal_parse_too_many_fraction_digits",
                text=text[:64],
                fraction_digits=len(frac_part),
                scale=scale,
            )
            raise TooManyFractionDigits(
                f"{text[:64]!r} has {len(frac_part)} fraction digits, scale allows {scale}"
            )
        target = scale
        kept, dropped = frac_part[:scale], frac_part[scale:]
        bump = dropped_digits_bump(dropped, mode or RoundingMode.DOWN)
        magnitude = digits_to_int(int_part + kept) + bump

    return (-magnitude if negative else magnitude), target


def parse_float(value: float | int, scale: int, mode: RoundingMode) -> int:
    """Scale a float by 10**scale and round it to an integer magnitude.

    The product is computed in binary floating point, so the result carries
    whatever representation error the float already has.

    Raises:
        InvalidFloat: If value is NaN or infinite, or the scaled value overflows
        TypeError: If value is not a float or int
    """
    if scale < 0:
        raise ValueError(f"Scale must be non-negative, got {scale}")
    if isinstance(value, bool) or not isinstance(value, (float, int)):
        raise TypeError(f"Float input must be float or int, got {type(value).__name__}")
    if isinstance(value, int):
        try:
            value = float(value)
        except OverflowError as err:
            logger.debug("decimal_float_rejected", reason="int out of float range")
            raise InvalidFloat("Integer is out of float range") from err
    if not math.isfinite(value):
        logger.debug("decimal_float_rejected", value=repr(value), reason="not finite")
        raise InvalidFloat(f"Float must be finite, got {value!r}")

    try:
        scaled = value * float(pow10(scale))
    except OverflowError as err:
        raise InvalidFloat(f"Float {value!r} cannot be scaled by 10^{scale}") from err
    if not math.isfinite(scaled):
        logger.debug("decimal_float_rejected", value=repr(value), reason="scaled overflow")
        raise InvalidFloat(f"Float {value!r} overflows at scale {scale}")

    truncated = math.trunc(scaled)
    fraction = abs(scaled - truncated)
    if mode is RoundingMode.DOWN:
        bump = 0
    elif mode is RoundingMode.UP:
        bump = 1 if fraction > 0 else 0
    elif mode is RoundingMode.HALF_UP:
        bump = 1 if fraction >= 0.5 else 0
    else:
        raise TypeError(f"Unknown rounding mode: {mode!r}")

    return truncated - bump if scaled < 0 else truncated + bump
