"""Text rendering of (magnitude, scale) pairs.

str(int) refuses values past sys.get_int_max_str_digits() (4300 digits by
default); magnitudes here are unbounded, so long ones are rendered in chunks.
"""

from __future__ import annotations

__all__ = ["int_digits", "int_text", "to_text", "format_text", "group_digits", "debug_text"]

# Below the smallest limit sys.set_int_max_str_digits() accepts (640)
CHUNK_DIGITS = 500
_CHUNK_BASE = 10**CHUNK_DIGITS


def int_digits(n: int) -> str:
    """Return the decimal digits of a non-negative int of any size."""
    if n < 0:
        raise ValueError("int_digits requires a non-negative int")
    if n < _CHUNK_BASE:
        return str(n)
    chunks = []
    while n >= _CHUNK_BASE:
        n, low = divmod(n, _CHUNK_BASE)
        chunks.append(str(low).rjust(CHUNK_DIGITS, "0"))
    chunks.append(str(n))
    return "".join(reversed(chunks))


def int_text(n: int) -> str:
    """Signed decimal text of an int of any size."""
    return f"-{int_digits(-n)}" if n < 0 else int_digits(n)


def _split(magnitude: int, scale: int) -> tuple[str, str, str]:
    """Return (sign, integer digits, fraction digits) for a magnitude."""
    sign = "-" if magnitude < 0 else ""
    digits = int_digits(abs(magnitude))
    if scale == 0:
        return sign, digits, ""
    digits = digits.rjust(scale + 1, "0")
    return sign, digits[:-scale], digits[-scale:]


def to_text(magnitude: int, scale: int) -> str:
    """Render as plain decimal text with exactly ``scale`` fraction digits.

    Examples:
        to_text(-5, 3) = "-0.005"
        to_text(12345, 0) = "12345"
    """
    sign, int_part, frac_part = _split(magnitude, scale)
    if frac_part:
        return f"{sign}{int_part}.{frac_part}"
    return f"{sign}{int_part}"


def group_digits(digits: str, separator: str) -> str:
    """Insert ``separator`` between groups of three digits, from the right."""
    if not separator or len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_text(magnitude: int, scale: int, thousands_sep: str, decimal_sep: str) -> str:
    """Render with a thousands separator and a custom decimal separator."""
    sign, int_part, frac_part = _split(magnitude, scale)
    grouped = group_digits(int_part, thousands_sep)
    if frac_part:
        return f"{sign}{grouped}{decimal_sep}{frac_part}"
    return f"{sign}{grouped}"


def debug_text(magnitude: int, scale: int) -> str:
    return f"FixedDecimal(magnitude={int_text(magnitude)}, scale={scale})"
