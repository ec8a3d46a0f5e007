"""Factory functions for creating test values.

Usage:
    from tests.helpers import dec, fd

    x = dec("12.345")   # parsed, scale inferred
    y = fd(12345, 3)    # raw magnitude and scale
"""

from fixed_decimal import FixedDecimal, RoundingMode


def fd(magnitude: int, scale: int = 0) -> FixedDecimal:
    """Create a FixedDecimal from a raw magnitude and scale."""
    return FixedDecimal(magnitude, scale)


def dec(
    text: str,
    scale: int | None = None,
    mode: RoundingMode | None = None,
) -> FixedDecimal:
    """Create a FixedDecimal from decimal text.

    Args:
        text: Decimal text such as "-0.005"
        scale: Optional target scale (default: inferred)
        mode: Optional rounding mode when narrowing (default: DOWN)

    Returns:
        Parsed FixedDecimal
    """
    return FixedDecimal.from_text(text, scale, mode)


def assert_same(actual: FixedDecimal, magnitude: int, scale: int) -> None:
    """Assert a value has exactly the given magnitude and scale."""
    assert (actual.magnitude, actual.scale) == (magnitude, scale), actual.to_debug_text()
