"""Tests for add, subtract, multiply, divide and power."""

import pytest

from fixed_decimal import (
    DivideByZero,
    FixedDecimal,
    NegativeValue,
    RoundingMode,
    ZeroToNegativePower,
)
from tests.helpers import assert_same, dec, fd

DOWN = RoundingMode.DOWN
UP = RoundingMode.UP
HALF_UP = RoundingMode.HALF_UP


class TestAddSubtract:
    """Tests for add and subtract."""

    def test_add_default_scale_is_max(self):
        """1.5 + 2.25 = 3.75."""
        assert_same(fd(15, 1).add(fd(225, 2)), 375, 2)

    def test_subtract_default_scale_is_max(self):
        """1.5 - 2.25 = -0.75."""
        assert_same(fd(15, 1).subtract(fd(225, 2)), -75, 2)

    def test_add_wider_target(self):
        assert_same(fd(15, 1).add(fd(225, 2), 4), 37500, 4)

    def test_add_narrower_target_rounds_operands_first(self):
        """1.25 + 1.25 at scale 1 is 1.3 + 1.3 = 2.6, not 2.5."""
        assert_same(dec("1.25").add(dec("1.25"), 1), 26, 1)

    def test_subtract_narrower_target_rounds_operands_first(self):
        """1.25 - (-1.25) at scale 1 is 1.3 + 1.3 = 2.6."""
        assert_same(dec("1.25").subtract(dec("-1.25"), 1), 26, 1)

    def test_add_negative(self):
        assert_same(dec("-0.005").add(dec("0.005")), 0, 3)

    def test_add_large(self):
        a = fd(10**40, 18)
        assert_same(a.add(a), 2 * 10**40, 18)


class TestMultiply:
    """Tests for multiply."""

    def test_natural_product_is_exact(self):
        """1.5 * 2.25 = 3.375 at scale 3."""
        assert_same(fd(15, 1).multiply(fd(225, 2)), 3375, 3)

    def test_target_scale_down(self):
        assert_same(fd(15, 1).multiply(fd(225, 2), 2, DOWN), 337, 2)

    def test_target_scale_half_up(self):
        assert_same(fd(15, 1).multiply(fd(225, 2), 2, HALF_UP), 338, 2)

    def test_target_scale_up(self):
        assert_same(fd(11, 1).multiply(fd(11, 1), 1, UP), 13, 1)

    def test_negative_half_up(self):
        assert_same(fd(-15, 1).multiply(fd(225, 2), 2, HALF_UP), -338, 2)

    def test_wider_target(self):
        assert_same(fd(15, 1).multiply(fd(225, 2), 5), 337500, 5)

    def test_by_zero(self):
        assert_same(fd(15, 1).multiply(FixedDecimal.zero(2)), 0, 3)


class TestDivide:
    """Tests for divide."""

    def test_default_scale_adds_twelve_digits(self):
        """10 / 3 = 3.333333333333 at scale 12."""
        assert_same(fd(10).divide(fd(3)), 3333333333333, 12)

    def test_default_scale_uses_max_operand_scale(self):
        """1.00 / 3 at scale 14."""
        assert_same(fd(100, 2).divide(fd(3)), 33333333333333, 14)

    def test_default_scale_from_config(self, short_division_config):
        assert_same(fd(1).divide(fd(3), config=short_division_config), 3333, 4)

    def test_explicit_scale(self):
        """56.7 / 7 = 8.10."""
        assert_same(fd(567, 1).divide(fd(7), 2), 810, 2)

    def test_modes(self):
        """1 / 8 = 0.125."""
        assert_same(fd(1).divide(fd(8), 2, DOWN), 12, 2)
        assert_same(fd(1).divide(fd(8), 2, UP), 13, 2)
        assert_same(fd(1).divide(fd(8), 2, HALF_UP), 13, 2)

    def test_negative_tie_goes_away_from_zero(self):
        assert_same(fd(-1).divide(fd(8), 2, HALF_UP), -13, 2)
        assert_same(fd(1).divide(fd(-8), 2, HALF_UP), -13, 2)

    def test_both_negative(self):
        assert_same(fd(-1).divide(fd(-8), 3), 125, 3)

    def test_divisor_with_scale(self):
        """1 / 0.25 = 4.00."""
        assert_same(fd(1).divide(fd(25, 2), 2), 400, 2)

    def test_narrow_target(self):
        """0.00001 / 1 at scale 2."""
        assert_same(fd(1, 5).divide(fd(1), 2, DOWN), 0, 2)
        assert_same(fd(1, 5).divide(fd(1), 2, UP), 1, 2)

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZero):
            fd(567, 1).divide(fd(0, 0), 2, DOWN)

    def test_divide_by_scaled_zero(self):
        with pytest.raises(DivideByZero):
            fd(567, 1).divide(FixedDecimal.zero(5))

    def test_zero_dividend(self):
        assert_same(FixedDecimal.zero().divide(fd(7), 2, UP), 0, 2)


class TestPower:
    """Tests for power."""

    def test_zero_exponent(self):
        assert_same(fd(12345, 3).power(0), 1, 0)

    def test_zero_exponent_with_scale(self):
        assert_same(fd(12345, 3).power(0, 2), 100, 2)

    def test_zero_to_zero(self):
        assert_same(FixedDecimal.zero().power(0), 1, 0)

    def test_square(self):
        assert_same(fd(15, 1).power(2), 225, 2)

    def test_cube(self):
        assert_same(fd(15, 1).power(3), 3375, 3)

    def test_integer_base(self):
        assert_same(fd(2).power(10), 1024, 0)

    def test_negative_base(self):
        assert_same(fd(-2).power(3), -8, 0)
        assert_same(fd(-15, 1).power(2), 225, 2)

    def test_scale_accumulates(self):
        """1.1^5 = 1.61051."""
        assert_same(fd(11, 1).power(5), 161051, 5)

    def test_final_quantize(self):
        assert_same(fd(11, 1).power(5, 2, HALF_UP), 161, 2)
        assert_same(fd(11, 1).power(5, 2, UP), 162, 2)

    def test_matches_repeated_multiplication(self):
        base = fd(123, 2)
        expected = base
        for _ in range(6):
            expected = expected.multiply(base)
        assert base.power(7).equal_exact(expected)
        assert_same(base.power(7), 123**7, 14)

    def test_large_exponent(self):
        assert_same(fd(1, 1).power(100), 1, 100)

    def test_zero_base(self):
        assert_same(FixedDecimal.zero().power(3), 0, 0)
        assert_same(FixedDecimal.zero(2).power(2), 0, 4)

    def test_negative_exponent(self):
        """2^-1 = 0.50."""
        assert_same(fd(2).power(-1, 2), 50, 2)

    def test_negative_exponent_default_scale(self):
        """2^-2 = 0.25 at the default division scale."""
        assert_same(fd(2).power(-2), 250000000000, 12)

    def test_negative_exponent_fractional_base(self):
        """0.5^-1 = 2 at scale 1 + 12."""
        assert_same(fd(5, 1).power(-1), 2 * 10**13, 13)

    def test_negative_exponent_rounding(self):
        """3^-1 = 0.33 / 0.34."""
        assert_same(fd(3).power(-1, 2, DOWN), 33, 2)
        assert_same(fd(3).power(-1, 2, UP), 34, 2)

    def test_zero_to_negative_power(self):
        with pytest.raises(ZeroToNegativePower):
            fd(0, 0).power(-1, 2, DOWN)

    def test_non_int_exponent_raises(self):
        with pytest.raises(TypeError):
            fd(2).power(1.5)  # type: ignore[arg-type]


class TestLongMagnitudeFailures:
    """Failure paths on huge values raise the decimal error, nothing else."""

    def test_divide_by_zero(self):
        with pytest.raises(DivideByZero):
            fd(10).power(5000).divide(FixedDecimal.zero())

    def test_to_natural_negative(self):
        with pytest.raises(NegativeValue):
            fd(-(10**5000)).to_natural()

    def test_from_natural_negative(self):
        with pytest.raises(NegativeValue):
            FixedDecimal.from_natural(-(10**5000))
