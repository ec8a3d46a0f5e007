"""Pytest configuration and fixtures."""

import pytest

from fixed_decimal import DecimalConfig, FixedDecimal
from tests.helpers import fd


@pytest.fixture
def price() -> FixedDecimal:
    """12.345 at scale 3."""
    return fd(12345, 3)


@pytest.fixture
def negative_price() -> FixedDecimal:
    """-12.345 at scale 3."""
    return fd(-12345, 3)


@pytest.fixture
def zero() -> FixedDecimal:
    """Zero at scale 0."""
    return FixedDecimal.zero()


@pytest.fixture
def european_config() -> DecimalConfig:
    """A config using "." for thousands and "," as decimal point."""
    return DecimalConfig(thousands_separator=".", decimal_separator=",")


@pytest.fixture
def short_division_config() -> DecimalConfig:
    """A config with only 4 extra digits for default-scale division."""
    return DecimalConfig(division_extra_scale=4)
