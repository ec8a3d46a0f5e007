"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: sample values used by property grids
- factories: FixedDecimal factory functions
"""

from tests.helpers.constants import SAMPLE_INTEGERS, SAMPLE_SCALES, SAMPLE_VALUES
from tests.helpers.factories import assert_same, dec, fd

__all__ = [
    # Constants
    "SAMPLE_INTEGERS",
    "SAMPLE_SCALES",
    "SAMPLE_VALUES",
    # Factories
    "assert_same",
    "dec",
    "fd",
]
