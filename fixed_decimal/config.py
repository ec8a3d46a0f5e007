"""Configuration for the fixed-point decimal engine."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

# Extra fractional digits a division gets when no target scale is requested
DIVISION_EXTRA_SCALE = 12

ENV_PREFIX = "FIXED_DECIMAL_"


@dataclass(frozen=True)
class DecimalConfig:
    """Centralized defaults for operations that take optional arguments.

    Attributes:
        division_extra_scale: Digits added to max(operand scales) when divide()
            is called without a target scale (default: 12)
        thousands_separator: Group separator used by format() (default: ",")
        decimal_separator: Decimal point used by format() (default: ".")
        strict_fraction_digits: If True, from_text() raises
            TooManyFractionDigits instead of rounding excess fraction digits.
    """

    division_extra_scale: int = DIVISION_EXTRA_SCALE
    thousands_separator: str = ","
    decimal_separator: str = "."
    strict_fraction_digits: bool = False

    def __post_init__(self) -> None:
        if self.division_extra_scale < 0:
            raise ValueError(
                f"division_extra_scale must be non-negative, got {self.division_extra_scale}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> DecimalConfig:
        """Build a config from FIXED_DECIMAL_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            division_extra_scale=int(
                env.get(f"{ENV_PREFIX}DIVISION_EXTRA_SCALE", str(defaults.division_extra_scale))
            ),
            thousands_separator=env.get(
                f"{ENV_PREFIX}THOUSANDS_SEPARATOR", defaults.thousands_separator
            ),
            decimal_separator=env.get(f"{ENV_PREFIX}DECIMAL_SEPARATOR", defaults.decimal_separator),
            strict_fraction_digits=env.get(f"{ENV_PREFIX}STRICT_FRACTION_DIGITS", "false").lower()
            in ("true", "1", "yes"),
        )


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig()
