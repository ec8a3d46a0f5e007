"""Pydantic models for the JSON renderings of a fixed-point decimal.

Magnitudes travel as decimal strings so JSON consumers that parse numbers
as doubles cannot lose digits.
"""

from typing import Annotated

from pydantic import BaseModel, Field

# Signed integer as decimal string
SignedIntString = Annotated[str, Field(pattern=r"^-?[0-9]+$")]


class DecimalJson(BaseModel):
    """Native rendering: ``{"magnitude":"12345","scale":3}``."""

    magnitude: SignedIntString = Field(description="Unscaled signed integer as decimal string")
    scale: int = Field(ge=0, description="Number of implied fraction digits")

    model_config = {"frozen": True, "extra": "forbid"}


class BigDecimalJson(BaseModel):
    """Rendering with BigDecimal field names: ``{"unscaledValue":"12345","scale":3}``."""

    unscaled_value: SignedIntString = Field(
        alias="unscaledValue",
        description="Unscaled signed integer as decimal string",
    )
    scale: int = Field(ge=0, description="Number of implied fraction digits")

    model_config = {"frozen": True, "extra": "forbid", "populate_by_name": True}
