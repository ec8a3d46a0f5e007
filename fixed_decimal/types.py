"""Pydantic field type for FixedDecimal values.

Usage:
    from pydantic import BaseModel
    from fixed_decimal.types import FixedDecimalField

    class Balance(BaseModel):
        amount: FixedDecimalField

    Balance(amount="12.50").amount  # FixedDecimal(magnitude=1250, scale=2)
"""

from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from fixed_decimal.number import FixedDecimal


def validate_fixed_decimal(value: Any) -> FixedDecimal:
    """Validate that a value is a FixedDecimal, decimal text, or an integer.

    Args:
        value: Value to validate

    Returns:
        FixedDecimal with the scale implied by the input

    Raises:
        ValueError: If value is a float, bool, other type, or malformed text
    """
    if isinstance(value, FixedDecimal):
        return value
    if isinstance(value, bool):
        raise ValueError("FixedDecimal cannot be built from a bool")
    if isinstance(value, int):
        return FixedDecimal.from_int(value)
    if isinstance(value, str):
        # InvalidFormat is a ValueError, so pydantic reports it as a validation error
        return FixedDecimal.from_text(value)
    raise ValueError(f"FixedDecimal must be string or int, got {type(value).__name__}")


class _FixedDecimalAnnotation:
    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            validate_fixed_decimal,
            serialization=core_schema.plain_serializer_function_ser_schema(
                FixedDecimal.to_text,
                return_schema=core_schema.str_schema(),
            ),
        )


# Decimal amount accepted as text or int, serialized as plain decimal text
FixedDecimalField = Annotated[FixedDecimal, _FixedDecimalAnnotation]
