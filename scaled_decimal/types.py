"""pydantic field type for scaled decimal values.

Usage:
    class Balance(BaseModel):
        amount: DecimalField

    Balance(amount=("1500000", 6))
    Balance.model_validate_json('{"amount": ["1500000", 6]}')
"""

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from scaled_decimal.core import DecimalValue, from_json, is_decimal_value
from scaled_decimal.errors import NegativeScaleError, ParseError


def validate_decimal_value(value: Any) -> DecimalValue:
    """Coerce a decimal value, its wire form, or its JSON text into a DecimalValue.

    Args:
        value: DecimalValue / (int, int) pair, ["<int>", scale] pair, or JSON text

    Returns:
        DecimalValue

    Raises:
        ValueError: If value is not one of the accepted shapes, or has a
            negative scale
    """
    if isinstance(value, (str, bytes)):
        decimal = from_json(value)
    elif is_decimal_value(value):
        decimal = DecimalValue(value[0], value[1])
    elif (
        isinstance(value, (tuple, list))
        and len(value) == 2
        and isinstance(value[0], str)
        and isinstance(value[1], int)
    ):
        try:
            decimal = DecimalValue(int(value[0]), value[1])
        except ValueError as err:
            raise ParseError(value[0], "magnitude must be an integer string") from err
    else:
        raise ValueError(f"Expected a [magnitude, scale] pair, got {type(value).__name__}")

    if decimal.scale < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {decimal.scale}")
    return decimal


def serialize_decimal_value(value: DecimalValue) -> list[Any]:
    """Wire form: ["<magnitude>", scale]."""
    return [str(value[0]), value[1]]


# Scaled decimal as a pydantic model field
DecimalField = Annotated[
    DecimalValue,
    PlainValidator(validate_decimal_value),
    PlainSerializer(serialize_decimal_value, return_type=list),
]
