"""Scaled decimal value representation.

A value is stored as an integer magnitude and a scale (number of decimals):
(123456, 2) represents 1234.56. Magnitudes are Python ints, so precision is
never lost to a fixed width or to binary floating point.

Representation is not canonical: (100, 2) and (1, 0) are both valid and
numerically equal. Use operations.equal() for numeric equality.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any, NamedTuple, Union

import structlog
from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError

from scaled_decimal.errors import NegativeScaleError, ParseError
from scaled_decimal.scaling import Rounding, divide_and_round, power_of_ten, split_number

__all__ = [
    "DecimalValue",
    "Numberish",
    "is_decimal_value",
    "from_value",
    "set_value_decimals",
    "set_decimals",
    "equalize_decimals",
    "to_json",
    "from_json",
]

logger = structlog.get_logger()


class DecimalValue(NamedTuple):
    """Immutable (magnitude, scale) pair representing magnitude / 10**scale."""

    magnitude: int
    scale: int


# Anything accepted at the ingestion boundary
Numberish = Union[int, float, str, DecimalValue, Sequence[int]]

# Optional sign, then digits with an optional fraction, or a bare fraction:
# "123", "1.23", ".23", "-123", "-1.23", "-.23"
NUMBER_RE = re.compile(r"-?(?:[0-9]+|[0-9]*\.[0-9]+)")

# Scientific notation as produced by repr(float) or typed by hand
EXPONENT_RE = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)[eE][+-]?[0-9]+")

_JSON_ADAPTER = TypeAdapter(tuple[StrictStr, StrictInt])
_MAGNITUDE_RE = re.compile(r"-?[0-9]+")


def is_decimal_value(value: Any) -> bool:
    """Check whether value has the shape of a decimal value.

    Any tuple or list whose first two items are ints qualifies. Extra
    trailing items are tolerated.
    """
    return (
        isinstance(value, (tuple, list))
        and len(value) >= 2
        and _is_int(value[0])
        and _is_int(value[1])
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _expand_exponent(text: str) -> str:
    """Rewrite scientific notation into positional form ("1e+21" -> "1000...0")."""
    if EXPONENT_RE.fullmatch(text) is None:
        return text
    return format(Decimal(text), "f")


def _number_text(value: int | float | str) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"Cannot convert {type(value).__name__} to a decimal value")
    if isinstance(value, float):
        return repr(value)
    return str(value)


def from_value(value: Numberish, decimals: int | None = None) -> DecimalValue:
    """Convert a number, numeric text or decimal value into a DecimalValue.

    Args:
        value: int, float, decimal literal text, or a decimal value
        decimals: Target scale. None infers it: the number of significant
            fractional digits for text and numbers, the existing scale for
            decimal values.

    Returns:
        DecimalValue at the requested (or inferred) scale. Extra fractional
        digits are truncated when converting text or numbers.

    Raises:
        ParseError: If value is text (or a float) that is not a decimal literal
        NegativeScaleError: If decimals is negative
        TypeError: If value is of an unsupported type

    Examples:
        from_value("12345.29387", 2) == (1234529, 2)
        from_value("-.5") == (-5, 1)
        from_value(10**21, 0) == (10**21, 0)
    """
    if is_decimal_value(value):
        if decimals is None:
            return DecimalValue(value[0], value[1])
        return set_decimals(value, decimals)

    text = _expand_exponent(_number_text(value))

    if NUMBER_RE.fullmatch(text) is None:
        logger.debug("decimal_parse_rejected", text=text)
        raise ParseError(text)

    if decimals is not None and decimals < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {decimals}")

    negative = text.startswith("-")
    if negative:
        text = text[1:]

    whole, fraction = split_number(text)

    if decimals is None:
        decimals = 0 if fraction == "0" else len(fraction)

    # Truncate, then pad with trailing zeros
    fraction = fraction[:decimals].ljust(decimals, "0")

    magnitude = int(whole) * power_of_ten(decimals) + int(fraction or "0")
    return DecimalValue(-magnitude if negative else magnitude, decimals)


def set_value_decimals(
    magnitude: int,
    decimals_diff: int,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> int:
    """Shift a raw magnitude by decimals_diff decimal places.

    A positive difference multiplies by a power of ten, a negative one
    divides and rounds with the given mode.
    """
    if decimals_diff > 0:
        return magnitude * power_of_ten(decimals_diff)
    if decimals_diff < 0:
        return divide_and_round(magnitude, power_of_ten(-decimals_diff), rounding)
    return magnitude


def set_decimals(
    value: Sequence[int],
    decimals: int,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> DecimalValue:
    """Rescale a decimal value to a new number of decimals.

    Scaling up is exact. Scaling down rounds with the given mode.

    Raises:
        NegativeScaleError: If the current or the requested scale is negative
    """
    magnitude, scale = value[0], value[1]
    if scale == decimals:
        return DecimalValue(magnitude, scale)
    if scale < 0 or decimals < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {scale} -> {decimals}")
    return DecimalValue(set_value_decimals(magnitude, decimals - scale, rounding), decimals)


def equalize_decimals(
    values: Iterable[Sequence[int]],
    decimals: int | None = None,
) -> list[DecimalValue]:
    """Rescale values to a shared scale, keeping their order.

    The shared scale is decimals when given, else the highest scale present.
    """
    values = list(values)
    if decimals is None:
        decimals = max((value[1] for value in values), default=0)
    return [set_decimals(value, decimals) for value in values]


def to_json(value: Sequence[int]) -> str:
    """Serialize as '["<magnitude>",<scale>]'.

    The magnitude is a string so that JSON readers with 64-bit numbers do
    not truncate it.
    """
    return _JSON_ADAPTER.dump_json((str(value[0]), value[1])).decode()


def from_json(text: str | bytes) -> DecimalValue:
    """Parse the output of to_json().

    The scale must be a JSON number; numeric strings are not coerced.

    Raises:
        ParseError: If text is not a ["<integer>", <scale>] JSON array
        NegativeScaleError: If the scale is negative
    """
    if isinstance(text, bytes):
        text = text.decode(errors="replace")

    try:
        magnitude, scale = _JSON_ADAPTER.validate_json(text)
    except ValidationError as err:
        logger.debug("decimal_json_rejected", text=text, errors=err.error_count())
        raise ParseError(text, "expected a [magnitude, scale] JSON array") from err

    if _MAGNITUDE_RE.fullmatch(magnitude) is None:
        logger.debug("decimal_json_rejected", text=text, magnitude=magnitude)
        raise ParseError(text, "magnitude must be an integer string")

    if scale < 0:
        logger.debug("decimal_json_rejected", text=text, scale=scale)
        raise NegativeScaleError(f"Decimals cannot be negative: {scale}")

    return DecimalValue(int(magnitude), scale)
