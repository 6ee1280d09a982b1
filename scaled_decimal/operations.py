"""Arithmetic and comparison on scaled decimal values.

Every operation accepts Numberish operands, converts them with from_value()
and works on integer magnitudes at a shared scale. When no result scale is
given, a decimal value as first operand keeps its own scale; a plain number
or text first operand yields the working (equalized) scale.
"""

from __future__ import annotations

import builtins

from scaled_decimal.core import (
    DecimalValue,
    Numberish,
    equalize_decimals,
    from_value,
    is_decimal_value,
    set_decimals,
)
from scaled_decimal.errors import DivisionByZeroError, NegativeScaleError
from scaled_decimal.scaling import Rounding, divide_and_round, power_of_ten

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "remainder",
    "compare",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "abs",
    "round",
    "floor",
    "ceil",
]


def _normalize_pair(num1: Numberish, num2: Numberish) -> tuple[DecimalValue, DecimalValue]:
    """Convert both operands and bring them to the higher of their scales.

    Raises:
        NegativeScaleError: If either operand has a negative scale
    """
    value1 = from_value(num1)
    value2 = from_value(num2)

    if value1.scale < 0 or value2.scale < 0:
        raise NegativeScaleError(
            f"Decimals cannot be negative: {value1.scale}, {value2.scale}"
        )

    value1, value2 = equalize_decimals([value1, value2])
    return value1, value2


def _result_decimals(num1: Numberish, working: DecimalValue, decimals: int | None) -> int:
    if decimals is not None:
        return decimals
    if is_decimal_value(num1):
        return num1[1]
    return working.scale


def add(num1: Numberish, num2: Numberish, decimals: int | None = None) -> DecimalValue:
    """Add two values.

    Examples:
        add((123456, 2), (123456, 4), 2) == (124691, 2)
        add(12.3456, 14.48) == (268256, 4)
    """
    value1, value2 = _normalize_pair(num1, num2)
    return set_decimals(
        (value1.magnitude + value2.magnitude, value1.scale),
        _result_decimals(num1, value1, decimals),
    )


def subtract(num1: Numberish, num2: Numberish, decimals: int | None = None) -> DecimalValue:
    """Subtract num2 from num1."""
    value1, value2 = _normalize_pair(num1, num2)
    return set_decimals(
        (value1.magnitude - value2.magnitude, value1.scale),
        _result_decimals(num1, value1, decimals),
    )


def multiply(
    num1: Numberish,
    num2: Numberish,
    decimals: int | None = None,
    *,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> DecimalValue:
    """Multiply two values.

    The exact product has twice the working scale; it is then rescaled to
    the result scale with the given rounding mode.
    """
    value1, value2 = _normalize_pair(num1, num2)
    return set_decimals(
        (value1.magnitude * value2.magnitude, value1.scale * 2),
        _result_decimals(num1, value1, decimals),
        rounding,
    )


def divide(
    num1: Numberish,
    num2: Numberish,
    decimals: int | None = None,
    *,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> DecimalValue:
    """Divide num1 by num2.

    Both operands share a scale, so the ratio of magnitudes is the ratio of
    values. The dividend is shifted left by the result scale before the
    integer division, which makes the quotient land on the result scale
    with a single rounding step.

    Raises:
        DivisionByZeroError: If num2 is zero
        NegativeScaleError: If an operand or the result scale is negative

    Examples:
        divide((123456, 4), (300000000, 8), 2) == (412, 2)
        divide(16.342, 14.43) == (1133, 3)
    """
    value1, value2 = _normalize_pair(num1, num2)
    if value2.magnitude == 0:
        raise DivisionByZeroError(f"Division by zero: {tuple(value1)} / {tuple(value2)}")

    target = _result_decimals(num1, value1, decimals)
    quotient = divide_and_round(
        value1.magnitude * power_of_ten(target),
        value2.magnitude,
        rounding,
    )
    return DecimalValue(quotient, target)


def remainder(num1: Numberish, num2: Numberish, decimals: int | None = None) -> DecimalValue:
    """Remainder of num1 / num2, truncated toward zero.

    The sign of the result follows the dividend: remainder(-10, 7) == (-3, 0).

    Raises:
        DivisionByZeroError: If num2 is zero
    """
    value1, value2 = _normalize_pair(num1, num2)
    if value2.magnitude == 0:
        raise DivisionByZeroError(f"Remainder by zero: {tuple(value1)} % {tuple(value2)}")

    rest = builtins.abs(value1.magnitude) % builtins.abs(value2.magnitude)
    if value1.magnitude < 0:
        rest = -rest
    return set_decimals((rest, value1.scale), _result_decimals(num1, value1, decimals))


def compare(num1: Numberish, num2: Numberish) -> int:
    """Return 1, 0 or -1 as num1 is greater than, equal to or less than num2.

    Works as a sort comparator: sorted(values, key=functools.cmp_to_key(compare)).
    """
    value1, value2 = _normalize_pair(num1, num2)
    if value1.magnitude > value2.magnitude:
        return 1
    if value1.magnitude < value2.magnitude:
        return -1
    return 0


def equal(num1: Numberish, num2: Numberish) -> bool:
    value1, value2 = _normalize_pair(num1, num2)
    return value1.magnitude == value2.magnitude


def greater_than(num1: Numberish, num2: Numberish) -> bool:
    value1, value2 = _normalize_pair(num1, num2)
    return value1.magnitude > value2.magnitude


def greater_than_or_equal(num1: Numberish, num2: Numberish) -> bool:
    value1, value2 = _normalize_pair(num1, num2)
    return value1.magnitude >= value2.magnitude


def less_than(num1: Numberish, num2: Numberish) -> bool:
    value1, value2 = _normalize_pair(num1, num2)
    return value1.magnitude < value2.magnitude


def less_than_or_equal(num1: Numberish, num2: Numberish) -> bool:
    value1, value2 = _normalize_pair(num1, num2)
    return value1.magnitude <= value2.magnitude


def abs(num: Numberish, decimals: int | None = None) -> DecimalValue:  # noqa: A001
    """Absolute value, rescaled to decimals (default: the input's scale)."""
    value = from_value(num)
    if value.scale < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {value.scale}")
    if decimals is None:
        decimals = value.scale
    magnitude = value.magnitude
    if magnitude < 0:
        magnitude = -magnitude
    return set_decimals((magnitude, value.scale), decimals)


def round(  # noqa: A001
    num: Numberish,
    decimals: int | None = None,
    *,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> DecimalValue:
    """Round to a whole number, then express it at decimals.

    Examples:
        round((123450, 2)) == (123500, 2)
        round((1234499999999999999999, 18), 2) == (123400, 2)
    """
    value = from_value(num)
    whole = set_decimals(value, 0, rounding)
    return set_decimals(whole, value.scale if decimals is None else decimals)


def floor(num: Numberish, decimals: int | None = None) -> DecimalValue:
    """Largest whole number not greater than num, expressed at decimals.

    Rounds toward negative infinity: floor((-101, 1)) == (-110, 1).
    """
    value = from_value(num)
    if value.scale < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {value.scale}")
    # Python's // already rounds toward negative infinity
    whole = value.magnitude // power_of_ten(value.scale)
    return set_decimals((whole, 0), value.scale if decimals is None else decimals)


def ceil(num: Numberish, decimals: int | None = None) -> DecimalValue:
    """Smallest whole number not less than num, expressed at decimals.

    Rounds toward positive infinity: ceil((-1234000000000000000001, 18))
    == (-1234000000000000000000, 18).
    """
    value = from_value(num)
    if value.scale < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {value.scale}")
    whole = -(-value.magnitude // power_of_ten(value.scale))
    return set_decimals((whole, 0), value.scale if decimals is None else decimals)
