"""Integer scaling primitives.

Everything here works on plain Python ints, so magnitudes and powers of ten
are unbounded. No function in this module touches binary floating point.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from scaled_decimal.errors import DivisionByZeroError, NegativeScaleError

__all__ = [
    "Rounding",
    "power_of_ten",
    "divide_and_round",
    "split_number",
]


class Rounding(str, Enum):
    """How the remainder of a scale reduction or division is resolved.

    ROUND_UP and ROUND_DOWN are magnitude based: they move away from and
    toward zero respectively, regardless of sign.
    """

    ROUND_HALF = "ROUND_HALF"
    ROUND_UP = "ROUND_UP"
    ROUND_DOWN = "ROUND_DOWN"


def power_of_ten(n: int) -> int:
    """Return 10**n as an exact integer.

    Raises:
        NegativeScaleError: If n is negative
    """
    if n < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {n}")
    return 10**n


def _round_half(quotient: int, remainder: int, divisor: int) -> int:
    # Ties go away from zero
    if remainder * 2 >= divisor:
        return quotient + 1
    return quotient


def _round_up(quotient: int, remainder: int, divisor: int) -> int:
    if remainder:
        return quotient + 1
    return quotient


def _round_down(quotient: int, remainder: int, divisor: int) -> int:
    return quotient


_ROUNDERS: dict[Rounding, Callable[[int, int, int], int]] = {
    Rounding.ROUND_HALF: _round_half,
    Rounding.ROUND_UP: _round_up,
    Rounding.ROUND_DOWN: _round_down,
}


def divide_and_round(
    dividend: int,
    divisor: int,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> int:
    """Divide two integers, resolving the remainder with a rounding mode.

    The division is done on magnitudes and the sign is reapplied afterwards,
    so ROUND_HALF rounds ties away from zero, ROUND_UP rounds away from zero
    and ROUND_DOWN truncates toward zero. A negative divisor is handled by
    negating both operands.

    Args:
        dividend: Integer numerator (any sign)
        divisor: Integer denominator (any sign, non-zero)
        rounding: Rounding mode, as a Rounding member or its name

    Returns:
        dividend / divisor rounded according to rounding

    Raises:
        DivisionByZeroError: If divisor is zero
        ValueError: If rounding is not a known mode

    Examples:
        divide_and_round(15, 2) == 8
        divide_and_round(-7, 2, Rounding.ROUND_UP) == -4
        divide_and_round(-7, 2, Rounding.ROUND_DOWN) == -3
    """
    if divisor == 0:
        raise DivisionByZeroError(f"Division by zero: {dividend} / 0")

    rounder = _ROUNDERS[Rounding(rounding)]

    if divisor < 0:
        dividend, divisor = -dividend, -divisor

    negative = dividend < 0
    quotient, remainder = divmod(-dividend if negative else dividend, divisor)
    quotient = rounder(quotient, remainder, divisor)
    return -quotient if negative else quotient


def split_number(text: str) -> tuple[str, str]:
    """Split an unsigned decimal literal into whole and fraction digits.

    A missing fraction becomes "0", an empty whole part becomes "0", and
    trailing zeros are trimmed from the fraction without removing its first
    digit.

    Examples:
        split_number("123.4500") == ("123", "45")
        split_number(".5") == ("0", "5")
        split_number("7") == ("7", "0")
    """
    whole, dot, fraction = text.partition(".")
    if not dot:
        fraction = "0"
    if whole == "":
        whole = "0"
    fraction = fraction.rstrip("0") or fraction[:1]
    return whole, fraction
