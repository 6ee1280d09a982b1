"""Digit extraction: whole part and fraction digits at any precision."""

from __future__ import annotations

from collections.abc import Sequence

from scaled_decimal.errors import NegativeScaleError
from scaled_decimal.scaling import Rounding, divide_and_round, power_of_ten

__all__ = ["to_parts", "to_string", "to_number"]


def to_parts(
    value: Sequence[int],
    digits: int | None = None,
    *,
    trailing_zeros: bool = False,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> tuple[int, str | None]:
    """Split a decimal value into its whole part and fraction digits.

    The fraction is rounded to `digits` places (default: the value's scale)
    using `rounding`. A rounding carry out of the fraction increments the
    whole part, e.g. 1.65 at 0 digits gives (2, None).

    The whole part is always non-negative; callers recover the sign from the
    magnitude.

    Args:
        value: Decimal value (magnitude, scale)
        digits: Number of fraction digits to keep
        trailing_zeros: Pad the fraction to exactly `digits` characters
            instead of trimming trailing zeros
        rounding: Rounding mode applied to the dropped fraction digits

    Returns:
        (whole, fraction). fraction is None when it would be empty, or when
        it is all zeros and trailing_zeros is False.

    Raises:
        NegativeScaleError: If the scale or digits is negative

    Examples:
        to_parts((123456, 2), 2) == (1234, "56")
        to_parts((123400, 2), 2) == (1234, None)
        to_parts((-123400, 4), 2) == (12, "34")
    """
    magnitude, scale = value[0], value[1]
    if digits is None:
        digits = scale
    if scale < 0 or digits < 0:
        raise NegativeScaleError(f"Decimals cannot be negative: {scale}, digits={digits}")

    divisor = power_of_ten(scale)
    whole, fraction_value = divmod(magnitude if magnitude >= 0 else -magnitude, divisor)

    # A leading 1 (i.e. adding the divisor) keeps the fraction's leading
    # zeros through the division. If rounding turns that 1 into a 2, the
    # fraction overflowed into the whole part.
    kept = min(scale, digits)
    rounded = divide_and_round(
        divisor + fraction_value,
        power_of_ten(scale - kept),
        rounding,
    )
    if rounded >= 2 * power_of_ten(kept):
        whole += 1

    fraction = str(rounded)[1 : digits + 1]

    if trailing_zeros:
        fraction = fraction.ljust(digits, "0")
    else:
        fraction = fraction.rstrip("0")

    if fraction == "":
        return whole, None
    return whole, fraction


def to_string(
    value: Sequence[int],
    digits: int | None = None,
    *,
    trailing_zeros: bool = False,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> str:
    """Plain text form: to_string((-123400, 4), 2) == "-12.34"."""
    whole, fraction = to_parts(value, digits, trailing_zeros=trailing_zeros, rounding=rounding)
    sign = "-" if value[0] < 0 else ""
    if fraction is None:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction}"


def to_number(
    value: Sequence[int],
    digits: int | None = None,
    *,
    trailing_zeros: bool = False,
    rounding: Rounding | str = Rounding.ROUND_HALF,
) -> float:
    """Convert to a float. Precision beyond what a float holds is lost."""
    return float(to_string(value, digits, trailing_zeros=trailing_zeros, rounding=rounding))
