"""Display formatting for scaled decimal values.

format_value() does the numeric work (rounding to the requested digits and
choosing the sign), then hands the result to a NumberFormatter which only
renders it: digit grouping, decimal separator and compact suffixes.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol

import structlog

from scaled_decimal.config import DEFAULT_FORMAT_CONFIG, FormatConfig, SignDisplay
from scaled_decimal.core import DecimalValue, Numberish, from_value
from scaled_decimal.parts import to_parts

__all__ = [
    "FormattedParts",
    "NumberFormatter",
    "LocaleSymbols",
    "GroupingNumberFormatter",
    "format_sign",
    "format_value",
]

logger = structlog.get_logger()


@dataclass(frozen=True)
class FormattedParts:
    """Rounded number ready for rendering.

    Attributes:
        sign: "+", "-" or ""
        whole: Non-negative whole part
        fraction: Fraction digits, or None when there is nothing to show
    """

    sign: str
    whole: int
    fraction: str | None = None


class NumberFormatter(Protocol):
    """Renders FormattedParts as text for a locale."""

    def format(self, parts: FormattedParts, locale: str, compact: bool) -> str: ...


@dataclass(frozen=True)
class LocaleSymbols:
    """Separators used when rendering a number."""

    group: str
    decimal: str


EN_SYMBOLS = LocaleSymbols(group=",", decimal=".")

# Keyed by language subtag ("de" for "de-DE", "de_AT", ...)
LOCALE_SYMBOLS: dict[str, LocaleSymbols] = {
    "en": EN_SYMBOLS,
    "ja": EN_SYMBOLS,
    "zh": EN_SYMBOLS,
    "de": LocaleSymbols(group=".", decimal=","),
    "es": LocaleSymbols(group=".", decimal=","),
    "it": LocaleSymbols(group=".", decimal=","),
    "nl": LocaleSymbols(group=".", decimal=","),
    "pt": LocaleSymbols(group=".", decimal=","),
    "fr": LocaleSymbols(group="\u202f", decimal=","),
    "ru": LocaleSymbols(group="\u00a0", decimal=","),
}

# (power of ten, suffix), smallest first
COMPACT_UNITS = [(3, "K"), (6, "M"), (9, "B"), (12, "T")]


class GroupingNumberFormatter:
    """Default formatter: thousands grouping, locale separators, K/M/B/T suffixes.

    Compact mode divides by the largest fitting unit and keeps two
    significant digits for single-digit results (1.2K) and no fraction
    otherwise (12K, 123K). Values below one thousand are left as given.
    """

    def __init__(self, symbols: dict[str, LocaleSymbols] | None = None) -> None:
        self.symbols = LOCALE_SYMBOLS if symbols is None else symbols

    def format(self, parts: FormattedParts, locale: str, compact: bool) -> str:
        symbols = self._symbols(locale)
        whole, fraction, suffix = parts.whole, parts.fraction, ""

        if compact:
            whole, fraction, suffix = self._compact(whole, fraction)

        text = f"{whole:,}".replace(",", symbols.group)
        if fraction:
            text = f"{text}{symbols.decimal}{fraction}"
        return f"{parts.sign}{text}{suffix}"

    def _symbols(self, locale: str) -> LocaleSymbols:
        language = locale.replace("_", "-").split("-")[0].lower()
        symbols = self.symbols.get(language)
        if symbols is None:
            logger.warning("format_unknown_locale", locale=locale, fallback="en")
            return EN_SYMBOLS
        return symbols

    @staticmethod
    def _compact(whole: int, fraction: str | None) -> tuple[int, str | None, str]:
        index = len(COMPACT_UNITS) - 1
        while index >= 0 and whole < 10 ** COMPACT_UNITS[index][0]:
            index -= 1
        if index < 0:
            return whole, fraction, ""

        fraction = fraction or ""
        exact = DecimalValue(int(f"{whole}{fraction}"), len(fraction))

        while True:
            power, suffix = COMPACT_UNITS[index]
            scaled = DecimalValue(exact.magnitude, exact.scale + power)
            digits = 1 if scaled.magnitude < 10 * 10**scaled.scale else 0
            compact_whole, compact_fraction = to_parts(scaled, digits)
            # 999.96K rounds up to 1000K, which reads better as 1M
            if compact_whole >= 1000 and index + 1 < len(COMPACT_UNITS):
                index += 1
                continue
            return compact_whole, compact_fraction, suffix


DEFAULT_FORMATTER = GroupingNumberFormatter()


def format_sign(
    value: DecimalValue | tuple[int, int],
    rounds_to_zero: bool,
    sign_display: SignDisplay | str = SignDisplay.AUTO,
) -> str:
    """Pick the sign to print in front of a formatted value.

    Args:
        value: The value being formatted (only its magnitude sign is used)
        rounds_to_zero: True when the displayed digits are all zero
        sign_display: Sign policy

    Returns:
        "+", "-" or ""
    """
    sign_display = SignDisplay(sign_display)
    negative = value[0] < 0

    if sign_display is SignDisplay.NEVER:
        return ""
    if sign_display is SignDisplay.ALWAYS:
        return "-" if negative else "+"
    if sign_display is SignDisplay.EXCEPT_ZERO:
        if rounds_to_zero or value[0] == 0:
            return ""
        return "-" if negative else "+"
    if sign_display is SignDisplay.NEGATIVE:
        return "-" if negative and not rounds_to_zero else ""
    return "-" if negative else ""


def format_value(
    value: Numberish,
    config: FormatConfig | int | None = None,
    *,
    formatter: NumberFormatter | None = None,
) -> str:
    """Format a value for display.

    Args:
        value: Value to format (anything from_value() accepts)
        config: FormatConfig, or an int as shorthand for FormatConfig(digits=...)
        formatter: Renderer to use (default: GroupingNumberFormatter)

    Returns:
        Formatted text

    Examples:
        format_value((123456, 2)) == "1,234.56"
        format_value((-12342938798723, 10), 6) == "-1,234.29388"
        format_value((-12342938798723, 10), FormatConfig(compact=True)) == "-1.2K"
    """
    if config is None:
        config = DEFAULT_FORMAT_CONFIG
    elif isinstance(config, int):
        config = replace(DEFAULT_FORMAT_CONFIG, digits=config)

    value = from_value(value)
    whole, fraction = to_parts(
        value,
        config.digits,
        trailing_zeros=config.trailing_zeros,
        rounding=config.rounding,
    )
    rounds_to_zero = whole == 0 and (fraction is None or int(fraction) == 0)
    sign = format_sign(value, rounds_to_zero, config.sign_display)

    parts = FormattedParts(sign=sign, whole=whole, fraction=fraction)
    return (formatter or DEFAULT_FORMATTER).format(parts, config.locale, config.compact)
