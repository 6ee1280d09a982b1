"""Formatting configuration."""

import os
from dataclasses import dataclass
from enum import Enum

from scaled_decimal.scaling import Rounding

# Locale used when a FormatConfig does not name one
DEFAULT_LOCALE = os.environ.get("SCALED_DECIMAL_LOCALE", "en-US")


class SignDisplay(str, Enum):
    """When to print a sign in front of a formatted number."""

    AUTO = "auto"
    ALWAYS = "always"
    EXCEPT_ZERO = "exceptZero"
    NEGATIVE = "negative"
    NEVER = "never"


@dataclass(frozen=True)
class FormatConfig:
    """Options for format_value().

    Attributes:
        digits: Fraction digits to display (default: the value's scale)
        trailing_zeros: Pad the fraction to exactly `digits` characters
        rounding: Rounding mode for dropped fraction digits
        compact: Abbreviate large numbers (1.2K, 35M)
        locale: Locale name passed to the number formatter
        sign_display: Sign policy, see formatting.format_sign()
    """

    digits: int | None = None
    trailing_zeros: bool = False
    rounding: Rounding = Rounding.ROUND_HALF
    compact: bool = False
    locale: str = DEFAULT_LOCALE
    sign_display: SignDisplay = SignDisplay.AUTO


# Default configuration instance
DEFAULT_FORMAT_CONFIG = FormatConfig()
