"""Exact fixed-point decimal arithmetic on (magnitude, scale) integer pairs."""

from scaled_decimal.config import DEFAULT_FORMAT_CONFIG, FormatConfig, SignDisplay
from scaled_decimal.core import (
    DecimalValue,
    Numberish,
    equalize_decimals,
    from_json,
    from_value,
    is_decimal_value,
    set_decimals,
    set_value_decimals,
    to_json,
)
from scaled_decimal.errors import (
    DivisionByZeroError,
    NegativeScaleError,
    ParseError,
    ScaledDecimalError,
)
from scaled_decimal.formatting import (
    FormattedParts,
    GroupingNumberFormatter,
    NumberFormatter,
    format_sign,
    format_value,
)
from scaled_decimal.operations import (
    abs,
    add,
    ceil,
    compare,
    divide,
    equal,
    floor,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    multiply,
    remainder,
    round,
    subtract,
)
from scaled_decimal.parts import to_number, to_parts, to_string
from scaled_decimal.scaling import Rounding, divide_and_round, power_of_ten, split_number

# Short aliases
sub = subtract
mul = multiply
div = divide
rem = remainder
cmp = compare
eq = equal
gt = greater_than
gte = greater_than_or_equal
lt = less_than
lte = less_than_or_equal

__version__ = "0.1.0"
__all__ = [
    # Types
    "DecimalValue",
    "Numberish",
    "Rounding",
    "SignDisplay",
    "FormatConfig",
    "FormattedParts",
    "NumberFormatter",
    "GroupingNumberFormatter",
    "DEFAULT_FORMAT_CONFIG",
    # Errors
    "ScaledDecimalError",
    "ParseError",
    "NegativeScaleError",
    "DivisionByZeroError",
    # Scaling
    "power_of_ten",
    "divide_and_round",
    "split_number",
    # Core
    "is_decimal_value",
    "from_value",
    "set_value_decimals",
    "set_decimals",
    "equalize_decimals",
    "to_json",
    "from_json",
    # Operations
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
    "sub",
    "mul",
    "div",
    "rem",
    "cmp",
    "eq",
    "gt",
    "gte",
    "lt",
    "lte",
    # Digit extraction
    "to_parts",
    "to_string",
    "to_number",
    # Formatting
    "format_sign",
    "format_value",
    "__version__",
]
