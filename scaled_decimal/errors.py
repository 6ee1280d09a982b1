"""Error classes for scaled decimal arithmetic."""


class ScaledDecimalError(Exception):
    """Base error for scaled decimal operations."""

    pass


class ParseError(ScaledDecimalError, ValueError):
    """Text does not match the decimal literal grammar."""

    def __init__(self, text: str, reason: str | None = None) -> None:
        self.text = text
        message = f"Incorrect number: {text!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NegativeScaleError(ScaledDecimalError, ValueError):
    """A scale (number of decimals) is negative."""

    pass


class DivisionByZeroError(ScaledDecimalError, ZeroDivisionError):
    """Divisor magnitude is zero."""

    pass
