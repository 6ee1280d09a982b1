"""Pytest configuration and fixtures."""

import pytest

from scaled_decimal import DecimalValue


@pytest.fixture
def token_amount() -> DecimalValue:
    """123.456789 with 18 decimals, the usual ERC-20 scale."""
    return DecimalValue(123456789000000000000, 18)


@pytest.fixture
def large_negative() -> DecimalValue:
    """A negative value far beyond 64-bit range (4 decimals)."""
    return DecimalValue(-123400932870192873098321798321798731298713298, 4)
