"""
Argument Validation Module

Shared checks for monetary amounts and loan terms. Every check raises
ValueError so callers can tell invalid input apart from a declined operation.
"""

from decimal import Decimal
from typing import Union

Amount = Union[int, float, Decimal]


def require_non_negative(value: Amount, message: str) -> Amount:
    """
    Ensure a value is zero or greater

    Args:
        value: Amount, rate or period index to check
        message: Error message used when the check fails

    Returns:
        The value unchanged

    Raises:
        ValueError: If value is negative or NaN
    """
    # NaN compares false both ways, so test for it explicitly
    if value != value or value < 0:
        raise ValueError(message)
    return value


def require_positive(value: Amount, message: str) -> Amount:
    """Ensure a value is strictly greater than zero"""
    if value != value or value <= 0:
        raise ValueError(message)
    return value


def validate_loan_terms(principal: Amount, rate: Amount, num_periods: int) -> None:
    """
    Validate the terms shared by every loan calculation

    Raises:
        ValueError: If principal or rate is negative, or num_periods is not positive
    """
    require_non_negative(principal, "Loan principal cannot be negative")
    require_non_negative(rate, "Interest rate cannot be negative")
    require_positive(num_periods, "Number of payments must be greater than zero")
