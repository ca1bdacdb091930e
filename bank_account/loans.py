"""
Loan Module

Amortized loan math: fixed periodic payment (French / equal installment
method), remaining principal after a number of payments, and the full
amortization schedule. All functions are pure and keep the numeric type of
their arguments, so Decimal terms produce Decimal results.
"""

from dataclasses import dataclass
from decimal import Overflow
from typing import List
import logging

from .validation import Amount, require_non_negative, validate_loan_terms


logger = logging.getLogger("bank_account.loans")


@dataclass(frozen=True)
class AmortizationEntry:
    """Single entry in an amortization schedule"""
    payment_number: int
    payment_amount: Amount
    principal_amount: Amount
    interest_amount: Amount
    remaining_balance: Amount

    def __post_init__(self):
        # Payment must split exactly into principal plus interest
        calculated_payment = self.principal_amount + self.interest_amount
        tolerance = abs(self.payment_amount) / 10 ** 9
        if abs(calculated_payment - self.payment_amount) > tolerance:
            raise ValueError(f"Payment amount {self.payment_amount} does not equal "
                             f"principal {self.principal_amount} + "
                             f"interest {self.interest_amount}")


def payment(principal: Amount, rate: Amount, num_periods: int) -> Amount:
    """
    Calculate the fixed periodic payment of an amortizing loan

    Standard loan payment formula: P * [c(1+c)^n / ((1+c)^n - 1)]
    Where P = principal, c = periodic interest rate, n = number of payments

    Args:
        principal: Amount borrowed
        rate: Interest rate per payment period (e.g. 0.001 for 0.1%)
        num_periods: Total number of payments

    Returns:
        Payment amount per period

    Raises:
        ValueError: If principal or rate is negative, or num_periods <= 0
    """
    validate_loan_terms(principal, rate, num_periods)

    if rate == 0:
        # No interest - simple division
        return principal / num_periods

    try:
        factor = (1 + rate) ** num_periods
    except (OverflowError, Overflow):
        # Interest dominates: payment tends to interest on the principal
        return principal * rate

    if factor == 1:
        # Rate vanishes at this precision, treat as interest free
        return principal / num_periods

    return principal * (rate * factor / (factor - 1))


def pending(principal: Amount, rate: Amount, num_periods: int, period_index: int) -> Amount:
    """
    Calculate the principal still owed after a number of payments

    Each period the balance drops by the principal portion of the payment,
    i.e. the payment minus the interest accrued on the previous balance.

    Args:
        principal: Amount borrowed
        rate: Interest rate per payment period
        num_periods: Total number of payments
        period_index: Number of payments already made (0 returns principal)

    Returns:
        Remaining balance after period_index payments

    Raises:
        ValueError: If any term is invalid or period_index is negative
    """
    validate_loan_terms(principal, rate, num_periods)
    require_non_negative(period_index, "Payment period cannot be negative")

    if period_index == 0:
        return principal

    installment = payment(principal, rate, num_periods)
    balance = principal
    for _ in range(period_index):
        balance = balance - (installment - rate * balance)

    return balance


def amortization_schedule(principal: Amount, rate: Amount, num_periods: int) -> List[AmortizationEntry]:
    """
    Generate the equal installment amortization schedule for a loan

    Args:
        principal: Amount borrowed
        rate: Interest rate per payment period
        num_periods: Total number of payments

    Returns:
        List of AmortizationEntry objects, one per payment
    """
    installment = payment(principal, rate, num_periods)

    schedule = []
    remaining_balance = principal

    for payment_num in range(1, num_periods + 1):
        # Interest on remaining balance, principal is payment minus interest
        interest_amount = rate * remaining_balance
        principal_amount = installment - interest_amount
        remaining_balance = remaining_balance - principal_amount

        schedule.append(AmortizationEntry(
            payment_number=payment_num,
            payment_amount=installment,
            principal_amount=principal_amount,
            interest_amount=interest_amount,
            remaining_balance=remaining_balance
        ))

    logger.debug(f"Generated {len(schedule)} entry amortization schedule for principal {principal}")
    return schedule
