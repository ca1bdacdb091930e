"""
Account Management Module

A single bank account holding a non-negative balance. Withdrawals that exceed
the balance are declined (return False) rather than raising; negative amounts
are invalid input and raise ValueError.
"""

from . import loans
from .logging_config import get_logger, log_action
from .validation import Amount, require_non_negative


logger = get_logger("bank_account.accounts")


class BankAccount:
    """
    Bank account with balance tracking and loan calculations
    """

    def __init__(self, balance: Amount = 0):
        self._balance = require_non_negative(balance, "Initial balance cannot be negative")

    def __repr__(self) -> str:
        return f"BankAccount(balance={self._balance!r})"

    @property
    def balance(self) -> Amount:
        """Current balance"""
        return self._balance

    def get_balance(self) -> Amount:
        """Get current balance"""
        return self._balance

    def withdraw(self, amount: Amount) -> bool:
        """
        Withdraw funds from the account

        Args:
            amount: Amount to withdraw

        Returns:
            True if the withdrawal was applied, False if funds are insufficient

        Raises:
            ValueError: If amount is negative
        """
        require_non_negative(amount, "Withdrawal amount cannot be negative")

        if amount > self._balance:
            log_action(
                logger, "warning",
                f"Withdrawal of {amount} declined: insufficient funds (balance {self._balance})",
                action="withdraw", resource="account"
            )
            return False

        self._balance -= amount
        log_action(logger, "debug", f"Withdrew {amount}, balance is now {self._balance}",
                   action="withdraw", resource="account")
        return True

    def deposit(self, amount: Amount) -> Amount:
        """
        Deposit funds into the account

        Args:
            amount: Amount to deposit

        Returns:
            New balance

        Raises:
            ValueError: If amount is negative
        """
        require_non_negative(amount, "Deposit amount cannot be negative")

        self._balance += amount
        log_action(logger, "debug", f"Deposited {amount}, balance is now {self._balance}",
                   action="deposit", resource="account")
        return self._balance

    def payment(self, principal: Amount, rate: Amount, num_periods: int) -> Amount:
        """Fixed periodic payment for a loan (see loans.payment)"""
        return loans.payment(principal, rate, num_periods)

    def pending(self, principal: Amount, rate: Amount, num_periods: int, period_index: int) -> Amount:
        """Remaining loan principal after period_index payments (see loans.pending)"""
        return loans.pending(principal, rate, num_periods, period_index)
