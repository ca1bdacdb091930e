"""
Bank Account

Balance tracking for a single account plus amortized loan math
(fixed payment and remaining principal).
"""

from .accounts import BankAccount
from .loans import AmortizationEntry, amortization_schedule, payment, pending

__version__ = "1.0.0"

__all__ = [
    "BankAccount",
    "AmortizationEntry",
    "amortization_schedule",
    "payment",
    "pending",
]
