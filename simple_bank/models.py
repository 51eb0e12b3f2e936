"""
Data models for the simple bank system.

This module contains the account entity used by the session.
"""

import decimal
import random
from dataclasses import dataclass, field
from decimal import Decimal

from .config import DEFAULT_CONFIG


def generate_account_id(max_account_id: int = DEFAULT_CONFIG.max_account_id) -> int:
    """Draw a random non-negative account number."""
    return random.randint(0, max_account_id)


def to_decimal(amount) -> Decimal:
    """Coerce an int, float or str amount to Decimal."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def is_representable(amount: Decimal) -> bool:
    """Check that the amount is finite and fits the current decimal context."""
    return amount.is_finite() and amount.adjusted() <= decimal.getcontext().Emax


def format_amount(amount: Decimal) -> str:
    """Render an amount with at least one fractional digit (150.0, 150.5)."""
    text = format(to_decimal(amount).normalize(), 'f')
    if '.' not in text:
        text += '.0'
    return text


@dataclass
class Account:
    """Represents a bank account."""

    holder_name: str = ""
    balance: Decimal = Decimal('0.00')
    account_id: int = field(default_factory=generate_account_id)

    def __post_init__(self):
        """Initialize account after creation."""
        # Ensure balance is a Decimal
        self.balance = to_decimal(self.balance)

        if self.balance < 0:
            raise ValueError("Initial deposit cannot be negative.")

        if self.account_id < 0:
            raise ValueError("Account number cannot be negative")

    def can_withdraw(self, amount: Decimal) -> bool:
        """Check if withdrawal is possible without going below zero."""
        amount = to_decimal(amount)
        return self.balance - amount >= 0

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw money from account."""
        amount = to_decimal(amount)

        if amount <= 0:
            return False

        if not self.can_withdraw(amount):
            return False

        self.balance -= amount
        return True

    def deposit(self, amount: Decimal) -> bool:
        """Deposit money to account."""
        amount = to_decimal(amount)

        if amount <= 0:
            return False

        self.balance += amount
        return True
