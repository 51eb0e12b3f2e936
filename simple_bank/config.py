"""
Configuration for the simple bank system.

Defaults reproduce the standard front desk output; tests and embedding
applications can pass their own instance.
"""

from dataclasses import dataclass


@dataclass
class BankConfig:
    """Display and account numbering settings."""

    bank_name: str = "Simple Bank System"
    currency_symbol: str = "$"
    max_account_id: int = 2**31 - 1

    def __post_init__(self):
        if self.max_account_id < 0:
            raise ValueError("max_account_id cannot be negative")


DEFAULT_CONFIG = BankConfig()
