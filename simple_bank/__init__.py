"""
Simple Bank System

An in-memory banking front desk with an interactive menu.
Supports account creation, switching accounts, deposits, withdrawals and balance checks.
"""

__version__ = "0.1.0"

from typing import Optional

from .config import BankConfig
from .models import Account
from .session import Session
from .cli import BankCLI, main


def create_session(config: Optional[BankConfig] = None) -> Session:
    """
    Create an empty Session.

    Args:
        config: Display and numbering settings, defaults when omitted

    Returns:
        Session instance
    """
    return Session(config)


__all__ = [
    "Account",
    "BankConfig",
    "BankCLI",
    "Session",
    "create_session",
    "main"
]
