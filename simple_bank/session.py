"""
Session state for the simple bank system.

This module contains the business rules behind the front desk menu: the
account collection, the current account and the running flag.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Optional

from .config import BankConfig, DEFAULT_CONFIG
from .models import Account, format_amount, generate_account_id, is_representable, to_decimal

NO_ACCOUNT_SELECTED = "No account selected. Please create or switch to an account first."
NO_ACCOUNTS_AVAILABLE = "No accounts available. Please create an account first."
AMOUNT_OUT_OF_RANGE = "Amount is out of range."


class Session:
    """Holds the accounts of one front desk run and applies operations to them.

    Rule violations raise ``ValueError`` with the message shown to the user;
    state is never modified when an operation is rejected.
    """

    def __init__(self, config: Optional[BankConfig] = None,
                 id_generator: Optional[Callable[[], int]] = None):
        """Initialize an empty session."""
        self.config = config or DEFAULT_CONFIG
        self.accounts: List[Account] = []
        self.current_account: Optional[Account] = None
        self.running = True
        self._id_generator = id_generator or (
            lambda: generate_account_id(self.config.max_account_id))
        self.logger = logging.getLogger(__name__)

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return f"{self.config.currency_symbol}{format_amount(amount)}"

    def _check_amount(self, amount) -> Decimal:
        amount = to_decimal(amount)
        if not is_representable(amount):
            self.logger.debug(f"Rejected unrepresentable amount {amount}")
            raise ValueError(AMOUNT_OUT_OF_RANGE)
        return amount

    def _new_account_id(self) -> int:
        if len(self.accounts) > self.config.max_account_id:
            raise ValueError("No account numbers left.")

        account_id = self._id_generator()

        # Ensure account number is unique within the session
        while self.find_account(account_id) is not None:
            self.logger.debug(f"Account number {account_id} already taken, drawing again")
            account_id = self._id_generator()

        return account_id

    def find_account(self, account_id: int) -> Optional[Account]:
        """Get account by account number."""
        for account in self.accounts:
            if account.account_id == account_id:
                return account
        return None

    def create_account(self, holder_name: str, initial_deposit: Decimal = Decimal('0.00')) -> Account:
        """Open a new account; the first one opened becomes current."""
        initial_deposit = self._check_amount(initial_deposit)
        if initial_deposit < 0:
            self.logger.debug(f"Rejected negative initial deposit {initial_deposit}")
            raise ValueError("Initial deposit cannot be negative.")

        account = Account(
            holder_name=holder_name,
            balance=initial_deposit,
            account_id=self._new_account_id()
        )
        self.accounts.append(account)
        self.logger.info(f"Created account {account.account_id} for {holder_name!r}")

        if self.current_account is None:
            self.current_account = account
            self.logger.info(f"Current account set to {account.account_id}")

        return account

    def switch_account(self, account_id: int) -> Account:
        """Make the account with the given number current."""
        if not self.accounts:
            raise ValueError(NO_ACCOUNTS_AVAILABLE)

        account = self.find_account(account_id)
        if account is None:
            self.logger.debug(f"Switch to unknown account {account_id}")
            raise ValueError("Account not found!")

        self.current_account = account
        self.logger.info(f"Current account set to {account.account_id}")
        return account

    def require_current_account(self) -> Account:
        if self.current_account is None:
            raise ValueError(NO_ACCOUNT_SELECTED)
        return self.current_account

    def deposit(self, amount: Decimal) -> Decimal:
        """Deposit to the current account and return the new balance."""
        account = self.require_current_account()
        amount = self._check_amount(amount)

        try:
            accepted = account.deposit(amount)
        except ArithmeticError:
            self.logger.debug(f"Deposit of {amount} to {account.account_id} overflows the balance")
            raise ValueError(AMOUNT_OUT_OF_RANGE)

        if not accepted:
            self.logger.debug(f"Rejected deposit of {amount} to {account.account_id}")
            raise ValueError("Deposit amount needs to be a positive number.")

        self.logger.info(f"Deposited {amount} to {account.account_id}")
        return account.balance

    def withdraw(self, amount: Decimal) -> Decimal:
        """Withdraw from the current account and return the new balance."""
        account = self.require_current_account()
        amount = self._check_amount(amount)

        if amount <= 0:
            self.logger.debug(f"Rejected withdrawal of {amount} from {account.account_id}")
            raise ValueError("Withdrawal amount needs to be a positive number.")

        if not account.withdraw(amount):
            self.logger.debug(f"Insufficient funds for withdrawal of {amount} from {account.account_id}")
            raise ValueError(
                "Can't withdraw more than balance.\n"
                f"Current balance is {self.format_currency(account.balance)}"
            )

        self.logger.info(f"Withdrew {amount} from {account.account_id}")
        return account.balance

    def check_balance(self) -> Decimal:
        """Return the balance of the current account."""
        return self.require_current_account().balance

    def close(self):
        """Stop the session loop."""
        self.running = False
        self.logger.info("Session closed")
