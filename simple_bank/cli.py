"""
CLI interface for the simple bank system.

This module provides the interactive menu loop used at the front desk.
"""

import click
import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from .config import BankConfig, DEFAULT_CONFIG
from .models import is_representable
from .session import NO_ACCOUNTS_AVAILABLE, Session

NUMERIC_ONLY = "\nInput only numeric values\n"

MENU_ITEMS = (
    "Create Account",
    "Switch Account",
    "Deposit Money",
    "Withdraw Money",
    "Check Balance",
    "Exit",
)


def parse_integer(value: str) -> int:
    """Parse a menu choice or account number."""
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"Invalid number: {value}")


def parse_amount(value: str, currency_symbol: str = "$") -> Decimal:
    """Parse money input such as "100", "$1,250.50" or "1e3"."""
    try:
        # Remove currency symbol and commas
        clean_str = value.replace(currency_symbol, '').replace(',', '').strip()
        amount = Decimal(clean_str)
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid amount: {value}")

    if not is_representable(amount):
        raise ValueError(f"Invalid amount: {value}")
    return amount


class ConsoleInput:
    """Line reader over the terminal, released once by the exit action."""

    def __init__(self):
        self.closed = False

    def read(self, text: str) -> str:
        if self.closed:
            raise RuntimeError("Console input has already been released")
        return click.prompt(text, default="", show_default=False, prompt_suffix="")

    def close(self):
        """Mark the input released; click owns the underlying stdin stream."""
        self.closed = True


class BankCLI:
    """Menu controller dispatching user choices to session operations."""

    def __init__(self, session: Optional[Session] = None,
                 config: Optional[BankConfig] = None,
                 console: Optional[ConsoleInput] = None):
        """Initialize CLI with a fresh session and console input."""
        if session is not None and config is not None and config != session.config:
            raise ValueError("config must match the session's config")
        self.config = session.config if session is not None else (config or DEFAULT_CONFIG)
        self.session = session or Session(self.config)
        self.console = console or ConsoleInput()
        self.logger = logging.getLogger(__name__)
        self.actions = {
            1: self.create_account,
            2: self.switch_account,
            3: self.deposit_money,
            4: self.withdraw_money,
            5: self.check_balance,
            6: self.exit_program,
        }

    def format_currency(self, amount: Decimal) -> str:
        """Format currency for display."""
        return self.session.format_currency(amount)

    def read_amount(self, text: str) -> Decimal:
        return parse_amount(self.console.read(text), self.config.currency_symbol)

    def show_main_menu(self) -> Optional[int]:
        """Display the menu and return the user's choice, or None for non-numeric input."""
        click.echo(f"--Welcome to {self.config.bank_name}--")
        for number, label in enumerate(MENU_ITEMS, start=1):
            click.echo(f"{number}. {label}")

        try:
            choice = parse_integer(self.console.read("Enter your choice: "))
        except ValueError:
            click.echo(NUMERIC_ONLY)
            return None

        click.echo("")
        return choice

    def create_account(self):
        """Create a new account from a holder name and an initial deposit."""
        click.echo("--Create Account Selected--")
        name = self.console.read("Enter account holder name: ")

        try:
            initial_deposit = self.read_amount("Enter initial deposit: ")
        except ValueError:
            click.echo(NUMERIC_ONLY)
            return

        had_current = self.session.current_account is not None
        try:
            account = self.session.create_account(name, initial_deposit)
        except ValueError as e:
            click.echo(f"\n{e}\n")
            return

        click.echo(f"\nAccount created successfully! Account No: {account.account_id}\n")
        if not had_current:
            click.echo(f"Current account is now set to {account.holder_name}\n")

    def switch_account(self):
        """List all accounts and switch to the one the user picks."""
        if not self.session.accounts:
            click.echo(f"{NO_ACCOUNTS_AVAILABLE}\n")
            return

        click.echo("Available Accounts:")
        for account in self.session.accounts:
            click.echo(f"Account No: {account.account_id} - {account.holder_name}")

        try:
            account_id = parse_integer(self.console.read("Enter account number to switch: "))
        except ValueError:
            click.echo(NUMERIC_ONLY)
            return

        try:
            account = self.session.switch_account(account_id)
        except ValueError as e:
            click.echo(f"{e}\n")
            return

        click.echo(f"Switched to account: {account.holder_name}\n")

    def deposit_money(self):
        """Deposit money to the current account."""
        try:
            self.session.require_current_account()
        except ValueError as e:
            click.echo(f"{e}\n")
            return

        try:
            amount = self.read_amount("Enter amount to deposit: ")
        except ValueError:
            click.echo(NUMERIC_ONLY)
            return

        try:
            new_balance = self.session.deposit(amount)
        except ValueError as e:
            click.echo(f"{e}\n")
            return

        click.echo(f"Deposit successful! New balance: {self.format_currency(new_balance)}\n")

    def withdraw_money(self):
        """Withdraw money from the current account."""
        try:
            self.session.require_current_account()
        except ValueError as e:
            click.echo(f"{e}\n")
            return

        try:
            amount = self.read_amount("Enter amount to withdraw: ")
        except ValueError:
            click.echo(NUMERIC_ONLY)
            return

        try:
            self.session.withdraw(amount)
        except ValueError as e:
            click.echo(f"{e}\n")

    def check_balance(self):
        """Display the balance of the current account."""
        try:
            balance = self.session.check_balance()
        except ValueError as e:
            click.echo(f"{e}\n")
            return

        click.echo(f"Current balance: {self.format_currency(balance)}\n")

    def exit_program(self):
        """End the session and release the console input."""
        self.session.close()
        self.console.close()
        click.echo(f"Thank you for using {self.config.bank_name}!")

    def run(self):
        """Show the menu and dispatch choices until the user exits."""
        while self.session.running:
            try:
                choice = self.show_main_menu()
                if choice is None:
                    continue

                action = self.actions.get(choice)
                if action is None:
                    self.logger.debug(f"Ignoring menu choice {choice}")
                    continue

                action()
            except click.Abort:
                self.logger.debug("Console input ended, closing session")
                click.echo("")
                self.exit_program()


@click.command()
def cli():
    """Simple Bank System front desk."""
    BankCLI().run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
