"""
Interactive Menu Module

Text menu driving the ledger: open accounts, move money, inspect history
and apply interest. All ledger failures are reported and the loop keeps
running.
"""

from decimal import Decimal
from typing import Callable, Optional

from rich.console import Console

from .accounts import Account, AccountKind
from .amounts import decimal_from_string, format_amount
from .directory import AccountDirectory
from .interest import InterestService
from .outcomes import attempt
from .transfers import TransferService
from .logging_config import get_logger


MENU = """
========= BANK MENU =========
1 - Create account
2 - Check balance
3 - Withdraw
4 - Deposit
5 - List accounts
6 - Transfer
7 - View history
8 - Apply interest
9 - Exit"""

EXIT_OPTION = 9


class BankConsole:
    """Menu loop over an AccountDirectory and the ledger services"""

    def __init__(
        self,
        directory: Optional[AccountDirectory] = None,
        transfers: Optional[TransferService] = None,
        interest: Optional[InterestService] = None,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None
    ):
        self.directory = directory if directory is not None else AccountDirectory()
        self.transfers = transfers if transfers is not None else TransferService()
        self.interest = interest if interest is not None else InterestService()
        self.console = console if console is not None else Console(highlight=False)
        self.input_func = input_func if input_func is not None else self.console.input
        self.logger = get_logger("banco.console")

        self._actions = {
            1: self.create_account_flow,
            2: self.balance_flow,
            3: self.withdraw_flow,
            4: self.deposit_flow,
            5: self.list_flow,
            6: self.transfer_flow,
            7: self.history_flow,
            8: self.interest_flow,
        }

    def run(self) -> None:
        """Show the menu until the user exits or input ends"""
        try:
            while True:
                self.say(MENU)
                line = self.ask("Select option: ")
                if not line:
                    continue

                try:
                    option = int(line)
                except ValueError:
                    self.say("Invalid option.")
                    continue

                if option == EXIT_OPTION:
                    self.say("Exiting...")
                    return

                action = self._actions.get(option)
                if action is None:
                    self.say("Invalid option.")
                    continue
                action()
        except EOFError:
            self.logger.debug("Input closed, leaving menu")
            self.say("Exiting...")

    def say(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False)

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def create_account_flow(self) -> None:
        owner = self.ask("Owner name: ")
        if not owner:
            self.say("Owner name cannot be empty.")
            return

        choice = self.ask("Kind (1=Checking, 2=Savings): ")
        parsed = attempt(AccountKind.parse, choice)
        account_kind = parsed.value if parsed.ok else AccountKind.CHECKING

        amount = self._read_amount("Initial balance: ")
        if amount is None:
            self.say("Invalid initial balance.")
            return

        result = attempt(self.directory.create, owner, account_kind, amount)
        if result.ok:
            self.say(f"Account created: {result.value}")
        else:
            self.say(f"Error: {result.message}")

    def balance_flow(self) -> None:
        account = self._find_account()
        if account is None:
            return
        self.say(f"Current balance: {format_amount(account.balance)}")

    def withdraw_flow(self) -> None:
        account = self._find_account()
        if account is None:
            return

        amount = self._read_amount("Amount to withdraw: ")
        if amount is None:
            self.say("Invalid amount.")
            return

        result = attempt(account.withdraw, amount)
        if result.ok:
            self.say(f"Withdrawal successful. New balance: {format_amount(result.value)}")
        else:
            self.say(f"Error: {result.message}")

    def deposit_flow(self) -> None:
        account = self._find_account()
        if account is None:
            return

        amount = self._read_amount("Amount to deposit: ")
        if amount is None:
            self.say("Invalid amount.")
            return

        result = attempt(account.deposit, amount)
        if result.ok:
            self.say(f"Deposit successful. New balance: {format_amount(result.value)}")
        else:
            self.say(f"Error: {result.message}")

    def list_flow(self) -> None:
        accounts = self.directory.list()
        if not accounts:
            self.say("No accounts.")
            return
        for account in accounts:
            self.say(str(account))

    def transfer_flow(self) -> None:
        source_id = self._read_id("Source account ID: ")
        if source_id is None:
            return
        destination_id = self._read_id("Destination account ID: ")
        if destination_id is None:
            return

        source = self.directory.lookup(source_id)
        destination = self.directory.lookup(destination_id)
        if source is None or destination is None:
            self.say("One of the accounts does not exist.")
            return

        amount = self._read_amount("Amount to transfer: ")
        if amount is None:
            self.say("Invalid amount.")
            return

        result = attempt(self.transfers.transfer, source, destination, amount)
        if result.ok:
            self.say("Transfer successful.")
        else:
            self.say(f"Transfer error: {result.message}")

    def history_flow(self) -> None:
        account = self._find_account()
        if account is None:
            return
        self.say("Transaction history:")
        for record in account.history:
            self.say(str(record))

    def interest_flow(self) -> None:
        account = self._find_account()
        if account is None:
            return
        posting = self.interest.apply_interest(account)
        self.say(f"Interest applied. New balance: {format_amount(posting.balance)}")

    def _read_id(self, prompt: str) -> Optional[int]:
        text = self.ask(prompt)
        try:
            return int(text)
        except ValueError:
            self.say("Invalid ID.")
            return None

    def _find_account(self) -> Optional[Account]:
        account_id = self._read_id("Account ID: ")
        if account_id is None:
            return None
        account = self.directory.lookup(account_id)
        if account is None:
            self.say("Account not found.")
        return account

    def _read_amount(self, prompt: str) -> Optional[Decimal]:
        result = attempt(decimal_from_string, self.ask(prompt))
        return result.value if result.ok else None
