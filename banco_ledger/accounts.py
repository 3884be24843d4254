"""
Account Management Module

An Account owns its balance and its ordered transaction history. Deposits,
withdrawals and recorded transactions are the only ways to change either,
and each of them runs under a lock private to the account, so concurrent
operations on the same account are serialized while different accounts
never block one another.
"""

from decimal import Decimal
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Tuple, Union
from enum import Enum
import threading

from .amounts import AmountLike, format_amount, to_amount
from .errors import InvalidArgumentError, InsufficientFundsError
from .records import TransactionRecord, OPENING, DEPOSIT, WITHDRAWAL
from .logging_config import get_logger, log_action


ZERO = Decimal('0')


class AccountKind(Enum):
    """Banking product kinds"""
    CHECKING = "checking"
    SAVINGS = "savings"

    @classmethod
    def parse(cls, value: Union['AccountKind', str]) -> 'AccountKind':
        """
        Resolve an account kind from the enum itself, its value or name
        (case-insensitive), or the menu codes "1" (checking) and "2" (savings)

        Raises:
            InvalidArgumentError: If the kind is not recognized
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            menu_codes = {"1": cls.CHECKING, "2": cls.SAVINGS}
            if key in menu_codes:
                return menu_codes[key]
            for kind in cls:
                if key == kind.value:
                    return kind
        raise InvalidArgumentError(f"Unrecognized account kind: {value!r}")


class Account:
    """
    Bank account holding a non-negative balance and an append-only history

    A negative initial balance is stored as zero, while the opening record
    keeps the amount exactly as requested.
    """

    def __init__(
        self,
        account_id: int,
        owner: str,
        kind: Union[AccountKind, str],
        initial_balance: AmountLike = 0
    ):
        if not isinstance(owner, str) or not owner.strip():
            raise InvalidArgumentError("Owner name must not be empty")
        requested = to_amount(initial_balance)

        self._id = account_id
        self._owner = owner.strip()
        self._kind = AccountKind.parse(kind)
        self._lock = threading.RLock()
        self._balance = max(ZERO, requested)
        self._history: List[TransactionRecord] = [TransactionRecord(OPENING, requested)]
        self.logger = get_logger("banco.accounts")

    @property
    def id(self) -> int:
        return self._id

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def kind(self) -> AccountKind:
        return self._kind

    @property
    def balance(self) -> Decimal:
        """Current balance"""
        with self._lock:
            return self._balance

    @property
    def history(self) -> Tuple[TransactionRecord, ...]:
        """Snapshot of the ledger in chronological order"""
        with self._lock:
            return tuple(self._history)

    @contextmanager
    def atomic(self) -> Iterator['Account']:
        """Hold this account's lock across several operations"""
        with self._lock:
            yield self

    def deposit(self, amount: AmountLike) -> Decimal:
        """
        Credit the account

        Args:
            amount: Strictly positive amount to add

        Returns:
            The balance after the deposit

        Raises:
            InvalidArgumentError: If amount is not positive
        """
        value = self._positive(amount)
        with self._lock:
            self._balance += value
            self._history.append(TransactionRecord(DEPOSIT, value))
            new_balance = self._balance

        log_action(
            self.logger, "debug", f"Deposited {value} into account {self._id}",
            action="deposit", resource=f"account:{self._id}",
            extra={"amount": str(value), "balance": str(new_balance)}
        )
        return new_balance

    def withdraw(self, amount: AmountLike) -> Decimal:
        """
        Debit the account

        Args:
            amount: Strictly positive amount, no larger than the balance

        Returns:
            The balance after the withdrawal

        Raises:
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        value = self._positive(amount)
        with self._lock:
            if value > self._balance:
                available = self._balance
                log_action(
                    self.logger, "warning", f"Withdrawal rejected for account {self._id}",
                    action="withdraw_rejected", resource=f"account:{self._id}",
                    extra={"requested": str(value), "available": str(available)}
                )
                raise InsufficientFundsError(value, available, account_id=self._id)
            self._balance -= value
            self._history.append(TransactionRecord(WITHDRAWAL, -value))
            new_balance = self._balance

        log_action(
            self.logger, "debug", f"Withdrew {value} from account {self._id}",
            action="withdraw", resource=f"account:{self._id}",
            extra={"amount": str(value), "balance": str(new_balance)}
        )
        return new_balance

    def record_transaction(self, description: str, amount: AmountLike) -> TransactionRecord:
        """
        Append a history entry without touching the balance

        Used by services to log the descriptive leg of a compound operation.
        Keeping balance and history consistent is the caller's job.
        """
        record = TransactionRecord(description, to_amount(amount))
        with self._lock:
            self._history.append(record)
        return record

    def to_dict(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "id": self._id,
                "owner": self._owner,
                "kind": self._kind.value,
                "balance": str(self._balance),
                "history_length": len(self._history),
            }

    def _positive(self, amount: AmountLike) -> Decimal:
        value = to_amount(amount)
        if value <= ZERO:
            raise InvalidArgumentError("Amount must be greater than 0")
        return value

    def __str__(self) -> str:
        return f"ID:{self._id} - {self._owner} ({self._kind.name}) - Saldo: {format_amount(self.balance)}"

    def __repr__(self) -> str:
        return f"Account(id={self._id!r}, owner={self._owner!r}, kind={self._kind.name})"
