"""
Account Directory Module

Creates accounts with sequential identifiers and keeps them in creation
order for lookup and listing.
"""

from typing import Dict, Iterator, Optional, Tuple, Union
import threading

from .accounts import Account, AccountKind
from .amounts import AmountLike
from .config import get_config
from .logging_config import get_logger, log_action


class AccountDirectory:
    """
    Registry of accounts keyed by id

    Ids are strictly increasing and never reused. Id assignment and
    insertion happen under one lock, so concurrent creates cannot collide.
    """

    def __init__(self, first_account_id: Optional[int] = None):
        if first_account_id is None:
            first_account_id = get_config().first_account_id
        self._next_id = first_account_id
        self._accounts: Dict[int, Account] = {}
        self._lock = threading.Lock()
        self.logger = get_logger("banco.directory")

    def create(
        self,
        owner: str,
        kind: Union[AccountKind, str],
        initial_balance: AmountLike = 0
    ) -> Account:
        """
        Open a new account with the next sequential id

        Raises:
            InvalidArgumentError: If owner, kind or initial balance are invalid
        """
        with self._lock:
            # A rejected account does not consume an id
            account = Account(self._next_id, owner, kind, initial_balance)
            self._accounts[account.id] = account
            self._next_id += 1

        log_action(
            self.logger, "info", f"Account {account.id} created",
            action="account_created", resource=f"account:{account.id}",
            extra=account.to_dict()
        )
        return account

    def lookup(self, account_id) -> Optional[Account]:
        """Get account by id, or None if there is none"""
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            return None
        with self._lock:
            return self._accounts.get(account_id)

    def list(self) -> Tuple[Account, ...]:
        """All accounts in creation order"""
        with self._lock:
            return tuple(self._accounts.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account_id) -> bool:
        return self.lookup(account_id) is not None

    def __iter__(self) -> Iterator[Account]:
        return iter(self.list())
