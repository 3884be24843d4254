"""
Banco Ledger

An in-memory banking ledger with per-account locking, all-or-nothing
transfers, interest accrual and an append-only transaction history.
"""

from .errors import BancoError, InvalidArgumentError, InsufficientFundsError
from .records import TransactionRecord
from .accounts import Account, AccountKind
from .directory import AccountDirectory
from .transfers import TransferService, TransferReceipt
from .interest import InterestService, InterestPosting
from .outcomes import OperationResult, attempt

__version__ = "1.0.0"

__all__ = [
    "BancoError",
    "InvalidArgumentError",
    "InsufficientFundsError",
    "TransactionRecord",
    "Account",
    "AccountKind",
    "AccountDirectory",
    "TransferService",
    "TransferReceipt",
    "InterestService",
    "InterestPosting",
    "OperationResult",
    "attempt",
]
