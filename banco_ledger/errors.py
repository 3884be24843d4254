"""
Ledger Error Types

Every failure raised by a core ledger operation derives from BancoError.
Errors are always raised before any balance or history mutation.
"""

from decimal import Decimal
from typing import Optional


class BancoError(Exception):
    """Base class for ledger errors"""

    code = "ledger_error"


class InvalidArgumentError(BancoError, ValueError):
    """Malformed input to a core operation"""

    code = "invalid_argument"


class InsufficientFundsError(BancoError):
    """
    Withdrawal requested for more than the available balance.

    The account is left completely unchanged.
    """

    code = "insufficient_funds"

    def __init__(
        self,
        requested: Decimal,
        available: Decimal,
        account_id: Optional[int] = None,
        message: Optional[str] = None
    ):
        self.requested = requested
        self.available = available
        self.account_id = account_id
        if message is None:
            message = f"Insufficient funds: requested {requested}, available {available}"
        super().__init__(message)

    @property
    def shortfall(self) -> Decimal:
        """Amount missing to cover the request"""
        return self.requested - self.available
