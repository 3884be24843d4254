"""
Transfer Service Module

Moves funds between two accounts as one logical unit: withdraw from the
source, deposit into the destination, then record a descriptive entry on
each side.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Optional

from .accounts import Account, ZERO
from .amounts import AmountLike, to_amount
from .errors import InvalidArgumentError, InsufficientFundsError
from .records import transfer_in_description, transfer_out_description
from .logging_config import get_logger, log_action


@dataclass(frozen=True)
class TransferReceipt:
    """Outcome of a completed transfer"""
    source_id: int
    destination_id: int
    amount: Decimal
    source_balance: Decimal
    destination_balance: Decimal


class TransferService:
    """
    Coordinates two-account transfers

    No combined lock is taken over both accounts. The withdrawal is atomic
    on the source and the deposit is atomic on the destination; if the
    deposit ever fails, the source is credited back before the error is
    re-raised.
    """

    def __init__(self):
        self.logger = get_logger("banco.transfers")

    def transfer(
        self,
        source: Optional[Account],
        destination: Optional[Account],
        amount: AmountLike
    ) -> TransferReceipt:
        """
        Transfer funds from source to destination

        Raises:
            InvalidArgumentError: If an account is missing, the amount is not
                positive, or source and destination are the same account
            InsufficientFundsError: If the source cannot cover the amount;
                neither account is changed
        """
        if source is None or destination is None:
            raise InvalidArgumentError("Both source and destination accounts are required")
        value = to_amount(amount)
        if value <= ZERO:
            raise InvalidArgumentError("Amount must be greater than 0")
        # Identity, not id: accounts from separate directories may share an id
        if source is destination:
            raise InvalidArgumentError("Cannot transfer to the same account")

        try:
            source_balance = source.withdraw(value)
        except InsufficientFundsError as e:
            log_action(
                self.logger, "warning",
                f"Transfer from {source.id} to {destination.id} rejected: {e}",
                action="transfer_failed", resource=f"account:{source.id}",
                extra={"destination": destination.id, "amount": str(value)}
            )
            raise

        try:
            destination_balance = destination.deposit(value)
        except Exception:
            source.deposit(value)
            self.logger.error(
                f"Deposit leg of transfer {source.id} -> {destination.id} failed, source credited back",
                exc_info=True
            )
            raise

        source.record_transaction(transfer_out_description(destination.id), -value)
        destination.record_transaction(transfer_in_description(source.id), value)

        log_action(
            self.logger, "info",
            f"Transferred {value} from {source.id} to {destination.id}",
            action="transfer", resource=f"account:{source.id}",
            extra={"destination": destination.id, "amount": str(value)}
        )

        return TransferReceipt(
            source_id=source.id,
            destination_id=destination.id,
            amount=value,
            source_balance=source_balance,
            destination_balance=destination_balance
        )
