"""
Transaction Record Module

A TransactionRecord is one immutable ledger entry. Positive amounts are
credits, negative amounts are debits.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .amounts import format_amount, format_rate
from .config import get_config


OPENING = "opening"
DEPOSIT = "deposit"
WITHDRAWAL = "withdrawal"


def transfer_out_description(destination_id: int) -> str:
    return f"transfer out to {destination_id}"


def transfer_in_description(source_id: int) -> str:
    return f"transfer in from {source_id}"


def interest_description(rate: Decimal) -> str:
    return f"interest applied ({format_rate(rate)}%)"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TransactionRecord:
    """Immutable ledger entry"""
    description: str
    amount: Decimal
    timestamp: datetime = field(default_factory=_utcnow)

    @property
    def is_credit(self) -> bool:
        return self.amount > 0

    @property
    def is_debit(self) -> bool:
        return self.amount < 0

    def render(self, timestamp_format: Optional[str] = None) -> str:
        """Format as "[<date time>] <description>: <amount>" in local time"""
        if timestamp_format is None:
            timestamp_format = get_config().timestamp_format
        when = self.timestamp.astimezone().strftime(timestamp_format)
        return f"[{when}] {self.description}: {format_amount(self.amount)}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "amount": str(self.amount),
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        return self.render()
