"""
Interest Service Module

Applies a kind-dependent interest credit to an account. Each posting is a
regular deposit followed by a descriptive "interest applied" record, so one
call adds two history entries.
"""

from decimal import Decimal
from dataclasses import dataclass
from typing import Optional

from .accounts import Account, AccountKind, ZERO
from .amounts import format_rate, to_amount
from .config import get_config
from .records import interest_description
from .logging_config import get_logger, log_action


@dataclass(frozen=True)
class InterestPosting:
    """Result of one interest application"""
    account_id: int
    rate: Decimal
    interest: Decimal
    balance: Decimal

    @property
    def posted(self) -> bool:
        return self.interest > ZERO


class InterestService:
    """Calculates and posts interest by account kind"""

    def __init__(
        self,
        savings_rate: Optional[Decimal] = None,
        checking_rate: Optional[Decimal] = None
    ):
        config = get_config()
        self.rates = {
            AccountKind.SAVINGS: to_amount(
                savings_rate if savings_rate is not None else config.savings_interest_rate
            ),
            AccountKind.CHECKING: to_amount(
                checking_rate if checking_rate is not None else config.checking_interest_rate
            ),
        }
        self.logger = get_logger("banco.interest")

    def rate_for(self, kind: AccountKind) -> Decimal:
        return self.rates[kind]

    def apply_interest(self, account: Account) -> InterestPosting:
        """
        Credit balance * rate to the account

        The balance read and the postings happen under the account lock.
        An account with zero balance earns nothing and gets no records.
        """
        rate = self.rate_for(account.kind)

        with account.atomic():
            interest = account.balance * rate
            if interest <= ZERO:
                return InterestPosting(account.id, rate, ZERO, account.balance)

            new_balance = account.deposit(interest)
            account.record_transaction(interest_description(rate), interest)

        log_action(
            self.logger, "info",
            f"Interest of {interest} ({format_rate(rate)}%) applied to account {account.id}",
            action="interest_applied", resource=f"account:{account.id}",
            extra={"rate": str(rate), "interest": str(interest), "balance": str(new_balance)}
        )
        return InterestPosting(account.id, rate, interest, new_balance)
