"""
Test suite for interest module

Tests kind-dependent rates, posted amounts, and the two history entries
written per interest application.
"""

import pytest
from decimal import Decimal

from banco_ledger.accounts import Account, AccountKind
from banco_ledger.interest import InterestService, InterestPosting


class TestInterestService:
    """Test InterestService functionality"""

    def setup_method(self):
        self.service = InterestService()

    def test_default_rates(self):
        assert self.service.rate_for(AccountKind.SAVINGS) == Decimal('0.02')
        assert self.service.rate_for(AccountKind.CHECKING) == Decimal('0.005')

    def test_savings_interest(self):
        """Test savings accounts earn 2%"""
        account = Account(1, "Ana", AccountKind.SAVINGS, 100)

        posting = self.service.apply_interest(account)

        assert account.balance == Decimal('102.0')
        assert posting == InterestPosting(
            account_id=1,
            rate=Decimal('0.02'),
            interest=Decimal('2.00'),
            balance=Decimal('102.00')
        )
        assert posting.posted

    def test_checking_interest(self):
        """Test checking accounts earn 0.5%"""
        account = Account(2, "Luis", AccountKind.CHECKING, 100)

        self.service.apply_interest(account)

        assert account.balance == Decimal('100.5')

    def test_two_history_entries(self):
        """Test each application logs a deposit and a descriptive entry"""
        account = Account(1, "Ana", AccountKind.SAVINGS, 100)

        self.service.apply_interest(account)

        history = account.history
        assert len(history) == 3
        assert history[1].description == "deposit"
        assert history[1].amount == Decimal('2.00')
        assert history[2].description == "interest applied (2%)"
        assert history[2].amount == Decimal('2.00')

    def test_checking_description(self):
        account = Account(1, "Ana", AccountKind.CHECKING, 100)
        self.service.apply_interest(account)
        assert account.history[-1].description == "interest applied (0.5%)"

    def test_repeated_application_compounds(self):
        account = Account(1, "Ana", AccountKind.SAVINGS, 100)

        self.service.apply_interest(account)
        self.service.apply_interest(account)

        assert account.balance == Decimal('104.04')
        assert len(account.history) == 5

    def test_zero_balance_posts_nothing(self):
        """Test an empty account earns nothing and gets no records"""
        account = Account(1, "Ana", AccountKind.SAVINGS, 0)

        posting = self.service.apply_interest(account)

        assert posting.interest == Decimal('0')
        assert not posting.posted
        assert account.balance == Decimal('0')
        assert len(account.history) == 1

    def test_custom_rates(self):
        service = InterestService(savings_rate=Decimal('0.1'), checking_rate="0.01")
        savings = Account(1, "Ana", AccountKind.SAVINGS, 50)
        checking = Account(2, "Luis", AccountKind.CHECKING, 50)

        service.apply_interest(savings)
        service.apply_interest(checking)

        assert savings.balance == Decimal('55')
        assert checking.balance == Decimal('50.5')
        assert savings.history[-1].description == "interest applied (10%)"

    def test_rates_from_config(self, monkeypatch):
        """Test rates are read from BANCO_ environment configuration"""
        from banco_ledger import config as config_module

        monkeypatch.setenv("BANCO_SAVINGS_INTEREST_RATE", "0.03")
        monkeypatch.setattr(config_module, "config", config_module.BancoConfig())

        service = InterestService()
        assert service.rate_for(AccountKind.SAVINGS) == Decimal('0.03')
        assert service.rate_for(AccountKind.CHECKING) == Decimal('0.005')
