from decimal import Decimal

import pytest

from booking_desk.shared.domain import Currency, Money


class TestMoney:
    def test_usd(self):
        money = Money.usd("50.0")
        assert money.amount == Decimal("50.0")
        assert money.currency == Currency("usd")
        assert str(money) == "50.00 USD"

    def test_negative_amount_raises(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            Money.usd(-1)
