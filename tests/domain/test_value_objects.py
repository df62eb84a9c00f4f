"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(1050)
        assert m.amount == 1050
        assert m.currency == "EUR"

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(-1)

    def test_non_integer_amount_rejected(self):
        with pytest.raises(ValidationError, match="integer of minor units"):
            Money(Decimal("10.5"))

    def test_addition(self):
        assert Money(1000) + Money(550) == Money(1550)

    def test_multiplication_by_int(self):
        assert Money(250) * 3 == Money(750)

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(1000, "EUR") + Money(500, "USD")

    def test_major_units(self):
        assert Money(850).major == Decimal("8.50")

    def test_str_divides_by_100_with_two_decimals(self):
        assert str(Money(800)) == "8.00 €"
        assert str(Money(5)) == "0.05 €"
        assert str(Money(123456)) == "1234.56 €"

    def test_str_unknown_currency_uses_code(self):
        assert str(Money(100, "CHF")) == "1.00 CHF"

    def test_not_orderable(self):
        # Catalog price sorting goes through Product.unit_amount.
        with pytest.raises(TypeError):
            Money(500) < Money(1000)


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(-3)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    def test_str(self):
        assert str(Quantity(7)) == "7"
