"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from babyland.domain.exceptions import ValidationError
from babyland.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten dollars")

    def test_zero_is_allowed(self):
        assert Money.zero() == Money.of("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_infinite_amount_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            Money.of("Infinity")

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_subtraction_going_negative_rejected(self):
        with pytest.raises(ValidationError, match="negative amount"):
            Money.of("5") - Money.of("10")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_greater_than(self):
        assert Money.of("10") > Money.of("9.99")
        assert not Money.of("5") > Money.of("5")
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") > Money(Decimal("5"), "EUR")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"
        assert str(Money.of("1234.5")) == "$1,234.50"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Quantity(0)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_addition(self):
        assert Quantity(2) + Quantity(3) == Quantity(5)

    @pytest.mark.parametrize("raw, expected", [(-4, 1), (0, 1), (1, 1), (7, 7)])
    def test_clamped(self, raw, expected):
        assert Quantity.clamped(raw) == Quantity(expected)

    def test_clamped_rejects_non_integers(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity.clamped(2.5)
