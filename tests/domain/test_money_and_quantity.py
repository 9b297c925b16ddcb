"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from kitchenpos.domain.exceptions import ValidationError
from kitchenpos.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_of_factory_from_string(self):
        assert Money.of("15000").amount == Decimal("15000")

    def test_of_factory_from_int(self):
        assert Money.of(20000) == Money(Decimal("20000"))

    def test_zero_is_allowed(self):
        assert Money.of("0") == Money.zero()

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Price is required"):
            Money.of(None)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money.of(-1)

    @pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "NaN"])
    def test_non_finite_rejected(self, amount):
        with pytest.raises(ValidationError, match="finite"):
            Money.of(amount)

    def test_garbage_rejected(self):
        with pytest.raises(ValidationError, match="Invalid price"):
            Money.of("fifteen")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(15000)

    def test_exact_decimal_arithmetic(self):
        total = Money.of("0.1") + Money.of("0.2")
        assert total == Money.of("0.3")

    def test_multiplication_by_int(self):
        assert Money.of("15000") * 2 == Money.of("30000")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("1") * 1.5

    def test_comparison_operators(self):
        assert Money.of("30000") < Money.of("36000")
        assert Money.of("36000") > Money.of("35000")
        assert Money.of("30000") <= Money.of("30000")

    def test_str_uses_thousands_separator(self):
        assert str(Money.of("30000")) == "30,000"


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(2).value == 2

    def test_zero_allowed(self):
        assert Quantity(0).value == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Quantity(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity("2")
