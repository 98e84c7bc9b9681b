"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.value_objects import Money, to_number


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "BRL"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_float(self):
        assert Money.of(15.5).amount == Decimal("15.5")

    def test_of_factory_rejects_text(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("abc")

    def test_of_factory_rejects_infinity(self):
        with pytest.raises(ValidationError):
            Money.of("Infinity")

    def test_non_decimal_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(10)  # type: ignore[arg-type]

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_decimal(self):
        assert Money.of("2") * Decimal("1.5") == Money.of("3.0")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("2") * 1.5  # type: ignore[operator]

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "BRL") + Money(Decimal("5"), "USD")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "R$ 15,00"
        assert str(Money.of("9.5")) == "R$ 9,50"
        assert str(Money.of("1234.5")) == "R$ 1.234,50"
        assert str(Money.of("1234567.891")) == "R$ 1.234.567,89"

    def test_str_negative(self):
        assert str(Money.of("-3")) == "-R$ 3,00"

    def test_str_rounds_half_cents_up(self):
        assert str(Money.of("0.125")) == "R$ 0,13"
        assert str(Money.of("2.675")) == "R$ 2,68"
        assert str(Money.of("-0.125")) == "-R$ 0,13"

    def test_str_of_large_product(self):
        total = Money.of("99999999999999999.99") * 99999999999999999
        assert str(total).startswith("R$ 9.999.999")

    def test_of_factory_rejects_huge_amount(self):
        with pytest.raises(ValidationError, match="too large"):
            Money.of("1e50")

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")

    def test_zero(self):
        assert Money.zero().amount == 0


# ── Number coercion ──────────────────────────────────────────────────────────


class TestToNumber:

    def test_integral_string_becomes_int(self):
        assert to_number("10", "quantity") == 10
        assert isinstance(to_number("10", "quantity"), int)

    def test_integral_float_becomes_int(self):
        assert to_number(4.0, "quantity") == 4
        assert isinstance(to_number(4.0, "quantity"), int)

    def test_fractional_kept_as_decimal(self):
        assert to_number("2.5", "quantity") == Decimal("2.5")

    def test_negative_accepted(self):
        assert to_number("-3", "quantity") == -3

    def test_surrounding_whitespace_ignored(self):
        assert to_number(" 7 ", "quantity") == 7

    def test_text_rejected(self):
        with pytest.raises(ValidationError, match="Invalid quantity"):
            to_number("ten", "quantity")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError):
            to_number(True, "quantity")

    def test_eighteen_digits_accepted(self):
        assert to_number("999999999999999999", "quantity") == 999999999999999999

    def test_huge_exponent_rejected(self):
        with pytest.raises(ValidationError, match="Quantity is too large"):
            to_number("1e2000000", "quantity")

    def test_nineteen_digits_rejected(self):
        with pytest.raises(ValidationError, match="too large"):
            to_number("1000000000000000000", "quantity")

    def test_tiny_exponent_accepted(self):
        assert to_number("1e-20", "quantity") == Decimal("1e-20")
