"""
Тесты для Money и rational helpers

Проверяемые инварианты:
1. amount — int в minor units, никогда не отрицательный
2. Арифметика только между одинаковыми валютами
3. scale() округляет один раз, half-up
4. Float → Fraction через shortest repr (без binary drift)
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.domain.money import Money
from src.core.errors import InvalidAmount, PricingCoreError
from src.core.math.rational import is_finite_number, round_half_up, to_rational


# =============================================================================
# ТЕСТЫ: Rational conversion & rounding
# =============================================================================


class TestToRational:
    def test_float_uses_shortest_repr(self):
        assert to_rational(1.2) == Fraction(6, 5)
        assert to_rational(0.1) == Fraction(1, 10)
        assert to_rational(0.15) == Fraction(3, 20)

    def test_exact_inputs_pass_through(self):
        assert to_rational(3) == Fraction(3)
        assert to_rational(Decimal("1.5")) == Fraction(3, 2)
        assert to_rational(Fraction(1, 3)) == Fraction(1, 3)
        assert to_rational(" 0.08 ") == Fraction(2, 25)

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), "abc", "inf", True],
    )
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            to_rational(value)

    def test_is_finite_number_rejects_bool_and_objects(self):
        assert is_finite_number(1)
        assert is_finite_number(1.5)
        assert not is_finite_number(False)
        assert not is_finite_number(None)
        assert not is_finite_number("1")


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (Fraction(5, 2), 3),
            (Fraction(3, 2), 2),
            (Fraction(49, 10), 5),
            (Fraction(41, 10), 4),
            (Fraction(0), 0),
            (Fraction(-5, 2), -3),
        ],
    )
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


# =============================================================================
# ТЕСТЫ: Money construction
# =============================================================================


class TestMoneyConstruction:
    def test_default_currency(self):
        assert Money(100).currency == "TZS"

    def test_zero(self):
        zero = Money.zero("USD")
        assert zero.amount == 0
        assert zero.currency == "USD"
        assert zero == Money(0, "USD")

    def test_negative_amount_rejected(self):
        with pytest.raises(InvalidAmount):
            Money(-1)

    @pytest.mark.parametrize("amount", [1.5, 100.0, Decimal("100"), "100", True])
    def test_non_int_amount_rejected(self, amount):
        with pytest.raises(InvalidAmount):
            Money(amount)

    @pytest.mark.parametrize("currency", ["tzs", "TZ", "TZSX", "", 840])
    def test_bad_currency_rejected(self, currency):
        with pytest.raises(InvalidAmount):
            Money(100, currency)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            Money(-5)
        assert issubclass(InvalidAmount, PricingCoreError)

    def test_immutable(self):
        money = Money(100)
        with pytest.raises(AttributeError):
            money.amount = 200  # type: ignore[misc]

    def test_value_equality_and_hash(self):
        assert Money(100, "TZS") == Money(100, "TZS")
        assert Money(100, "TZS") != Money(100, "USD")
        assert len({Money(1), Money(1), Money(2)}) == 2


# =============================================================================
# ТЕСТЫ: Money arithmetic
# =============================================================================


class TestMoneyArithmetic:
    def test_add_same_currency(self):
        assert Money(2700) + Money(15300) == Money(18000)

    def test_add_currency_mismatch(self):
        with pytest.raises(InvalidAmount):
            Money(1, "TZS") + Money(1, "USD")

    def test_subtract(self):
        assert Money(18000) - Money(2700) == Money(15300)
        assert Money(5) - Money(5) == Money(0)

    def test_subtract_below_zero_rejected(self):
        with pytest.raises(InvalidAmount):
            Money(1) - Money(2)

    def test_subtract_currency_mismatch(self):
        with pytest.raises(InvalidAmount):
            Money(10, "KES") - Money(1, "TZS")

    def test_comparisons(self):
        assert Money(1) < Money(2)
        assert Money(2) <= Money(2)
        assert Money(3) > Money(2)
        assert Money(3) >= Money(3)

    def test_compare_currency_mismatch(self):
        with pytest.raises(InvalidAmount):
            Money(1, "TZS") < Money(2, "USD")

    def test_scale_rounds_half_up_once(self):
        assert Money(3).scale("0.5") == Money(2)
        assert Money(18000).scale(0.15) == Money(2700)
        assert Money(18001).scale(Fraction(3, 20)) == Money(2700)
        assert Money(18010).scale(Fraction(3, 20)) == Money(2702)

    def test_scale_by_zero(self):
        assert Money(18000, "USD").scale(0) == Money(0, "USD")

    @pytest.mark.parametrize("multiplier", [-0.1, float("nan"), float("inf"), "x"])
    def test_scale_invalid_multiplier(self, multiplier):
        with pytest.raises(InvalidAmount):
            Money(100).scale(multiplier)

    def test_scale_error_keeps_cause(self):
        with pytest.raises(InvalidAmount) as exc_info:
            Money(100).scale("x")
        assert isinstance(exc_info.value.__cause__, ValueError)
