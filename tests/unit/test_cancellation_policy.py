"""Тесты для CancellationPolicyEngine

Покрытие:
- FULL / PARTIAL / NONE сценарии (24h / 12h / 50%)
- Усечение часов к нулю на границах окон
- Отмена после начала услуги → NONE
- Монотонность возврата
- InvalidWindow
"""

from datetime import datetime, timedelta, timezone
from fractions import Fraction

import pytest

from src.core.domain.cancellation import CancellationWindow, RefundReason
from src.core.domain.money import Money
from src.core.errors import InvalidWindow
from src.settlement.cancellation_policy import evaluate_cancellation, hours_until_start


BOOKING_START = datetime(2026, 3, 14, 10, 0, tzinfo=timezone.utc)
PRICE = Money(18000)


@pytest.fixture
def window():
    return CancellationWindow(
        free_cancellation_hours=24, partial_refund_hours=12, refund_percentage=50
    )


def cancel_before(window, delta: timedelta, price: Money = PRICE):
    return evaluate_cancellation(BOOKING_START, BOOKING_START - delta, window, price)


# =============================================================================
# ТЕСТЫ: Scenarios
# =============================================================================


class TestEvaluateCancellation:
    def test_full_refund(self, window):
        outcome = cancel_before(window, timedelta(hours=30))
        assert outcome.reason is RefundReason.FULL
        assert outcome.refund == Money(18000)
        assert outcome.hours_until_start == 30

    def test_partial_refund(self, window):
        outcome = cancel_before(window, timedelta(hours=15))
        assert outcome.reason is RefundReason.PARTIAL
        assert outcome.refund == Money(9000)

    def test_no_refund(self, window):
        outcome = cancel_before(window, timedelta(hours=2))
        assert outcome.reason is RefundReason.NONE
        assert outcome.refund == Money(0)

    def test_zero_refund_keeps_currency(self, window):
        outcome = cancel_before(window, timedelta(hours=1), Money(500, "KES"))
        assert outcome.refund == Money(0, "KES")

    def test_partial_refund_rounds_half_up(self, window):
        outcome = cancel_before(window, timedelta(hours=13), Money(18001))
        assert outcome.refund == Money(9001)

    def test_idempotent(self, window):
        assert cancel_before(window, timedelta(hours=15)) == cancel_before(
            window, timedelta(hours=15)
        )


class TestWindowBoundaries:
    def test_exactly_free_hours_is_full(self, window):
        assert cancel_before(window, timedelta(hours=24)).reason is RefundReason.FULL

    def test_just_under_free_hours_truncates_to_partial(self, window):
        outcome = cancel_before(window, timedelta(hours=23, minutes=59, seconds=59))
        assert outcome.hours_until_start == 23
        assert outcome.reason is RefundReason.PARTIAL

    def test_exactly_partial_hours_is_partial(self, window):
        assert cancel_before(window, timedelta(hours=12)).reason is RefundReason.PARTIAL

    def test_just_under_partial_hours_is_none(self, window):
        outcome = cancel_before(window, timedelta(hours=11, minutes=59))
        assert outcome.reason is RefundReason.NONE

    def test_refund_non_increasing_as_start_approaches(self, window):
        refunds = [
            cancel_before(window, timedelta(hours=h)).refund.amount for h in range(48, -1, -1)
        ]
        assert all(a >= b for a, b in zip(refunds, refunds[1:]))
        assert refunds[0] == PRICE.amount
        assert refunds[-1] == 0


class TestLateCancellation:
    def test_after_start_is_none(self, window):
        outcome = evaluate_cancellation(
            BOOKING_START, BOOKING_START + timedelta(hours=3), window, PRICE
        )
        assert outcome.reason is RefundReason.NONE
        assert outcome.refund == Money(0)
        assert outcome.hours_until_start == -3

    def test_after_start_with_zero_hour_window(self):
        window = CancellationWindow(0, 0, 100)
        outcome = evaluate_cancellation(
            BOOKING_START, BOOKING_START + timedelta(minutes=30), window, PRICE
        )
        assert outcome.reason is RefundReason.NONE

    def test_at_start_with_zero_hour_window_is_full(self):
        window = CancellationWindow(0, 0, 100)
        outcome = evaluate_cancellation(BOOKING_START, BOOKING_START, window, PRICE)
        assert outcome.reason is RefundReason.FULL


class TestHoursUntilStart:
    @pytest.mark.parametrize(
        "delta,expected",
        [
            (timedelta(hours=5), 5),
            (timedelta(hours=5, minutes=59), 5),
            (timedelta(minutes=59), 0),
            (timedelta(0), 0),
            (timedelta(minutes=-30), 0),
            (timedelta(minutes=-90), -1),
        ],
    )
    def test_truncates_toward_zero(self, delta, expected):
        assert hours_until_start(BOOKING_START, BOOKING_START - delta) == expected

    def test_naive_and_aware_mix_rejected(self):
        with pytest.raises(InvalidWindow):
            hours_until_start(BOOKING_START, datetime(2026, 3, 13, 10, 0))

    def test_naive_timestamps_supported(self):
        assert hours_until_start(datetime(2026, 3, 14, 10), datetime(2026, 3, 13, 10)) == 24


# =============================================================================
# ТЕСТЫ: InvalidWindow
# =============================================================================


class TestCancellationWindow:
    def test_refund_fraction(self, window):
        assert window.refund_percentage == Fraction(50)
        assert window.refund_fraction == Fraction(1, 2)

    def test_free_below_partial(self):
        with pytest.raises(InvalidWindow):
            CancellationWindow(12, 24, 50)

    def test_negative_partial(self):
        with pytest.raises(InvalidWindow):
            CancellationWindow(24, -1, 50)

    @pytest.mark.parametrize("pct", [-1, 100.5, float("nan"), "half"])
    def test_percentage_out_of_range(self, pct):
        with pytest.raises(InvalidWindow):
            CancellationWindow(24, 12, pct)

    def test_percentage_error_keeps_cause(self):
        with pytest.raises(InvalidWindow) as exc_info:
            CancellationWindow(24, 12, 150)
        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.parametrize("hours", [24.0, "24", True])
    def test_hours_must_be_int(self, hours):
        with pytest.raises(InvalidWindow):
            CancellationWindow(hours, 12, 50)

    def test_equal_hours_allowed(self):
        window = CancellationWindow(6, 6, 25)
        outcome = evaluate_cancellation(
            BOOKING_START, BOOKING_START - timedelta(hours=6), window, PRICE
        )
        assert outcome.reason is RefundReason.FULL

    def test_window_type_checked(self):
        with pytest.raises(InvalidWindow):
            evaluate_cancellation(BOOKING_START, BOOKING_START, {"free": 24}, PRICE)  # type: ignore[arg-type]
