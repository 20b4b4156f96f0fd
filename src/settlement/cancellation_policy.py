"""CancellationPolicyEngine — refund eligibility from booking timing.

hours_until_start = (booking_start - request_time) in whole hours, truncated
toward zero.

    hours >= free_cancellation_hours  → FULL, refund = final price
    hours >= partial_refund_hours     → PARTIAL, refund = round(price * pct / 100)
    otherwise                         → NONE, refund = 0

A request after the booking start is NONE: a late cancellation is a valid,
unfavorable outcome, not an input error.
"""

from datetime import datetime, timedelta
from typing import Final

from src.core.domain.cancellation import CancellationOutcome, CancellationWindow, RefundReason
from src.core.domain.money import Money
from src.core.errors import InvalidWindow

ONE_HOUR: Final[timedelta] = timedelta(hours=1)


def hours_until_start(booking_start: datetime, request_time: datetime) -> int:
    """Whole hours from request to start, truncated toward zero.

    Negative when the request comes after the start.

    Raises:
        InvalidWindow: если один timestamp naive, а другой timezone-aware
    """
    if (booking_start.tzinfo is None) != (request_time.tzinfo is None):
        raise InvalidWindow(
            "booking_start and request_time must both be naive or both be "
            "timezone-aware"
        )
    delta = booking_start - request_time
    # timedelta // timedelta floors; truncate on the magnitude instead
    whole_hours = abs(delta) // ONE_HOUR
    return -whole_hours if delta < timedelta(0) else whole_hours


def evaluate_cancellation(
    booking_start: datetime,
    request_time: datetime,
    window: CancellationWindow,
    final_price: Money,
) -> CancellationOutcome:
    """Refund and reason for a cancellation requested at `request_time`."""
    if not isinstance(window, CancellationWindow):
        raise InvalidWindow(
            f"window must be CancellationWindow, got {type(window).__name__}"
        )

    hours = hours_until_start(booking_start, request_time)

    # Service already started: even a zero-hour window grants nothing
    if request_time > booking_start:
        return CancellationOutcome(
            refund=Money.zero(final_price.currency),
            reason=RefundReason.NONE,
            hours_until_start=hours,
        )

    if hours >= window.free_cancellation_hours:
        return CancellationOutcome(
            refund=final_price, reason=RefundReason.FULL, hours_until_start=hours
        )

    if hours >= window.partial_refund_hours:
        return CancellationOutcome(
            refund=final_price.scale(window.refund_fraction),
            reason=RefundReason.PARTIAL,
            hours_until_start=hours,
        )

    return CancellationOutcome(
        refund=Money.zero(final_price.currency),
        reason=RefundReason.NONE,
        hours_until_start=hours,
    )
