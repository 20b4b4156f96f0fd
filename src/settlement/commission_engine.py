"""CommissionEngine — tier selection and provider/platform split.

Rule: the applicable rate is that of the highest threshold <= amount
(boundary inclusive). Below the lowest threshold the default rate applies.

    commission = floor(final_price * rate)
    payout     = final_price - commission

The payout is a subtraction, not a second multiplication, so
commission + payout == final_price holds exactly. Commission is rounded down:
any rounding remainder stays with the provider and the platform never takes
more than price * rate.
"""

import math
from bisect import bisect_right
from fractions import Fraction
from typing import Sequence

import structlog

from src.core.domain.commission import CommissionSchedule, CommissionSplit, CommissionTier
from src.core.domain.money import Money
from src.core.errors import InvalidAmount
from src.core.math.rational import RationalLike

logger = structlog.get_logger(__name__)


def select_commission_rate(amount: Money, schedule: CommissionSchedule) -> Fraction:
    """Rate of the highest threshold <= amount, else schedule.default_rate.

    Raises:
        InvalidAmount: если валюта суммы не совпадает с валютой порогов
    """
    if schedule.currency is not None and amount.currency != schedule.currency:
        raise InvalidAmount(
            f"Amount currency {amount.currency} does not match tier currency "
            f"{schedule.currency}"
        )

    # bisect_right: a threshold equal to the amount counts as reached
    index = bisect_right(schedule.thresholds, amount.amount) - 1
    if index < 0:
        return schedule.default_rate
    return schedule.tiers[index].rate


def split_with_schedule(final_price: Money, schedule: CommissionSchedule) -> CommissionSplit:
    """Split a quoted price using an already validated schedule."""
    rate = select_commission_rate(final_price, schedule)
    commission = Money(math.floor(final_price.amount * rate), final_price.currency)
    payout = final_price - commission

    logger.debug(
        "commission_tier_selected",
        amount=final_price.amount,
        currency=final_price.currency,
        rate=str(rate),
        commission=commission.amount,
    )
    return CommissionSplit(rate=rate, commission_amount=commission, provider_payout=payout)


def split_commission(
    final_price: Money,
    tiers: Sequence[CommissionTier],
    default_rate: RationalLike,
) -> CommissionSplit:
    """Validate the tier table, then split `final_price`.

    Raises:
        InvalidTierTable: thresholds not strictly increasing, mixed currencies,
            or a rate (default included) outside [0, 1]
        InvalidAmount: price currency differs from the threshold currency
    """
    schedule = CommissionSchedule.build(tiers, default_rate)
    return split_with_schedule(final_price, schedule)
