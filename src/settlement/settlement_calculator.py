"""SettlementCalculator — price, commission split and refund in one record.

Orchestration order:
1. compute_price(factors)                       → final price
2. split_with_schedule(price, schedule)         → commission / provider payout
3. evaluate_cancellation(...) (if requested)    → refund + reason
4. allocation of the refund between provider and platform

Refund allocation:
- FULL:    settlement is void, provider and platform both keep 0
- PARTIAL: both sides keep their share scaled by (1 - pct/100); the platform
           share is floored, the provider absorbs the rounding remainder
- NONE:    nothing refunded, nets equal the split

All-or-nothing: the first error raised by a sub-component propagates
untouched and no partial SettlementResult is built.
"""

import math
from dataclasses import dataclass
from datetime import datetime

import structlog

from src.core.config import DEFAULT_PAYMENT_CONFIG, PaymentConfig
from src.core.domain.cancellation import CancellationWindow, RefundReason
from src.core.domain.commission import CommissionSchedule, CommissionSplit
from src.core.domain.factors import Location, PricingFactors
from src.core.domain.money import Money
from src.core.domain.settlement import SettlementResult
from src.core.errors import InvalidWindow
from src.core.math.rational import ONE
from src.settlement.cancellation_policy import evaluate_cancellation
from src.settlement.commission_engine import split_with_schedule
from src.settlement.factor_resolver import DefaultFactorResolver, FactorResolver
from src.settlement.price_calculator import compute_price, resolve_factors

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CancellationRequest:
    """Timing of a cancellation; both timestamps are supplied by the caller."""

    booking_start: datetime
    request_time: datetime


# =============================================================================
# FREE FUNCTION
# =============================================================================


def settle(
    factors: PricingFactors,
    schedule: CommissionSchedule,
    window: CancellationWindow | None = None,
    cancellation: CancellationRequest | None = None,
) -> SettlementResult:
    """Compute the settlement of one booking.

    Args:
        factors: pricing inputs
        schedule: validated commission tier table
        window: cancellation window (required when `cancellation` is given)
        cancellation: cancellation timing, None for a booking that stands

    Returns:
        SettlementResult

    Raises:
        InvalidFactor / InvalidTierTable / InvalidWindow / InvalidAmount:
            as raised by the sub-component that failed
    """
    final_price = compute_price(factors)
    split = split_with_schedule(final_price, schedule)

    if cancellation is None:
        result = _result_without_refund(final_price, split, RefundReason.NOT_CANCELLED)
    else:
        if window is None:
            raise InvalidWindow("A cancellation window is required to settle a cancellation")
        outcome = evaluate_cancellation(
            cancellation.booking_start,
            cancellation.request_time,
            window,
            final_price,
        )
        if outcome.reason is RefundReason.FULL:
            result = SettlementResult(
                final_price=final_price,
                commission_rate=split.rate,
                commission_amount=split.commission_amount,
                provider_payout=split.provider_payout,
                refund=outcome.refund,
                refund_reason=RefundReason.FULL,
                net_provider_payout=Money.zero(final_price.currency),
                net_platform_fee=Money.zero(final_price.currency),
            )
        elif outcome.reason is RefundReason.PARTIAL:
            retained = ONE - window.refund_fraction
            net_fee = Money(
                math.floor(split.commission_amount.amount * retained),
                final_price.currency,
            )
            net_payout = final_price - outcome.refund - net_fee
            result = SettlementResult(
                final_price=final_price,
                commission_rate=split.rate,
                commission_amount=split.commission_amount,
                provider_payout=split.provider_payout,
                refund=outcome.refund,
                refund_reason=RefundReason.PARTIAL,
                net_provider_payout=net_payout,
                net_platform_fee=net_fee,
            )
        else:
            result = _result_without_refund(
                final_price, split, RefundReason.NONE, refund=outcome.refund
            )

    logger.debug(
        "settlement_computed",
        currency=result.currency,
        final_price=result.final_price.amount,
        commission=result.commission_amount.amount,
        refund_reason=result.refund_reason.value,
        refund=None if result.refund is None else result.refund.amount,
    )
    return result


def _result_without_refund(
    final_price: Money,
    split: CommissionSplit,
    reason: RefundReason,
    refund: Money | None = None,
) -> SettlementResult:
    return SettlementResult(
        final_price=final_price,
        commission_rate=split.rate,
        commission_amount=split.commission_amount,
        provider_payout=split.provider_payout,
        refund=refund,
        refund_reason=reason,
        net_provider_payout=split.provider_payout,
        net_platform_fee=split.commission_amount,
    )


# =============================================================================
# CONFIGURED CALCULATOR
# =============================================================================


class SettlementCalculator:
    """Settlement with tier table, window and factor policy from PaymentConfig.

    The configuration is frozen; a reload means building a new calculator.
    """

    def __init__(
        self,
        config: PaymentConfig | None = None,
        resolver: FactorResolver | None = None,
    ):
        """
        Args:
            config: payment configuration (default: DEFAULT_PAYMENT_CONFIG)
            resolver: factor strategy (default: DefaultFactorResolver built
                from config.pricing)
        """
        self.config = config or DEFAULT_PAYMENT_CONFIG
        self.schedule = self.config.commission_schedule()
        self.window = self.config.cancellation_window()
        self.resolver = resolver or DefaultFactorResolver(self.config.factor_policy())

    def quote(self, base_price: Money, hour_of_day: int, location: Location) -> Money:
        """Quoted price for raw booking context."""
        factors = resolve_factors(base_price, hour_of_day, location, self.resolver)
        return compute_price(factors)

    def settle(
        self,
        factors: PricingFactors,
        cancellation: CancellationRequest | None = None,
    ) -> SettlementResult:
        return settle(factors, self.schedule, self.window, cancellation)

    def settle_booking(
        self,
        base_price: Money,
        hour_of_day: int,
        location: Location,
        cancellation: CancellationRequest | None = None,
    ) -> SettlementResult:
        """Resolve factors from raw context, then settle."""
        factors = resolve_factors(base_price, hour_of_day, location, self.resolver)
        return settle(factors, self.schedule, self.window, cancellation)
