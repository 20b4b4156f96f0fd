"""
Domain models and value objects.

Contains the immutable building blocks of a settlement: Money, PricingFactors,
CommissionSchedule, CancellationWindow, SettlementResult.
"""

from src.core.domain.cancellation import (
    CancellationOutcome,
    CancellationWindow,
    RefundReason,
)
from src.core.domain.commission import (
    CommissionSchedule,
    CommissionSplit,
    CommissionTier,
)
from src.core.domain.factors import NEUTRAL_FACTOR, Location, PricingFactors
from src.core.domain.money import DEFAULT_CURRENCY, Money
from src.core.domain.pricing_policy import FactorPolicy, HourRange, validate_hour_of_day
from src.core.domain.settlement import SettlementResult

__all__ = [
    # Money
    "DEFAULT_CURRENCY",
    "Money",
    # Pricing inputs
    "NEUTRAL_FACTOR",
    "Location",
    "PricingFactors",
    # Commission
    "CommissionTier",
    "CommissionSchedule",
    "CommissionSplit",
    # Cancellation
    "CancellationWindow",
    "CancellationOutcome",
    "RefundReason",
    # Pricing policy
    "FactorPolicy",
    "HourRange",
    "validate_hour_of_day",
    # Settlement
    "SettlementResult",
]
