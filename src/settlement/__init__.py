"""Settlement — pricing, commission, cancellation and their orchestration.

Data flows one way:
- PriceCalculator:          factors → final price
- CommissionEngine:         final price → commission / provider payout
- CancellationPolicyEngine: booking timing + price → refund
- SettlementCalculator:     all of the above → SettlementResult
"""

from .cancellation_policy import evaluate_cancellation, hours_until_start
from .commission_engine import select_commission_rate, split_commission, split_with_schedule
from .factor_resolver import DefaultFactorResolver, FactorResolver, ResolvedFactors
from .price_calculator import compute_price, quote_price, resolve_factors
from .settlement_calculator import CancellationRequest, SettlementCalculator, settle

__all__ = [
    # Pricing
    "compute_price",
    "resolve_factors",
    "quote_price",
    "DefaultFactorResolver",
    "FactorResolver",
    "ResolvedFactors",
    # Commission
    "select_commission_rate",
    "split_commission",
    "split_with_schedule",
    # Cancellation
    "evaluate_cancellation",
    "hours_until_start",
    # Settlement
    "CancellationRequest",
    "SettlementCalculator",
    "settle",
]
