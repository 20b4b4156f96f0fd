"""PriceCalculator — dynamic price from base price and multipliers.

    final_price = base_price * demand_factor * location_factor * time_factor

The product is exact (Fraction); rounding to the nearest minor unit is
applied once, at the end, so rounding error never compounds across
multiplications.
"""

import structlog

from src.core.domain.factors import Location, PricingFactors
from src.core.domain.money import Money
from src.core.math.rational import round_half_up
from src.settlement.factor_resolver import DefaultFactorResolver, FactorResolver

logger = structlog.get_logger(__name__)


def compute_price(factors: PricingFactors) -> Money:
    """Quoted price for pre-resolved factors.

    Args:
        factors: base price + demand/location/time multipliers (validated on
            construction, so invalid factors already raised InvalidFactor)

    Returns:
        Money in the base price currency
    """
    raw = factors.base_price.amount * factors.combined_factor
    return Money(round_half_up(raw), factors.base_price.currency)


def resolve_factors(
    base_price: Money,
    hour_of_day: int,
    location: Location,
    resolver: FactorResolver | None = None,
) -> PricingFactors:
    """Build PricingFactors from raw booking context.

    Raises:
        InvalidFactor: bad hour, location, or a resolver returning a bad factor
    """
    resolved = (resolver or DefaultFactorResolver()).resolve(hour_of_day, location)
    factors = PricingFactors(
        base_price=base_price,
        demand_factor=resolved.demand_factor,
        location_factor=resolved.location_factor,
        time_factor=resolved.time_factor,
    )
    logger.debug(
        "pricing_factors_resolved",
        hour_of_day=hour_of_day,
        demand_factor=str(factors.demand_factor),
        location_factor=str(factors.location_factor),
        time_factor=str(factors.time_factor),
    )
    return factors


def quote_price(
    base_price: Money,
    hour_of_day: int,
    location: Location,
    resolver: FactorResolver | None = None,
) -> Money:
    """resolve_factors + compute_price in one call."""
    return compute_price(resolve_factors(base_price, hour_of_day, location, resolver))
