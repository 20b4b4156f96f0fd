"""Factor resolution — raw booking context → pricing multipliers.

Default policy (see FactorPolicy):
- demand factor elevated during the evening peak
- time factor elevated during the morning peak
- location factor elevated for northern latitudes (latitude > 0)
Any other input yields the neutral factor 1.0.

The hour of day is always passed in; nothing here reads a clock. The resolver
is a strategy: any object satisfying FactorResolver can replace the default.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Protocol

from src.core.domain.factors import NEUTRAL_FACTOR, Location
from src.core.domain.pricing_policy import FactorPolicy, validate_hour_of_day
from src.core.errors import InvalidFactor


@dataclass(frozen=True)
class ResolvedFactors:
    demand_factor: Fraction
    location_factor: Fraction
    time_factor: Fraction


class FactorResolver(Protocol):
    """Strategy turning raw booking context into multipliers."""

    def resolve(self, hour_of_day: int, location: Location) -> ResolvedFactors:
        ...


class DefaultFactorResolver:
    """Time-of-day bands + coarse north/south location bucketing."""

    def __init__(self, policy: FactorPolicy | None = None):
        self.policy = policy or FactorPolicy()

    def demand_factor(self, hour_of_day: int) -> Fraction:
        hour = validate_hour_of_day(hour_of_day)
        if hour in self.policy.evening_peak:
            return self.policy.evening_demand_factor
        return NEUTRAL_FACTOR

    def time_factor(self, hour_of_day: int) -> Fraction:
        hour = validate_hour_of_day(hour_of_day)
        if hour in self.policy.morning_peak:
            return self.policy.morning_time_factor
        return NEUTRAL_FACTOR

    def location_factor(self, location: Location) -> Fraction:
        if not isinstance(location, Location):
            raise InvalidFactor(
                f"location must be Location, got {type(location).__name__}"
            )
        if location.latitude > 0:
            return self.policy.northern_location_factor
        return NEUTRAL_FACTOR

    def resolve(self, hour_of_day: int, location: Location) -> ResolvedFactors:
        return ResolvedFactors(
            demand_factor=self.demand_factor(hour_of_day),
            location_factor=self.location_factor(location),
            time_factor=self.time_factor(hour_of_day),
        )
