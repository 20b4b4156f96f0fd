"""
PricingFactors — Входные множители динамической цены

Base price plus three independent multipliers. Each multiplier is stored as
an exact Fraction; a factor of 0 is a valid (free) input, negative or
non-finite factors are rejected with InvalidFactor.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Final

from src.core.domain.money import Money
from src.core.errors import InvalidFactor
from src.core.math.rational import RationalLike, to_rational, validate_non_negative


NEUTRAL_FACTOR: Final[Fraction] = Fraction(1)


def coerce_factor(value: RationalLike, name: str) -> Fraction:
    """
    Convert and validate a single multiplier.

    Raises:
        InvalidFactor: если значение отрицательное, NaN/Inf или не число
    """
    try:
        return validate_non_negative(to_rational(value), name)
    except ValueError as e:
        raise InvalidFactor(f"{name}: {e}") from e


# =============================================================================
# PRICING FACTORS
# =============================================================================


@dataclass(frozen=True)
class PricingFactors:
    """
    Pre-resolved inputs of the price computation.

    Factors may be given as int/float/Decimal/Fraction/str and are normalized
    to Fraction on construction.
    """

    base_price: Money
    demand_factor: Fraction = field(default=NEUTRAL_FACTOR)
    location_factor: Fraction = field(default=NEUTRAL_FACTOR)
    time_factor: Fraction = field(default=NEUTRAL_FACTOR)

    def __post_init__(self) -> None:
        if not isinstance(self.base_price, Money):
            raise InvalidFactor(
                f"base_price must be Money, got {type(self.base_price).__name__}"
            )
        # frozen: normalize through object.__setattr__
        for name in ("demand_factor", "location_factor", "time_factor"):
            object.__setattr__(self, name, coerce_factor(getattr(self, name), name))

    @property
    def combined_factor(self) -> Fraction:
        """Exact product demand * location * time."""
        return self.demand_factor * self.location_factor * self.time_factor


# =============================================================================
# LOCATION
# =============================================================================


@dataclass(frozen=True)
class Location:
    """Coarse geographic position used for location bucketing."""

    latitude: Fraction
    longitude: Fraction

    def __post_init__(self) -> None:
        lat = coerce_latitude(self.latitude)
        lon = coerce_longitude(self.longitude)
        object.__setattr__(self, "latitude", lat)
        object.__setattr__(self, "longitude", lon)


def coerce_latitude(value: RationalLike) -> Fraction:
    try:
        lat = to_rational(value)
    except ValueError as e:
        raise InvalidFactor(f"latitude: {e}") from e
    if not -90 <= lat <= 90:
        raise InvalidFactor(f"latitude must be in [-90, 90], got {value}")
    return lat


def coerce_longitude(value: RationalLike) -> Fraction:
    try:
        lon = to_rational(value)
    except ValueError as e:
        raise InvalidFactor(f"longitude: {e}") from e
    if not -180 <= lon <= 180:
        raise InvalidFactor(f"longitude must be in [-180, 180], got {value}")
    return lon
