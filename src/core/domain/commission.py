"""
CommissionTier / CommissionSchedule — Таблица комиссий платформы

An ordered tier table maps amount thresholds to commission rates. The
schedule validates itself on construction, so an engine holding a
CommissionSchedule never sees an unsorted table or an out-of-range rate.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from src.core.domain.money import Money
from src.core.errors import InvalidTierTable
from src.core.math.rational import ONE, ZERO, RationalLike, to_rational, validate_in_range


def coerce_rate(value: RationalLike, name: str = "rate") -> Fraction:
    """
    Raises:
        InvalidTierTable: если rate вне [0, 1] или не число
    """
    try:
        return validate_in_range(to_rational(value), ZERO, ONE, name)
    except ValueError as e:
        raise InvalidTierTable(f"{name}: {e}") from e


@dataclass(frozen=True)
class CommissionTier:
    """Rate applied from `threshold` (inclusive) upward."""

    threshold: Money
    rate: Fraction

    def __post_init__(self) -> None:
        if not isinstance(self.threshold, Money):
            raise InvalidTierTable(
                f"threshold must be Money, got {type(self.threshold).__name__}"
            )
        object.__setattr__(self, "rate", coerce_rate(self.rate))


@dataclass(frozen=True)
class CommissionSchedule:
    """
    Validated tier table plus the rate for amounts below the lowest threshold.

    Invariants:
    - thresholds strictly increasing
    - all thresholds in one currency
    - every rate (default included) in [0, 1]
    """

    tiers: tuple[CommissionTier, ...]
    default_rate: Fraction

    def __post_init__(self) -> None:
        tiers = tuple(self.tiers)
        for tier in tiers:
            if not isinstance(tier, CommissionTier):
                raise InvalidTierTable(
                    f"tiers must contain CommissionTier, got {type(tier).__name__}"
                )
        object.__setattr__(self, "tiers", tiers)
        object.__setattr__(
            self, "default_rate", coerce_rate(self.default_rate, "default_rate")
        )

        if tiers:
            currency = tiers[0].threshold.currency
            for tier in tiers[1:]:
                if tier.threshold.currency != currency:
                    raise InvalidTierTable(
                        f"Tier thresholds mix currencies: {currency} and "
                        f"{tier.threshold.currency}"
                    )

        for lower, upper in zip(tiers, tiers[1:]):
            if upper.threshold.amount <= lower.threshold.amount:
                raise InvalidTierTable(
                    f"Tier thresholds must be strictly increasing: "
                    f"{lower.threshold.amount} then {upper.threshold.amount}"
                )

    @classmethod
    def build(
        cls,
        tiers: Sequence[CommissionTier],
        default_rate: RationalLike,
    ) -> "CommissionSchedule":
        return cls(tiers=tuple(tiers), default_rate=default_rate)

    @property
    def currency(self) -> str | None:
        """Currency of the thresholds, None for an empty table."""
        return self.tiers[0].threshold.currency if self.tiers else None

    @property
    def thresholds(self) -> tuple[int, ...]:
        return tuple(tier.threshold.amount for tier in self.tiers)


@dataclass(frozen=True)
class CommissionSplit:
    """Результат разделения цены: комиссия платформы + выплата провайдеру."""

    rate: Fraction
    commission_amount: Money
    provider_payout: Money
