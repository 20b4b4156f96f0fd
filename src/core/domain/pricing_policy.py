"""
FactorPolicy — Политика разрешения множителей по времени суток и локации

Values from the original payment app: evening demand peak 1.5, morning
time peak 1.3, northern latitude 1.2. Peak ranges are half-open [start, end)
hours of day: [18, 22) covers 18:00–21:59, [6, 10) covers 06:00–09:59.
"""

from dataclasses import dataclass, field
from fractions import Fraction
from typing import Final

from src.core.domain.factors import coerce_factor
from src.core.errors import InvalidFactor


HOURS_PER_DAY: Final[int] = 24


@dataclass(frozen=True)
class HourRange:
    """Half-open range of hours of day [start, end)."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for name in ("start", "end"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidFactor(f"HourRange.{name} must be an int, got {value!r}")
        if not 0 <= self.start <= self.end <= HOURS_PER_DAY:
            raise InvalidFactor(
                f"HourRange must satisfy 0 <= start <= end <= 24, "
                f"got [{self.start}, {self.end})"
            )

    def __contains__(self, hour: int) -> bool:
        return self.start <= hour < self.end


def validate_hour_of_day(hour_of_day: int) -> int:
    """
    Raises:
        InvalidFactor: если час не int в диапазоне 0..23
    """
    if isinstance(hour_of_day, bool) or not isinstance(hour_of_day, int):
        raise InvalidFactor(f"hour_of_day must be an int, got {hour_of_day!r}")
    if not 0 <= hour_of_day < HOURS_PER_DAY:
        raise InvalidFactor(f"hour_of_day must be in 0..23, got {hour_of_day}")
    return hour_of_day


@dataclass(frozen=True)
class FactorPolicy:
    """Конфигурация default factor resolver."""

    evening_peak: HourRange = field(default_factory=lambda: HourRange(18, 22))
    evening_demand_factor: Fraction = Fraction(3, 2)
    morning_peak: HourRange = field(default_factory=lambda: HourRange(6, 10))
    morning_time_factor: Fraction = Fraction(13, 10)
    northern_location_factor: Fraction = Fraction(6, 5)

    def __post_init__(self) -> None:
        for name in (
            "evening_demand_factor",
            "morning_time_factor",
            "northern_location_factor",
        ):
            object.__setattr__(self, name, coerce_factor(getattr(self, name), name))
