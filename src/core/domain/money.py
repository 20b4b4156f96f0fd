"""
Money — Fixed-point monetary value

Immutable value object: integer amount in minor units plus a currency code.
Every other component (prices, commissions, payouts, refunds) is expressed in
Money, so the invariants live here:

- amount is an int (never float) and never negative
- arithmetic only between equal currencies
- scaling by a rational rounds once, half-up, to the nearest minor unit
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final

from src.core.errors import InvalidAmount
from src.core.math.rational import RationalLike, round_half_up, to_rational


# ISO-4217 style alphabetic code
CURRENCY_CODE_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

DEFAULT_CURRENCY: Final[str] = "TZS"


# =============================================================================
# MONEY
# =============================================================================


@dataclass(frozen=True, order=False)
class Money:
    """
    Monetary amount in minor units.

    Money(18000, "TZS") is 180.00 TZS. Equality is value equality;
    ordering is only defined between equal currencies.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise InvalidAmount(
                f"Money amount must be an int in minor units, got {self.amount!r}"
            )
        if self.amount < 0:
            raise InvalidAmount(f"Money amount cannot be negative: {self.amount}")
        if not isinstance(self.currency, str) or not CURRENCY_CODE_PATTERN.match(
            self.currency
        ):
            raise InvalidAmount(f"Invalid currency code: {self.currency!r}")

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(0, currency)

    def _check_currency(self, other: Money, operation: str) -> None:
        if not isinstance(other, Money):
            raise InvalidAmount(f"Cannot {operation} Money and {type(other).__name__}")
        if self.currency != other.currency:
            raise InvalidAmount(
                f"Cannot {operation} {self.currency} and {other.currency}"
            )

    def __add__(self, other: Money) -> Money:
        self._check_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        """
        Subtract money of the same currency.

        Raises:
            InvalidAmount: если результат отрицательный или валюты различаются
        """
        self._check_currency(other, "subtract")
        if other.amount > self.amount:
            raise InvalidAmount(
                f"Subtraction would go negative: {self.amount} - {other.amount} "
                f"{self.currency}"
            )
        return Money(self.amount - other.amount, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other, "compare")
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._check_currency(other, "compare")
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._check_currency(other, "compare")
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._check_currency(other, "compare")
        return self.amount >= other.amount

    def scale(self, multiplier: RationalLike) -> Money:
        """
        Multiply by a non-negative rational, rounding once to a minor unit.

        Args:
            multiplier: Rate or factor (0.15, Fraction(1, 2), "1.5", ...)

        Returns:
            New Money, round_half_up(amount * multiplier)

        Raises:
            InvalidAmount: если множитель отрицательный или не число
        """
        try:
            factor = to_rational(multiplier)
        except ValueError as e:
            raise InvalidAmount(f"Invalid multiplier for {self}: {e}") from e
        if factor < 0:
            raise InvalidAmount(f"Cannot scale money by a negative factor: {factor}")
        return Money(round_half_up(self.amount * factor), self.currency)

    def __repr__(self) -> str:
        return f"Money({self.amount}, {self.currency!r})"
