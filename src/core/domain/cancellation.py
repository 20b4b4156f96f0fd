"""
CancellationWindow — Окна бесплатной и частичной отмены

free_cancellation_hours >= partial_refund_hours >= 0, refund_percentage in
[0, 100]. Violations raise InvalidWindow on construction.
"""

from dataclasses import dataclass
from enum import Enum
from fractions import Fraction

from src.core.domain.money import Money
from src.core.errors import InvalidWindow
from src.core.math.rational import HUNDRED, ZERO, to_rational, validate_in_range


# =============================================================================
# ENUMS
# =============================================================================


class RefundReason(str, Enum):
    """
    Причина (категория) возврата.

    NOT_CANCELLED only appears on a settlement without a cancellation request;
    evaluate_cancellation never returns it.
    """

    FULL = "FULL"
    PARTIAL = "PARTIAL"
    NONE = "NONE"
    NOT_CANCELLED = "NOT_CANCELLED"


# =============================================================================
# WINDOW
# =============================================================================


@dataclass(frozen=True)
class CancellationWindow:
    free_cancellation_hours: int
    partial_refund_hours: int
    refund_percentage: Fraction

    def __post_init__(self) -> None:
        for name in ("free_cancellation_hours", "partial_refund_hours"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidWindow(f"{name} must be an int, got {value!r}")

        if self.partial_refund_hours < 0:
            raise InvalidWindow(
                f"partial_refund_hours must be >= 0, got {self.partial_refund_hours}"
            )
        if self.free_cancellation_hours < self.partial_refund_hours:
            raise InvalidWindow(
                f"free_cancellation_hours ({self.free_cancellation_hours}) must be "
                f">= partial_refund_hours ({self.partial_refund_hours})"
            )

        try:
            pct = validate_in_range(
                to_rational(self.refund_percentage), ZERO, HUNDRED, "refund_percentage"
            )
        except ValueError as e:
            raise InvalidWindow(f"refund_percentage: {e}") from e
        object.__setattr__(self, "refund_percentage", pct)

    @property
    def refund_fraction(self) -> Fraction:
        """refund_percentage / 100"""
        return self.refund_percentage / HUNDRED


@dataclass(frozen=True)
class CancellationOutcome:
    """Результат оценки отмены."""

    refund: Money
    reason: RefundReason
    hours_until_start: int
