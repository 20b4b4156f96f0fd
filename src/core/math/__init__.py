"""
Core math modules для pricing core

Точная рациональная арифметика и однократное округление до minor units.
"""

from src.core.math.rational import (
    HUNDRED,
    ONE,
    ZERO,
    RationalLike,
    is_finite_number,
    round_half_up,
    to_rational,
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    # Constants
    "ZERO",
    "ONE",
    "HUNDRED",
    # Types
    "RationalLike",
    # Conversion
    "is_finite_number",
    "to_rational",
    # Rounding
    "round_half_up",
    # Validation
    "validate_in_range",
    "validate_non_negative",
]
