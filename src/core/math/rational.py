"""
Rational Arithmetic — Exact Factors & One-Shot Rounding

Money is carried in integer minor units; multipliers and rates are carried
as exact `Fraction`s. Rounding to a minor unit happens once, at the end of a
computation, never between multiplications.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float inputs are converted through their shortest decimal repr
   (1.2 → 6/5, not 5404319552844595/4503599627370496)
2. NaN/Inf never enter a computation (rejected, not sanitized)
3. Rounding is half-up to the nearest integer, deterministic
4. All operations are pure and reproducible
"""

import math
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Final, Union

# Anything a caller may pass where a rational is expected
RationalLike = Union[int, float, Decimal, Fraction, str]

ZERO: Final[Fraction] = Fraction(0)
ONE: Final[Fraction] = Fraction(1)
HUNDRED: Final[Fraction] = Fraction(100)


# =============================================================================
# CONVERSION
# =============================================================================


def is_finite_number(value: object) -> bool:
    """
    Проверка, является ли значение конечным числом (не NaN, не Inf).

    bool is rejected even though it is an int subclass.

    Args:
        value: Проверяемое значение

    Returns:
        True для конечных int/float/Decimal/Fraction, иначе False
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, Fraction)):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return False


def to_rational(value: RationalLike) -> Fraction:
    """
    Exact conversion of a numeric input to `Fraction`.

    Args:
        value: int, float, Decimal, Fraction or a numeric string ("1.5")

    Returns:
        Exact rational value

    Raises:
        ValueError: если значение NaN/Inf, bool или не парсится как число

    Examples:
        >>> to_rational(1.2)
        Fraction(6, 5)
        >>> to_rational("0.15")
        Fraction(3, 20)
    """
    if isinstance(value, str):
        try:
            value = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e

    if not is_finite_number(value):
        raise ValueError(f"Value must be a finite number, got {value!r}")

    if isinstance(value, float):
        # repr() gives the shortest string that round-trips
        return Fraction(Decimal(repr(value)))

    return Fraction(value)


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(value: Fraction) -> int:
    """
    Round to the nearest integer, ties away from zero.

    Args:
        value: Exact rational value

    Returns:
        Nearest integer (2.5 → 3, -2.5 → -3)
    """
    magnitude = math.floor(abs(value) + Fraction(1, 2))
    return -magnitude if value < 0 else magnitude


# =============================================================================
# VALIDATION
# =============================================================================


def validate_non_negative(value: Fraction, name: str) -> Fraction:
    """
    Args:
        value: Проверяемое значение
        name: Имя параметра для сообщения об ошибке

    Raises:
        ValueError: если value < 0
    """
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def validate_in_range(
    value: Fraction, min_val: Fraction, max_val: Fraction, name: str
) -> Fraction:
    """
    Проверка вхождения в закрытый диапазон [min_val, max_val].

    Raises:
        ValueError: если значение вне диапазона
    """
    if value < min_val or value > max_val:
        raise ValueError(f"{name} must be in [{min_val}, {max_val}], got {value}")
    return value
