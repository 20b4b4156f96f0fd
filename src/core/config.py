"""
PaymentConfig — Конфигурация комиссий, отмен и ценовой политики

Immutable Pydantic модели, отражающие блоки `commission` / `cancellation`
платёжной конфигурации. Loaded once per process and treated as read-only; a
reload builds a new object (copy on reload), so concurrent settlements never
see a half-updated table.

Two validation layers:
1. JSON Schema contract (payment_config.json): structure and types
2. Domain builders (commission_schedule(), cancellation_window()): invariants
   that raise InvalidTierTable / InvalidWindow
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

import structlog
from pydantic import BaseModel, Field

from src.core.contracts import validate_payment_config
from src.core.domain.cancellation import CancellationWindow
from src.core.domain.commission import CommissionSchedule, CommissionTier
from src.core.domain.money import DEFAULT_CURRENCY, Money
from src.core.domain.pricing_policy import FactorPolicy, HourRange
from src.core.math.rational import to_rational

logger = structlog.get_logger(__name__)


# =============================================================================
# NESTED MODELS
# =============================================================================


class CommissionTierConfig(BaseModel):
    """Порог (minor units, включительно) и ставка комиссии."""

    threshold: int = Field(..., ge=0, description="Порог суммы (minor units)")
    rate: float = Field(..., ge=0, le=1, description="Ставка комиссии (фракция, 0-1)")

    model_config = {"frozen": True}


class CommissionConfig(BaseModel):
    default_rate: float = Field(
        0.15, ge=0, le=1, description="Ставка ниже минимального порога"
    )
    tiers: tuple[CommissionTierConfig, ...] = Field(
        default=(
            CommissionTierConfig(threshold=100000, rate=0.10),
            CommissionTierConfig(threshold=500000, rate=0.08),
            CommissionTierConfig(threshold=1000000, rate=0.05),
        ),
        description="Таблица тарифов, по возрастанию порога",
    )

    model_config = {"frozen": True}


class CancellationConfig(BaseModel):
    free_cancellation_hours: int = Field(24, ge=0)
    partial_refund_hours: int = Field(12, ge=0)
    refund_percentage: float = Field(50, ge=0, le=100)

    model_config = {"frozen": True}


class PricingPolicyConfig(BaseModel):
    """
    Default factor resolver policy.

    Peak ranges are half-open [start, end) hours of day.
    """

    evening_peak_start: int = Field(18, ge=0, le=24)
    evening_peak_end: int = Field(22, ge=0, le=24)
    evening_demand_factor: float = Field(1.5, ge=0)
    morning_peak_start: int = Field(6, ge=0, le=24)
    morning_peak_end: int = Field(10, ge=0, le=24)
    morning_time_factor: float = Field(1.3, ge=0)
    northern_location_factor: float = Field(1.2, ge=0)

    model_config = {"frozen": True}


# =============================================================================
# PAYMENT CONFIG
# =============================================================================


class PaymentConfig(BaseModel):
    """Полная конфигурация pricing core."""

    currency: str = Field(DEFAULT_CURRENCY, pattern="^[A-Z]{3}$")
    commission: CommissionConfig = Field(default_factory=CommissionConfig)
    cancellation: CancellationConfig = Field(default_factory=CancellationConfig)
    pricing: PricingPolicyConfig = Field(default_factory=PricingPolicyConfig)

    model_config = {"frozen": True}

    def commission_schedule(self) -> CommissionSchedule:
        """
        Raises:
            InvalidTierTable: если пороги не строго возрастают
        """
        return CommissionSchedule.build(
            [
                CommissionTier(
                    threshold=Money(tier.threshold, self.currency),
                    rate=to_rational(tier.rate),
                )
                for tier in self.commission.tiers
            ],
            default_rate=to_rational(self.commission.default_rate),
        )

    def cancellation_window(self) -> CancellationWindow:
        """
        Raises:
            InvalidWindow: если free_cancellation_hours < partial_refund_hours
        """
        return CancellationWindow(
            free_cancellation_hours=self.cancellation.free_cancellation_hours,
            partial_refund_hours=self.cancellation.partial_refund_hours,
            refund_percentage=to_rational(self.cancellation.refund_percentage),
        )

    def factor_policy(self) -> FactorPolicy:
        """
        Raises:
            InvalidFactor: если диапазон часов некорректен (start > end)
        """
        p = self.pricing
        return FactorPolicy(
            evening_peak=HourRange(p.evening_peak_start, p.evening_peak_end),
            evening_demand_factor=to_rational(p.evening_demand_factor),
            morning_peak=HourRange(p.morning_peak_start, p.morning_peak_end),
            morning_time_factor=to_rational(p.morning_time_factor),
            northern_location_factor=to_rational(p.northern_location_factor),
        )


DEFAULT_PAYMENT_CONFIG = PaymentConfig()


# =============================================================================
# LOADING
# =============================================================================


def load_payment_config(source: Union[Dict[str, Any], str, Path]) -> PaymentConfig:
    """
    Загрузка и валидация конфигурации.

    Args:
        source: dict или путь к JSON файлу

    Returns:
        Frozen PaymentConfig, domain invariants already checked

    Raises:
        jsonschema.ValidationError: нарушение контракта payment_config
        pydantic.ValidationError: нарушение ограничений модели
        InvalidTierTable / InvalidWindow / InvalidFactor: нарушение инвариантов
    """
    if isinstance(source, (str, Path)):
        with open(source, "r", encoding="utf-8") as f:
            data = json.load(f)
    else:
        data = source

    validate_payment_config(data)
    config = PaymentConfig.model_validate(data)

    # Build once so invariant violations surface at load time, not mid-booking
    config.commission_schedule()
    config.cancellation_window()
    config.factor_policy()

    logger.info(
        "payment_config_loaded",
        currency=config.currency,
        tiers=len(config.commission.tiers),
        default_rate=config.commission.default_rate,
    )
    return config
