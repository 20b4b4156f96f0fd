"""
SettlementResult — Итоговое распределение цены бронирования

Immutable record returned to the booking workflow and consumed by the
payment-processing and receipt collaborators.

Invariants (checked on construction):
    commission_amount + provider_payout == final_price
    net_provider_payout + net_platform_fee + refund == final_price
All Money fields share one currency.
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Dict, Optional

from src.core.domain.cancellation import RefundReason
from src.core.domain.money import Money
from src.core.errors import InvalidAmount


@dataclass(frozen=True)
class SettlementResult:
    final_price: Money
    commission_rate: Fraction
    commission_amount: Money
    provider_payout: Money
    refund: Optional[Money]
    refund_reason: RefundReason

    # After the refund (equal to the split when nothing is refunded)
    net_provider_payout: Money
    net_platform_fee: Money

    def __post_init__(self) -> None:
        currency = self.final_price.currency
        for name in (
            "commission_amount",
            "provider_payout",
            "net_provider_payout",
            "net_platform_fee",
        ):
            if getattr(self, name).currency != currency:
                raise InvalidAmount(
                    f"{name} currency {getattr(self, name).currency} != {currency}"
                )
        if self.refund is not None and self.refund.currency != currency:
            raise InvalidAmount(f"refund currency {self.refund.currency} != {currency}")

        if self.commission_amount + self.provider_payout != self.final_price:
            raise InvalidAmount(
                f"commission {self.commission_amount.amount} + payout "
                f"{self.provider_payout.amount} != final price {self.final_price.amount}"
            )

        refunded = self.refund or Money.zero(currency)
        if self.net_provider_payout + self.net_platform_fee + refunded != self.final_price:
            raise InvalidAmount(
                f"net payout {self.net_provider_payout.amount} + net fee "
                f"{self.net_platform_fee.amount} + refund {refunded.amount} != "
                f"final price {self.final_price.amount}"
            )

    @property
    def currency(self) -> str:
        return self.final_price.currency

    @property
    def is_cancelled(self) -> bool:
        return self.refund_reason is not RefundReason.NOT_CANCELLED

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-ready dict matching the settlement_result contract.

        Amounts are integers in minor units; the commission rate is an exact
        "numerator/denominator" string so no precision is lost on the wire.
        """
        rate = self.commission_rate
        return {
            "schema_version": "1",
            "currency": self.currency,
            "final_price": self.final_price.amount,
            "commission_rate": f"{rate.numerator}/{rate.denominator}",
            "commission_amount": self.commission_amount.amount,
            "provider_payout": self.provider_payout.amount,
            "refund": None if self.refund is None else self.refund.amount,
            "refund_reason": self.refund_reason.value,
            "net_provider_payout": self.net_provider_payout.amount,
            "net_platform_fee": self.net_platform_fee.amount,
        }
