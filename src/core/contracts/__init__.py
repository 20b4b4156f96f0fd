"""
Contract Validation Module

Модуль для валидации JSON контрактов pricing core: входной платёжной
конфигурации и выходного settlement результата.
"""

from .validators import (
    ContractValidator,
    PaymentConfigValidator,
    SchemaLoader,
    SettlementResultValidator,
    validate_payment_config,
    validate_settlement_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PaymentConfigValidator",
    "SettlementResultValidator",
    # Functions
    "validate_payment_config",
    "validate_settlement_result",
]
