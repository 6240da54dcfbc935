"""
Contract Validation Module

Модуль для валидации JSON контрактов (сериализованных фискальных периодов).
"""

from .validators import (
    ContractValidator,
    FiscalPeriodValidator,
    SchemaLoader,
    validate_fiscal_period,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FiscalPeriodValidator",
    # Functions
    "validate_fiscal_period",
]
