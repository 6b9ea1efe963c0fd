"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных процентов.
"""

from .validators import (
    ContractValidator,
    PercentValidator,
    SchemaLoader,
    validate_percent,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PercentValidator",
    # Functions
    "validate_percent",
]
