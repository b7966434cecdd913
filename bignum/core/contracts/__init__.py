"""
Contract Validation Module

Валидация JSON документов библиотеки (конфигурация, записи чисел).
"""

from .validators import (
    ContractValidator,
    LongMathConfigValidator,
    NumberRecordValidator,
    SchemaLoader,
    validate_longmath_config,
    validate_number_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LongMathConfigValidator",
    "NumberRecordValidator",
    # Functions
    "validate_longmath_config",
    "validate_number_record",
]
