"""
bignum — arbitrary-precision signed integers

Знаковые целые неограниченной величины: конверсии из/в int, текст в
основаниях 2..16 и float, арифметика с необязательным модулем,
возведение в степень и Fermat-фильтр простоты.
"""

from bignum.context import (
    LongMathConfig,
    MathContext,
    get_context,
    math_context,
    set_context,
)
from bignum.core.conversion.integers import IntegerWidth
from bignum.core.domain import (
    BigInteger,
    DivisionByZeroError,
    DivisionResult,
    InvalidBaseError,
    LongMathError,
    NegativeNumberError,
    NumberTooLargeError,
    OperationResult,
    OperationStatus,
)

__all__ = [
    # Context
    "LongMathConfig",
    "MathContext",
    "get_context",
    "set_context",
    "math_context",
    # Domain
    "BigInteger",
    "IntegerWidth",
    "OperationStatus",
    "OperationResult",
    "DivisionResult",
    # Errors
    "LongMathError",
    "DivisionByZeroError",
    "InvalidBaseError",
    "NegativeNumberError",
    "NumberTooLargeError",
]
