"""
Domain models and value objects.

Contains the Digit Buffer primitives, the BigInteger value model and the
operation status taxonomy.
"""

from bignum.core.domain.big_integer import (
    DEFAULT_DISPLAY_BASE,
    MAX_DISPLAY_BASE,
    MIN_DISPLAY_BASE,
    BigInteger,
)
from bignum.core.domain.digits import (
    DIGIT_BASE,
    DIGIT_BITS,
    DIGIT_MASK,
    bit_at,
    bit_length,
    digit_at,
    digits_from_int,
    int_from_digits,
    is_canonical,
    trim,
)
from bignum.core.domain.status import (
    DivisionByZeroError,
    DivisionResult,
    InvalidBaseError,
    LongMathError,
    NegativeNumberError,
    NumberTooLargeError,
    OperationResult,
    OperationStatus,
    error_for_status,
)

__all__ = [
    # Digit Buffer
    "DIGIT_BASE",
    "DIGIT_BITS",
    "DIGIT_MASK",
    "bit_at",
    "bit_length",
    "digit_at",
    "digits_from_int",
    "int_from_digits",
    "is_canonical",
    "trim",
    # BigInteger model
    "BigInteger",
    "DEFAULT_DISPLAY_BASE",
    "MAX_DISPLAY_BASE",
    "MIN_DISPLAY_BASE",
    # Status
    "OperationStatus",
    "OperationResult",
    "DivisionResult",
    "LongMathError",
    "DivisionByZeroError",
    "InvalidBaseError",
    "NegativeNumberError",
    "NumberTooLargeError",
    "error_for_status",
]
