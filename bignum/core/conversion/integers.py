"""
Integer Conversion — int ⇄ BigInteger

Из int конверсия точная для любой ширины (Python int не ограничен).
Обратное сужение в фиксированную ширину проверяет диапазон:
- NUMBER_TOO_LARGE: значение не помещается в ширину
- NEGATIVE_NUMBER: отрицательное значение в беззнаковом типе
Ноль никогда не даёт ошибки. При ошибке возвращается 0.
"""

from enum import Enum

from bignum.core.domain.big_integer import DEFAULT_DISPLAY_BASE, BigInteger
from bignum.core.domain.digits import digits_from_int, int_from_digits
from bignum.core.domain.status import OperationResult, OperationStatus


# =============================================================================
# ENUMS
# =============================================================================


class IntegerWidth(str, Enum):
    """Целевой целочисленный тип фиксированной ширины"""

    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"

    @property
    def bits(self) -> int:
        return int(self.value.removeprefix("u").removeprefix("int"))

    @property
    def signed(self) -> bool:
        return not self.value.startswith("u")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def from_int(value: int, display_base: int = DEFAULT_DISPLAY_BASE) -> BigInteger:
    """
    Точная конверсия int → BigInteger.

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return BigInteger.from_digits(
        digits_from_int(abs(value)), is_positive=value >= 0, display_base=display_base
    )


def to_int(number: BigInteger, width: IntegerWidth | None = None) -> OperationResult[int]:
    """
    Конверсия BigInteger → int, с проверкой ширины при заданном width.

    Args:
        number: Исходное значение
        width: Целевой тип; None — без ограничения ширины

    Returns:
        OperationResult со значением; при ошибке значение 0 и статус
        NUMBER_TOO_LARGE или NEGATIVE_NUMBER (размер проверяется первым)
    """
    magnitude = int_from_digits(number.digits)
    value = magnitude if number.is_positive else -magnitude
    if width is None or number.is_zero:
        return OperationResult(value)
    if number.bit_length > width.bits or value > width.max_value:
        return OperationResult(0, OperationStatus.NUMBER_TOO_LARGE)
    if value < width.min_value:
        if not width.signed:
            return OperationResult(0, OperationStatus.NEGATIVE_NUMBER)
        return OperationResult(0, OperationStatus.NUMBER_TOO_LARGE)
    return OperationResult(value)
