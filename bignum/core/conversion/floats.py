"""
Float Conversion — float ⇄ BigInteger (приближённо)

Обе конверсии lossy, точное округление не гарантируется:
- BigInteger → float: один-два старших digit как мантисса, масштаб
  base^(оставшееся число digits)
- float → BigInteger: frexp-разложение, мантисса * 2^63 как целое, затем
  умножение или деление на 2^|exp - 63|
"""

import math
from typing import Final

from bignum.core.domain.big_integer import DEFAULT_DISPLAY_BASE, BigInteger
from bignum.core.domain.digits import DIGIT_BITS
from bignum.core.conversion.integers import from_int
from bignum.core.math.exponent import exponent
from bignum.core.math.kernel import multiply, quotient

# Разрядность целочисленной мантиссы
MANTISSA_BITS: Final[int] = 63


def from_float(value: float, display_base: int = DEFAULT_DISPLAY_BASE) -> BigInteger:
    """
    Приближённая конверсия float → BigInteger (дробная часть отбрасывается).

    Args:
        value: Конечное значение float
        display_base: Display base результата

    Raises:
        ValueError: Если value содержит NaN/Inf
    """
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"cannot convert NaN/Inf to BigInteger: {value}")
    if value == 0:
        return BigInteger.zero(display_base)

    mantissa, exp = math.frexp(value)
    negative = mantissa < 0
    result = from_int(round(abs(mantissa) * (1 << MANTISSA_BITS)), display_base)

    exp -= MANTISSA_BITS
    two = from_int(2, display_base)
    if exp > 0:
        result = multiply(result, exponent(two, from_int(exp)).value).value
    elif exp < 0:
        result = quotient(result, exponent(two, from_int(-exp)).value).value

    if negative:
        result = result.negate()
    return result


def to_float(number: BigInteger) -> float:
    """
    Приближённая конверсия BigInteger → float.

    Переполнение диапазона float даёт ±inf.
    """
    if number.is_zero:
        return 0.0
    index = len(number.digits) - 1
    lead = number.digits[index] << DIGIT_BITS
    index -= 1
    if index >= 0:
        lead += number.digits[index]
    try:
        result = math.ldexp(float(lead), index * DIGIT_BITS)
    except OverflowError:
        result = math.inf
    return result if number.is_positive else -result
