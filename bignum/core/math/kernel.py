"""
Core Arithmetic Kernel — знаковые сложение, вычитание, умножение, деление

Чистые функции над BigInteger (+ необязательный modulus). Каждая возвращает
явный результат со статусом и канонизированным значением.

Знаковые таблицы:
    a + b:  (+,+) → |a|+|b|      (-,-) → -(|a|+|b|)
            (+,-) → |a| - |b|    (-,+) → |b| - |a|
    a - b:  (+,+) → |a| - |b|    (-,-) → |b| - |a|
            (+,-) → |a|+|b|      (-,+) → -(|a|+|b|)
    a * b:  знак = XOR знаков, если произведение не ноль
    a / b:  quotient = XOR знаков; remainder — знак делимого

Соглашение о делении (не floor, не Euclid):
     5 / -3 → q = -1, r =  2
    -5 /  3 → q = -1, r = -2
    -5 / -3 → q =  1, r = -2

С modulus оба операнда сначала приводятся по модулю (remainder, знак
операнда сохраняется), затем результат приводится ещё раз. Нулевой modulus
даёт DIVISION_BY_ZERO и нулевое значение.
"""

import math
from typing import Sequence

from bignum.core.domain.big_integer import BigInteger
from bignum.core.domain.digits import DIGIT_BITS
from bignum.core.domain.status import DivisionResult, OperationResult, OperationStatus
from bignum.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    multiply_magnitudes,
    subtract_magnitudes,
)

# Знаковое значение для внутренних вычислений: (magnitude, is_positive)
Signed = tuple[list[int], bool]


# =============================================================================
# ЗНАКОВЫЕ ХЕЛПЕРЫ
# =============================================================================


def _subtract_positive(minuend: Sequence[int], subtrahend: Sequence[int]) -> Signed:
    """|minuend| - |subtrahend| со swap и сменой знака при minuend < subtrahend."""
    if compare_magnitudes(minuend, subtrahend) < 0:
        return subtract_magnitudes(subtrahend, minuend), False
    return subtract_magnitudes(minuend, subtrahend), True


def _signed_subtract(a: Signed, b: Signed) -> Signed:
    a_digits, a_positive = a
    b_digits, b_positive = b
    if a_positive and b_positive:
        return _subtract_positive(a_digits, b_digits)
    if not a_positive and not b_positive:
        return _subtract_positive(b_digits, a_digits)
    if a_positive:
        return add_magnitudes(a_digits, b_digits), True
    return add_magnitudes(a_digits, b_digits), False


def _signed_add(a: Signed, b: Signed) -> Signed:
    a_digits, a_positive = a
    b_digits, b_positive = b
    if a_positive == b_positive:
        return add_magnitudes(a_digits, b_digits), a_positive
    # Смешанные знаки сводятся к вычитанию положительных magnitudes
    if a_positive:
        return _signed_subtract((list(a_digits), True), (list(b_digits), True))
    return _signed_subtract((list(b_digits), True), (list(a_digits), True))


def _reduce(value: Signed, modulus: Sequence[int]) -> Signed:
    """Остаток по модулю |modulus| со знаком исходного значения."""
    digits, positive = value
    return divmod_magnitudes(digits, modulus)[1], positive


def _build(value: Signed, display_base: int) -> BigInteger:
    digits, positive = value
    return BigInteger.from_digits(digits, is_positive=positive, display_base=display_base)


def _signed(number: BigInteger) -> Signed:
    return list(number.digits), number.is_positive


def _modular(
    a: BigInteger,
    b: BigInteger,
    modulus: BigInteger | None,
    operation,
) -> OperationResult[BigInteger]:
    display_base = a.inherit_display_base(b)
    if modulus is None:
        return OperationResult(_build(operation(_signed(a), _signed(b)), display_base))
    if modulus.is_zero:
        return OperationResult(BigInteger.zero(display_base), OperationStatus.DIVISION_BY_ZERO)
    m = modulus.digits
    result = operation(_reduce(_signed(a), m), _reduce(_signed(b), m))
    return OperationResult(_build(_reduce(result, m), display_base))


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ
# =============================================================================


def add(
    a: BigInteger, b: BigInteger, modulus: BigInteger | None = None
) -> OperationResult[BigInteger]:
    """
    Сумма a + b (или (a + b) mod modulus).

    Args:
        a: Первое слагаемое
        b: Второе слагаемое
        modulus: Необязательный модуль

    Returns:
        OperationResult с суммой; DIVISION_BY_ZERO при нулевом модуле

    Examples:
        >>> int(add(BigInteger.from_digits([5]), BigInteger.from_digits([3], False)).value)
        2
    """
    return _modular(a, b, modulus, _signed_add)


def subtract(
    minuend: BigInteger, subtrahend: BigInteger, modulus: BigInteger | None = None
) -> OperationResult[BigInteger]:
    """Разность minuend - subtrahend (или по модулю)."""
    return _modular(minuend, subtrahend, modulus, _signed_subtract)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def multiply(
    a: BigInteger, b: BigInteger, modulus: BigInteger | None = None
) -> OperationResult[BigInteger]:
    """
    Произведение a * b (или a * b mod modulus).

    Schoolbook свёртка: каждая строка a_i * b * base^i складывается в
    накопитель; с модулем накопитель приводится после каждой строки.
    Знак = XOR знаков операндов (ноль всегда положителен).
    """
    display_base = a.inherit_display_base(b)
    positive = a.is_positive == b.is_positive
    if modulus is None:
        product = multiply_magnitudes(a.digits, b.digits)
        return OperationResult(_build((product, positive), display_base))
    if modulus.is_zero:
        return OperationResult(BigInteger.zero(display_base), OperationStatus.DIVISION_BY_ZERO)
    m = modulus.digits
    a_digits = divmod_magnitudes(a.digits, m)[1]
    b_digits = divmod_magnitudes(b.digits, m)[1]
    product = multiply_magnitudes(a_digits, b_digits, m)
    return OperationResult(_build((product, positive), display_base))


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def divide(dividend: BigInteger, divisor: BigInteger) -> DivisionResult:
    """
    Деление с остатком.

    quotient: знак = XOR знаков операндов
    remainder: знак всегда равен знаку делимого

    Инвариант: dividend == divisor * quotient + remainder.

    Args:
        dividend: Делимое
        divisor: Делитель

    Returns:
        DivisionResult; при нулевом делителе quotient = remainder = 0 и
        статус DIVISION_BY_ZERO
    """
    display_base = dividend.inherit_display_base(divisor)
    if divisor.is_zero:
        zero = BigInteger.zero(display_base)
        return DivisionResult(zero, zero, OperationStatus.DIVISION_BY_ZERO)
    quotient, remainder = divmod_magnitudes(dividend.digits, divisor.digits)
    return DivisionResult(
        quotient=_build((quotient, dividend.is_positive == divisor.is_positive), display_base),
        remainder=_build((remainder, dividend.is_positive), display_base),
    )


def quotient(dividend: BigInteger, divisor: BigInteger) -> OperationResult[BigInteger]:
    result = divide(dividend, divisor)
    return OperationResult(result.quotient, result.status)


def remainder(dividend: BigInteger, divisor: BigInteger) -> OperationResult[BigInteger]:
    result = divide(dividend, divisor)
    return OperationResult(result.remainder, result.status)


def _leading_value(digits: Sequence[int]) -> int:
    """Два старших digits как одно значение (младший добивается нулём)."""
    lead = digits[-1] << DIGIT_BITS
    if len(digits) > 1:
        lead += digits[-2]
    return lead


def fraction(dividend: BigInteger, divisor: BigInteger) -> OperationResult[float]:
    """
    Приближённое частное dividend / divisor как float.

    Берутся два старших digits каждого операнда; порядок восстанавливается
    через разницу длин. Точность ограничена ~64 битами.
    """
    if divisor.is_zero:
        return OperationResult(0.0, OperationStatus.DIVISION_BY_ZERO)
    if dividend.is_zero:
        return OperationResult(0.0)
    ratio = _leading_value(dividend.digits) / _leading_value(divisor.digits)
    shift = (len(dividend.digits) - len(divisor.digits)) * DIGIT_BITS
    try:
        value = math.ldexp(ratio, shift)
    except OverflowError:
        value = math.inf
    if dividend.is_positive != divisor.is_positive:
        value = -value
    return OperationResult(value)
