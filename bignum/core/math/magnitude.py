"""
Magnitude kernels — беззнаковая арифметика над буферами digits

Все функции принимают и возвращают канонические little-endian буферы
(list[int], base 2^32) и не знают о знаке и display base. Знаковая логика и
статусы живут уровнем выше (kernel.py).

Промежуточные значения ограничены двумя digits:
- сложение: d + d + carry <= 2 * (2^32 - 1) + 1
- умножение: d * d + carry < 2^64
"""

import logging
from typing import Sequence

from bignum.core.domain.digits import DIGIT_BASE, DIGIT_BITS, DIGIT_MASK, digit_at, trim

logger = logging.getLogger(__name__)


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение двух канонических magnitudes.

    Returns:
        -1 если a < b, 0 если a == b, 1 если a > b
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1
    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1
    return 0


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Сумма двух magnitudes с переносом."""
    if len(a) < len(b):
        a, b = b, a
    result = [0] * (len(a) + 1)
    carry = 0
    for i in range(len(a)):
        temp = carry + a[i] + digit_at(b, i)
        result[i] = temp & DIGIT_MASK
        carry = temp >> DIGIT_BITS
    result[len(a)] = carry
    return trim(result)


def subtract_magnitudes(minuend: Sequence[int], subtrahend: Sequence[int]) -> list[int]:
    """
    Разность magnitudes, minuend >= subtrahend.

    На каждом шаге temp = base + m_i - s_i + borrow_in - 1; digit = temp mod
    base, borrow_out = temp div base (1 означает отсутствие заёма).

    Raises:
        ValueError: Если minuend < subtrahend
    """
    if compare_magnitudes(minuend, subtrahend) < 0:
        raise ValueError("minuend magnitude is smaller than subtrahend magnitude")
    result = [0] * len(minuend)
    borrow = 1
    for i in range(len(minuend)):
        temp = DIGIT_BASE + minuend[i] - digit_at(subtrahend, i) + borrow - 1
        result[i] = temp % DIGIT_BASE
        borrow = temp // DIGIT_BASE
    return trim(result)


def multiply_row(a: Sequence[int], digit: int, shift: int = 0) -> list[int]:
    """
    Произведение magnitude на один digit, сдвинутое на shift digits.

    Проход делается на один digit длиннее, чтобы сбросить последний перенос.
    """
    row = [0] * (shift + len(a) + 1)
    carry = 0
    for j in range(len(a) + 1):
        temp = digit * digit_at(a, j) + carry
        row[shift + j] = temp % DIGIT_BASE
        carry = temp // DIGIT_BASE
    return trim(row)


def multiply_magnitudes(
    a: Sequence[int],
    b: Sequence[int],
    modulus: Sequence[int] | None = None,
) -> list[int]:
    """
    Schoolbook O(n*m) произведение magnitudes.

    Для каждого digit a строится сдвинутая строка a_i * b * base^i, которая
    складывается в накопитель. С modulus накопитель приводится по модулю
    после каждой строки, так что он не растёт выше modulus.

    Args:
        a: Первый множитель
        b: Второй множитель
        modulus: Необязательный ненулевой модуль (magnitude)

    Returns:
        a * b (или a * b mod modulus)
    """
    total: list[int] = []
    if not a or not b:
        return total
    for i, digit in enumerate(a):
        if digit == 0:
            continue
        total = add_magnitudes(total, multiply_row(b, digit, i))
        if modulus is not None:
            total = divmod_magnitudes(total, modulus)[1]
    return total


def shift_digits(a: Sequence[int], shift: int) -> list[int]:
    """a * base^shift."""
    if not a:
        return []
    return [0] * shift + list(a)


def divmod_by_digit(a: Sequence[int], divisor: int) -> tuple[list[int], int]:
    """
    Деление magnitude на один ненулевой digit.

    Returns:
        (quotient, remainder), remainder — native int < divisor
    """
    if not 0 < divisor < DIGIT_BASE:
        raise ValueError(f"divisor digit out of range: {divisor}")
    quotient = [0] * len(a)
    remainder = 0
    for i in range(len(a) - 1, -1, -1):
        remainder = (remainder << DIGIT_BITS) | a[i]
        quotient[i] = remainder // divisor
        remainder -= quotient[i] * divisor
    return trim(quotient), remainder


def divmod_magnitudes(
    dividend: Sequence[int], divisor: Sequence[int]
) -> tuple[list[int], list[int]]:
    """
    Длинное деление magnitudes с оценкой quotient digit.

    Оценка следующего digit: один или два старших digit текущего остатка
    делятся на (старший digit делителя + 1), что исключает переоценку. Из
    остатка вычитается divisor * estimate * base^k, пока остаток не станет
    меньше делителя. Каждая итерация строго уменьшает остаток.

    Raises:
        ZeroDivisionError: Если divisor пуст (вызывающий уровень проверяет
            ноль заранее и превращает его в статус)
    """
    if not divisor:
        raise ZeroDivisionError("magnitude division by zero")
    if len(divisor) == 1:
        quotient, remainder = divmod_by_digit(dividend, divisor[0])
        return quotient, trim([remainder])
    order = compare_magnitudes(dividend, divisor)
    if order < 0:
        return [], list(dividend)
    if order == 0:
        return [1], []

    top = divisor[-1]
    quotient: list[int] = []
    remainder = list(dividend)
    steps = 0
    while compare_magnitudes(remainder, divisor) >= 0:
        steps += 1
        lead = remainder[-1]
        shift = len(remainder) - len(divisor)
        if lead <= top and shift > 0:
            lead = lead * DIGIT_BASE + remainder[-2]
            shift -= 1
            estimate = lead // (top + 1)
        elif lead == top:
            estimate = 1
        else:
            estimate = lead // (top + 1)
        quotient = add_magnitudes(quotient, shift_digits([estimate], shift))
        remainder = subtract_magnitudes(remainder, multiply_row(divisor, estimate, shift))
    logger.debug(
        "long division %d/%d digits finished in %d estimate steps",
        len(dividend),
        len(divisor),
        steps,
    )
    return quotient, remainder
