"""
Number-Theory Utilities — чётность, Fermat-фильтр, поиск кандидатов, random

Fermat-фильтр НЕ является доказательством простоты:
1. n <= 23 → прямая проверка по первым девяти простым
2. n mod 223092870 (= 2*3*5*7*11*13*17*19*23) делится на одно из них → отказ
3. 2^n mod n == 2 → "probable prime"

Составные числа Пуле (псевдопростые по основанию 2, например 341 = 11*31)
проходят фильтр, если не делятся на малые простые.
"""

import logging
import random
from typing import Final

from bignum.core.domain.big_integer import DEFAULT_DISPLAY_BASE, BigInteger
from bignum.core.domain.digits import DIGIT_BITS, trim
from bignum.core.math.exponent import exponent
from bignum.core.math.kernel import add, remainder
from bignum.core.math.relational import equal

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ФИЛЬТРА
# =============================================================================

# Первые девять простых
SMALL_PRIMES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23)

# Произведение SMALL_PRIMES (помещается в один digit)
SMALL_PRIMES_PRODUCT: Final[int] = 223092870

# Значения <= этого порога проверяются прямым членством в SMALL_PRIMES
SMALL_PRIMES_LIMIT: Final[int] = 23

# Источник случайности по умолчанию для random_number
_DEFAULT_RNG = random.Random()


# =============================================================================
# ЧЁТНОСТЬ
# =============================================================================


def is_even(number: BigInteger) -> bool:
    """Чётность по младшему digit (ноль чётный)."""
    return number.is_zero or number.digits[0] % 2 == 0


def is_odd(number: BigInteger) -> bool:
    return not is_even(number)


# =============================================================================
# FERMAT-ФИЛЬТР
# =============================================================================


def is_probable_prime(number: BigInteger) -> bool:
    """
    Fermat-style фильтр по основанию 2 с предварительным решетом.

    Args:
        number: Проверяемое значение

    Returns:
        False — число точно составное (или <= 1, или отрицательное);
        True — probable prime

    Examples:
        >>> is_probable_prime(BigInteger.from_digits([17]))
        True
        >>> is_probable_prime(BigInteger.from_digits([21]))
        False
    """
    if number.is_zero or not number.is_positive:
        return False
    if number.bit_length <= 5 and number.digits[0] <= SMALL_PRIMES_LIMIT:
        return number.digits[0] in SMALL_PRIMES

    residue = remainder(number, BigInteger.from_digits([SMALL_PRIMES_PRODUCT])).value
    residue_value = residue.digit_at(0)
    if any(residue_value % prime == 0 for prime in SMALL_PRIMES):
        return False

    two = BigInteger.from_digits([2])
    return equal(exponent(two, number, number).value, two)


def next_probable_prime(number: BigInteger) -> BigInteger:
    """
    Следующий probable prime строго больше number.

    Шаг к следующему нечётному значению, затем +2, пока фильтр не пройдёт.
    Результат наследует display base аргумента.
    """
    one = BigInteger.one(number.display_base)
    two = BigInteger.from_digits([2], display_base=number.display_base)
    candidate = add(number, two if is_odd(number) else one).value
    tested = 1
    while not is_probable_prime(candidate):
        candidate = add(candidate, two).value
        tested += 1
    logger.debug("next probable prime found after %d candidates (bits=%d)", tested, candidate.bit_length)
    return candidate


# =============================================================================
# RANDOM
# =============================================================================


def random_number(
    bits: int,
    rng: random.Random | None = None,
    display_base: int = DEFAULT_DISPLAY_BASE,
) -> BigInteger:
    """
    Псевдослучайное неотрицательное число, 0 <= result < 2^bits.

    Все digits, кроме старшего, заполняются равномерными 32-битными
    значениями; старший — равномерным значением по маске оставшихся бит.
    Старшие нулевые биты уменьшают фактическую длину: гарантирована только
    верхняя граница bit_length <= bits.

    Args:
        bits: Верхняя граница bit length (>= 0)
        rng: Источник случайности (по умолчанию модуль random)
        display_base: Display base результата

    Raises:
        ValueError: Если bits < 0
    """
    if bits < 0:
        raise ValueError(f"bits must be non-negative, got {bits}")
    if bits == 0:
        return BigInteger.zero(display_base)
    source = rng if rng is not None else _DEFAULT_RNG
    count = (bits + DIGIT_BITS - 1) // DIGIT_BITS
    digits = [source.getrandbits(DIGIT_BITS) for _ in range(count - 1)]
    top_bits = (bits - 1) % DIGIT_BITS + 1
    digits.append(source.randrange(1 << top_bits))
    return BigInteger.from_digits(trim(digits), display_base=display_base)
