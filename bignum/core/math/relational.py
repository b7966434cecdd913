"""
Relational Layer — порядок и равенство BigInteger

Примитив — строгое less_than; остальные отношения выводятся из него.
display base в сравнении не участвует.
"""

from bignum.core.domain.big_integer import BigInteger


def less_than(a: BigInteger, b: BigInteger) -> bool:
    """
    Строгое a < b.

    1. Разные знаки решают сразу (отрицательное < положительного)
    2. Оба отрицательны → сравнение модулей в обратном порядке
    3. Одинаковый знак → сначала bit_length, затем digits от старшего
    """
    if a.is_positive != b.is_positive:
        return not a.is_positive
    if not a.is_positive:
        return less_than(b.absolute(), a.absolute())
    if a.bit_length != b.bit_length:
        return a.bit_length < b.bit_length
    for i in range(len(a.digits) - 1, -1, -1):
        if a.digits[i] != b.digits[i]:
            return a.digits[i] < b.digits[i]
    return False


def equal(a: BigInteger, b: BigInteger) -> bool:
    # Быстрый отказ по знаку и bit_length
    if a.is_positive != b.is_positive or a.bit_length != b.bit_length:
        return False
    return not less_than(a, b) and not less_than(b, a)


def greater_than(a: BigInteger, b: BigInteger) -> bool:
    return less_than(b, a)


def less_equal(a: BigInteger, b: BigInteger) -> bool:
    return not less_than(b, a)


def greater_equal(a: BigInteger, b: BigInteger) -> bool:
    return not less_than(a, b)


def compare(a: BigInteger, b: BigInteger) -> int:
    """-1, 0 или 1 (как cmp)."""
    if less_than(a, b):
        return -1
    if less_than(b, a):
        return 1
    return 0
