"""
Тесты для magnitude kernels

Проверяет беззнаковую арифметику над буферами digits против нативного int,
включая переносы и заёмы через границы digits.
"""

import logging

import pytest

from bignum.core.domain.digits import DIGIT_MASK, digits_from_int, int_from_digits
from bignum.core.math.magnitude import (
    add_magnitudes,
    compare_magnitudes,
    divmod_by_digit,
    divmod_magnitudes,
    multiply_magnitudes,
    multiply_row,
    shift_digits,
    subtract_magnitudes,
)

SAMPLES = [
    0,
    1,
    DIGIT_MASK,
    2**32,
    2**64 - 1,
    2**64,
    0x123456789ABCDEF,
    0x123456789ABCD,
    3**97,
    (2**128 - 1) * 12345,
]


def d(value: int) -> list[int]:
    return digits_from_int(value)


class TestCompare:
    """compare_magnitudes"""

    def test_by_length(self) -> None:
        assert compare_magnitudes(d(2**32), d(DIGIT_MASK)) == 1
        assert compare_magnitudes(d(5), d(2**40)) == -1

    def test_by_digits(self) -> None:
        assert compare_magnitudes(d(2**33 + 1), d(2**33 + 2)) == -1
        assert compare_magnitudes(d(2**33 + 2), d(2**33 + 1)) == 1

    def test_equal(self) -> None:
        assert compare_magnitudes(d(3**50), d(3**50)) == 0
        assert compare_magnitudes([], []) == 0


class TestAddSubtract:
    """add_magnitudes / subtract_magnitudes"""

    def test_carry_across_digits(self) -> None:
        assert int_from_digits(add_magnitudes(d(2**64 - 1), d(1))) == 2**64

    def test_borrow_across_digits(self) -> None:
        assert int_from_digits(subtract_magnitudes(d(2**64), d(1))) == 2**64 - 1

    def test_subtract_to_zero(self) -> None:
        assert subtract_magnitudes(d(3**40), d(3**40)) == []

    def test_subtract_requires_larger_minuend(self) -> None:
        with pytest.raises(ValueError):
            subtract_magnitudes(d(1), d(2))

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_against_native(self, a: int, b: int) -> None:
        assert int_from_digits(add_magnitudes(d(a), d(b))) == a + b
        big, small = max(a, b), min(a, b)
        assert int_from_digits(subtract_magnitudes(d(big), d(small))) == big - small


class TestMultiply:
    """multiply_row / multiply_magnitudes"""

    def test_row_flushes_carry(self) -> None:
        assert int_from_digits(multiply_row(d(2**64 - 1), DIGIT_MASK)) == (2**64 - 1) * DIGIT_MASK

    def test_row_shift(self) -> None:
        assert int_from_digits(multiply_row(d(7), 3, 2)) == 21 * 2**64

    def test_by_zero(self) -> None:
        assert multiply_magnitudes(d(12345), []) == []
        assert multiply_magnitudes([], d(12345)) == []

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", SAMPLES)
    def test_against_native(self, a: int, b: int) -> None:
        assert int_from_digits(multiply_magnitudes(d(a), d(b))) == a * b

    def test_with_modulus(self) -> None:
        m = 2**61 - 1
        a, b = 3**90, 7**70
        assert int_from_digits(multiply_magnitudes(d(a), d(b), d(m))) == (a * b) % m


class TestDivide:
    """divmod_by_digit / divmod_magnitudes"""

    def test_by_digit(self) -> None:
        quotient, remainder = divmod_by_digit(d(2**70 + 5), 10)
        assert int_from_digits(quotient) == (2**70 + 5) // 10
        assert remainder == (2**70 + 5) % 10

    def test_by_digit_range_checked(self) -> None:
        with pytest.raises(ValueError):
            divmod_by_digit(d(5), 0)

    def test_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            divmod_magnitudes(d(5), [])

    def test_shorter_dividend(self) -> None:
        assert divmod_magnitudes(d(2**40), d(2**70)) == ([], d(2**40))

    def test_equal_operands(self) -> None:
        assert divmod_magnitudes(d(2**70 + 3), d(2**70 + 3)) == ([1], [])

    def test_known_pair(self) -> None:
        dividend, divisor = 0x123456789ABCDEF, 0x123456789ABCD
        quotient, remainder = divmod_magnitudes(d(dividend), d(divisor))
        assert int_from_digits(quotient) == dividend // divisor
        assert int_from_digits(remainder) == dividend % divisor

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", [s for s in SAMPLES if s])
    def test_against_native(self, a: int, b: int) -> None:
        quotient, remainder = divmod_magnitudes(d(a), d(b))
        assert int_from_digits(quotient) == a // b
        assert int_from_digits(remainder) == a % b

    def test_small_leading_divisor_digit(self) -> None:
        """Старший digit делителя = 1: оценка по (1 + 1) всё равно сходится"""
        dividend = 2**200 - 1
        divisor = 2**64 + DIGIT_MASK
        quotient, remainder = divmod_magnitudes(d(dividend), d(divisor))
        assert int_from_digits(quotient) == dividend // divisor
        assert int_from_digits(remainder) == dividend % divisor

    def test_shift_digits(self) -> None:
        assert shift_digits([5], 2) == [0, 0, 5]
        assert shift_digits([], 3) == []

    def test_general_case_logs_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="bignum.core.math.magnitude"):
            divmod_magnitudes(d(2**200 + 1), d(2**70 + 3))
        assert "long division 7/3 digits" in caplog.text

    def test_fast_path_not_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="bignum.core.math.magnitude"):
            divmod_magnitudes(d(2**200 + 1), d(12345))
        assert caplog.records == []
