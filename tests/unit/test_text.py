"""
Тесты для Text Conversion

Проверяет:
1. Все нотации маркеров основания
2. Знак до и после маркера
3. INVALID_BASE для недопустимых digits и оснований
4. Рендеринг в основаниях 2..16
"""

import pytest

from bignum.core.conversion.integers import from_int
from bignum.core.conversion.text import (
    parse,
    parse_bin,
    parse_dec,
    parse_hex,
    parse_oct,
    parse_with_base,
    render,
    render_bin,
    render_dec,
    render_hex,
    render_oct,
)
from bignum.core.domain.status import OperationStatus

LARGE = 2**200 + 123456789


class TestParseNotations:
    """parse: маркеры основания"""

    @pytest.mark.parametrize(
        "text,base",
        [
            ("%1100100", 2),
            ("0b1100100", 2),
            ("&144", 8),
            ("0144", 8),
            ("o144", 8),
            ("O144", 8),
            ("144o", 8),
            ("144O", 8),
            ("$64", 16),
            ("0x64", 16),
            ("64h", 16),
            ("64H", 16),
            ("79(13", 13),
            ("400~5", 5),
            ("100", 10),
        ],
    )
    def test_hundred(self, text: str, base: int) -> None:
        result = parse(text)
        assert result.ok
        assert int(result.value) == 100
        assert result.value.display_base == base

    def test_explicit_base_nine(self) -> None:
        assert int(parse("81~9").value) == 73

    def test_lowercase_hex_digits(self) -> None:
        assert int(parse("0xff").value) == 255
        assert int(parse("$aBc").value) == 0xABC

    def test_default_base(self) -> None:
        result = parse("FF", 16)
        assert int(result.value) == 255
        assert result.value.display_base == 16

    def test_lone_zero_is_octal(self) -> None:
        result = parse("0")
        assert result.ok
        assert result.value.is_zero
        assert result.value.display_base == 8

    def test_empty(self) -> None:
        assert parse("").value.is_zero
        assert parse("-").value.is_zero
        assert parse("-").ok


class TestParseSign:
    """parse: отрицательные значения"""

    def test_scenario_base_seven(self) -> None:
        result = parse("-202(7")
        assert int(result.value) == -100
        assert result.value.display_base == 7
        assert render(result.value).value == "-202"

    @pytest.mark.parametrize("text", ["-$64", "$-64", "-0x64", "0x-64", "-64h", "-%1100100", "-o144", "-144o", "-100"])
    def test_minus_before_or_after_marker(self, text: str) -> None:
        assert int(parse(text).value) == -100

    def test_negative_zero_is_positive(self) -> None:
        result = parse("-0x0")
        assert result.value.is_zero
        assert result.value.is_positive


class TestParseErrors:
    """parse: INVALID_BASE"""

    @pytest.mark.parametrize("text", ["12(2", "0b102", "&18", "1G", "12~1", "12~17", "12(x", "12~", "1 2"])
    def test_invalid(self, text: str) -> None:
        result = parse(text)
        assert result.status == OperationStatus.INVALID_BASE
        assert result.value.is_zero

    def test_marker_without_digits(self) -> None:
        result = parse("0x")
        assert result.ok
        assert result.value.is_zero
        assert result.value.display_base == 16

    def test_parse_with_base_out_of_range(self) -> None:
        for base in (0, 1, 17, -2):
            result = parse_with_base("1", base)
            assert result.status == OperationStatus.INVALID_BASE
            assert result.value.is_zero

    def test_digit_equal_to_base(self) -> None:
        assert parse_with_base("8", 8).status == OperationStatus.INVALID_BASE
        assert parse_with_base("7", 8).ok


class TestParseWithBase:
    """parse_with_base и сокращения"""

    def test_large_decimal(self) -> None:
        assert int(parse_dec(str(LARGE)).value) == LARGE

    def test_shortcuts(self) -> None:
        assert int(parse_bin("101").value) == 5
        assert int(parse_oct("777").value) == 511
        assert int(parse_hex("-DEADBEEF").value) == -0xDEADBEEF

    def test_no_markers(self) -> None:
        assert parse_with_base("0x10", 16).status == OperationStatus.INVALID_BASE


class TestRender:
    """render"""

    def test_zero_in_every_base(self) -> None:
        zero = from_int(0)
        for base in range(2, 17):
            assert render(zero, base).value == "0"

    def test_display_base_by_default(self) -> None:
        assert render(from_int(-255, 16)).value == "-FF"
        assert render(from_int(255, 2)).value == "11111111"

    def test_shortcuts(self) -> None:
        value = from_int(LARGE)
        assert render_bin(value).value == format(LARGE, "b")
        assert render_oct(value).value == format(LARGE, "o")
        assert render_dec(value).value == str(LARGE)
        assert render_hex(value).value == format(LARGE, "X")

    @pytest.mark.parametrize("base", [1, 17, 0])
    def test_invalid_base(self, base: int) -> None:
        result = render(from_int(10), base)
        assert result.status == OperationStatus.INVALID_BASE
        assert result.value == ""

    @pytest.mark.parametrize("base", range(2, 17))
    def test_round_trip(self, base: int) -> None:
        for value in (1, -1, base - 1, base, 2**64, -LARGE):
            text = render(from_int(value), base).value
            parsed = parse_with_base(text, base)
            assert parsed.ok
            assert int(parsed.value) == value
            assert parsed.value.display_base == base
