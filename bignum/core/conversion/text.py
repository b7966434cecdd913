"""
Text Conversion — разбор и рендеринг чисел в основаниях 2..16

Поддерживаемые нотации (минус допускается перед или после маркера):
    двоичная:     %1100100, 0b1100100
    восьмеричная: &144, 0144, o144, O144, 144o, 144O
    шестнадцат.:  $64, 0x64, 64h, 64H
    любая база:   81~9, 79(13   (база 2..16 после '~' или '(')
    без маркера:  основание по умолчанию

Разбор сам работает на арифметике BigInteger: digits сворачиваются от
старшего как acc = acc * base + digit через умножение и сложение ядра,
поскольку промежуточное значение может превышать нативную ширину.
Рендеринг отделяет digits делением ядра на основание.
"""

from typing import Final

from bignum.core.domain.big_integer import (
    DEFAULT_DISPLAY_BASE,
    MAX_DISPLAY_BASE,
    MIN_DISPLAY_BASE,
    BigInteger,
)
from bignum.core.domain.status import OperationResult, OperationStatus
from bignum.core.math.kernel import add, divide, multiply

# =============================================================================
# КОНСТАНТЫ НОТАЦИИ
# =============================================================================

DIGIT_CHARS: Final[str] = "0123456789ABCDEF"

# Префиксы (после необязательного минуса) → основание; порядок проверки важен
_PREFIXES: Final[tuple[tuple[str, int], ...]] = (
    ("0b", 2),
    ("0x", 16),
    ("0", 8),
    ("$", 16),
    ("&", 8),
    ("%", 2),
)

# Разделители явного основания value~B / value(B
_BASE_SEPARATORS: Final[tuple[str, ...]] = ("~", "(")


def _is_valid_base(base: int) -> bool:
    return MIN_DISPLAY_BASE <= base <= MAX_DISPLAY_BASE


def _digit_value(char: str) -> int:
    """Числовое значение символа digit или -1 для недопустимого символа."""
    return DIGIT_CHARS.find(char.upper()) if len(char) == 1 else -1


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_with_base(text: str, base: int) -> OperationResult[BigInteger]:
    """
    Разбор текста строго в заданном основании (без маркеров).

    Допускается ведущий минус. Пустой текст — ноль.

    Args:
        text: Digits в основании base
        base: Основание 2..16

    Returns:
        OperationResult; INVALID_BASE и ноль, если base вне [2, 16] или
        встретился digit >= base
    """
    if not _is_valid_base(base):
        return OperationResult(BigInteger.zero(DEFAULT_DISPLAY_BASE), OperationStatus.INVALID_BASE)
    zero = BigInteger.zero(base)
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    radix = BigInteger.from_digits([base], display_base=base)
    accumulator = zero
    for char in text:
        value = _digit_value(char)
        if value < 0 or value >= base:
            return OperationResult(zero, OperationStatus.INVALID_BASE)
        accumulator = multiply(accumulator, radix).value
        accumulator = add(accumulator, BigInteger.from_digits([value], display_base=base)).value

    if negative:
        accumulator = accumulator.negate()
    return OperationResult(accumulator.with_display_base(base))


def parse(text: str, default_base: int = DEFAULT_DISPLAY_BASE) -> OperationResult[BigInteger]:
    """
    Разбор текста с распознаванием маркеров основания.

    Args:
        text: Текст числа в любой поддерживаемой нотации
        default_base: Основание, если маркера нет

    Returns:
        OperationResult; display base результата равен разобранному
        основанию. INVALID_BASE при недопустимом digit или основании.

    Examples:
        >>> str(parse("-202(7").value)
        '-202'
        >>> int(parse("-202(7").value)
        -100
    """
    if not text:
        return parse_with_base("", default_base)
    sign = ""
    if text.startswith("-"):
        sign = "-"
        text = text[1:]
    if not text:
        return parse_with_base("", default_base)

    for prefix, base in _PREFIXES:
        if text.startswith(prefix):
            return parse_with_base(sign + text[len(prefix):], base)

    if text[-1] in "hH":
        return parse_with_base(sign + text[:-1], 16)
    if text[0] in "oO":
        return parse_with_base(sign + text[1:], 8)
    if text[-1] in "oO":
        return parse_with_base(sign + text[:-1], 8)

    for separator in _BASE_SEPARATORS:
        position = text.find(separator)
        if position < 0:
            continue
        base_text = text[position + 1:]
        if not (base_text.isascii() and base_text.isdigit()):
            return OperationResult(BigInteger.zero(default_base), OperationStatus.INVALID_BASE)
        base = int(base_text)
        if not _is_valid_base(base):
            return OperationResult(BigInteger.zero(default_base), OperationStatus.INVALID_BASE)
        return parse_with_base(sign + text[:position], base)

    return parse_with_base(sign + text, default_base)


# =============================================================================
# РЕНДЕРИНГ
# =============================================================================


def render(number: BigInteger, base: int | None = None) -> OperationResult[str]:
    """
    Рендеринг числа в основании base (по умолчанию — display base числа).

    Значение без знака многократно делится на основание делением ядра;
    каждый остаток даёт digit 0-9/A-F, который добавляется слева.

    Returns:
        OperationResult; INVALID_BASE и пустая строка, если base вне [2, 16]
    """
    if base is None:
        base = number.display_base
    if not _is_valid_base(base):
        return OperationResult("", OperationStatus.INVALID_BASE)
    if number.is_zero:
        return OperationResult("0")

    radix = BigInteger.from_digits([base])
    current = number.absolute()
    chars: list[str] = []
    while not current.is_zero:
        step = divide(current, radix)
        chars.append(DIGIT_CHARS[step.remainder.digit_at(0)])
        current = step.quotient
    if not number.is_positive:
        chars.append("-")
    return OperationResult("".join(reversed(chars)))


# Сокращения для фиксированных оснований


def parse_bin(text: str) -> OperationResult[BigInteger]:
    return parse_with_base(text, 2)


def parse_oct(text: str) -> OperationResult[BigInteger]:
    return parse_with_base(text, 8)


def parse_dec(text: str) -> OperationResult[BigInteger]:
    return parse_with_base(text, 10)


def parse_hex(text: str) -> OperationResult[BigInteger]:
    return parse_with_base(text, 16)


def render_bin(number: BigInteger) -> OperationResult[str]:
    return render(number, 2)


def render_oct(number: BigInteger) -> OperationResult[str]:
    return render(number, 8)


def render_dec(number: BigInteger) -> OperationResult[str]:
    return render(number, 10)


def render_hex(number: BigInteger) -> OperationResult[str]:
    return render(number, 16)
