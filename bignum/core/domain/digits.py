"""
Digit Buffer — каноническое представление модуля числа

Модуль описывает низкоуровневое хранение magnitude:
- little-endian последовательность 32-битных digits (base 2^32)
- zero-extension при чтении digit/bit за пределами буфера
- канонизация (удаление старших нулевых digits)
- вычисление bit length как чистой функции от digits

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Канонический буфер не содержит старшего нулевого digit
2. Пустой буфер означает ноль
3. Каждый digit лежит в [0, DIGIT_BASE)
4. bit_length никогда не кэшируется, всегда пересчитывается из digits
"""

from typing import Final, Sequence

# =============================================================================
# КОНСТАНТЫ DIGIT BUFFER
# =============================================================================

# Ширина одного digit в битах
DIGIT_BITS: Final[int] = 32

# Основание позиционной системы (2^32)
DIGIT_BASE: Final[int] = 1 << DIGIT_BITS

# Маска одного digit
DIGIT_MASK: Final[int] = DIGIT_BASE - 1


# =============================================================================
# ДОСТУП К DIGITS И BITS
# =============================================================================


def digit_at(digits: Sequence[int], position: int) -> int:
    """
    Digit на позиции position с zero-extension.

    Args:
        digits: Little-endian буфер digits
        position: Индекс digit (0 = младший)

    Returns:
        digits[position] или 0, если позиция за пределами буфера
    """
    if position < 0:
        raise ValueError(f"digit position must be non-negative, got {position}")
    if position >= len(digits):
        return 0
    return digits[position]


def bit_at(digits: Sequence[int], position: int) -> bool:
    """
    Бит на позиции position (0 = младший бит младшего digit).

    За пределами буфера всегда False (zero-extension).
    """
    if position < 0:
        raise ValueError(f"bit position must be non-negative, got {position}")
    index, offset = divmod(position, DIGIT_BITS)
    return bool((digit_at(digits, index) >> offset) & 1)


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def trim(digits: list[int]) -> list[int]:
    """
    Удаление старших нулевых digits (in place).

    Args:
        digits: Изменяемый буфер digits

    Returns:
        Тот же список, приведённый к канонической форме
    """
    while digits and digits[-1] == 0:
        digits.pop()
    return digits


def is_canonical(digits: Sequence[int]) -> bool:
    """Проверка: все digits в диапазоне и нет старшего нулевого digit."""
    if digits and digits[-1] == 0:
        return False
    return all(0 <= d < DIGIT_BASE for d in digits)


def bit_length(digits: Sequence[int]) -> int:
    """
    Bit length канонического буфера.

    (digit_count - 1) * 32 + (позиция старшего бита старшего digit + 1);
    0 для пустого буфера.
    """
    if not digits:
        return 0
    return (len(digits) - 1) * DIGIT_BITS + digits[-1].bit_length()


# =============================================================================
# МОСТ С НАТИВНЫМ int
# =============================================================================


def digits_from_int(value: int) -> list[int]:
    """
    Разложение неотрицательного int в канонический буфер digits.

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"magnitude must be non-negative, got {value}")
    digits: list[int] = []
    while value:
        digits.append(value & DIGIT_MASK)
        value >>= DIGIT_BITS
    return digits


def int_from_digits(digits: Sequence[int]) -> int:
    """Сборка неотрицательного int из буфера digits."""
    value = 0
    for digit in reversed(digits):
        value = (value << DIGIT_BITS) | digit
    return value
