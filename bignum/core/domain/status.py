"""
Operation Status — статус операции и таксономия ошибок

Каждая операция возвращает явный результат со статусом вместо глобального
кода возврата. Ошибки локально восстановимы: при неуспехе значение всё равно
определено (как правило, ноль), поэтому игнорирование статуса даёт
детерминированный, но неверный ноль.

Таксономия:
- DIVISION_BY_ZERO: нулевой делитель или нулевой модуль
- INVALID_BASE: основание вне [2, 16] или digit, недопустимый для основания
- NEGATIVE_NUMBER: сужение отрицательного значения в беззнаковый тип
- NUMBER_TOO_LARGE: значение не помещается в целевую ширину
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


# =============================================================================
# ENUMS
# =============================================================================


class OperationStatus(str, Enum):
    """Статус последней операции"""

    OK = "OK"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_BASE = "INVALID_BASE"
    NEGATIVE_NUMBER = "NEGATIVE_NUMBER"
    NUMBER_TOO_LARGE = "NUMBER_TOO_LARGE"


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Результат операции: значение + статус."""

    value: T
    status: OperationStatus = OperationStatus.OK

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.OK


@dataclass(frozen=True)
class DivisionResult:
    """
    Результат деления: quotient + remainder + статус.

    Знак quotient = XOR знаков операндов.
    Знак remainder всегда совпадает со знаком делимого.
    """

    quotient: Any
    remainder: Any
    status: OperationStatus = OperationStatus.OK

    @property
    def ok(self) -> bool:
        return self.status == OperationStatus.OK


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LongMathError(Exception):
    """
    Базовая ошибка арифметики больших чисел.

    Поднимается только контекстом с raise_on_error=True; чистые операции
    сообщают об ошибке через статус результата.
    """

    status: OperationStatus = OperationStatus.OK


class DivisionByZeroError(LongMathError):
    """Деление (или приведение по модулю) на ноль."""

    status = OperationStatus.DIVISION_BY_ZERO


class InvalidBaseError(LongMathError):
    """Основание вне [2, 16] или digit, недопустимый для основания."""

    status = OperationStatus.INVALID_BASE


class NegativeNumberError(LongMathError):
    """Отрицательное значение при сужении в беззнаковый тип."""

    status = OperationStatus.NEGATIVE_NUMBER


class NumberTooLargeError(LongMathError):
    """Значение не помещается в целевую ширину."""

    status = OperationStatus.NUMBER_TOO_LARGE


_ERRORS_BY_STATUS: dict[OperationStatus, type[LongMathError]] = {
    OperationStatus.DIVISION_BY_ZERO: DivisionByZeroError,
    OperationStatus.INVALID_BASE: InvalidBaseError,
    OperationStatus.NEGATIVE_NUMBER: NegativeNumberError,
    OperationStatus.NUMBER_TOO_LARGE: NumberTooLargeError,
}

_ERROR_MESSAGES: dict[OperationStatus, str] = {
    OperationStatus.DIVISION_BY_ZERO: "Division by zero",
    OperationStatus.INVALID_BASE: "Invalid base specified",
    OperationStatus.NEGATIVE_NUMBER: "Negative number",
    OperationStatus.NUMBER_TOO_LARGE: "Number too large",
}


def error_for_status(status: OperationStatus) -> LongMathError:
    """
    Построение исключения для неуспешного статуса.

    Args:
        status: Статус операции (не OK)

    Returns:
        Экземпляр соответствующего подкласса LongMathError

    Raises:
        ValueError: Если status == OK
    """
    if status == OperationStatus.OK:
        raise ValueError("OK status has no associated error")
    return _ERRORS_BY_STATUS[status](_ERROR_MESSAGES[status])
