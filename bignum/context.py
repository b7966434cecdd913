"""
MathContext — конфигурация и канал статуса

Контекст владеет конфигурацией и статусом последней операции. Каждый метод
контекста вызывает чистую операцию, перезаписывает last_status
(last-write-wins), пишет WARNING в лог для неуспешного статуса и, если
включён raise_on_error, поднимает соответствующий LongMathError.

ВАЖНО: в цепочке выражений сохраняется только статус последней
подоперации. Например, ctx.multiply(a, ctx.parse("zzz")) при
raise_on_error=False оставит OK от multiply, хотя parse вернул
INVALID_BASE. Если статус важен, проверяйте его после каждого шага.

Контексты принадлежат вызывающему коду. Операторы BigInteger используют
контекст текущего потока (get_context / set_context / math_context), так
что потоки не делят статус.
"""

import logging
import random
import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, TypeVar

from pydantic import BaseModel, Field

from bignum.core.contracts import validate_longmath_config
from bignum.core.conversion import floats, integers, records, text
from bignum.core.conversion.integers import IntegerWidth
from bignum.core.domain.big_integer import (
    DEFAULT_DISPLAY_BASE,
    MAX_DISPLAY_BASE,
    MIN_DISPLAY_BASE,
    BigInteger,
)
from bignum.core.domain.status import (
    DivisionResult,
    OperationResult,
    OperationStatus,
    error_for_status,
)
from bignum.core.math.exponent import exponent as power
from bignum.core.math import kernel, number_theory, relational

logger = logging.getLogger(__name__)

T = TypeVar("T")


# =============================================================================
# CONFIG
# =============================================================================


class LongMathConfig(BaseModel):
    """
    Конфигурация MathContext.

    Immutable модель (frozen=True); для изменения создаётся новый контекст.
    """

    default_display_base: int = Field(
        default=DEFAULT_DISPLAY_BASE,
        ge=MIN_DISPLAY_BASE,
        le=MAX_DISPLAY_BASE,
        description="Display base для значений из int/float и основание разбора без маркера",
    )
    raise_on_error: bool = Field(
        default=True, description="Поднимать исключение в дополнение к статусу"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LongMathConfig":
        """
        Построение из документа конфигурации.

        Raises:
            jsonschema.ValidationError: Если документ не соответствует контракту
        """
        validate_longmath_config(data)
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()


# =============================================================================
# CONTEXT
# =============================================================================


class MathContext:
    """
    Фасад над всеми публичными операциями с каналом статуса.

    Attributes:
        config: Конфигурация контекста
        last_status: Статус последней операции этого контекста
    """

    def __init__(self, config: LongMathConfig | None = None, rng: random.Random | None = None):
        """
        Args:
            config: конфигурация (по умолчанию LongMathConfig())
            rng: источник случайности для random_number
        """
        self.config = config or LongMathConfig()
        self.rng = rng
        self.last_status = OperationStatus.OK

    # -------------------------------------------------------------------------
    # Канал статуса
    # -------------------------------------------------------------------------

    def _set_status(self, status: OperationStatus, operation: str) -> None:
        self.last_status = status
        if status == OperationStatus.OK:
            return
        logger.warning("%s finished with status %s", operation, status.value)
        if self.config.raise_on_error:
            raise error_for_status(status)

    def _record(self, result: OperationResult[T], operation: str) -> T:
        self._set_status(result.status, operation)
        return result.value

    def _ok(self, value: T) -> T:
        self.last_status = OperationStatus.OK
        return value

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def from_int(self, value: int, display_base: int | None = None) -> BigInteger:
        base = display_base or self.config.default_display_base
        return self._ok(integers.from_int(value, base))

    def to_int(self, number: BigInteger, width: IntegerWidth | None = None) -> int:
        return self._record(integers.to_int(number, width), "to_int")

    def to_uint8(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.UINT8)

    def to_uint16(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.UINT16)

    def to_uint32(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.UINT32)

    def to_uint64(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.UINT64)

    def to_int8(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.INT8)

    def to_int16(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.INT16)

    def to_int32(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.INT32)

    def to_int64(self, number: BigInteger) -> int:
        return self.to_int(number, IntegerWidth.INT64)

    def parse(self, value: str) -> BigInteger:
        """Разбор с маркерами; без маркера — default_display_base."""
        return self._record(text.parse(value, self.config.default_display_base), "parse")

    def parse_with_base(self, value: str, base: int) -> BigInteger:
        return self._record(text.parse_with_base(value, base), "parse_with_base")

    def parse_bin(self, value: str) -> BigInteger:
        return self.parse_with_base(value, 2)

    def parse_oct(self, value: str) -> BigInteger:
        return self.parse_with_base(value, 8)

    def parse_dec(self, value: str) -> BigInteger:
        return self.parse_with_base(value, 10)

    def parse_hex(self, value: str) -> BigInteger:
        return self.parse_with_base(value, 16)

    def render(self, number: BigInteger, base: int | None = None) -> str:
        """Текст в base или в display base числа."""
        return self._record(text.render(number, base), "render")

    def render_bin(self, number: BigInteger) -> str:
        return self.render(number, 2)

    def render_oct(self, number: BigInteger) -> str:
        return self.render(number, 8)

    def render_dec(self, number: BigInteger) -> str:
        return self.render(number, 10)

    def render_hex(self, number: BigInteger) -> str:
        return self.render(number, 16)

    def from_float(self, value: float) -> BigInteger:
        return self._ok(floats.from_float(value, self.config.default_display_base))

    def to_float(self, number: BigInteger) -> float:
        return self._ok(floats.to_float(number))

    def to_record(self, number: BigInteger) -> Dict[str, Any]:
        return self._ok(records.to_record(number))

    def from_record(self, data: Dict[str, Any]) -> BigInteger:
        return self._record(records.from_record(data), "from_record")

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, a: BigInteger, b: BigInteger, modulus: BigInteger | None = None) -> BigInteger:
        return self._record(kernel.add(a, b, modulus), "add")

    def subtract(
        self, a: BigInteger, b: BigInteger, modulus: BigInteger | None = None
    ) -> BigInteger:
        return self._record(kernel.subtract(a, b, modulus), "subtract")

    def multiply(
        self, a: BigInteger, b: BigInteger, modulus: BigInteger | None = None
    ) -> BigInteger:
        return self._record(kernel.multiply(a, b, modulus), "multiply")

    def divide(self, dividend: BigInteger, divisor: BigInteger) -> tuple[BigInteger, BigInteger]:
        """(quotient, remainder); remainder имеет знак делимого."""
        result: DivisionResult = kernel.divide(dividend, divisor)
        self._set_status(result.status, "divide")
        return result.quotient, result.remainder

    def quotient(self, dividend: BigInteger, divisor: BigInteger) -> BigInteger:
        return self._record(kernel.quotient(dividend, divisor), "quotient")

    def remainder(self, dividend: BigInteger, divisor: BigInteger) -> BigInteger:
        return self._record(kernel.remainder(dividend, divisor), "remainder")

    def fraction(self, dividend: BigInteger, divisor: BigInteger) -> float:
        return self._record(kernel.fraction(dividend, divisor), "fraction")

    def exponent(
        self, base: BigInteger, exponent: BigInteger, modulus: BigInteger | None = None
    ) -> BigInteger:
        return self._record(power(base, exponent, modulus), "exponent")

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def less(self, a: BigInteger, b: BigInteger) -> bool:
        return self._ok(relational.less_than(a, b))

    def greater(self, a: BigInteger, b: BigInteger) -> bool:
        return self._ok(relational.greater_than(a, b))

    def less_equal(self, a: BigInteger, b: BigInteger) -> bool:
        return self._ok(relational.less_equal(a, b))

    def greater_equal(self, a: BigInteger, b: BigInteger) -> bool:
        return self._ok(relational.greater_equal(a, b))

    def equal(self, a: BigInteger, b: BigInteger) -> bool:
        return self._ok(relational.equal(a, b))

    def compare(self, a: BigInteger, b: BigInteger) -> int:
        return self._ok(relational.compare(a, b))

    # -------------------------------------------------------------------------
    # Number theory
    # -------------------------------------------------------------------------

    def is_even(self, number: BigInteger) -> bool:
        return self._ok(number_theory.is_even(number))

    def is_odd(self, number: BigInteger) -> bool:
        return self._ok(number_theory.is_odd(number))

    def is_probable_prime(self, number: BigInteger) -> bool:
        return self._ok(number_theory.is_probable_prime(number))

    def next_probable_prime(self, number: BigInteger) -> BigInteger:
        return self._ok(number_theory.next_probable_prime(number))

    def random_number(self, bits: int) -> BigInteger:
        return self._ok(
            number_theory.random_number(
                bits, rng=self.rng, display_base=self.config.default_display_base
            )
        )


# =============================================================================
# КОНТЕКСТ ПОТОКА
# =============================================================================

_local = threading.local()


def get_context() -> MathContext:
    """Контекст текущего потока (создаётся лениво с конфигурацией по умолчанию)."""
    context = getattr(_local, "context", None)
    if context is None:
        context = MathContext()
        _local.context = context
    return context


def set_context(context: MathContext) -> None:
    _local.context = context


@contextmanager
def math_context(config: LongMathConfig | None = None) -> Iterator[MathContext]:
    """
    Временный контекст текущего потока.

    Example:
        >>> with math_context(LongMathConfig(raise_on_error=False)) as ctx:
        ...     _ = BigInteger.from_int(1) // BigInteger.from_int(0)
        ...     ctx.last_status.value
        'DIVISION_BY_ZERO'
    """
    previous = getattr(_local, "context", None)
    context = MathContext(config)
    _local.context = context
    try:
        yield context
    finally:
        _local.context = previous
