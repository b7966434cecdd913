"""
BigInteger — Модель знакового целого произвольной точности

Immutable Pydantic модель: знак + канонический little-endian буфер 32-битных
digits + display base. Все операции value-in/value-out, алиасинга между
операндами и результатом нет.

Правило display base для бинарных операций: результат наследует display
base первого операнда, кроме случая, когда первый операнд равен нулю, тогда
наследуется display base второго операнда.

Арифметические операторы делегируют в MathContext текущего потока, поэтому
статус операции и политика raise_on_error применяются и к ним. Операнды int
конвертируются точно; str и float должны конвертироваться явно.
"""

from typing import Final, Sequence

from pydantic import BaseModel, Field, field_validator

from bignum.core.domain.digits import (
    DIGIT_BASE,
    bit_at,
    bit_length,
    digit_at,
    int_from_digits,
    is_canonical,
    trim,
)

# =============================================================================
# КОНСТАНТЫ DISPLAY BASE
# =============================================================================

MIN_DISPLAY_BASE: Final[int] = 2
MAX_DISPLAY_BASE: Final[int] = 16
DEFAULT_DISPLAY_BASE: Final[int] = 10


# =============================================================================
# BIG INTEGER MODEL
# =============================================================================


class BigInteger(BaseModel):
    """
    Знаковое целое неограниченной величины.

    Immutable модель (frozen=True). Любая операция создаёт новый экземпляр.
    Ноль канонически положителен и имеет пустой буфер digits.
    """

    digits: tuple[int, ...] = Field(
        default=(), description="Magnitude: little-endian digits base 2^32"
    )
    is_positive: bool = Field(default=True, description="Знак (ноль всегда положителен)")
    display_base: int = Field(
        default=DEFAULT_DISPLAY_BASE,
        ge=MIN_DISPLAY_BASE,
        le=MAX_DISPLAY_BASE,
        description="Основание для отображения по умолчанию",
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Буфер digits должен быть каноническим."""
        if not is_canonical(v):
            raise ValueError(
                f"digits must be canonical base {DIGIT_BASE} values without a leading zero"
            )
        return v

    @field_validator("is_positive")
    @classmethod
    def validate_zero_is_positive(cls, v: bool, info) -> bool:
        """Ноль не может быть отрицательным."""
        if not v and "digits" in info.data and not info.data["digits"]:
            raise ValueError("zero must be positive")
        return v

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(
        cls,
        digits: Sequence[int],
        is_positive: bool = True,
        display_base: int = DEFAULT_DISPLAY_BASE,
    ) -> "BigInteger":
        """
        Построение из произвольного буфера с канонизацией.

        Удаляет старшие нулевые digits; пустой результат делает знак
        положительным.
        """
        canonical = trim(list(digits))
        return cls(
            digits=tuple(canonical),
            is_positive=is_positive or not canonical,
            display_base=display_base,
        )

    @classmethod
    def zero(cls, display_base: int = DEFAULT_DISPLAY_BASE) -> "BigInteger":
        return cls(display_base=display_base)

    @classmethod
    def one(cls, display_base: int = DEFAULT_DISPLAY_BASE) -> "BigInteger":
        return cls(digits=(1,), display_base=display_base)

    @classmethod
    def from_int(cls, value: int, display_base: int | None = None) -> "BigInteger":
        """Явная точная конверсия из int (через контекст потока)."""
        from bignum.context import get_context

        return get_context().from_int(value, display_base=display_base)

    @classmethod
    def from_str(cls, text: str, base: int | None = None) -> "BigInteger":
        """
        Явный разбор текста (через контекст потока).

        Без base распознаются префиксы/суффиксы оснований; с base текст
        разбирается строго в этом основании.
        """
        from bignum.context import get_context

        if base is None:
            return get_context().parse(text)
        return get_context().parse_with_base(text, base)

    @classmethod
    def from_float(cls, value: float) -> "BigInteger":
        """Явная приближённая конверсия из float (через контекст потока)."""
        from bignum.context import get_context

        return get_context().from_float(value)

    # -------------------------------------------------------------------------
    # Digit Buffer
    # -------------------------------------------------------------------------

    @property
    def bit_length(self) -> int:
        """Позиция старшего установленного бита + 1; 0 для нуля."""
        return bit_length(self.digits)

    @property
    def is_zero(self) -> bool:
        return not self.digits

    def digit_at(self, position: int) -> int:
        return digit_at(self.digits, position)

    def bit_at(self, position: int) -> bool:
        return bit_at(self.digits, position)

    # -------------------------------------------------------------------------
    # Унарные операции (статус не меняют)
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInteger":
        if self.is_zero:
            return self
        return BigInteger(
            digits=self.digits, is_positive=not self.is_positive, display_base=self.display_base
        )

    def absolute(self) -> "BigInteger":
        if self.is_positive:
            return self
        return BigInteger(digits=self.digits, display_base=self.display_base)

    def with_display_base(self, display_base: int) -> "BigInteger":
        """Та же величина с другим display base."""
        return BigInteger(
            digits=self.digits, is_positive=self.is_positive, display_base=display_base
        )

    def inherit_display_base(self, other: "BigInteger") -> int:
        """
        Display base результата бинарной операции self <op> other.

        Первый операнд определяет base, если он не ноль; иначе второй.
        """
        if self.is_zero:
            return other.display_base
        return self.display_base

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> "BigInteger | None":
        if isinstance(other, BigInteger):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            from bignum.context import get_context

            return get_context().from_int(other)
        return None

    def _context(self):
        from bignum.context import get_context

        return get_context()

    def __add__(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().add(self, rhs)

    def __radd__(self, other: object) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._context().add(lhs, self)

    def __sub__(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().subtract(self, rhs)

    def __rsub__(self, other: object) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._context().subtract(lhs, self)

    def __mul__(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().multiply(self, rhs)

    def __rmul__(self, other: object) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._context().multiply(lhs, self)

    def __floordiv__(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().quotient(self, rhs)

    def __rfloordiv__(self, other: object) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._context().quotient(lhs, self)

    def __mod__(self, other: object) -> "BigInteger":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().remainder(self, rhs)

    def __rmod__(self, other: object) -> "BigInteger":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return self._context().remainder(lhs, self)

    def __divmod__(self, other: object) -> tuple["BigInteger", "BigInteger"]:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().divide(self, rhs)

    def __pow__(self, other: object, modulo: object = None) -> "BigInteger":
        exponent = self._coerce(other)
        if exponent is None:
            return NotImplemented
        modulus = None
        if modulo is not None:
            modulus = self._coerce(modulo)
            if modulus is None:
                return NotImplemented
        return self._context().exponent(self, exponent, modulus)

    def __rpow__(self, other: object) -> "BigInteger":
        base = self._coerce(other)
        if base is None:
            return NotImplemented
        return self._context().exponent(base, self)

    def __neg__(self) -> "BigInteger":
        return self.negate()

    def __pos__(self) -> "BigInteger":
        return self

    def __abs__(self) -> "BigInteger":
        return self.absolute()

    def __bool__(self) -> bool:
        return not self.is_zero

    def __int__(self) -> int:
        magnitude = int_from_digits(self.digits)
        return magnitude if self.is_positive else -magnitude

    # Сравнения по значению, display base не учитывается

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().equal(self, rhs)

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().less(self, rhs)

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().less_equal(self, rhs)

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().greater(self, rhs)

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._context().greater_equal(self, rhs)

    def __hash__(self) -> int:
        return hash(int(self))

    # Текстовое представление

    def __str__(self) -> str:
        from bignum.core.conversion.text import render

        return render(self).value

    def __repr__(self) -> str:
        return f"BigInteger('{self}', display_base={self.display_base})"
