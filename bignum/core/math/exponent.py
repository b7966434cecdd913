"""
Exponentiation Engine — square-and-multiply

Биты показателя обходятся от младшего к старшему:
    result = 1, current = base
    bit_i == 1 → result = result * current [mod m]
    не последний бит → current = current * current [mod m]

Правила:
- отрицательный показатель → 0 (дробных результатов на целых нет)
- нулевое основание → 0 для любого показателя (включая 0)
- нулевой показатель → 1
- знак результата отрицателен, только если основание отрицательно и
  показатель нечётен

Без модуля результат растёт неограниченно: большие показатели могут
исчерпать память.
"""

from bignum.core.domain.big_integer import BigInteger
from bignum.core.domain.status import OperationResult, OperationStatus
from bignum.core.math.magnitude import divmod_magnitudes, multiply_magnitudes


def exponent(
    base: BigInteger, power: BigInteger, modulus: BigInteger | None = None
) -> OperationResult[BigInteger]:
    """
    base ** power (или base ** power mod modulus).

    Args:
        base: Основание
        power: Показатель
        modulus: Необязательный модуль; основание приводится до цикла, каждое
            умножение ограничено модулем

    Returns:
        OperationResult со степенью; DIVISION_BY_ZERO при нулевом модуле

    Examples:
        >>> int(exponent(BigInteger.from_digits([3], False), BigInteger.from_digits([3])).value)
        -27
    """
    display_base = base.inherit_display_base(power)
    if modulus is not None and modulus.is_zero:
        return OperationResult(BigInteger.zero(display_base), OperationStatus.DIVISION_BY_ZERO)

    m = modulus.digits if modulus is not None else None
    current = list(base.digits)
    if m is not None:
        current = divmod_magnitudes(current, m)[1]

    if not current or not power.is_positive:
        return OperationResult(BigInteger.zero(display_base))
    result = [1] if m is None else divmod_magnitudes([1], m)[1]
    if power.is_zero:
        return OperationResult(BigInteger.from_digits(result, display_base=display_base))

    bits = power.bit_length
    for i in range(bits):
        if power.bit_at(i):
            result = multiply_magnitudes(result, current, m)
        if i < bits - 1:
            current = multiply_magnitudes(current, current, m)

    positive = base.is_positive or not power.bit_at(0)
    return OperationResult(
        BigInteger.from_digits(result, is_positive=positive, display_base=display_base)
    )
