"""
Number Records — текстовая запись числа в виде dict

Формат записи (контракт number_record):
    {"value": "<текст в основании display_base>", "display_base": B}

Значение хранится в текстовой нотации без маркеров, поэтому запись
однозначно восстанавливается через parse_with_base.
"""

from typing import Any, Dict

from bignum.core.contracts import validate_number_record
from bignum.core.conversion.text import parse_with_base, render
from bignum.core.domain.big_integer import BigInteger
from bignum.core.domain.status import OperationResult


def to_record(number: BigInteger) -> Dict[str, Any]:
    """Запись числа в его display base."""
    return {"value": render(number).value, "display_base": number.display_base}


def from_record(data: Dict[str, Any]) -> OperationResult[BigInteger]:
    """
    Восстановление числа из записи.

    Raises:
        jsonschema.ValidationError: Если запись не соответствует контракту
    """
    validate_number_record(data)
    return parse_with_base(data["value"], data["display_base"])
