"""
Тесты для Number Records
"""

import pytest
from jsonschema import ValidationError

from bignum.core.conversion.integers import from_int
from bignum.core.conversion.records import from_record, to_record
from bignum.core.domain.status import OperationStatus


class TestToRecord:
    """to_record"""

    def test_hex(self) -> None:
        assert to_record(from_int(255, 16)) == {"value": "FF", "display_base": 16}

    def test_negative_base_seven(self) -> None:
        assert to_record(from_int(-100, 7)) == {"value": "-202", "display_base": 7}


class TestFromRecord:
    """from_record"""

    def test_round_trip(self) -> None:
        number = from_int(-(2**100) - 1, 3)
        restored = from_record(to_record(number))
        assert restored.ok
        assert restored.value == number
        assert restored.value.display_base == 3

    def test_digit_outside_base(self) -> None:
        result = from_record({"value": "FF", "display_base": 10})
        assert result.status == OperationStatus.INVALID_BASE
        assert result.value.is_zero

    @pytest.mark.parametrize(
        "data",
        [
            {"value": "10"},
            {"display_base": 10},
            {"value": "10", "display_base": 17},
            {"value": "10", "display_base": 1},
            {"value": "0x10", "display_base": 16},
            {"value": "", "display_base": 10},
            {"value": 10, "display_base": 10},
            {"value": "10", "display_base": 10, "extra": True},
        ],
    )
    def test_contract_violation(self, data) -> None:
        with pytest.raises(ValidationError):
            from_record(data)
