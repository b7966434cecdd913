"""
Тесты для Float Conversion (приближённые конверсии)
"""

import math

import pytest

from bignum.core.conversion.floats import from_float, to_float
from bignum.core.conversion.integers import from_int


class TestFromFloat:
    """from_float"""

    @pytest.mark.parametrize("value", [1.0, 1.5, -2.75, 0.5, -0.99, 12345.678, 2.0**100, -(2.0**70) * 3, 1e30, 1e-300])
    def test_truncates_toward_zero(self, value: float) -> None:
        assert int(from_float(value)) == int(value)

    def test_zero(self) -> None:
        assert from_float(0.0).is_zero
        assert from_float(-0.0).is_positive

    def test_display_base(self) -> None:
        assert from_float(3.0, display_base=16).display_base == 16

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value: float) -> None:
        with pytest.raises(ValueError):
            from_float(value)


class TestToFloat:
    """to_float"""

    def test_exact_small(self) -> None:
        assert to_float(from_int(0)) == 0.0
        assert to_float(from_int(12345)) == 12345.0
        assert to_float(from_int(-(2**40 + 5))) == float(-(2**40 + 5))

    def test_power_of_two(self) -> None:
        assert to_float(from_int(2**100)) == 2.0**100

    @pytest.mark.parametrize("value", [3**100, -(7**200), 10**300])
    def test_approximate(self, value: int) -> None:
        assert to_float(from_int(value)) == pytest.approx(float(value), rel=1e-9)

    def test_overflow(self) -> None:
        assert to_float(from_int(2**2000)) == math.inf
        assert to_float(from_int(-(2**2000))) == -math.inf
