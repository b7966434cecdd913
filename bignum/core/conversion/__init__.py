"""
Conversion Layer — int, text, float и записи ⇄ BigInteger.
"""

from bignum.core.conversion.floats import from_float, to_float
from bignum.core.conversion.integers import IntegerWidth, from_int, to_int
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

__all__ = [
    "IntegerWidth",
    "from_int",
    "to_int",
    "from_float",
    "to_float",
    "parse",
    "parse_with_base",
    "parse_bin",
    "parse_oct",
    "parse_dec",
    "parse_hex",
    "render",
    "render_bin",
    "render_oct",
    "render_dec",
    "render_hex",
]
