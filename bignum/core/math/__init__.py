"""
Core math modules

Арифметические ядра, возведение в степень, сравнения и number theory.
"""

# Core Kernel
from bignum.core.math.kernel import (
    add,
    divide,
    fraction,
    multiply,
    quotient,
    remainder,
    subtract,
)

# Exponentiation Engine
from bignum.core.math.exponent import exponent

# Relational Layer
from bignum.core.math.relational import (
    compare,
    equal,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
)

# Number theory
from bignum.core.math.number_theory import (
    SMALL_PRIMES,
    SMALL_PRIMES_PRODUCT,
    is_even,
    is_odd,
    is_probable_prime,
    next_probable_prime,
    random_number,
)

__all__ = [
    # Core Kernel
    "add",
    "subtract",
    "multiply",
    "divide",
    "quotient",
    "remainder",
    "fraction",
    # Exponentiation
    "exponent",
    # Relational
    "less_than",
    "greater_than",
    "less_equal",
    "greater_equal",
    "equal",
    "compare",
    # Number theory: constants
    "SMALL_PRIMES",
    "SMALL_PRIMES_PRODUCT",
    # Number theory: functions
    "is_even",
    "is_odd",
    "is_probable_prime",
    "next_probable_prime",
    "random_number",
]
