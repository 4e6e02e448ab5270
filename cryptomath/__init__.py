"""
cryptomath - number theory for learning cryptography fundamentals.

Modules:
- algebra: gcd, lcm, primality, factorisation
- modular: modular exponentiation and inverse, CRT, totient, Z/nZ
- errors: MathError hierarchy
"""

__version__ = "0.1.0"

from .errors import (
    MathError,
    DivisionByZeroError,
    PositiveIntegerRequiredError,
    MathOverflowError,
    OutOfRangeError,
    NoInverseError,
)
from .algebra.gcd import gcd, gcd_abs, extended_gcd
from .algebra.lcm import lcm, lcm_all
from .algebra.prime import (
    is_prime_number,
    is_probably_prime,
    generate_prime,
    primes_up_to,
    factorize,
)
from .modular.arithmetic import mod_exp, mod_inverse, crt, euler_phi
from .modular.ring import IntegerModRing, ModInt
from .config import INT64_MAX

__all__ = [
    # Errors
    'MathError',
    'DivisionByZeroError',
    'PositiveIntegerRequiredError',
    'MathOverflowError',
    'OutOfRangeError',
    'NoInverseError',
    # Algebra
    'gcd',
    'gcd_abs',
    'extended_gcd',
    'lcm',
    'lcm_all',
    'is_prime_number',
    'is_probably_prime',
    'generate_prime',
    'primes_up_to',
    'factorize',
    # Modular arithmetic
    'mod_exp',
    'mod_inverse',
    'crt',
    'euler_phi',
    'IntegerModRing',
    'ModInt',
    'INT64_MAX',
]
