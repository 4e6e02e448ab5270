# Algebra Module
"""
Elementary number theory on integers:
- Greatest common divisor (signed, absolute, extended) - gcd.py
- Least common multiple with optional overflow ceiling - lcm.py
- Primality tests, prime generation, sieve, factorisation - prime.py
"""

from .gcd import gcd, gcd_abs, extended_gcd
from .lcm import lcm, lcm_all

_PRIME_EXPORTS = (
    'is_prime_number',
    'is_probably_prime',
    'generate_prime',
    'primes_up_to',
    'factorize',
)


# prime.py imports modular.arithmetic, which imports gcd.py: load it lazily
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    if name not in _PRIME_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from . import prime
    return getattr(prime, name)


__all__ = [
    'gcd',
    'gcd_abs',
    'extended_gcd',
    'lcm',
    'lcm_all',
    *_PRIME_EXPORTS,
]
