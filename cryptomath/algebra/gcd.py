"""
Greatest Common Divisor

Implements Euclid's algorithm in three flavours:
- gcd: signed result, using truncated (round-toward-zero) remainders
- gcd_abs: the same computation, always non-negative
- extended_gcd: Bezout coefficients (a*x + b*y = g)

The signed variant reproduces the remainder sequence machine integers
produce, so the sign of the result depends on the operands:

    >>> gcd(48, 88), gcd(48, -88), gcd(-48, 88), gcd(-48, -88)
    (8, 8, -8, -8)
"""

from typing import Tuple

from ..errors import DivisionByZeroError


def _truncated_rem(a: int, b: int) -> int:
    """Remainder of a / b rounded toward zero; takes the sign of a."""
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using Euclid's algorithm.

    At each step r = a rem b; when r is zero the current divisor b is the
    result, otherwise the pair (b, r) is reduced further.

    Args:
        a: First integer
        b: Second integer (divisor, must be non-zero)

    Returns:
        GCD of a and b, signed as described in the module docstring

    Raises:
        DivisionByZeroError: If b == 0
    """
    if b == 0:
        raise DivisionByZeroError(details={'a': a, 'b': b})

    while True:
        r = _truncated_rem(a, b)
        if r == 0:
            return b
        a, b = b, r


def gcd_abs(a: int, b: int) -> int:
    """
    Greatest common divisor as a non-negative integer.

    Raises:
        DivisionByZeroError: If b == 0
    """
    return abs(gcd(a, b))


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean Algorithm.

    Finds integers x, y such that: a*x + b*y = g, where g >= 0 is the
    greatest common divisor of a and b.

    Args:
        a: First integer
        b: Second integer

    Returns:
        Tuple (g, x, y) where a*x + b*y = g
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1

    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    if old_r < 0:
        return -old_r, -old_x, -old_y
    if old_r == 0:
        # a == b == 0
        return 0, 0, 0
    return old_r, old_x, old_y
