"""
Modular Arithmetic

Implements the core operations of arithmetic modulo m:
- Modular exponentiation (square-and-multiply algorithm)
- Modular inverse via the Extended Euclidean Algorithm
- Chinese Remainder Theorem
- Euler's totient function

Note: This implementation avoids using Python's built-in pow(a, b, mod).
      All modular exponentiation uses the square-and-multiply algorithm.
"""

from typing import List, Sequence, Tuple

from ..algebra.gcd import extended_gcd
from ..errors import (
    DivisionByZeroError,
    NoInverseError,
    OutOfRangeError,
    PositiveIntegerRequiredError,
)
from ..logger import get_logger

logger = get_logger(__name__)


def _check_modulus(m: int) -> None:
    if m == 0:
        raise DivisionByZeroError("Modulus must be non-zero", {'modulus': m})
    if m < 0:
        raise PositiveIntegerRequiredError("Modulus must be positive", {'modulus': m})


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Modular exponentiation using square-and-multiply algorithm.

    Computes (base^exponent) mod modulus efficiently without using
    Python's built-in pow(a, b, mod).

    Algorithm (right-to-left binary method):
    1. Start with result = 1
    2. For each bit of exponent (from LSB to MSB):
       - If bit is 1, multiply result by base (mod modulus)
       - Square the base (mod modulus)

    Time complexity: O(log exponent) multiplications

    Args:
        base: The base number
        exponent: The exponent (must be non-negative)
        modulus: The modulus (must be positive)

    Returns:
        (base^exponent) mod modulus, in [0, modulus)

    Raises:
        OutOfRangeError: If exponent < 0
        DivisionByZeroError: If modulus == 0
        PositiveIntegerRequiredError: If modulus < 0
    """
    if exponent < 0:
        raise OutOfRangeError("Exponent must be non-negative", {'exponent': exponent})
    _check_modulus(modulus)
    if modulus == 1:
        return 0

    base = base % modulus
    result = 1

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1

    return result


def mod_inverse(a: int, m: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.

    Finds x such that (a * x) mod m = 1

    Args:
        a: The number to find inverse of
        m: The modulus (must be positive)

    Returns:
        Modular inverse of a mod m, in [0, m)

    Raises:
        DivisionByZeroError: If m == 0
        PositiveIntegerRequiredError: If m < 0
        NoInverseError: If gcd(a, m) != 1
    """
    _check_modulus(m)
    if m == 1:
        return 0

    g, x, _ = extended_gcd(a % m, m)

    if g != 1:
        raise NoInverseError(
            f"Modular inverse doesn't exist (gcd({a}, {m}) = {g})",
            {'a': a, 'm': m, 'gcd': g},
        )

    return x % m


def crt(residues: Sequence[int], moduli: Sequence[int]) -> Tuple[int, int]:
    """
    Solve a system of congruences with the Chinese Remainder Theorem.

    Finds the unique x in [0, M) with x ≡ residues[i] (mod moduli[i]) for
    every i, where M is the product of the (pairwise coprime) moduli.

    Example:
        >>> crt([2, 3, 2], [3, 5, 7])
        (23, 105)

    Raises:
        OutOfRangeError: If the inputs are empty or of different lengths
        PositiveIntegerRequiredError: If a modulus is < 1
        NoInverseError: If two moduli share a factor
    """
    if len(residues) != len(moduli) or not moduli:
        raise OutOfRangeError(
            "Residues and moduli must be non-empty and of equal length",
            {'residues': len(residues), 'moduli': len(moduli)},
        )
    for m in moduli:
        if m < 1:
            raise PositiveIntegerRequiredError("Moduli must be positive", {'modulus': m})

    x, big_m = 0, 1
    for r, m in zip(residues, moduli):
        # Lift x (mod big_m) to the combined modulus big_m * m
        try:
            inv = mod_inverse(big_m % m, m)
        except NoInverseError:
            raise NoInverseError(
                f"Moduli are not pairwise coprime (modulus {m})",
                {'moduli': list(moduli)},
            ) from None
        t = ((r - x) * inv) % m
        x += big_m * t
        big_m *= m
        logger.debug("crt_step", modulus=m, partial=x, combined_modulus=big_m)

    return x % big_m, big_m


def euler_phi(n: int) -> int:
    """
    Euler's totient: the count of 1 <= k <= n with gcd(k, n) == 1.

    Uses phi(n) = n * prod(1 - 1/p) over the prime divisors p of n.

    Raises:
        PositiveIntegerRequiredError: If n < 1
    """
    if n < 1:
        raise PositiveIntegerRequiredError(details={'n': n})

    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def residues_coprime_to(n: int) -> List[int]:
    """Reduced residue system mod n: every k in [0, n) coprime to n."""
    if n < 1:
        raise PositiveIntegerRequiredError(details={'n': n})
    if n == 1:
        return [0]
    return [k for k in range(1, n) if extended_gcd(k, n)[0] == 1]
