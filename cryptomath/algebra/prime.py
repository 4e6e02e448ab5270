"""
Prime Numbers

Implements primality testing and related number theory:
- Wilson's theorem primality test (exact, O(n))
- Miller-Rabin primality test (probabilistic, O(k log^3 n))
- Random prime generation
- Sieve of Eratosthenes
- Prime factorisation by trial division

Note: Wilson's theorem is a teaching tool, not a practical test. It needs
      n - 1 modular multiplications; use is_probably_prime for large n.
"""

import secrets
from typing import Dict, List, Optional

from .. import config
from ..errors import OutOfRangeError, PositiveIntegerRequiredError
from ..logger import get_logger
from ..modular.arithmetic import mod_exp

logger = get_logger(__name__)

SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47)


def is_prime_number(n: int) -> Optional[int]:
    """
    Primality test based on Wilson's theorem.

    Wilson's theorem: n > 1 is prime if and only if
        (n - 1)! ≡ -1 (mod n)

    The factorial is reduced mod n after every multiplication so the
    running product never exceeds n^2.

    Args:
        n: Number to test (must be >= 2)

    Returns:
        n if n is prime, None otherwise

    Raises:
        OutOfRangeError: If n < 2
    """
    if n < 2:
        raise OutOfRangeError(details={'n': n})

    factorial = 1
    for i in range(1, n):
        factorial = (factorial * i) % n

    if (factorial + 1) % n == 0:
        return n
    return None


def is_probably_prime(n: int, rounds: Optional[int] = None) -> bool:
    """
    Miller-Rabin primality test.

    A probabilistic test that determines if n is probably prime.
    Probability of false positive: at most (1/4)^rounds

    Algorithm:
    1. Write n-1 as 2^r * d (factor out powers of 2)
    2. For each random witness a:
       - Compute x = a^d mod n
       - If x = 1 or x = n-1, continue
       - Square x up to r-1 times, looking for n-1
       - If never found, n is composite

    Args:
        n: Number to test for primality
        rounds: Number of witnesses to test (default: config.MILLER_RABIN_ROUNDS)

    Returns:
        True if n is probably prime, False if definitely composite

    Raises:
        OutOfRangeError: If rounds < 1
    """
    if rounds is None:
        rounds = config.MILLER_RABIN_ROUNDS
    if rounds < 1:
        raise OutOfRangeError("Miller-Rabin needs at least one round", {'rounds': rounds})

    if n < 2:
        return False

    # Small prime check for efficiency
    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    # Write n-1 as 2^r * d
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2

    for _ in range(rounds):
        # Random witness in range [2, n-2]
        a = secrets.randbelow(n - 3) + 2
        x = mod_exp(a, d, n)

        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False

    return True


def generate_prime(bits: int, rounds: Optional[int] = None) -> int:
    """
    Generate a random prime number of specified bit length.

    Args:
        bits: Desired bit length of the prime
        rounds: Miller-Rabin rounds per candidate

    Returns:
        A (probable) prime with exactly `bits` bits

    Raises:
        OutOfRangeError: If bits < 2
    """
    if bits < 2:
        raise OutOfRangeError("Bit length must be at least 2", {'bits': bits})

    attempts = 0
    while True:
        attempts += 1
        candidate = secrets.randbits(bits)
        candidate |= (1 << (bits - 1))  # Set MSB
        candidate |= 1  # Set LSB (make odd)

        if is_probably_prime(candidate, rounds):
            logger.debug("prime_generated", bits=bits, attempts=attempts)
            return candidate


def primes_up_to(limit: int) -> List[int]:
    """
    All primes p <= limit, using the Sieve of Eratosthenes.

    Example:
        >>> primes_up_to(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if limit < 2:
        return []

    sieve = bytearray([1]) * (limit + 1)
    sieve[0] = sieve[1] = 0

    p = 2
    while p * p <= limit:
        if sieve[p]:
            sieve[p * p::p] = bytearray(len(range(p * p, limit + 1, p)))
        p += 1

    return [i for i, is_prime in enumerate(sieve) if is_prime]


def factorize(n: int) -> Dict[int, int]:
    """
    Prime factorisation by trial division.

    Args:
        n: Integer to factor (must be >= 1)

    Returns:
        Mapping {prime: exponent} in ascending prime order; {} for n == 1

    Raises:
        PositiveIntegerRequiredError: If n < 1
    """
    if n < 1:
        raise PositiveIntegerRequiredError(details={'n': n})

    factors: Dict[int, int] = {}
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1 if divisor == 2 else 2

    if n > 1:
        factors[n] = factors.get(n, 0) + 1

    return factors
