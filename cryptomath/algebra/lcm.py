"""
Least Common Multiple

lcm(a, b) is defined here on non-negative integers only. Results are
arbitrary-precision; pass max_value (e.g. INT64_MAX) to reject results
that would not fit a fixed-width integer.
"""

from typing import Iterable, Optional

from ..config import INT64_MAX
from ..errors import MathOverflowError, PositiveIntegerRequiredError
from ..logger import get_logger
from .gcd import gcd_abs

logger = get_logger(__name__)


def _check_ceiling(result: int, max_value: Optional[int], a: int, b: int) -> int:
    if max_value is not None and result > max_value:
        logger.debug("lcm_overflow", a=a, b=b, max_value=max_value)
        raise MathOverflowError(details={'a': a, 'b': b, 'max_value': max_value})
    return result


def lcm(a: int, b: int, max_value: Optional[int] = None) -> int:
    """
    Least common multiple of two non-negative integers.

    Computed as (a / gcd(a, b)) * b so the intermediate value never
    exceeds the result.

    Args:
        a: First integer (>= 0)
        b: Second integer (>= 0)
        max_value: Optional inclusive ceiling for the result

    Returns:
        LCM of a and b; 0 if either operand is 0

    Raises:
        PositiveIntegerRequiredError: If a < 0 or b < 0
        MathOverflowError: If the result exceeds max_value
    """
    if a < 0 or b < 0:
        raise PositiveIntegerRequiredError(details={'a': a, 'b': b})

    if a == 0 or b == 0:
        return 0

    a_reduced = a // gcd_abs(a, b)
    return _check_ceiling(a_reduced * b, max_value, a, b)


def lcm_all(values: Iterable[int], max_value: Optional[int] = None) -> int:
    """
    Least common multiple of any number of non-negative integers.

    The ceiling is enforced after every pairwise step. An empty input
    returns 1, the identity for lcm.
    """
    result = 1
    for value in values:
        result = lcm(result, value, max_value=max_value)
    return result


__all__ = ['lcm', 'lcm_all', 'INT64_MAX']
