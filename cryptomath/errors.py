"""
Math Error Hierarchy

Every failure a cryptomath operation can report derives from MathError.
Each concrete error also subclasses the matching builtin exception, so
callers may catch either the library class or e.g. ValueError.

Error kinds:
- DivisionByZeroError: zero divisor or zero modulus
- PositiveIntegerRequiredError: negative operand where only n >= 0 (or n >= 1) is defined
- MathOverflowError: result exceeds a caller-supplied ceiling
- OutOfRangeError: operand outside the domain of the operation
- NoInverseError: element is not a unit modulo m
"""

from typing import Any, Dict, Optional


class MathError(Exception):
    """Base for all math errors."""

    default_message = "Math error"
    code = "MATH_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"


class DivisionByZeroError(MathError, ZeroDivisionError):
    """Raised when a divisor or modulus is zero."""

    default_message = "Division by zero"
    code = "DIVISION_BY_ZERO"


class PositiveIntegerRequiredError(MathError, ValueError):
    """Raised when a negative operand is given to an operation defined on naturals."""

    default_message = "Positive integer required"
    code = "POSITIVE_INTEGER_REQUIRED"


class MathOverflowError(MathError, OverflowError):
    """Raised when a result would exceed the requested ceiling."""

    default_message = "Overflow"
    code = "OVERFLOW"


class OutOfRangeError(MathError, ValueError):
    """Raised when an operand is outside the domain of the operation."""

    default_message = "Out of range"
    code = "OUT_OF_RANGE"


class NoInverseError(MathError, ValueError):
    """Raised when a modular inverse does not exist."""

    default_message = "Modular inverse does not exist"
    code = "NO_INVERSE"


__all__ = [
    'MathError',
    'DivisionByZeroError',
    'PositiveIntegerRequiredError',
    'MathOverflowError',
    'OutOfRangeError',
    'NoInverseError',
]
