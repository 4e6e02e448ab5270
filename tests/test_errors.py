"""
Error handling tests for cryptomath.

Tests:
- Exception hierarchy and builtin compatibility
- Error messages, codes and details
- Package-level exports
"""

import pytest

import cryptomath
from cryptomath import errors
from cryptomath.errors import (
    MathError,
    DivisionByZeroError,
    PositiveIntegerRequiredError,
    MathOverflowError,
    OutOfRangeError,
    NoInverseError,
)


class TestHierarchy:
    """Every error is a MathError and a matching builtin."""

    @pytest.mark.parametrize("cls, builtin", [
        (DivisionByZeroError, ZeroDivisionError),
        (PositiveIntegerRequiredError, ValueError),
        (MathOverflowError, OverflowError),
        (OutOfRangeError, ValueError),
        (NoInverseError, ValueError),
    ])
    def test_subclasses(self, cls, builtin):
        """Catchable as MathError and as the builtin."""
        assert issubclass(cls, MathError)
        assert issubclass(cls, builtin)

    def test_catch_as_builtin(self):
        """Callers may keep catching ZeroDivisionError."""
        with pytest.raises(ZeroDivisionError):
            cryptomath.gcd(1, 0)

    def test_catch_as_math_error(self):
        """Callers may catch the library base class."""
        with pytest.raises(MathError):
            cryptomath.lcm(-1, 2)


class TestMessages:
    """Messages, codes and details."""

    @pytest.mark.parametrize("cls, message, code", [
        (MathError, "Math error", "MATH_ERROR"),
        (DivisionByZeroError, "Division by zero", "DIVISION_BY_ZERO"),
        (PositiveIntegerRequiredError, "Positive integer required", "POSITIVE_INTEGER_REQUIRED"),
        (MathOverflowError, "Overflow", "OVERFLOW"),
        (OutOfRangeError, "Out of range", "OUT_OF_RANGE"),
        (NoInverseError, "Modular inverse does not exist", "NO_INVERSE"),
    ])
    def test_defaults(self, cls, message, code):
        """Default message and code per class."""
        exc = cls()
        assert str(exc) == message
        assert exc.code == code
        assert exc.details == {}

    def test_custom_message_and_details(self):
        """Custom message and details are kept."""
        exc = OutOfRangeError("too small", {'n': 1})
        assert str(exc) == "too small"
        assert exc.details == {'n': 1}
        assert "too small" in repr(exc)

    def test_details_record_operands(self):
        """Raised errors carry the offending operands."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            cryptomath.gcd(9, 0)
        assert exc_info.value.details == {'a': 9, 'b': 0}

        with pytest.raises(PositiveIntegerRequiredError) as exc_info:
            cryptomath.lcm(-5, 10)
        assert exc_info.value.details == {'a': -5, 'b': 10}


class TestExports:
    """Public API surface."""

    def test_errors_all(self):
        """errors.__all__ lists every error class."""
        for name in errors.__all__:
            assert issubclass(getattr(errors, name), MathError)

    def test_package_all(self):
        """Every name in cryptomath.__all__ resolves."""
        for name in cryptomath.__all__:
            assert hasattr(cryptomath, name), name

    def test_subpackage_lazy_exports(self):
        """Subpackages resolve their exports on access."""
        from cryptomath import algebra, modular
        for name in algebra.__all__:
            assert callable(getattr(algebra, name))
        for name in modular.__all__:
            assert callable(getattr(modular, name))

    def test_unknown_attribute(self):
        """Unknown names raise AttributeError."""
        from cryptomath import modular
        with pytest.raises(AttributeError):
            modular.does_not_exist
