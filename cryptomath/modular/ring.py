"""
Integers Modulo n

Implements the ring Z/nZ as two small types:
- IntegerModRing: the ring itself (modulus, units, field check)
- ModInt: an immutable element of the ring with operator overloading

Example:
    >>> Z7 = IntegerModRing(7)
    >>> x = Z7(3)
    >>> x * 5
    ModInt(1, 7)
    >>> x.inverse()
    ModInt(5, 7)
    >>> x ** -1 == 5
    True
"""

from dataclasses import dataclass
from typing import Iterator, List, Union

from ..algebra.prime import is_probably_prime
from ..errors import OutOfRangeError, PositiveIntegerRequiredError
from .arithmetic import euler_phi, mod_exp, mod_inverse, residues_coprime_to


@dataclass(frozen=True, eq=False)
class ModInt:
    """
    Element of Z/nZ.

    The stored value is always reduced into [0, modulus). frozen=True
    keeps elements hashable and safe to share.

    Comparison with a plain int tests congruence, so ModInt(3, 7) == 10.
    The hash is that of the reduced value, which matches hash(3) but not
    hash(10): as dict keys or set members, elements only meet the int
    equal to their reduced value.
    """
    value: int
    modulus: int

    def __post_init__(self):
        if self.modulus < 1:
            raise PositiveIntegerRequiredError("Modulus must be positive", {'modulus': self.modulus})
        object.__setattr__(self, 'value', self.value % self.modulus)

    def _coerce(self, other: Union['ModInt', int]) -> 'ModInt':
        if isinstance(other, ModInt):
            if other.modulus != self.modulus:
                raise OutOfRangeError(
                    f"Cannot combine elements mod {self.modulus} and mod {other.modulus}",
                    {'left': self.modulus, 'right': other.modulus},
                )
            return other
        if isinstance(other, int):
            return ModInt(other, self.modulus)
        return NotImplemented

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value + other.value, self.modulus)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value - other.value, self.modulus)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(other.value - self.value, self.modulus)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return ModInt(self.value * other.value, self.modulus)

    __rmul__ = __mul__

    def __neg__(self) -> 'ModInt':
        return ModInt(-self.value, self.modulus)

    def __pow__(self, exponent: int) -> 'ModInt':
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return self.inverse() ** -exponent
        return ModInt(mod_exp(self.value, exponent, self.modulus), self.modulus)

    def inverse(self) -> 'ModInt':
        """Multiplicative inverse; raises NoInverseError for non-units."""
        return ModInt(mod_inverse(self.value, self.modulus), self.modulus)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self * other.inverse()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other * self.inverse()

    def __eq__(self, other) -> bool:
        if isinstance(other, ModInt):
            return self.modulus == other.modulus and self.value == other.value
        if isinstance(other, int):
            return (other - self.value) % self.modulus == 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"ModInt({self.value}, {self.modulus})"

    def __str__(self) -> str:
        return f"{self.value} (mod {self.modulus})"


class IntegerModRing:
    """
    The ring of integers modulo n.

    Calling the ring reduces an integer into it:

        >>> IntegerModRing(5)(12)
        ModInt(2, 5)
    """

    def __init__(self, modulus: int):
        """
        Args:
            modulus: n >= 1

        Raises:
            PositiveIntegerRequiredError: If modulus < 1
        """
        if modulus < 1:
            raise PositiveIntegerRequiredError("Modulus must be positive", {'modulus': modulus})
        self._modulus = modulus

    def __call__(self, value: int) -> ModInt:
        return ModInt(value, self._modulus)

    @property
    def modulus(self) -> int:
        """Modulus n."""
        return self._modulus

    @property
    def order(self) -> int:
        """Number of elements."""
        return self._modulus

    @property
    def zero(self) -> ModInt:
        return self(0)

    @property
    def one(self) -> ModInt:
        return self(1)

    @property
    def is_field(self) -> bool:
        """Z/nZ is a field exactly when n is prime."""
        return self._modulus > 1 and is_probably_prime(self._modulus)

    def elements(self) -> Iterator[ModInt]:
        """Iterate over every element, 0 to n-1."""
        for value in range(self._modulus):
            yield self(value)

    def units(self) -> List[ModInt]:
        """Invertible elements (the multiplicative group)."""
        return [self(k) for k in residues_coprime_to(self._modulus)]

    def unit_count(self) -> int:
        """Order of the multiplicative group, phi(n)."""
        return euler_phi(self._modulus)

    def __contains__(self, item) -> bool:
        return isinstance(item, ModInt) and item.modulus == self._modulus

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntegerModRing):
            return NotImplemented
        return self._modulus == other._modulus

    def __hash__(self) -> int:
        return hash(('IntegerModRing', self._modulus))

    def __repr__(self) -> str:
        return f"IntegerModRing({self._modulus})"
