"""This module supports finite (Galois) fields.

Function GF creates types implementing finite fields, serving as the
reference backend for the quadratic-character engine.
Instantiate an object from a field and subsequently apply overloaded
operators such as +,-,*,/,** to compute with field elements.
All field elements of a field are listed, in a fixed order, by elements().

Prime fields GF(p) hold integers in {0, ..., p-1}. Extension fields GF(p^d)
hold polynomials over GF(p) of degree below d, reduced modulo an irreducible
polynomial of degree d (see quadchar.gfpx).
"""

import functools
import logging
from quadchar import gmpy as gmpy2
from quadchar import gfpx


def GF(modulus):
    """Create a finite (Galois) field for given modulus.

    The modulus is either a prime p, a prime power p^d (for which the least
    irreducible polynomial of degree d is used), or an irreducible polynomial.
    """
    if isinstance(modulus, gfpx.Polynomial):
        return xGF(modulus)

    if not isinstance(modulus, int):
        raise TypeError(f'int or polynomial required, got {type(modulus).__name__}')

    p, d = gmpy2.factor_prime_power(modulus)
    if d == 1:
        return pGF(p)

    return xGF(find_irreducible(p, d))


class FiniteFieldElement:
    """Abstract base class for finite field elements.

    Invariant: 'value' is reduced w.r.t. modulus.
    """

    __slots__ = 'value'

    modulus = None  # set by subclass
    order = None
    characteristic = None
    ext_deg = None
    _mix_types: type  # or, a tuple of types

    def __init__(self, value):
        self.value = value

    @classmethod
    def elements(cls):
        """Yield all field elements, ordered by their integer representation."""
        for i in range(cls.order):
            yield cls(i)

    def __int__(self):
        """Extract field element as an integer value."""
        raise NotImplementedError('abstract method')

    def __add__(self, other):
        """Addition."""
        if isinstance(other, type(self)):
            return type(self)(self.value + other.value)

        if isinstance(other, self._mix_types):
            return type(self)(self.value + other)

        return NotImplemented

    def __sub__(self, other):
        """Subtraction."""
        if isinstance(other, type(self)):
            return type(self)(self.value - other.value)

        if isinstance(other, self._mix_types):
            return type(self)(self.value - other)

        return NotImplemented

    def __neg__(self):
        """Negation."""
        return type(self)(-self.value)

    def __mul__(self, other):
        """Multiplication."""
        if isinstance(other, type(self)):
            return type(self)(self.value * other.value)

        if isinstance(other, self._mix_types):
            return type(self)(self.value * other)

        return NotImplemented

    def __truediv__(self, other):
        """Division."""
        if isinstance(other, type(self)):
            other = other.value
        elif isinstance(other, self._mix_types):
            other = type(self)(other).value
        else:
            return NotImplemented

        return self * type(self)(type(self)._reciprocal(other))

    def __pow__(self, other):
        """Exponentiation."""
        raise NotImplementedError('abstract method')

    @classmethod
    def _reciprocal(cls, a):
        """Multiplicative inverse."""
        raise NotImplementedError('abstract method')

    def reciprocal(self):
        """Multiplicative inverse."""
        cls = type(self)
        return cls(cls._reciprocal(self.value))

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, type(self)):
            return self.value == other.value

        if isinstance(other, self._mix_types):
            return self == type(self)(other)

        return NotImplemented

    def __hash__(self):
        """Make finite field elements hashable (e.g., for use in sets)."""
        return hash((type(self).__name__, int(self)))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        """
        return bool(self.value)


@functools.cache
def pGF(p):
    """Create a finite field for given prime modulus p."""
    if not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    GFp = type(f'GF({p})', (PrimeFieldElement,), {'__slots__': ()})
    GFp.__doc__ = 'Class of prime field elements.'
    GFp.modulus = p
    GFp.order = p
    GFp.characteristic = p
    GFp.ext_deg = 1
    logging.debug(f'Create prime field {GFp.__name__}')
    return GFp


class PrimeFieldElement(FiniteFieldElement):
    """Common base class for prime field elements."""

    __slots__ = ()

    modulus: int
    _mix_types = int

    def __init__(self, value):
        if not isinstance(value, int):
            raise TypeError(f'int required, got {type(value).__name__}')

        # Directly call int.__mod__() for efficiency:
        value = value.__mod__(self.modulus)
        super().__init__(value)

    def __int__(self):
        """Extract field element as an integer in {0, ..., p-1}."""
        return self.value

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        return type(self)(int(gmpy2.powmod(self.value, other, self.modulus)))

    @classmethod
    def _reciprocal(cls, a):
        return int(gmpy2.invert(a, cls.modulus))

    def __repr__(self):
        return f'{self.value}'


def find_irreducible(p, d):
    """Find smallest monic irreducible polynomial of degree d over GF(p)."""
    return gfpx.GFpX(p).next_irreducible(p**d - 1)


@functools.cache
def xGF(modulus):
    """Create a finite field for given irreducible polynomial."""
    p = modulus.p
    poly = gfpx.GFpX(p)
    if not poly.is_irreducible(modulus):
        raise ValueError('modulus is not irreducible')

    d = poly.deg(modulus)
    GFq = type(f'GF({p}^{d})', (ExtensionFieldElement,), {'__slots__': ()})
    GFq.__doc__ = 'Class of extension field elements.'
    GFq.modulus = modulus
    GFq.order = p**d
    GFq.characteristic = p
    GFq.ext_deg = d
    GFq._mix_types = (int, poly)
    logging.debug(f'Create extension field {GFq.__name__} with modulus {modulus}')
    return GFq


class ExtensionFieldElement(FiniteFieldElement):
    """Common base class for extension field elements."""

    __slots__ = ()

    modulus: gfpx.Polynomial
    _mix_types = (int, gfpx.Polynomial)

    def __init__(self, value):
        poly = type(self.modulus)
        if not isinstance(value, (int, poly)):
            raise TypeError(f'int or {poly.__name__} required, got {type(value).__name__}')

        super().__init__(poly(value) % self.modulus)

    def __int__(self):
        """Extract field element as an integer in {0, ..., q-1}."""
        return int(self.value)

    def __pow__(self, other):
        """Exponentiation."""
        if not isinstance(other, int):
            return NotImplemented

        poly = type(self.modulus)
        if other < 0:
            return type(self)(poly.powmod(self._reciprocal(self.value), -other, self.modulus))

        return type(self)(poly.powmod(self.value, other, self.modulus))

    @classmethod
    def _reciprocal(cls, a):
        return type(cls.modulus).invert(a, cls.modulus)

    def __repr__(self):
        return f'{self.value}'
