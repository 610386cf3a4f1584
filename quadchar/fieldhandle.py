"""This module provides the read-only facade through which finite fields are consumed.

A field handle exposes the capabilities the quadratic-character engine needs
from a field backend: cardinality, characteristic, zero and one, enumeration
of all elements, exponentiation, and inversion. Class FieldHandle is the
abstract facade; class GFHandle adapts the field types of quadchar.finfields.
Any other backend can be plugged in by subclassing FieldHandle.

The error kinds raised by the engine for inputs outside an operation's
domain are defined here as well.
"""

import functools
import logging
from quadchar import gmpy as gmpy2


class ZeroNotClassifiable(ValueError):
    """Quadratic residuosity queried for the zero element."""

    def __init__(self, value):
        super().__init__(f'zero element {value!r} is neither residue nor non-residue')
        self.value = value


class DivisionByZero(ZeroDivisionError):
    """Inversion of the zero element."""

    def __init__(self, value):
        super().__init__(f'zero element {value!r} has no inverse')
        self.value = value


class UnsupportedCharacteristic(ValueError):
    """Operation restricted to odd characteristic invoked on a field of characteristic 2."""

    def __init__(self, characteristic, operation=None):
        msg = f'characteristic {characteristic} not supported'
        if operation:
            msg = f'{operation}: {msg}'
        super().__init__(msg)
        self.characteristic = characteristic
        self.operation = operation


class FieldHandle:
    """Abstract read-only facade over a finite field backend.

    The field descriptor (order q, characteristic p, degree k with q = p^k) is
    derived once, when the handle is created. Subclasses must set up their own
    state before calling FieldHandle.__init__().
    """

    def __init__(self):
        q = self.cardinality()
        p = self.characteristic()
        if q < 2:
            raise ValueError(f'field order must be at least 2, got {q}')

        p_, k = gmpy2.factor_prime_power(q)
        if p_ != p:
            raise ValueError(f'characteristic {p} inconsistent with order {q}')

        self.order = q
        self.p = p
        self.degree = k

    def cardinality(self):
        """Number of field elements q."""
        raise NotImplementedError('abstract method')

    def characteristic(self):
        """Prime characteristic p of the field."""
        raise NotImplementedError('abstract method')

    def zero(self):
        """Additive identity."""
        raise NotImplementedError('abstract method')

    def one(self):
        """Multiplicative identity."""
        raise NotImplementedError('abstract method')

    def enumerate(self):
        """Return all q field elements, each exactly once, in a fixed order."""
        raise NotImplementedError('abstract method')

    def power(self, a, n):
        """Return a**n for integer n >= 0."""
        raise NotImplementedError('abstract method')

    def invert(self, a):
        """Return multiplicative inverse of nonzero a.

        Raises DivisionByZero if a is zero.
        """
        raise NotImplementedError('abstract method')

    def is_zero(self, a):
        """Test whether a is the zero element."""
        return a == self.zero()

    def negate(self, a):
        """Additive inverse of a."""
        return -a

    def add(self, a, b):
        """Sum a + b."""
        return a + b

    def subtract(self, a, b):
        """Difference a - b."""
        return a - b

    def multiply(self, a, b):
        """Product a * b."""
        return a * b

    def __repr__(self):
        return f'{type(self).__name__}(q={self.order}, p={self.p})'


class GFHandle(FieldHandle):
    """Field handle for a field type created by quadchar.finfields.GF()."""

    def __init__(self, field):
        self.field = field
        self._zero = field(0)
        self._one = field(1)
        self._elements = None
        super().__init__()
        logging.debug(f'Field handle for {field.__name__}: q={self.order}, p={self.p}, k={self.degree}')

    def cardinality(self):
        return self.field.order

    def characteristic(self):
        return self.field.characteristic

    def zero(self):
        return self._zero

    def one(self):
        return self._one

    def enumerate(self):
        if self._elements is None:
            self._elements = tuple(self.field.elements())
        return self._elements

    def power(self, a, n):
        if n < 0:
            raise ValueError('negative exponent')

        return a**n

    def invert(self, a):
        try:
            return a.reciprocal()
        except ZeroDivisionError as exc:
            raise DivisionByZero(a) from exc

    def __repr__(self):
        return f'GFHandle({self.field.__name__})'


def field_handle(field):
    """Return a field handle for the given field type (or field handle)."""
    if isinstance(field, FieldHandle):
        return field

    return _gf_handle(field)


@functools.cache
def _gf_handle(field):
    # one handle per field type, so the descriptor is derived only once
    return GFHandle(field)
