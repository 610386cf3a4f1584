"""This module decides quadratic residuosity in finite fields.

A nonzero element a of a finite field of odd order q is a square if and only
if a^((q-1)/2) = 1 (Euler's criterion), which takes O(log q) multiplications
using the backend's exponentiation. In characteristic 2 every element is a
square, as squaring is then a field automorphism (the Frobenius map).
"""

import enum
from quadchar.fieldhandle import field_handle, ZeroNotClassifiable


class Residuosity(enum.Enum):
    """Classification of a field element w.r.t. quadratic residuosity."""

    ZERO = 0
    RESIDUE = 1
    NON_RESIDUE = -1


class ResidueClassifier:
    """Quadratic residuosity tests for the elements of a given field."""

    def __init__(self, field):
        self.field = field_handle(field)
        q = self.field.order
        self.even = self.field.p == 2
        self._euler_exponent = None if self.even else (q-1) >> 1

    def is_square(self, a):
        """Test whether nonzero a is a quadratic residue.

        Raises ZeroNotClassifiable if a is zero.
        """
        F = self.field
        if F.is_zero(a):
            raise ZeroNotClassifiable(a)

        if self.even:
            return True

        return F.power(a, self._euler_exponent) == F.one()

    def is_non_residue(self, a):
        """Test whether a is a quadratic non-residue (False for zero)."""
        if self.field.is_zero(a):
            return False

        return not self.is_square(a)

    def classify(self, a):
        """Return the residuosity class of a."""
        if self.field.is_zero(a):
            return Residuosity.ZERO

        if self.is_square(a):
            return Residuosity.RESIDUE

        return Residuosity.NON_RESIDUE

    def residues(self):
        """Return list of all nonzero quadratic residues, in enumeration order."""
        F = self.field
        return [a for a in F.enumerate() if not F.is_zero(a) and self.is_square(a)]

    def non_residues(self):
        """Return list of all quadratic non-residues, in enumeration order."""
        return [a for a in self.field.enumerate() if self.is_non_residue(a)]
