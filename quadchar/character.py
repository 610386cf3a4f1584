"""This module provides the quadratic character of a finite field.

The quadratic character chi maps 0 to 0, nonzero squares to 1, and
non-residues to -1. For fields of odd order q, chi is multiplicative,
chi(a*b) = chi(a)*chi(b), and chi(-1) = 1 if and only if q = 1 (mod 4).
Hence chi is symmetric, chi(-a) = chi(a), if q = 1 (mod 4), and chi is
skew-symmetric, chi(-a) = -chi(a), if q = 3 (mod 4).

These symmetry laws do not apply in characteristic 2, where -1 = 1;
operations relying on them raise UnsupportedCharacteristic for such fields.
"""

import functools
from quadchar.fieldhandle import field_handle, UnsupportedCharacteristic
from quadchar.residues import ResidueClassifier


class QuadraticCharacter:
    """Quadratic character chi of a given field."""

    def __init__(self, field):
        if isinstance(field, ResidueClassifier):
            self.classifier = field
        else:
            self.classifier = ResidueClassifier(field)
        self.field = self.classifier.field

    def __call__(self, a):
        """Return chi(a) in {-1, 0, 1}."""
        if self.field.is_zero(a):
            return 0

        return 1 if self.classifier.is_square(a) else -1

    def require_odd_characteristic(self, operation=None):
        """Raise UnsupportedCharacteristic if the field has characteristic 2."""
        if self.field.p == 2:
            raise UnsupportedCharacteristic(2, operation)

    def minus_one(self):
        """Return chi(-1), using that -1 is a square if and only if q = 1 (mod 4)."""
        self.require_odd_characteristic('minus_one')
        return 1 if self.field.order%4 == 1 else -1

    def is_symmetric(self):
        """Test whether chi(-a) = chi(a) for all a."""
        return self.minus_one() == 1

    def is_skew_symmetric(self):
        """Test whether chi(-a) = -chi(a) for all a."""
        return self.minus_one() == -1

    def table(self):
        """Return list of chi(a) for all field elements a, in enumeration order."""
        return [self(a) for a in self.field.enumerate()]

    def __repr__(self):
        return f'QuadraticCharacter({self.field!r})'


def _character(field):
    if isinstance(field, QuadraticCharacter):
        return field

    return _handle_character(field_handle(field))


@functools.cache
def _handle_character(F):
    return QuadraticCharacter(F)


def is_square(field, a):
    """Test whether nonzero a is a quadratic residue in the given field."""
    return _character(field).classifier.is_square(a)


def is_non_residue(field, a):
    """Test whether a is a quadratic non-residue in the given field."""
    return _character(field).classifier.is_non_residue(a)


def quadratic_character(field, a):
    """Return the quadratic character of a in the given field."""
    return _character(field)(a)
