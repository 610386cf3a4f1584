"""This module captures the squaring map on the group of units of a finite field.

Squaring a -> a^2 is a group homomorphism on the units F* of a field F of
order q. Its kernel consists of the square roots of 1, which are 1 and -1,
so the kernel has 2 elements if the characteristic is odd, and only 1 element
in characteristic 2. Its range is the set of nonzero quadratic residues. From
|F*| = |range| * |kernel| it follows that there are exactly (q-1)/2 nonzero
squares and (q-1)/2 non-squares in F for odd q.

All counts are computed in closed form from the field descriptor. The scans
kernel(), range() and verify() enumerate the field, and are meant for
validating these counts on small fields.
"""

import functools
import logging
from quadchar.fieldhandle import field_handle
from quadchar.residues import ResidueClassifier


class UnitsSquaringStructure:
    """Squaring homomorphism on the group of units of a given field."""

    def __init__(self, field):
        self.field = field_handle(field)

    def units_count(self):
        """Number of units, q-1."""
        return self.field.order - 1

    def kernel_count(self):
        """Number of square roots of 1."""
        return 1 if self.field.p == 2 else 2

    def range_count(self):
        """Number of squares of units."""
        return self.units_count() // self.kernel_count()

    def quad_residue_count(self):
        """Number of nonzero quadratic residues."""
        return self.range_count()

    def non_residue_count(self):
        """Number of quadratic non-residues."""
        return self.units_count() - self.range_count()

    def is_minus_one_a_square(self):
        """Test whether -1 is a square, that is, whether q = 1 (mod 4) or q is even.

        The units form a cyclic group of order q-1, which contains an element
        of order 4 (a square root of -1) if and only if 4 divides q-1.
        """
        q = self.field.order
        return q%2 == 0 or q%4 == 1

    def units(self):
        """Return list of all units, in enumeration order."""
        F = self.field
        return [a for a in F.enumerate() if not F.is_zero(a)]

    def kernel(self):
        """Return list of all units a with a^2 = 1."""
        F = self.field
        one = F.one()
        return [a for a in self.units() if F.power(a, 2) == one]

    def range(self):
        """Return list of all distinct squares of units.

        Duplicates are removed by equality only, as field elements need not be
        hashable, which takes O(q^2) comparisons. Use on small fields only.
        """
        F = self.field
        squares = []
        for a in self.units():
            b = F.power(a, 2)
            if b not in squares:
                squares.append(b)
        return squares

    def verify(self):
        """Check the closed-form counts against a scan of the field.

        Builds on range(), so this is quadratic in q as well.
        """
        F = self.field
        units = self.units()
        kernel = self.kernel()
        squares = self.range()
        residues = ResidueClassifier(F).residues()
        logging.debug(f'Units of {F}: {len(units)} units, kernel size {len(kernel)}, '
                      f'range size {len(squares)}')
        one = F.one()
        return (len(units) == self.units_count() and
                len(kernel) == self.kernel_count() and
                len(squares) == self.range_count() and
                len(units) == len(squares) * len(kernel) and
                all(a == one or a == F.negate(one) for a in kernel) and
                len(residues) == len(squares) and
                all(b in squares for b in residues) and
                len(units) - len(residues) == self.non_residue_count())


@functools.cache
def _handle_units(F):
    return UnitsSquaringStructure(F)


def _units(field):
    return _handle_units(field_handle(field))


def quad_residue_count(field):
    """Return number of nonzero quadratic residues in the given field."""
    return _units(field).quad_residue_count()


def non_residue_count(field):
    """Return number of quadratic non-residues in the given field."""
    return _units(field).non_residue_count()


def is_minus_one_a_square(field):
    """Test whether -1 is a square in the given field."""
    return _units(field).is_minus_one_a_square()
