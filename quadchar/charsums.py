"""This module computes classical sums of the quadratic character.

For a field F of odd order q with quadratic character chi:

    sum_a chi(a) = 0,
    sum_a chi(a - c) = 0, for any fixed c,
    sum_i chi(a - i) chi(b - i) = -1, for a != b (and q-1 for a = b),
    sum_a chi(a) chi(a + c) = -1, for c != 0 (and q-1 for c = 0).

By default, the sums are computed by a scan over all field elements, which
serves to validate the identities. Pass scan=False to get the closed forms
instead, avoiding the O(q) scan for large fields. Scans are split over
multiple threads if QUADCHAR_MAXWORKERS is set to a positive number.

All sums require odd characteristic.
"""

import os
import logging
import functools
import concurrent.futures
import numpy as np
from quadchar.character import QuadraticCharacter, _character


def _sum_terms(f, elements):
    """Return sum of f(a) for all a in elements, using worker threads if enabled."""
    W = int(os.getenv('QUADCHAR_MAXWORKERS') or 0)
    n = len(elements)
    if W <= 1 or n < W:
        return sum(map(f, elements))

    with concurrent.futures.ThreadPoolExecutor(max_workers=W) as executor:
        tasks = {executor.submit(lambda s: sum(map(f, s)), elements[i*n//W:(i+1)*n//W]): i
                 for i in range(W)}
    s = 0
    for task in concurrent.futures.as_completed(tasks):
        s += task.result()
    return s


class CharacterSumToolkit:
    """Sums of the quadratic character of a given field."""

    def __init__(self, field):
        if isinstance(field, QuadraticCharacter):
            self.chi = field
        else:
            self.chi = QuadraticCharacter(field)
        self.field = self.chi.field

    def _elements(self):
        return list(self.field.enumerate())

    def sum_character(self, scan=True):
        """Return sum of chi(a) over all a."""
        self.chi.require_odd_characteristic('sum_character')
        if not scan:
            return 0

        logging.debug(f'Scan sum_character over {self.field}')
        return _sum_terms(self.chi, self._elements())

    def sum_shifted(self, c, scan=True):
        """Return sum of chi(a - c) over all a."""
        self.chi.require_odd_characteristic('sum_shifted')
        if not scan:
            return 0

        F, chi = self.field, self.chi
        logging.debug(f'Scan sum_shifted over {F}')
        return _sum_terms(lambda a: chi(F.subtract(a, c)), self._elements())

    def sum_pair_product(self, a, b, scan=True):
        """Return sum of chi(a - i) chi(b - i) over all i."""
        self.chi.require_odd_characteristic('sum_pair_product')
        F, chi = self.field, self.chi
        if not scan:
            return F.order - 1 if a == b else -1

        logging.debug(f'Scan sum_pair_product over {F}')
        return _sum_terms(lambda i: chi(F.subtract(a, i)) * chi(F.subtract(b, i)),
                          self._elements())

    def sum_product_shift(self, c, scan=True):
        """Return sum of chi(a) chi(a + c) over all a."""
        self.chi.require_odd_characteristic('sum_product_shift')
        F, chi = self.field, self.chi
        if not scan:
            return F.order - 1 if F.is_zero(c) else -1

        logging.debug(f'Scan sum_product_shift over {F}')
        return _sum_terms(lambda a: chi(a) * chi(F.add(a, c)), self._elements())

    def gauss_sum(self):
        """Return the quadratic Gauss sum g = sum of chi(a) exp(2 pi i a/p) over all a.

        Only for prime fields GF(p), with elements convertible to int.
        Satisfies |g|^2 = p and g^2 = chi(-1) p.
        """
        self.chi.require_odd_characteristic('gauss_sum')
        F = self.field
        if F.degree != 1:
            raise ValueError('Gauss sum only supported for prime fields')

        elements = self._elements()
        chi = np.array([self.chi(a) for a in elements])
        k = np.array([int(a) for a in elements])
        g = np.sum(chi * np.exp(2j * np.pi * k / F.p))
        return complex(g)


def _toolkit(field):
    if isinstance(field, CharacterSumToolkit):
        return field

    return _character_toolkit(_character(field))


@functools.cache
def _character_toolkit(chi):
    return CharacterSumToolkit(chi)


def sum_character(field, scan=True):
    """Return sum of chi(a) over all a in the given field."""
    return _toolkit(field).sum_character(scan=scan)


def sum_shifted(field, c, scan=True):
    """Return sum of chi(a - c) over all a in the given field."""
    return _toolkit(field).sum_shifted(c, scan=scan)


def sum_pair_product(field, a, b, scan=True):
    """Return sum of chi(a - i) chi(b - i) over all i in the given field."""
    return _toolkit(field).sum_pair_product(a, b, scan=scan)


def sum_product_shift(field, c, scan=True):
    """Return sum of chi(a) chi(a + c) over all a in the given field."""
    return _toolkit(field).sum_product_shift(c, scan=scan)
