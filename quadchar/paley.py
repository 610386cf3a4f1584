"""This module provides Paley-type constructions from the quadratic character.

For a field F of odd order q with elements a_0, ..., a_{q-1} (in enumeration
order), the Jacobsthal matrix Q is the q x q matrix with entries chi(a_i - a_j).
Q is symmetric if q = 1 (mod 4) and skew-symmetric if q = 3 (mod 4), and
satisfies Q Q^T = qI - J and QJ = JQ = 0, where J is the all-ones matrix.

From Q, the following are obtained:

    paley_graph(F)        adjacency matrix of the Paley graph, q = 1 (mod 4)
    paley_tournament(F)   adjacency matrix of the Paley tournament, q = 3 (mod 4)
    conference_matrix(F)  symmetric conference matrix of order q+1, q = 1 (mod 4)
    hadamard_matrix(F)    Hadamard matrix of order q+1, q = 3 (mod 4)

All matrices are returned as NumPy integer arrays.
"""

import logging
import numpy as np
from quadchar.character import _character


def jacobsthal_matrix(field):
    """Return the Jacobsthal matrix Q of the given field."""
    chi = _character(field)
    chi.require_odd_characteristic('jacobsthal_matrix')
    F = chi.field
    elements = list(F.enumerate())
    logging.debug(f'Build Jacobsthal matrix of order {len(elements)}')
    return np.array([[chi(F.subtract(a, b)) for b in elements] for a in elements], dtype=int)


def paley_graph(field):
    """Return adjacency matrix of the Paley graph of the given field.

    Vertices a and b are adjacent if a - b is a nonzero square.
    """
    chi = _character(field)
    if not chi.is_symmetric():
        raise ValueError(f'Paley graph requires q = 1 (mod 4), got q={chi.field.order}')

    return (jacobsthal_matrix(chi) == 1).astype(int)


def paley_tournament(field):
    """Return adjacency matrix of the Paley tournament of the given field.

    There is an arc from a to b if a - b is a nonzero square.
    """
    chi = _character(field)
    if not chi.is_skew_symmetric():
        raise ValueError(f'Paley tournament requires q = 3 (mod 4), got q={chi.field.order}')

    return (jacobsthal_matrix(chi) == 1).astype(int)


def _border(Q, sign):
    q = Q.shape[0]
    C = np.zeros((q+1, q+1), dtype=int)
    C[0, 1:] = 1
    C[1:, 0] = sign
    C[1:, 1:] = Q
    return C


def conference_matrix(field):
    """Return symmetric conference matrix C of order q+1, with C C^T = qI (Paley II)."""
    chi = _character(field)
    if not chi.is_symmetric():
        raise ValueError(f'symmetric conference matrix requires q = 1 (mod 4), '
                         f'got q={chi.field.order}')

    return _border(jacobsthal_matrix(chi), 1)


def hadamard_matrix(field):
    """Return Hadamard matrix H of order q+1, with H H^T = (q+1)I (Paley I)."""
    chi = _character(field)
    if not chi.is_skew_symmetric():
        raise ValueError(f'Paley Hadamard matrix requires q = 3 (mod 4), '
                         f'got q={chi.field.order}')

    C = _border(jacobsthal_matrix(chi), -1)
    return C + np.eye(C.shape[0], dtype=int)
