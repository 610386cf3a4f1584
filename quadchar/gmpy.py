"""This module collects all gmpy2 functions used by quadchar.

A function for factoring prime powers is also provided, used to validate
and decompose the order q = p^k of a finite field.
"""

import logging
from gmpy2 import version, is_prime, powmod, invert, iroot

logging.debug(f'Load gmpy2 version {version()}')

__all__ = ['is_prime', 'powmod', 'invert', 'iroot', 'factor_prime_power']


def factor_prime_power(x):
    """Return p and d for a prime power x = p**d."""
    if x <= 1:
        raise ValueError('number not a prime power')

    # largest d first, so that p = x**(1/d) is prime rather than a power itself
    for d in range(x.bit_length(), 0, -1):
        p, exact = iroot(x, d)
        if exact and is_prime(p):
            return int(p), d

    raise ValueError('number not a prime power')
