"""This module supports arithmetic with polynomials over GF(p).

Polynomials over GF(p) are represented as coefficient lists.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the list [a_0, a_1, ... , a_n] of integers in {0, ... , p-1}.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.

Polynomials can also be given as integers, reading off the coefficients
as the base-p digits of the integer, least significant digit first.
This gives a bijection between {0, ..., p^d - 1} and the polynomials of
degree below d, which is used to enumerate extension fields.

The operators +,-,*,%, and function divmod are overloaded, next to
modular powers and inverses, a simple irreducibility test, and a routine
to find the next irreducible polynomial in the integer order.
"""

import functools
import logging
from quadchar import gmpy as gmpy2

X = 'x'  # symbol for indeterminate in polynomials


@functools.cache
def GFpX(p):
    """Create type for polynomials over GF(p)."""
    if not gmpy2.is_prime(p):
        raise ValueError('number is not prime')

    GFpPolynomial = type(f'GF({p})[{X}]', (Polynomial,), {'__slots__': ()})
    GFpPolynomial.p = p
    return GFpPolynomial


class Polynomial:
    """Polynomials over GF(p) represented as lists of integers in {0, ... , p-1}.

    Invariant: last element of attribute 'value' is a nonzero integer (if 'value' nonempty).
    """

    __slots__ = 'value'

    p = None

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = self._intern(value)
        self.value = value

    @classmethod
    def _intern(cls, a):
        if isinstance(a, Polynomial):
            if not isinstance(a, cls):
                raise TypeError(f'polynomial of type {cls.__name__} expected')

            return a.value

        if isinstance(a, int):
            return cls._from_int(a)

        if isinstance(a, (list, tuple)):
            p = cls.p
            if not all(isinstance(a_i, int) and 0 <= a_i < p for a_i in a):
                raise ValueError('polynomial coefficients invalid or out of range')

            a = list(a)
            while a and not a[-1]:
                a.pop()
            return a

        raise TypeError(f'polynomial over GF({cls.p}) expected')

    @classmethod
    def _from_int(cls, a):
        p = cls.p
        neg = a < 0
        if neg:
            a = -a
        c = []
        while a:
            a, r = divmod(a, p)
            c.append(p - r if neg and r else r)
        return c

    @classmethod
    def _to_int(cls, a):
        p = cls.p
        s = 0
        for a_i in reversed(a):
            s *= p
            s += a_i
        return s

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @classmethod
    def _add(cls, a, b):
        p = cls.p
        if len(a) < len(b):
            a, b = b, a
        c = a[:]
        for i, b_i in enumerate(b):
            c[i] = (c[i] + b_i) % p
        while c and not c[-1]:
            c.pop()
        return c

    @classmethod
    def _neg(cls, a):
        p = cls.p
        return [(p - a_i) % p for a_i in a]

    @classmethod
    def _sub(cls, a, b):
        return cls._add(a, cls._neg(b))

    @classmethod
    def _mul(cls, a, b):
        if not a or not b:
            return []

        p = cls.p
        c = [0] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        return [c_i % p for c_i in c]

    @classmethod
    def _divmod(cls, a, b):
        if not b:
            raise ZeroDivisionError('division by zero polynomial')

        p = cls.p
        n = len(b)
        if len(a) < n:
            return [], a

        b1 = int(gmpy2.invert(b[-1], p))
        q, r = [0] * (len(a) - n + 1), a[:]
        while len(r) >= n:
            i = len(r) - n
            q[i] = q_i = (r[-1] * b1) % p
            for j in range(n):
                r[i + j] = (r[i + j] - q_i * b[j]) % p
            while r and not r[-1]:
                r.pop()
        return q, r

    @classmethod
    def _mod(cls, a, b):
        return cls._divmod(a, b)[1]

    @classmethod
    def _powmod(cls, a, n, modulus):
        if n < 0:
            raise ValueError('negative exponent')

        b = cls._mod([1], modulus)
        a = cls._mod(a, modulus)
        for i in range(n.bit_length() - 1, -1, -1):
            b = cls._mod(cls._mul(b, b), modulus)
            if (n >> i) & 1:
                b = cls._mod(cls._mul(b, a), modulus)
        return b

    @classmethod
    def _monic(cls, a):
        if a and a[-1] != 1:
            a1 = int(gmpy2.invert(a[-1], cls.p))
            a = [(a_i * a1) % cls.p for a_i in a]
        return a

    @classmethod
    def _gcd(cls, a, b):
        while b:
            a, b = b, cls._mod(a, b)
        return cls._monic(a)

    @classmethod
    def _invert(cls, a, b):
        if not b:
            raise ZeroDivisionError('division by zero polynomial')

        s, s1 = [1], []
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._sub(s, cls._mul(q, s1))
        if len(a) != 1:
            raise ZeroDivisionError('inverse does not exist')

        a1 = int(gmpy2.invert(a[0], cls.p))
        return [(s_i * a1) % cls.p for s_i in s]

    @classmethod
    def _is_irreducible(cls, a):
        # Ben-Or: a of degree d is irreducible iff gcd(X^(p^i) - X, a) = 1 for i <= d/2
        if cls._deg(a) <= 0:
            return False

        b = [0, 1]
        for _ in range(cls._deg(a) // 2):
            b = cls._powmod(b, cls.p, a)
            if cls._gcd(cls._sub(b, [0, 1]), a) != [1]:
                return False

        return True

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (-1 for the zero polynomial)."""
        return cls._deg(cls._intern(a))

    def degree(self):
        """Degree of polynomial."""
        return self._deg(self.value)

    @classmethod
    def powmod(cls, a, n, b):
        """Return a**n mod b for nonnegative n."""
        return cls(cls._powmod(cls._intern(a), n, cls._intern(b)), check=False)

    @classmethod
    def invert(cls, a, b):
        """Return inverse of a modulo b, if it exists."""
        return cls(cls._invert(cls._intern(a), cls._intern(b)), check=False)

    @classmethod
    def is_irreducible(cls, a):
        """Test a for irreducibility."""
        return cls._is_irreducible(cls._intern(a))

    @classmethod
    def next_irreducible(cls, a):
        """Return least monic irreducible polynomial above a, in the integer order."""
        p = cls.p
        a = cls._to_int(cls._intern(a))
        while True:
            a += 1
            if a % p == 0:
                a += 1  # skip polynomials divisible by X
            b = cls._from_int(a)
            if b[-1] != 1:
                a = p**len(b)  # jump to next monic polynomial of degree len(b)
                continue

            if cls._is_irreducible(b):
                break

        logging.debug(f'Found irreducible polynomial {a} over GF({p})')
        return cls(b, check=False)

    def __int__(self):
        return self._to_int(self.value)

    def __iter__(self):
        yield from self.value

    def __add__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        return type(self)(self._add(self.value, other), check=False)

    __radd__ = __add__

    def __sub__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        return type(self)(self._sub(self.value, other), check=False)

    def __rsub__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        return type(self)(self._sub(other, self.value), check=False)

    def __neg__(self):
        return type(self)(self._neg(self.value), check=False)

    def __mul__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        return type(self)(self._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def __mod__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        return type(self)(self._mod(self.value, other), check=False)

    def __divmod__(self, other):
        try:
            other = self._intern(other)
        except TypeError:
            return NotImplemented

        q, r = self._divmod(self.value, other)
        return type(self)(q, check=False), type(self)(r, check=False)

    def __eq__(self, other):
        if isinstance(other, Polynomial) and not isinstance(other, type(self)):
            return False

        try:
            other = self._intern(other)
        except (TypeError, ValueError):
            return NotImplemented

        return self.value == other

    def __hash__(self):
        return hash((type(self).__name__, tuple(self.value)))

    def __bool__(self):
        return bool(self.value)

    def __repr__(self):
        if not self.value:
            return '0'

        terms = []
        for i, a_i in enumerate(self.value):
            if a_i == 0:
                continue

            c = '' if a_i == 1 and i else str(a_i)
            if i == 0:
                terms.append(c)
            elif i == 1:
                terms.append(f'{c}{X}')
            else:
                terms.append(f'{c}{X}^{i}')
        return '+'.join(terms)
