import unittest
from quadchar import finfields
from quadchar.fieldhandle import (FieldHandle, GFHandle, field_handle, DivisionByZero,
                                  ZeroNotClassifiable, UnsupportedCharacteristic)


class IntegersMod(FieldHandle):
    """Prime field backend using plain Python integers."""

    def __init__(self, p):
        self.modulus = p
        super().__init__()

    def cardinality(self):
        return self.modulus

    def characteristic(self):
        return self.modulus

    def zero(self):
        return 0

    def one(self):
        return 1

    def enumerate(self):
        return list(range(self.modulus))

    def power(self, a, n):
        return pow(a, n, self.modulus)

    def invert(self, a):
        if a % self.modulus == 0:
            raise DivisionByZero(a)

        return pow(a, -1, self.modulus)

    def negate(self, a):
        return -a % self.modulus

    def add(self, a, b):
        return (a + b) % self.modulus

    def subtract(self, a, b):
        return (a - b) % self.modulus

    def multiply(self, a, b):
        return (a * b) % self.modulus


class Handles(unittest.TestCase):

    def test_gf_handle(self):
        F = finfields.GF(5)
        H = GFHandle(F)
        self.assertEqual((H.cardinality(), H.characteristic()), (5, 5))
        self.assertEqual((H.order, H.p, H.degree), (5, 5, 1))
        self.assertEqual(H.zero(), 0)
        self.assertEqual(H.one(), 1)
        self.assertTrue(H.is_zero(F(0)))
        self.assertFalse(H.is_zero(F(3)))
        self.assertEqual(list(H.enumerate()), [F(a) for a in range(5)])
        self.assertEqual(H.power(F(2), 2), 4)
        self.assertEqual(H.power(F(0), 3), 0)
        self.assertRaises(ValueError, H.power, F(2), -1)
        self.assertEqual(H.invert(F(2)), 3)
        self.assertEqual(H.negate(F(2)), 3)
        self.assertEqual(H.add(F(2), F(4)), 1)
        self.assertEqual(H.subtract(F(2), F(4)), 3)
        self.assertEqual(H.multiply(F(2), F(4)), 3)
        self.assertEqual(repr(H), 'GFHandle(GF(5))')
        self.assertIs(field_handle(H), H)

    def test_extension_handle(self):
        H = field_handle(finfields.GF(27))
        self.assertEqual((H.order, H.p, H.degree), (27, 3, 3))
        self.assertEqual(len(H.enumerate()), 27)
        a = H.enumerate()[5]
        self.assertEqual(H.multiply(H.invert(a), a), H.one())

    def test_division_by_zero(self):
        for q in (2, 7, 9):
            H = field_handle(finfields.GF(q))
            with self.assertRaises(DivisionByZero) as cm:
                H.invert(H.zero())
            self.assertIsInstance(cm.exception, ZeroDivisionError)
            self.assertEqual(cm.exception.value, 0)

    def test_custom_backend(self):
        H = IntegersMod(7)
        self.assertEqual((H.order, H.p, H.degree), (7, 7, 1))
        self.assertEqual(repr(H), 'IntegersMod(q=7, p=7)')
        self.assertRaises(DivisionByZero, H.invert, 0)
        self.assertRaises(ValueError, IntegersMod, 6)
        self.assertRaises(ValueError, IntegersMod, 1)

    def test_inconsistent_descriptor(self):
        class Inconsistent(IntegersMod):
            def characteristic(self):
                return 2

        self.assertRaises(ValueError, Inconsistent, 9)

    def test_errors(self):
        e = ZeroNotClassifiable(0)
        self.assertIsInstance(e, ValueError)
        self.assertEqual(e.value, 0)
        e = UnsupportedCharacteristic(2, 'sum_character')
        self.assertIsInstance(e, ValueError)
        self.assertEqual(e.characteristic, 2)
        self.assertIn('sum_character', str(e))


if __name__ == "__main__":
    unittest.main()
