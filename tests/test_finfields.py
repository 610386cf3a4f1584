import operator
import unittest
from quadchar import gfpx
from quadchar import finfields


class Arithmetic(unittest.TestCase):

    def setUp(self):
        self.f2 = finfields.GF(2)
        self.f4 = finfields.GF(4)
        self.f7 = finfields.GF(7)    # 7 % 4 = 3
        self.f9 = finfields.GF(9)  # irreducible polynomial X^2 + 1
        self.f27 = finfields.GF(gfpx.GFpX(3)(46))  # irreducible polynomial X^3 + 2X^2 + 1

    def test_field_caching(self):
        self.assertIs(finfields.GF(7), self.f7)
        self.assertIs(finfields.GF(9), finfields.GF(gfpx.GFpX(3)(10)))
        self.assertNotEqual(self.f2(1), self.f4(1))
        self.assertRaises(ValueError, finfields.GF, 1)
        self.assertRaises(ValueError, finfields.GF, 6)
        self.assertRaises(ValueError, finfields.GF, gfpx.GFpX(3)(28))
        self.assertRaises(TypeError, finfields.GF, 2.5)

    def test_descriptors(self):
        self.assertEqual((self.f7.order, self.f7.characteristic, self.f7.ext_deg), (7, 7, 1))
        self.assertEqual((self.f9.order, self.f9.characteristic, self.f9.ext_deg), (9, 3, 2))
        self.assertEqual(self.f9.modulus, gfpx.GFpX(3)(10))
        self.assertEqual(self.f4.modulus, gfpx.GFpX(2)(7))
        self.assertEqual(self.f27.order, 27)
        self.assertEqual(finfields.GF(8).ext_deg, 3)

    def test_elements(self):
        for F in (self.f2, self.f4, self.f7, self.f9, self.f27):
            elements = list(F.elements())
            self.assertEqual(len(elements), F.order)
            self.assertEqual([int(a) for a in elements], list(range(F.order)))
            self.assertEqual(len(set(elements)), F.order)
            self.assertEqual(elements, list(F.elements()))

    def test_prime_field(self):
        f7 = self.f7
        self.assertFalse(f7(0))
        self.assertTrue(f7(8))
        self.assertEqual(f7(3) + 5, 1)
        self.assertEqual(f7(5) - 3, 2)
        self.assertEqual(f7(3) - f7(5), 5)
        self.assertEqual(f7(4) * 2, 1)
        self.assertEqual(-f7(1), 6)
        self.assertEqual(f7(1) / f7(2), 4)
        self.assertEqual(f7(1) / 3, 5)
        self.assertEqual(f7(3).reciprocal(), 5)
        self.assertEqual(f7(3)**6, 1)
        self.assertEqual(f7(3)**0, 1)
        self.assertEqual(f7(3)**-1, 5)
        self.assertRaises(ZeroDivisionError, f7(0).reciprocal)
        self.assertRaises(TypeError, f7, 1.0)
        self.assertRaises(TypeError, operator.add, 5, f7(3))
        self.assertRaises(TypeError, operator.sub, 5, f7(3))
        self.assertRaises(TypeError, operator.mul, 2, f7(4))
        self.assertRaises(TypeError, operator.truediv, 1, f7(3))
        self.assertEqual(repr(f7(10)), '3')
        self.assertFalse(hasattr(f7(1), 'is_sqr'))

    def test_extension_field(self):
        f9 = self.f9
        x = f9(3)  # X
        self.assertEqual(x * x, -1)
        self.assertEqual(x * x, f9(2))
        self.assertEqual(x**4, 1)
        self.assertEqual((x + 1)**8, 1)
        self.assertEqual((x + 1)**-1 * (x + 1), 1)
        self.assertEqual(f9(4) / f9(4), 1)
        self.assertEqual(f9(4) - f9(4), 0)
        self.assertEqual(x.reciprocal(), f9(6))  # 1/X = -X = 2X
        self.assertRaises(ZeroDivisionError, f9(0).reciprocal)

        f4 = self.f4
        w = f4(2)
        self.assertEqual(w * w, w + 1)
        self.assertEqual(w**3, 1)
        self.assertEqual(w + w, 0)


if __name__ == "__main__":
    unittest.main()
