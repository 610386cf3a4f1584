import unittest
import numpy as np
from quadchar import finfields
from quadchar.fieldhandle import UnsupportedCharacteristic
from quadchar import paley


class Constructions(unittest.TestCase):

    def test_jacobsthal(self):
        for q in (3, 5, 7, 9, 11, 13, 25, 27):
            F = finfields.GF(q)
            Q = paley.jacobsthal_matrix(F)
            I = np.eye(q, dtype=int)
            J = np.ones((q, q), dtype=int)
            self.assertEqual(Q.shape, (q, q))
            np.testing.assert_array_equal(np.diag(Q), 0)
            np.testing.assert_array_equal(Q @ Q.T, q * I - J)
            np.testing.assert_array_equal(Q @ J, 0)
            np.testing.assert_array_equal(J @ Q, 0)
            if q%4 == 1:
                np.testing.assert_array_equal(Q, Q.T)
            else:
                np.testing.assert_array_equal(Q, -Q.T)

    def test_gf5(self):
        Q = paley.jacobsthal_matrix(finfields.GF(5))
        np.testing.assert_array_equal(Q[0], [0, 1, -1, -1, 1])
        A = paley.paley_graph(finfields.GF(5))
        C5 = np.roll(np.eye(5, dtype=int), 1, axis=1) + np.roll(np.eye(5, dtype=int), -1, axis=1)
        np.testing.assert_array_equal(A, C5)  # the 5-cycle

    def test_paley_graph(self):
        for q in (5, 9, 13, 17, 25):
            A = paley.paley_graph(finfields.GF(q))
            I = np.eye(q, dtype=int)
            J = np.ones((q, q), dtype=int)
            k, lam, mu = (q-1) // 2, (q-5) // 4, (q-1) // 4
            np.testing.assert_array_equal(A, A.T)
            np.testing.assert_array_equal(np.diag(A), 0)
            np.testing.assert_array_equal(A.sum(axis=1), k)
            # strongly regular with parameters (q, k, lam, mu)
            np.testing.assert_array_equal(A @ A, k * I + lam * A + mu * (J - I - A))
        self.assertRaises(ValueError, paley.paley_graph, finfields.GF(7))

    def test_paley_tournament(self):
        for q in (3, 7, 11, 27):
            T = paley.paley_tournament(finfields.GF(q))
            I = np.eye(q, dtype=int)
            J = np.ones((q, q), dtype=int)
            np.testing.assert_array_equal(T + T.T, J - I)
            np.testing.assert_array_equal(T.sum(axis=1), (q-1) // 2)
        self.assertRaises(ValueError, paley.paley_tournament, finfields.GF(13))

    def test_conference_matrix(self):
        for q in (5, 9, 13):
            C = paley.conference_matrix(finfields.GF(q))
            np.testing.assert_array_equal(C, C.T)
            np.testing.assert_array_equal(np.diag(C), 0)
            np.testing.assert_array_equal(C @ C.T, q * np.eye(q+1, dtype=int))
        self.assertRaises(ValueError, paley.conference_matrix, finfields.GF(11))

    def test_hadamard_matrix(self):
        for q in (3, 7, 11, 19, 27):
            H = paley.hadamard_matrix(finfields.GF(q))
            self.assertEqual(H.shape, (q+1, q+1))
            self.assertTrue(np.all(np.abs(H) == 1))
            np.testing.assert_array_equal(H @ H.T, (q+1) * np.eye(q+1, dtype=int))
        self.assertRaises(ValueError, paley.hadamard_matrix, finfields.GF(5))

    def test_characteristic_two(self):
        F = finfields.GF(4)
        self.assertRaises(UnsupportedCharacteristic, paley.jacobsthal_matrix, F)
        self.assertRaises(UnsupportedCharacteristic, paley.paley_graph, F)
        self.assertRaises(UnsupportedCharacteristic, paley.hadamard_matrix, finfields.GF(2))


if __name__ == "__main__":
    unittest.main()
