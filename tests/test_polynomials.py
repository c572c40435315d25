import unittest
from fractions import Fraction

from staticpoly.polynomials import Polynomial, mul

class TestPolynomials(unittest.TestCase):

    def test_sorting(self):
        # lower degree first, then compare from the highest coefficient down
        self.assertLess(Polynomial([2019, 944, 95]), Polynomial([2012, 945, 95]))
        self.assertGreater(Polynomial([2012, 945, 95]), Polynomial([2019, 944, 95]))
        self.assertLess(Polynomial([100, 100]), Polynomial([0, 0, 1]))
        self.assertLess(Polynomial([0, 0, 0]), Polynomial([-5]))
        assert Polynomial([1, 2]) <= Polynomial([1, 2, 0, 0])
        assert Polynomial([1, 2]) >= Polynomial([1, 2, 0, 0])
        assert not (Polynomial([1, 2]) < Polynomial([1, 2, 0]))

    def test_sorting_ignores_capacity(self):
        ps = [Polynomial([3, 1], size=5), Polynomial([7]), Polynomial([0, 0, 2]), Polynomial([1, 1])]
        self.assertEqual(sorted(ps), [Polynomial([7]), Polynomial([1, 1]), Polynomial([3, 1]), Polynomial([0, 0, 2])])

    def test_complex_coefficients_are_unordered(self):
        a = Polynomial([1j, 1])
        b = Polynomial([2j, 1])
        with self.assertRaises(TypeError):
            a < b
        with self.assertRaises(TypeError):
            a >= b
        assert a != b
        assert a == Polynomial([1j, 1, 0])

    def test_construction_pads_and_truncates(self):
        p = Polynomial([1, 2, 3], size=5)
        self.assertEqual(p.size(), 5)
        self.assertEqual(p.coefficients(), (1, 2, 3, 0, 0))
        q = Polynomial([1, 2, 3], size=2)
        self.assertEqual(q.coefficients(), (1, 2))
        self.assertEqual(len(Polynomial([4, 5, 6])), 3)

    def test_explicit_conversion(self):
        p = Polynomial([1, 0, 1])
        big = Polynomial(p, size=6)
        self.assertEqual(len(big), 6)
        assert big == p
        small = p.resize(2)
        self.assertEqual(small.coefficients(), (1, 0))
        # conversion copies; the original is untouched
        big[5] = 9
        self.assertEqual(len(p), 3)
        self.assertEqual(p.degree(), 2)

    def test_constant(self):
        c = Polynomial.constant(7, size=3)
        self.assertEqual(c.coefficients(), (7, 0, 0))
        self.assertEqual(c.degree(), 0)

    def test_kind_inference(self):
        self.assertIs(Polynomial([1, 2]).kind, int)
        self.assertIs(Polynomial([1, 2.5]).kind, float)
        self.assertIs(Polynomial([Fraction(1, 2), 1]).kind, Fraction)
        self.assertIs(Polynomial([]).kind, int)
        self.assertIs(Polynomial([1], kind=float).kind, float)
        self.assertEqual(Polynomial([], size=2, kind=float).coefficients(), (0.0, 0.0))

    def test_indexing(self):
        p = Polynomial([1, 2, 3])
        self.assertEqual(p[2], 3)
        p[1] = 5
        self.assertEqual(p[1], 5)
        with self.assertRaises(IndexError):
            p[3]
        with self.assertRaises(IndexError):
            p[-1]
        with self.assertRaises(IndexError):
            p[3] = 1
        self.assertEqual(list(p), [1, 5, 3])

    def test_degree(self):
        self.assertEqual(Polynomial([1, 0, 1]).degree(), 2)
        self.assertEqual(Polynomial([1, 0, 1, 0, 0]).degree(), 2)
        self.assertEqual(Polynomial([0, 0]).degree(), -1)
        self.assertEqual(Polynomial([]).degree(), -1)
        self.assertEqual(Polynomial([5]).degree(), 0)

    def test_bool(self):
        assert Polynomial([0, 1])
        assert not Polynomial([0, 0, 0])
        assert not Polynomial([])

    def test_evaluate(self):
        p = Polynomial([-1, 0, 2]) # 2x^2 - 1
        self.assertEqual(p(3), 17)
        self.assertEqual(p.evaluate(0), -1)
        self.assertAlmostEqual(p(0.5), -0.5)
        self.assertEqual(Polynomial([]).evaluate(4), 0)

    def test_equality_is_capacity_independent(self):
        a = Polynomial([1, 0, 1])
        b = Polynomial([1, 0, 1, 0, 0])
        c = Polynomial([1, 0, 1, 0])
        assert a == a
        assert a == b and b == a
        assert b == c and a == c
        assert a != Polynomial([1, 0, 2])
        # the leading coefficient takes part in the comparison
        assert Polynomial([1, 2]) != Polynomial([1, 3])
        assert Polynomial([0]) == Polynomial([])
        assert Polynomial([1]) != 1

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Polynomial([1]))

    def test_scalar_add_subtract(self):
        p = Polynomial([1, 2, 3])
        self.assertEqual((p + 4).coefficients(), (5, 2, 3))
        self.assertEqual((4 + p).coefficients(), (5, 2, 3))
        self.assertEqual((p - 4).coefficients(), (-3, 2, 3))
        self.assertEqual((4 - p).coefficients(), (3, -2, -3))
        # operators return new values
        self.assertEqual(p.coefficients(), (1, 2, 3))

    def test_scalar_add_to_empty(self):
        empty = Polynomial([])
        s = empty + 3
        self.assertEqual(len(s), 1)
        self.assertEqual(s[0], 3)
        d = empty - 3
        self.assertEqual(d.coefficients(), (-3,))
        r = 3 - empty
        self.assertEqual(r.coefficients(), (3,))
        with self.assertRaises(ValueError):
            empty += 1

    def test_in_place_scalar_ops(self):
        p = Polynomial([4, 6])
        p += 1
        p *= 2
        self.assertEqual(p.coefficients(), (10, 12))
        p -= 2
        p /= 4
        self.assertEqual(p.coefficients(), (2, 3))
        p %= 2
        self.assertEqual(p.coefficients(), (0, 1))

    def test_scalar_multiply(self):
        p = Polynomial([1, -2, 3])
        self.assertEqual((p * 2).coefficients(), (2, -4, 6))
        self.assertEqual((2 * p).coefficients(), (2, -4, 6))
        z = p * 0
        self.assertEqual(len(z), 3)
        self.assertEqual(z.degree(), -1)

    def test_scalar_divide(self):
        self.assertEqual((Polynomial([2.0, 3.0]) / 2).coefficients(), (1.0, 1.5))
        # integer coefficients divide with truncation toward zero
        self.assertEqual((Polynomial([7, -7]) / 2).coefficients(), (3, -3))
        with self.assertRaises(ZeroDivisionError):
            Polynomial([1, 2]) / 0

    def test_scalar_modulo(self):
        p = Polynomial([5, 7])
        r = 2
        self.assertEqual((p % r).coefficients(), (1, 1))
        assert p == (p / r) * r + (p % r)
        q = Polynomial([-7, 9, -3, 0])
        for r in (2, 3, -4):
            assert q == (q / r) * r + (q % r)
        self.assertEqual((Polynomial([-7]) % 2).coefficients(), (-1,))

    def test_scalar_modulo_over_field(self):
        m = Polynomial([5.0, 7.5]) % 2.0
        self.assertEqual(len(m), 2)
        assert not m
        assert not (Polynomial([Fraction(1, 3)]) % 2)

    def test_add_subtract(self):
        a = Polynomial([1, 2, 3])
        b = Polynomial([1, 1])
        s = a + b
        self.assertEqual(len(s), 3)
        self.assertEqual(s.coefficients(), (2, 3, 3))
        self.assertEqual((b + a).coefficients(), (2, 3, 3))
        self.assertEqual((b - a).coefficients(), (0, -1, -3))
        self.assertEqual((a - a).degree(), -1)
        self.assertEqual(len(a - a), 3)

    def test_in_place_polynomial_add(self):
        a = Polynomial([1, 2, 0, 0])
        a += Polynomial([1, 1, 1])
        self.assertEqual(a.coefficients(), (2, 3, 1, 0))
        a -= Polynomial([2, 3, 1, 0, 0, 0])
        self.assertEqual(a.degree(), -1)
        with self.assertRaises(ValueError):
            a += Polynomial([0, 0, 0, 0, 1])

    def test_multiply(self):
        x2p1 = Polynomial([1, 0, 1])
        xm1 = Polynomial([-1, 1])
        prod = x2p1 * xm1
        self.assertEqual(len(prod), 4)
        self.assertEqual(prod.coefficients(), (-1, 1, -1, 1))
        self.assertEqual(prod.degree(), x2p1.degree() + xm1.degree())

    def test_multiply_degrees(self):
        a = Polynomial([3, 0, 2, 0])
        b = Polynomial([1, 5, 0])
        self.assertEqual(len(a * b), 6)
        self.assertEqual((a * b).degree(), a.degree() + b.degree())

    def test_multiply_by_zero(self):
        z = Polynomial([0, 0]) * Polynomial([1, 2, 3])
        self.assertEqual(len(z), 4)
        self.assertEqual(z.degree(), -1)
        self.assertEqual(len(Polynomial([]) * Polynomial([])), 0)

    def test_in_place_multiply(self):
        p = Polynomial([1, 1, 0, 0])
        p *= Polynomial([1, 1])
        self.assertEqual(p.coefficients(), (1, 2, 1, 0))
        self.assertEqual(len(p), 4)
        with self.assertRaises(ValueError):
            p *= Polynomial([0, 0, 1])

    def test_headroom_multiply(self):
        a = Polynomial([1, 1, 0, 0])
        b = Polynomial([-1, 1, 0, 0])
        self.assertEqual(mul(a, b).coefficients(), (-1, 0, 1, 0))
        self.assertEqual(mul(a, b, 6).coefficients(), (-1, 0, 1, 0, 0, 0))
        # terms past the requested capacity are dropped
        self.assertEqual(mul(a, a, 2).coefficients(), (1, 2))
        self.assertEqual(mul(a, Polynomial([0])).degree(), -1)

    def test_negate(self):
        p = Polynomial([1, -2, 0])
        n = -p
        self.assertEqual(n.coefficients(), (-1, 2, 0))
        self.assertEqual(len(n), 3)
        self.assertEqual(p.coefficients(), (1, -2, 0))
        assert +p == p and +p is not p

    def test_mixed_kinds(self):
        s = Polynomial([1, 2]) + Polynomial([0.5])
        self.assertIs(s.kind, float)
        self.assertEqual(s.coefficients(), (1.5, 2))

    def test_scalar_operand_changes_kind(self):
        for p in (Polynomial([1, 3]) * 0.5, 0.5 * Polynomial([1, 3])):
            self.assertIs(p.kind, float)
            self.assertEqual((p / 2).coefficients(), (0.25, 0.75))
            m = p % 2
            self.assertEqual(len(m), 2)
            assert not m
        h = Polynomial([1, 3]) * Fraction(1, 2)
        self.assertIs(h.kind, Fraction)
        self.assertEqual((h / 2).coefficients(), (Fraction(1, 4), Fraction(3, 4)))
        assert not (h % 2)
        # integer scalars leave the kind alone
        self.assertIs((Polynomial([1, 3]) * 2).kind, int)
        self.assertIs((Polynomial([1, 3]) + True).kind, int)

    def test_scalar_add_and_subtract_change_kind(self):
        self.assertIs((Polynomial([1, 2]) + 0.5).kind, float)
        self.assertIs((Polynomial([1, 2]) - 0.5).kind, float)
        self.assertIs((0.5 - Polynomial([1, 2])).kind, float)
        self.assertIs((Polynomial([]) + 0.5).kind, float)
        self.assertIs((Polynomial([]) - Fraction(1, 2)).kind, Fraction)
        self.assertIs((Polynomial([1, 2]) + 1j).kind, complex)

    def test_in_place_ops_change_kind(self):
        a = Polynomial([1, 2])
        a += Polynomial([0.5])
        self.assertIs(a.kind, float)
        self.assertEqual((a / 2).coefficients(), (0.75, 1.0))
        assert not (a % 2)
        b = Polynomial([1, 2])
        b -= 0.5
        self.assertIs(b.kind, float)
        c = Polynomial([2, 4])
        c /= 0.5
        self.assertIs(c.kind, float)
        self.assertEqual(c.coefficients(), (4.0, 8.0))
        d = Polynomial([1, 1, 0])
        d *= Polynomial([Fraction(1, 2), Fraction(1, 2)])
        self.assertIs(d.kind, Fraction)
        self.assertEqual(d.coefficients(), (Fraction(1, 2), 1, Fraction(1, 2)))

    def test_scaled_polynomial_divides_over_field(self):
        p = Polynomial([-1, 0, 1]) * 0.5
        q, r = divmod(p, Polynomial([-1, 1]))
        self.assertEqual(q.coefficients(), (0.5, 0.5))
        assert not r

    def test_repr(self):
        self.assertEqual(repr(Polynomial([1, 2], size=3)), "Polynomial([1, 2, 0], size=3)")

if __name__ == '__main__':
    unittest.main()
