"""Class for representing fixed-capacity polynomials of one variable.

A Polynomial holds exactly `size()` coefficients; index 0 is the constant
term.  The capacity of a value never changes: operations that need more room
(like multiplication) return a new, larger polynomial, and conversion between
capacities only happens when asked for explicitly with
`Polynomial(p, size=...)` or `p.resize(...)`.

Important functions and classes:
 - Polynomial: the container and its operators
 - mul: multiply into a result of a caller-chosen capacity
"""

import functools

from staticpoly.coefficients import traits_for
from staticpoly.common import compare_with_lt
from staticpoly.evaluation import evaluate_polynomial

def _infer_kind(values):
    for v in values:
        if type(v) not in (int, bool):
            return type(v)
    return int

def _common_kind(k1, k2):
    if k1 is k2 or k2 is int:
        return k1
    if k1 is int:
        return k2
    return k1

@functools.total_ordering
class Polynomial(object):
    __slots__ = ("_coeffs", "kind")

    def __init__(self, coefficients=(), size=None, kind=None):
        """Build a polynomial from a sequence of coefficients.

        If `size` is given, the coefficient list is padded with zeros or has
        its high-order terms dropped to fit.  Passing another Polynomial
        copies it (with an explicit `size`, this converts it to a new
        capacity).
        """
        if isinstance(coefficients, Polynomial):
            if kind is None:
                kind = coefficients.kind
            coefficients = coefficients._coeffs
        values = list(coefficients)
        if kind is None:
            kind = _infer_kind(values)
        self.kind = kind
        if size is None:
            size = len(values)
        assert size >= 0, "polynomial capacity must be non-negative, not {}".format(size)
        if len(values) > size:
            del values[size:]
        elif len(values) < size:
            zero = self.traits().zero(kind)
            values.extend(zero for i in range(size - len(values)))
        self._coeffs = values

    @staticmethod
    def constant(value, size=1, kind=None):
        """A polynomial of the given capacity whose constant term is `value`."""
        return Polynomial([value], size=size, kind=kind)

    @staticmethod
    def zero(size, kind=int):
        return Polynomial((), size=size, kind=kind)

    def traits(self):
        return traits_for(self.kind)

    def resize(self, size):
        """Return a copy with capacity `size`, truncating or zero-extending."""
        return Polynomial(self, size=size)

    def copy(self):
        return Polynomial(self)

    # access

    def size(self):
        return len(self._coeffs)

    def __len__(self):
        return len(self._coeffs)

    def __iter__(self):
        return iter(self._coeffs)

    def coefficients(self):
        return tuple(self._coeffs)

    def _check_index(self, i):
        if not isinstance(i, int):
            raise TypeError("polynomial indices must be integers, not {}".format(type(i).__name__))
        if i < 0 or i >= len(self._coeffs):
            raise IndexError("coefficient index {} out of range for capacity {}".format(i, len(self._coeffs)))

    def __getitem__(self, i):
        self._check_index(i)
        return self._coeffs[i]

    def __setitem__(self, i, value):
        self._check_index(i)
        self._coeffs[i] = value

    def degree(self):
        """Index of the highest nonzero coefficient, or -1 for the zero polynomial."""
        for i in reversed(range(len(self._coeffs))):
            if self._coeffs[i]:
                return i
        return -1

    def evaluate(self, z):
        return evaluate_polynomial(self._coeffs, z, zero=self.traits().zero(self.kind))

    __call__ = evaluate

    def __bool__(self):
        return self.degree() >= 0

    def __repr__(self):
        return "Polynomial({!r}, size={})".format(self._coeffs, len(self._coeffs))

    def __str__(self):
        from staticpoly.formatting import format_polynomial
        return format_polynomial(self)

    # comparison

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        n = self.degree()
        if other.degree() != n:
            return False
        for i in range(n + 1):
            if self._coeffs[i] != other._coeffs[i]:
                return False
        return True

    __hash__ = None

    def __lt__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if not (self.traits().ordered and other.traits().ordered):
            return NotImplemented
        d1 = self.degree()
        d2 = other.degree()
        if d1 != d2:
            return d1 < d2
        for i in reversed(range(d1 + 1)):
            c = compare_with_lt(self._coeffs[i], other._coeffs[i])
            if c != 0:
                return c < 0
        return False

    # in-place operators

    def __iadd__(self, other):
        if isinstance(other, Polynomial):
            self._require_room(other.degree(), "add")
            self.kind = _common_kind(self.kind, other.kind)
            for i in range(other.degree() + 1):
                self._coeffs[i] += other._coeffs[i]
            return self
        if not self._coeffs:
            raise ValueError("cannot modify a polynomial of capacity 0 in place")
        self.kind = self._scalar_kind(other)
        self._coeffs[0] += other
        return self

    def __isub__(self, other):
        if isinstance(other, Polynomial):
            self._require_room(other.degree(), "subtract")
            self.kind = _common_kind(self.kind, other.kind)
            for i in range(other.degree() + 1):
                self._coeffs[i] -= other._coeffs[i]
            return self
        if not self._coeffs:
            raise ValueError("cannot modify a polynomial of capacity 0 in place")
        self.kind = self._scalar_kind(other)
        self._coeffs[0] -= other
        return self

    def __imul__(self, other):
        if isinstance(other, Polynomial):
            if self and other:
                self._require_room(self.degree() + other.degree(), "multiply")
            res = mul(self, other, len(self._coeffs))
            self._coeffs = res._coeffs
            self.kind = res.kind
            return self
        self.kind = self._scalar_kind(other)
        for i in range(len(self._coeffs)):
            self._coeffs[i] *= other
        return self

    def __itruediv__(self, other):
        if isinstance(other, Polynomial):
            return NotImplemented
        self.kind = self._scalar_kind(other)
        traits = self.traits()
        for i in range(len(self._coeffs)):
            self._coeffs[i] = traits.divide(self._coeffs[i], other)
        return self

    def __imod__(self, other):
        if isinstance(other, Polynomial):
            return NotImplemented
        self.kind = self._scalar_kind(other)
        traits = self.traits()
        for i in range(len(self._coeffs)):
            self._coeffs[i] = traits.remainder(self._coeffs[i], other)
        return self

    def _scalar_kind(self, value):
        """The kind after combining this polynomial with the scalar `value`."""
        if type(value) in (int, bool):
            return self.kind
        return _common_kind(self.kind, type(value))

    def _require_room(self, degree, what):
        if degree >= len(self._coeffs):
            raise ValueError("cannot {} in place: result needs degree {}, but capacity is {}".format(
                what, degree, len(self._coeffs)))

    # arithmetic

    def __neg__(self):
        return Polynomial([-c for c in self._coeffs], kind=self.kind)

    def __pos__(self):
        return self.copy()

    def __add__(self, other):
        if isinstance(other, Polynomial):
            kind = _common_kind(self.kind, other.kind)
            res = Polynomial(self, size=max(len(self), len(other)), kind=kind)
            for i in range(len(other)):
                res._coeffs[i] += other._coeffs[i]
            return res
        if not self._coeffs:
            return Polynomial.constant(other, kind=self._scalar_kind(other))
        res = self.copy()
        res += other
        return res

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            kind = _common_kind(self.kind, other.kind)
            res = Polynomial(self, size=max(len(self), len(other)), kind=kind)
            for i in range(len(other)):
                res._coeffs[i] -= other._coeffs[i]
            return res
        if not self._coeffs:
            return Polynomial.constant(-other, kind=self._scalar_kind(other))
        res = self.copy()
        res -= other
        return res

    def __rsub__(self, other):
        return Polynomial.constant(other, size=max(len(self), 1), kind=self._scalar_kind(other)) - self

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            kind = _common_kind(self.kind, other.kind)
            res = Polynomial.zero(max(len(self) + len(other) - 1, 0), kind=kind)
            if not self or not other:
                return res
            for i, a in enumerate(self._coeffs):
                for j, b in enumerate(other._coeffs):
                    res._coeffs[i + j] += a * b
            return res
        res = self.copy()
        res *= other
        return res

    def __rmul__(self, other):
        return Polynomial([other * c for c in self._coeffs], kind=self._scalar_kind(other))

    def __truediv__(self, other):
        if isinstance(other, Polynomial):
            from staticpoly.division import quotient_remainder
            return quotient_remainder(self, other)[0]
        res = self.copy()
        res /= other
        return res

    def __floordiv__(self, other):
        if isinstance(other, Polynomial):
            return self.__truediv__(other)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, Polynomial):
            from staticpoly.division import quotient_remainder
            return quotient_remainder(self, other)[1]
        res = self.copy()
        res %= other
        return res

    def __divmod__(self, other):
        if isinstance(other, Polynomial):
            from staticpoly.division import quotient_remainder
            return quotient_remainder(self, other)
        return NotImplemented

    def __pow__(self, exponent):
        from staticpoly.power import power
        return power(self, exponent)

def mul(a, b, size=None):
    """Multiply a and b into a polynomial of capacity `size` (default len(a)).

    This is cheaper than `a * b` when the caller knows that the product fits:
    only the products a[i]*b[j] with i+j < size are computed, and any terms
    of the true product beyond the requested capacity are silently dropped.
    """
    if size is None:
        size = len(a)
    res = Polynomial.zero(size, kind=_common_kind(a.kind, b.kind))
    if not a or not b:
        return res
    prod = res._coeffs
    for i in range(min(len(a), size)):
        x = a._coeffs[i]
        for j in range(min(len(b), size - i)):
            prod[i + j] += x * b._coeffs[j]
    return res
