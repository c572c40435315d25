"""Capabilities of coefficient types.

A polynomial does not care what its coefficients are, as long as they can be
added, multiplied, and compared for equality.  A few algorithms need to know
more:
 - long division needs to know whether the coefficients form a field (so
   that the leading coefficient can be divided out) or only an integral
   domain (so that pseudo-division must be used instead)
 - the formatter needs to know whether a coefficient is zero, one, or
   negative, even for floating-point values that are only approximately so
   and for types like complex numbers that have no sign at all
 - ordering polynomials needs a total order on the coefficients

Those facts are properties of the coefficient *type*, not of individual
values.  Each type is associated with a CoefficientTraits object, found with
`traits_for(kind)`.

Important functions:
 - traits_for: look up the traits for a coefficient type
 - register: associate traits with a new coefficient type
"""

from decimal import Decimal
from fractions import Fraction
import math
import numbers
import sys

from staticpoly.common import truncated_divide, find_one, count
from staticpoly.opts import Option

zero_tolerance = Option("zero-tolerance", float, 1e-11,
    description="Floating-point coefficients smaller than this in magnitude are treated as zero")
one_tolerance = Option("one-tolerance", float, 1e-11,
    description="Floating-point coefficients within this relative distance of 1 are treated as one")

class CoefficientTraits(object):
    """Traits for an exact coefficient type that forms a field.

    This is also the fallback for types we know nothing about: values are
    compared literally, and division is assumed to be exact.
    """

    field = True
    ordered = True

    def zero(self, kind):
        return kind(0)

    def one(self, kind):
        return kind(1)

    def is_zero(self, v):
        return v == 0

    def is_one(self, v):
        return v == 1

    def is_negative(self, v):
        return v < 0 and not self.is_zero(v)

    def divide(self, a, b):
        return a / b

    def remainder(self, a, b):
        # There is no meaningful remainder in a field.
        return a * 0

    def format(self, v):
        return str(v)

    def __repr__(self):
        return "{}()".format(type(self).__name__)

class IntegralTraits(CoefficientTraits):
    """Traits for integers: an integral domain, not a field."""

    field = False

    def divide(self, a, b):
        return truncated_divide(a, b)

    def remainder(self, a, b):
        # Preserves a == b*(a/b) + (a%b) with truncating `/`.
        return a - b * truncated_divide(a, b)

class FloatTraits(CoefficientTraits):
    """Traits for floating-point numbers, with approximate zero and one."""

    def zero(self, kind):
        return kind(0.0)

    def one(self, kind):
        return kind(1.0)

    def is_zero(self, v):
        v = float(v)
        if not math.isfinite(v):
            return True # NaN or infinite
        if abs(v) < sys.float_info.min:
            return True # zero or subnormal
        return abs(v) < zero_tolerance.value

    def is_one(self, v):
        v = float(v)
        if not math.isfinite(v) or v <= 0:
            return False
        return abs(v - 1.0) / min(v, 1.0) < one_tolerance.value

class CompositeTraits(CoefficientTraits):
    """Traits for values made of several real components.

    Complex numbers, quaternions, and octonions are all handled here: a value
    is zero if all of its components are, and one if its first component is
    one and the rest are zero.  These types have no total order, so
    polynomials over them cannot be compared with `<`.

    A composite value is "negative" (which only matters for choosing between
    " + " and " - " when formatting) if its first nonzero component is
    negative and at least as many nonzero components are negative as are
    positive.  This is a readability heuristic, not a mathematical property.
    """

    ordered = False

    def __init__(self, components=None):
        self._components = components
        self._real = FloatTraits()

    def components(self, v):
        if self._components is not None:
            return tuple(self._components(v))
        return tuple(v.components())

    def is_zero(self, v):
        return all(self._real.is_zero(c) for c in self.components(v))

    def is_one(self, v):
        first, *rest = self.components(v)
        return self._real.is_one(first) and all(self._real.is_zero(c) for c in rest)

    def is_negative(self, v):
        real = self._real
        vals = self.components(v)
        nonzero = find_one(vals, lambda c: not real.is_zero(c))
        if nonzero is None:
            return False
        return (nonzero < 0 and
            count(vals, lambda c: c < 0 and not real.is_zero(c)) >=
            count(vals, lambda c: c > 0 and not real.is_zero(c)))

EXACT_FIELD = CoefficientTraits()
INTEGRAL = IntegralTraits()
FLOATING = FloatTraits()
COMPLEX = CompositeTraits(components=lambda c: (c.real, c.imag))

_REGISTRY = {
    bool: INTEGRAL,
    int: INTEGRAL,
    float: FLOATING,
    complex: COMPLEX,
    Fraction: EXACT_FIELD,
    Decimal: EXACT_FIELD,
}

def register(kind, traits):
    """Use `traits` for coefficients of type `kind` (and its subclasses)."""
    assert isinstance(traits, CoefficientTraits)
    _REGISTRY[kind] = traits

def traits_for(kind):
    """Find the CoefficientTraits for a coefficient type.

    Explicit registrations win, searched along the type's MRO so that
    subclasses inherit their parent's traits.  Otherwise the numeric tower
    decides, then the presence of a `components()` method.  Anything else is
    treated as an exact field.
    """
    for t in kind.__mro__:
        traits = _REGISTRY.get(t)
        if traits is not None:
            return traits
    if issubclass(kind, numbers.Integral):
        return INTEGRAL
    if issubclass(kind, numbers.Rational):
        return EXACT_FIELD
    if issubclass(kind, numbers.Real):
        return FLOATING
    if issubclass(kind, numbers.Complex):
        return COMPLEX
    if callable(getattr(kind, "components", None)):
        return CompositeTraits()
    return EXACT_FIELD
