"""Integer powers of polynomials.

Important functions:
 - power: raise a polynomial to a non-negative integer power
"""

from staticpoly.common import typechecked
from staticpoly.logging import task
from staticpoly.polynomials import Polynomial, mul

def power_size(size, exponent):
    """Capacity of a polynomial of capacity `size` raised to `exponent`.

    The highest possible degree of the result is exponent*(size-1), so this is
    the same tight bound that `a * b` uses, applied exponent-1 times.
    """
    return max(exponent * (size - 1) + 1, 1)

@typechecked
def power(base : Polynomial, exponent : int) -> Polynomial:
    """Compute base**exponent by repeated squaring.

    Raises ValueError if exponent is negative.
    """
    if exponent < 0:
        raise ValueError("negative power {} not supported".format(exponent))
    size = power_size(len(base), exponent)
    traits = base.traits()
    with task("power", degree=base.degree(), exponent=exponent):
        result = Polynomial.constant(traits.one(base.kind), size=size, kind=base.kind)
        acc = Polynomial(base, size=size)
        # Every intermediate product has degree at most exponent*degree(base),
        # so `mul` never needs more than `size` coefficients.
        while exponent:
            if exponent & 1:
                result = mul(result, acc, size)
            exponent >>= 1
            if exponent:
                acc = mul(acc, acc, size)
        return result
