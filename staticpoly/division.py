"""Long division of polynomials.

Knuth, The Art of Computer Programming: Volume 2, Third edition, 1998,
Chapter 4.6.1 describes two algorithms:
 - Algorithm D divides polynomials over a field: each quotient coefficient
   is the leading remainder coefficient divided by the divisor's leading
   coefficient.
 - Algorithm R ("pseudo-division") divides polynomials over an integral
   domain without ever dividing coefficients.  Instead it scales the
   remainder by the divisor's leading coefficient at every step, so that

       lc(v)**(m-n+1) * u == q*v + r

   where m and n are the degrees of u and v.  When v is monic this is
   ordinary division.

The algorithm is chosen by the coefficient type (see
`staticpoly.coefficients`), never by the coefficient values.

Important functions:
 - quotient_remainder: compute (a / b, a % b) together
"""

from staticpoly.coefficients import traits_for
from staticpoly.common import integer_power
from staticpoly.logging import task, event
from staticpoly.polynomials import Polynomial, _common_kind

def _field_step(q, u, v, n, k, traits):
    q[k] = traits.divide(u[n + k], v[n])
    for j in reversed(range(k, n + k)):
        u[j] -= q[k] * v[j - k]

def _pseudo_step(q, u, v, n, k, traits):
    q[k] = u[n + k] * integer_power(v[n], k)
    for j in reversed(range(n + k)):
        u[j] = v[n] * u[j] - (0 if j < k else u[n + k] * v[j - k])

def quotient_remainder(dividend, divisor):
    """Divide `dividend` by `divisor`, returning (quotient, remainder).

    The quotient's base capacity is max(len(dividend) - len(divisor) + 1, 1).
    This function departs from that rule when the divisor's degree is below
    its capacity: the quotient is widened to deg(dividend) - deg(divisor) + 1
    so that no quotient term is dropped and dividend == divisor*q + r still
    holds.  The remainder has capacity min(len(dividend), len(divisor)).

    Raises ZeroDivisionError if the divisor is the zero polynomial.
    """
    if not divisor:
        raise ZeroDivisionError("polynomial division by the zero polynomial")

    kind = _common_kind(dividend.kind, divisor.kind)
    traits = traits_for(kind)
    m = dividend.degree()
    n = divisor.degree()
    q_size = max(len(dividend) - len(divisor) + 1, m - n + 1, 1)
    r_size = min(len(dividend), len(divisor))

    if m < n:
        return (Polynomial.zero(q_size, kind=kind),
                Polynomial(dividend, size=r_size, kind=kind))

    with task("quotient_remainder", dividend_degree=m, divisor_degree=n):
        u = list(dividend.coefficients()[:m + 1])
        v = divisor.coefficients()[:n + 1]
        q = Polynomial.zero(q_size, kind=kind)
        if traits.field:
            event("dividing over a field")
            step = _field_step
        else:
            event("pseudo-dividing over an integral domain")
            step = _pseudo_step
        for k in reversed(range(m - n + 1)):
            step(q, u, v, n, k, traits)
        return (q, Polynomial(u[:n], size=r_size, kind=kind))
