"""Canonical text for polynomials.

A polynomial is written as a sum of monomials in decreasing degree, e.g.

    x^3 - 2x^2 + x - 1

Coefficients equal to one are omitted, and the sign of each coefficient is
folded into the separator between monomials.  Whether a coefficient is zero,
one, or negative is decided by its type's CoefficientTraits, so that nearly
zero floating-point values disappear and complex or quaternion coefficients
get a sensible sign.

Important functions:
 - format_polynomial: Polynomial -> str
"""

def _xpow(i):
    if i == 1:
        return "x"
    if i > 1:
        return "x^{}".format(i)
    return ""

def _monomial(traits, coefficient, i):
    """The text for coefficient*x^i, leaving out a coefficient of 1 or -1."""
    if traits.is_one(-coefficient):
        return "-" + _xpow(i)
    if traits.is_one(coefficient):
        return _xpow(i)
    return traits.format(coefficient) + _xpow(i)

def format_polynomial(p):
    i = p.degree()
    if i == -1:
        return "0"
    traits = p.traits()
    if i == 0:
        return traits.format(p[0])

    parts = [_monomial(traits, p[i], i)]
    for i in reversed(range(1, i)):
        c = p[i]
        if traits.is_negative(c):
            parts.append(" - " + _monomial(traits, -c, i))
        elif not traits.is_zero(c):
            parts.append(" + " + _monomial(traits, c, i))

    c = p[0]
    if traits.is_negative(c):
        parts.append(" - " + traits.format(-c))
    elif not traits.is_zero(c):
        parts.append(" + " + traits.format(c))
    return "".join(parts)
