"""Evaluate polynomials at a point.

Important functions:
 - evaluate_polynomial: Horner's method over a sequence of coefficients
"""

def evaluate_polynomial(coefficients, z, zero=0):
    """Evaluate the polynomial with the given coefficients at z.

    `coefficients[i]` is the coefficient of z**i.  Uses Horner's method,
    which needs len(coefficients)-1 multiplications and is numerically
    stable.  `zero` is returned when there are no coefficients at all.

    z only needs to support `*` and `+` with the coefficients, so it may be
    a number of a different type, a matrix, or another polynomial.
    """
    count = len(coefficients)
    if count == 0:
        return zero
    total = coefficients[count - 1]
    for i in reversed(range(count - 1)):
        total = total * z + coefficients[i]
    return total
