"""Fixed-capacity polynomials over generic coefficient types.

Important functions and classes:
 - Polynomial: the container and its arithmetic operators
 - quotient_remainder: polynomial long division
 - power: integer powers by repeated squaring
 - format_polynomial / parse_polynomial: canonical text and back
 - traits_for / register: capabilities of coefficient types
"""

from staticpoly.coefficients import CoefficientTraits, traits_for, register
from staticpoly.evaluation import evaluate_polynomial
from staticpoly.polynomials import Polynomial, mul
from staticpoly.division import quotient_remainder
from staticpoly.power import power
from staticpoly.formatting import format_polynomial
from staticpoly.parse import parse_polynomial, ParseError
