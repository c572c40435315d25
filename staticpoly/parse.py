"""Parser for polynomial text.

This reads the syntax produced by `staticpoly.formatting`, such as

    x^3 - 2x^2 + 3/4x - 1.5

and also accepts a few common variations: `*` between a coefficient and the
variable, `**` for powers, and any identifier as the variable name (all
monomials must use the same one).

The important functions are:
 - parse_polynomial: str -> Polynomial
 - tokenize: str -> iterator of ply tokens
"""

# builtin
from fractions import Fraction

# 3rd party
from ply import lex, yacc

# ours
from staticpoly.polynomials import Polynomial

class ParseError(ValueError):
    pass

# Each operator becomes an OP_* token for the lexer.  So, e.g. "PLUS" matches
# "+" and the token will be named OP_PLUS.
_OPERATORS = ["PLUS", "MINUS", "POW", "TIMES", "CARET"]

# Lexer ########################################################################

def op_token_name(opname):
    return "OP_{}".format(opname.upper())

# Enumerate token names
tokens = []
for opname in _OPERATORS:
    tokens.append(op_token_name(opname))
tokens += ["WORD", "NUM", "FLOAT", "RATIONAL"]
tokens = tuple(tokens) # freeze tokens

def make_lexer():

    # ply discovers token rules by looking at the variables in this scope.
    # String rules are tried longest-regex-first, so "**" wins over "*".
    t_OP_PLUS = r"\+"
    t_OP_MINUS = r"-"
    t_OP_POW = r"\*\*"
    t_OP_TIMES = r"\*"
    t_OP_CARET = r"\^"

    def t_WORD(t):
        r"[a-zA-Z_]\w*"
        return t

    def t_FLOAT(t):
        r"\d+\.\d*(?:[eE][-+]?\d+)?|\d+[eE][-+]?\d+"
        t.value = float(t.value)
        return t

    def t_RATIONAL(t):
        r"\d+/\d+"
        num, den = t.value.split("/")
        if int(den) == 0:
            raise ParseError("zero denominator in {!r} at position {}".format(t.value, t.lexpos))
        t.value = Fraction(int(num), int(den))
        return t

    def t_NUM(t):
        r"\d+"
        t.value = int(t.value)
        return t

    t_ignore = " \t\n"

    def t_error(t):
        raise ParseError("illegal character {!r} at position {}".format(t.value[0], t.lexpos))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Parser #######################################################################

# The parser produces a list of (degree, coefficient, variable-name) triples,
# with variable-name None for constant terms.

def make_parser():
    start = "poly"

    def p_poly(p):
        """poly : signedterm
                | poly OP_PLUS term
                | poly OP_MINUS term"""
        if len(p) == 2:
            p[0] = [p[1]]
        elif p[2] == "+":
            p[0] = p[1] + [p[3]]
        else:
            degree, coefficient, var = p[3]
            p[0] = p[1] + [(degree, -coefficient, var)]

    def p_signedterm(p):
        """signedterm : term
                      | OP_PLUS term
                      | OP_MINUS term"""
        if len(p) == 2:
            p[0] = p[1]
        elif p[1] == "+":
            p[0] = p[2]
        else:
            degree, coefficient, var = p[2]
            p[0] = (degree, -coefficient, var)

    def p_term(p):
        """term : number
                | number varpower
                | number OP_TIMES varpower
                | varpower"""
        if len(p) == 2:
            if isinstance(p[1], tuple):
                var, degree = p[1]
                p[0] = (degree, 1, var)
            else:
                p[0] = (0, p[1], None)
        else:
            var, degree = p[len(p) - 1]
            p[0] = (degree, p[1], var)

    def p_varpower(p):
        """varpower : WORD
                    | WORD OP_CARET NUM
                    | WORD OP_POW NUM"""
        if len(p) == 2:
            p[0] = (p[1], 1)
        else:
            p[0] = (p[1], p[3])

    def p_number(p):
        """number : NUM
                  | FLOAT
                  | RATIONAL"""
        p[0] = p[1]

    def p_error(p):
        if p is None:
            raise ParseError("unexpected end of input")
        raise ParseError("syntax error at position {} near {!r}".format(p.lexpos, p.value))

    return yacc.yacc(debug=False, write_tables=False)

_parser = make_parser()

def parse_polynomial(s, size=None, kind=None):
    """Parse a string as a polynomial.

    The capacity of the result is `size`, or one more than the highest power
    that appears in the text.  If `kind` is given, every coefficient is
    converted with `kind(...)`.
    """
    terms = _parser.parse(s, lexer=_lexer.clone())
    names = set(var for (degree, coefficient, var) in terms if var is not None)
    if len(names) > 1:
        raise ParseError("more than one variable: {}".format(", ".join(sorted(names))))
    by_degree = {}
    for degree, coefficient, var in terms:
        by_degree[degree] = by_degree.get(degree, 0) + coefficient
    coefficients = [by_degree.get(i, 0) for i in range(max(by_degree) + 1)]
    if kind is not None:
        coefficients = [kind(c) for c in coefficients]
    if size is None:
        size = len(coefficients)
    return Polynomial(coefficients, size=size, kind=kind)
