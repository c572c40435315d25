"""Utility functions not found in the standard libraries.

Important functions:
 - @typechecked: decorator to perform runtime typechecking
 - integer_power: raise a coefficient to a non-negative integer power
 - truncated_divide: integer division that rounds toward zero
 - find_one / count: small helpers over iterables
"""

from functools import wraps
import inspect

def check_type(value, ty, value_name="value"):
    """
    Verify that the given value has the given type.
        value      - the value to check
        ty         - a class, or None to do no checking (for example, if the
                     Python formal variable does not have a type annotation)
        value_name - the variable or expression that evaluates to `value`;
                     printed in diagnostic messages
    """
    if ty is not None:
        assert isinstance(value, ty), "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to perform run-time typechecking.
    Each annotation must be a class; unannotated parameters are not checked.
    """
    argspec = inspect.getfullargspec(f)
    annotations = f.__annotations__
    @wraps(f)
    def g(*args, **kwargs):
        for argname, argval in zip(argspec.args, args):
            check_type(argval, annotations.get(argname), argname)
        for argname, argval in kwargs.items():
            check_type(argval, annotations.get(argname), argname)
        ret = f(*args, **kwargs)
        check_type(ret, annotations.get("return"), "return")
        return ret
    return g

def integer_power(t, n : int):
    """Compute t**n by repeated squaring using only `*`.

    Unlike the builtin `**`, this works for any coefficient type that can be
    multiplied, and never produces a float from int arguments.
    """
    assert n >= 0
    if n == 0:
        return t * 0 + 1
    if n == 1:
        return t
    if n == 2:
        return t * t
    result = integer_power(t, n // 2)
    result = result * result
    if n & 1:
        result = result * t
    return result

def truncated_divide(a, b):
    """Integer division rounding toward zero (as in C), not toward -inf."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    q = a // b
    if q < 0 and q * b != a:
        q += 1
    return q

def find_one(iter, pred=lambda x: True):
    for x in iter:
        if pred(x):
            return x
    return None

def count(iter, pred=lambda x: True):
    n = 0
    for x in iter:
        if pred(x):
            n += 1
    return n

def compare_with_lt(x, y):
    """
    Comparator function that promises only to use the `<` binary operator
    (not `>`, `<=`, etc.)
    """
    if x < y:
        return -1
    elif y < x:
        return 1
    else:
        return 0
