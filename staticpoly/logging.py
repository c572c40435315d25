"""A small logging framework that supports timing and indented log messages.

Divisions and powers are the only operations whose cost grows faster than
the size of their inputs, so they report themselves here.  Nothing is
printed unless the `verbose` option is on; timings are always collected.

Important functions:
 - task: a context manager to wrap one self-contained computation
 - event: print a log message (indented based on active tasks)
 - timings: total seconds spent in each stack of nested tasks
 - dump_profile: write the timings to a file, most expensive first
"""

from collections import defaultdict
from contextlib import contextmanager
import datetime

from staticpoly.opts import Option

verbose = Option("verbose", bool, False, description="Print progress messages for divisions and powers")

_times = defaultdict(float)
_task_stack = []
_begin = datetime.datetime.now()

def _indent(depth):
    return "  " * depth

def _describe(name, kwargs):
    if not kwargs:
        return name
    return "{} [{}]".format(name, ", ".join("{}={}".format(k, v) for k, v in kwargs.items()))

def log(string):
    if verbose.value:
        print(string)

@contextmanager
def task(name, **kwargs):
    """Time the body of a `with` block and (if verbose) announce it.

    Tasks nest; each one's duration is added to the entry for the full stack
    of enclosing task names, so `("power", "quotient_remainder")` and
    `("quotient_remainder",)` are counted separately.
    """
    log("{}{}...".format(_indent(len(_task_stack)), _describe(name, kwargs)))
    _task_stack.append(name)
    key = tuple(_task_stack)
    start = datetime.datetime.now()
    try:
        yield
    finally:
        duration = (datetime.datetime.now() - start).total_seconds()
        _task_stack.pop()
        _times[key] += duration
        log("{}Finished {} [duration={:.3}s]".format(_indent(len(_task_stack)), name, duration))

def event(name):
    log("{}{}".format(_indent(len(_task_stack)), name))

def timings():
    """Return a copy of the accumulated task durations (in seconds)."""
    return dict(_times)

def dump_profile(path):
    duration = (datetime.datetime.now() - _begin).total_seconds()
    with open(path, "w") as f:
        f.write("Total duration: {:.3} seconds\n".format(duration))
        f.write("Currently in: {}\n\n".format(", ".join(_task_stack)))
        for k in sorted(_times.keys(), key=_times.get, reverse=True):
            f.write("{:16.3} {}\n".format(_times[k], ", ".join(k)))
