"""Tools to define local options.

Several staticpoly modules have local settings, such as the tolerances used
to classify floating-point coefficients or whether to print log messages.
It is convenient for those settings to be listed in the module source code
next to the code that reads them.  Each module declares an Option instance
per setting; `snapshot` and `restore` save and reapply the values of every
Option that has been defined by the program so far.
"""

# All Option objects that have ever been created.
_OPTS = []

# Default values for options.  The `restore` procedure needs this to override
# values for options in modules that have not been imported yet.
_DEFAULT_VALUE_OVERRIDES = {}

class Option(object):
    def __init__(self, name, type, default, description=""):
        assert type in (bool, str, int, float)
        self.name = name
        self.description = description
        self.type = type
        self.default = default
        self.value = _DEFAULT_VALUE_OVERRIDES.get(name, default)
        _OPTS.append(self)

    def __repr__(self):
        return "Option({!r}, {}, {!r})".format(self.name, self.type.__name__, self.value)

    def __bool__(self):
        raise Exception(
            "An attempt was made to convert an Option to a boolean. " +
            "If you intended to read the value of this Option, use `_.value`. " +
            "If you intended to check whether this object is None, use `_ is None`.")

def find(name):
    """Return the Option with the given name, or None."""
    for o in _OPTS:
        if o.name == name:
            return o
    return None

def snapshot():
    """Produce a snapshot of current option values."""
    return { o.name : o.value for o in _OPTS }

def restore(snap):
    """Restore a snapshot of option values."""
    global _DEFAULT_VALUE_OVERRIDES

    # Set the values for options that have already been imported.
    for o in _OPTS:
        o.value = o.type(snap.get(o.name, o.value))

    # Set the overrides for options that have not yet been imported.
    _DEFAULT_VALUE_OVERRIDES = dict(snap)
