"""
Decorators for controlling numpy floating point error handling.

The distance metrics do not guard their arithmetic.  A weighting matrix
which is not positive semidefinite can give a negative quadratic form, and
taking its root produces *nan* with whatever warning the active numpy error
state asks for.  Use these helpers to pick the behaviour around a call.

Usage
-----

This is a wrapper around numpy.errstate, with the same keyword arguments::

    with numpy.errstate(...):
        statements

    @errors(...)
    def f():
        statements

Some convenience decorators are predefined: ignored, raised, printed, warned.
*POLICIES* maps the policy names accepted on the command line to these.

Example
-------

    >>> import numpy
    >>> @ignored
    ... def f(): return numpy.sqrt(-1.0)
    >>> print(f())
    nan
    >>> @raised
    ... def g(): return numpy.sqrt(-1.0)
    >>> g()
    Traceback (most recent call last):
    ...
    FloatingPointError: invalid value encountered in sqrt
"""

__all__ = ["errors", "ignored", "raised", "printed", "warned", "POLICIES"]

import functools

import numpy


def errors(**kw):
    def decorator(f):
        @functools.wraps(f)
        def decorated(*args, **kwargs):
            with numpy.errstate(**kw):
                return f(*args, **kwargs)

        return decorated

    return decorator


ignored = errors(all="ignore")
raised = errors(all="raise")
printed = errors(all="print")
warned = errors(all="warn")

POLICIES = {
    "ignore": ignored,
    "raise": raised,
    "print": printed,
    "warn": warned,
}


def test_policies():
    assert set(POLICIES) == {"ignore", "raise", "print", "warn"}
    f = POLICIES["ignore"](lambda: numpy.float64(1.0) / 0.0)
    assert numpy.isinf(f())
