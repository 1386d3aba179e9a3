"""
Option parser for the qmetric command line
"""

import os
import sys

from .numpyerrors import POLICIES


class ParseOpts:
    """
    Options parser.

    Subclass should define *MINARGS*, *FLAGS*, *VALUES* and *USAGE*.

    *MINARGS* is the minimum number of positional arguments.

    *FLAGS* is a set of arguments that may be present or absent.

    *VALUES* is a set of arguments that take values.  Value checking
    can be done in the setter for each argument in the set.  Default
    values should be set in the corresponding object attribute.

    *USAGE* is the help string to display for option "help".

    The constructor will invoke the command line parser, leaving the
    values set by the command line as attribute values.   Flag options
    will be True or False.
    """

    MINARGS = 0
    FLAGS = set()
    VALUES = set()
    USAGE = ""

    def __init__(self, args):
        self._parse(args)

    def _parse(self, args):
        if self.VALUES & self.FLAGS:
            raise TypeError("option used as both a flag and a value: %s"%
                            ",".join(self.VALUES&self.FLAGS))
        flagargs = [v
                    for v in args
                    if v.startswith('--') and not '=' in v]
        flags = set(v[2:] for v in flagargs)
        if 'help' in flags or '-h' in args or '-?' in args:
            print(self.USAGE)
            sys.exit()
        unknown = flags - self.FLAGS
        if any(unknown):
            raise ValueError("Unknown options --%s.  Use -? for help."
                             % ", --".join(sorted(unknown)))
        for f in self.FLAGS:
            setattr(self, f, (f in flags))

        valueargs = [v
                     for v in args
                     if v.startswith('--') and '=' in v]
        for f in valueargs:
            idx = f.find('=')
            name = f[2:idx]
            value = f[idx + 1:]
            if name not in self.VALUES:
                raise ValueError(
                    "Unknown option --%s. Use -? for help." % name)
            setattr(self, name, value)

        positionargs = [v for v in args if not v.startswith('--')]
        if len(positionargs) < self.MINARGS:
            raise ValueError("Expected at least %d arguments.  Use -? for help."
                             % self.MINARGS)
        self.args = positionargs


class ChoiceList(object):

    def __init__(self, *choices):
        self.choices = choices

    def __call__(self, value):
        if not value in self.choices:
            raise ValueError('invalid option "%s": use %s'
                             % (value, '|'.join(self.choices)))
        else:
            return value


METRICS = ("mahalanobis", "euclidean", "sqeuclidean", "manhattan", "chebyshev")
ERROR_POLICIES = tuple(sorted(POLICIES))


class QmetricOpts(ParseOpts):
    """
    Option parser for qmetric.
    """

    MINARGS = 2
    FLAGS = set(("root", "verbose"))
    VALUES = set(("metric", "covariance", "errors"))
    metric = "mahalanobis"
    covariance = None
    USAGE = """\
Usage: qmetric [options] points_a points_b

Print the distance between corresponding rows of two text files.  Each
file holds one vector per row, with columns separated by whitespace.  If
one of the files holds a single row it is compared against every row of
the other file.

Options:

    --metric=mahalanobis    [%(metrics)s]
        distance measure
    --covariance=filename
        weighting matrix for the mahalanobis distance; identity if missing
    --root
        take the root of the mahalanobis distance
    --errors=%(errors)s    [%(policies)s]
        numpy floating point error handling; default from QMETRIC_ERRORS
    --verbose
        show debugging messages
    -?/-h/--help
        display this help
"""

    def __init__(self, args):
        self.errors = os.environ.get("QMETRIC_ERRORS", "warn")
        ParseOpts.__init__(self, args)
        self.metric = ChoiceList(*METRICS)(self.metric)
        self.errors = ChoiceList(*ERROR_POLICIES)(self.errors)


QmetricOpts.USAGE %= dict(
    metrics="|".join(METRICS),
    policies="|".join(ERROR_POLICIES),
    errors="warn",
)


def getopts(args=None):
    """
    Process command line options.
    """
    if args is None:
        args = sys.argv[1:]
    return QmetricOpts(args)


def test_getopts():
    opts = getopts(["--root", "--metric=euclidean", "a.txt", "b.txt"])
    assert opts.root and not opts.verbose
    assert opts.metric == "euclidean"
    assert opts.covariance is None
    assert opts.args == ["a.txt", "b.txt"]


def test_bad_options():
    for args in (["--nope", "a", "b"], ["--metric=cosine", "a", "b"], ["a"], ["--errors=loud", "a", "b"]):
        try:
            getopts(args)
        except ValueError:
            pass
        else:
            raise AssertionError("%s should be rejected" % args)


def test_errors_from_environment():
    saved = os.environ.get("QMETRIC_ERRORS")
    os.environ["QMETRIC_ERRORS"] = "raise"
    try:
        assert getopts(["a", "b"]).errors == "raise"
        assert getopts(["--errors=ignore", "a", "b"]).errors == "ignore"
    finally:
        if saved is None:
            del os.environ["QMETRIC_ERRORS"]
        else:
            os.environ["QMETRIC_ERRORS"] = saved
