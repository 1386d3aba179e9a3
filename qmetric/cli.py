"""
Qmetric command line interface.

Compute distances between the rows of two text files::

    qmetric --covariance=Q.txt --root a.txt b.txt

The same functions can be used from a script.  :func:`make_metric` builds
the metric described by the options, and :func:`row_distances` applies it
to two sets of row vectors.
"""

__all__ = ["main", "make_metric", "load_points", "row_distances", "setup_logging"]

import logging
import sys

import numpy as np

from .mahalanobis import MahalanobisDistance
from .lmetric import EuclideanDistance, SquaredEuclideanDistance, ManhattanDistance, ChebyshevDistance
from .numpyerrors import POLICIES

LMETRICS = {
    "euclidean": EuclideanDistance,
    "sqeuclidean": SquaredEuclideanDistance,
    "manhattan": ManhattanDistance,
    "chebyshev": ChebyshevDistance,
}


def setup_logging(verbose=False):
    """Start logger"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


def load_points(path):
    """
    Load row vectors from the whitespace delimited text file *path*.
    """
    return np.loadtxt(path, dtype="d", ndmin=2)


def make_metric(opts):
    """
    Return the metric selected by the command line options *opts*.
    """
    if opts.metric == "mahalanobis":
        covariance = load_points(opts.covariance) if opts.covariance else None
        return MahalanobisDistance(covariance, take_root=opts.root)
    if opts.covariance:
        logging.warning("--covariance is ignored for the %s metric", opts.metric)
    if opts.root:
        logging.warning("--root is ignored for the %s metric", opts.metric)
    return LMETRICS[opts.metric]()


def row_distances(metric, A, B):
    """
    Return *metric.evaluate(A[i], B[i])* for each row.

    A single row in *A* or *B* is compared against every row of the other.
    """
    if len(A) == 1:
        A = np.repeat(A, len(B), axis=0)
    elif len(B) == 1:
        B = np.repeat(B, len(A), axis=0)
    elif len(A) != len(B):
        raise ValueError("row count mismatch: %d vs %d" % (len(A), len(B)))
    return [metric.evaluate(a, b) for a, b in zip(A, B)]


def main(args=None):
    """
    Run the qmetric program with the command line interface.

    Input parameters are taken from *args*, or sys.argv if not given.
    """
    from . import options

    if args is None:
        args = sys.argv[1:]
    if not args:
        args = ["-?"]

    try:
        opts = options.getopts(args)
    except ValueError as exc:
        print("qmetric: %s" % exc, file=sys.stderr)
        sys.exit(1)
    setup_logging(opts.verbose)

    try:
        metric = make_metric(opts)
        A, B = load_points(opts.args[0]), load_points(opts.args[1])
        logging.debug("comparing %d points to %d points with %r", len(A), len(B), metric)
        distances = POLICIES[opts.errors](row_distances)(metric, A, B)
    except (OSError, ValueError, FloatingPointError) as exc:
        print("qmetric: %s" % exc, file=sys.stderr)
        sys.exit(1)

    for d in distances:
        print("%.15g" % d)


def test_row_distances():
    metric = MahalanobisDistance(np.eye(2), take_root=True)
    A = np.array([[0.0, 0.0]])
    B = np.array([[3.0, 4.0], [6.0, 8.0]])
    assert row_distances(metric, A, B) == [5.0, 10.0]
    assert row_distances(metric, B, A) == [5.0, 10.0]
    assert row_distances(metric, B, B) == [0.0, 0.0]
    try:
        row_distances(metric, np.zeros((2, 2)), np.zeros((3, 2)))
    except ValueError:
        pass
    else:
        raise AssertionError("row count mismatch should be rejected")


def test_main():
    import os
    import tempfile
    from contextlib import redirect_stdout
    from io import StringIO

    with tempfile.TemporaryDirectory() as tmp:
        a, b, q = (os.path.join(tmp, name) for name in ("a.txt", "b.txt", "q.txt"))
        np.savetxt(a, [[0, 0]])
        np.savetxt(b, [[1, 1], [3, 4]])
        np.savetxt(q, [[2, 0], [0, 1]])

        out = StringIO()
        with redirect_stdout(out):
            main(["--covariance=" + q, a, b])
        assert out.getvalue().split() == ["3", "34"]

        out = StringIO()
        with redirect_stdout(out):
            main(["--metric=manhattan", a, b])
        assert out.getvalue().split() == ["2", "7"]

        try:
            main([a, os.path.join(tmp, "missing.txt")])
        except SystemExit as exc:
            assert exc.code == 1
        else:
            raise AssertionError("missing file should exit with an error")

        out = StringIO()
        with redirect_stdout(out):
            main(["--root", a, b])
        assert np.allclose([float(v) for v in out.getvalue().split()], [np.sqrt(2), 5.0])

        np.savetxt(q, [[-1, 0], [0, -1]])
        try:
            main(["--root", "--errors=raise", "--covariance=" + q, a, b])
        except SystemExit as exc:
            assert exc.code == 1
        else:
            raise AssertionError("negative form should fail under --errors=raise")

        saved = os.environ.get("QMETRIC_ERRORS")
        os.environ["QMETRIC_ERRORS"] = "ignore"
        try:
            out = StringIO()
            with redirect_stdout(out):
                main(["--root", "--covariance=" + q, a, b])
        finally:
            if saved is None:
                del os.environ["QMETRIC_ERRORS"]
            else:
                os.environ["QMETRIC_ERRORS"] = saved
        assert out.getvalue().split() == ["nan", "nan"]
