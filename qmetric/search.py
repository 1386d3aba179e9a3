"""
Brute force algorithms over an arbitrary distance metric.

These routines only use the *evaluate(a, b)* method of the metric, so any
:class:`qmetric.metric.DistanceMetric` can be supplied.  Neighbour ranking
is unchanged by a monotonic transform of the distance, which is why the
metrics default to skipping the root.

    >>> import numpy as np
    >>> from qmetric import MahalanobisDistance
    >>> ref = np.array([[0, 0], [1, 0], [0, 2]])
    >>> dist, idx = nearest(MahalanobisDistance([[1, 0], [0, 4]]), [[0.9, 0.9]], ref, k=2)
    >>> idx.tolist()
    [[1, 0]]
"""

__all__ = ["pairwise", "nearest"]

import numpy as np


def _as_rows(X, name):
    X = np.asarray(X, dtype="d")
    if X.ndim != 2:
        raise ValueError("%s must be a 2-D array of row vectors, not shape %s" % (name, X.shape))
    return X


def pairwise(metric, X, Y=None):
    """
    Return the matrix *D[i, j] = metric.evaluate(X[i], Y[j])*.

    If *Y* is not given then distances are between all rows of *X*.
    """
    X = _as_rows(X, "X")
    Y = X if Y is None else _as_rows(Y, "Y")
    D = np.empty((X.shape[0], Y.shape[0]), dtype="d")
    for i, x in enumerate(X):
        for j, y in enumerate(Y):
            D[i, j] = metric.evaluate(x, y)
    return D


def nearest(metric, queries, reference, k=1):
    """
    Find the *k* nearest rows of *reference* for each row of *queries*.

    Returns *(distances, indices)*, each of shape *(len(queries), k)*,
    sorted from nearest to farthest.  Ties go to the lower index.
    """
    reference = _as_rows(reference, "reference")
    if not 1 <= k <= reference.shape[0]:
        raise ValueError("k=%d is out of range for %d reference points" % (k, reference.shape[0]))
    D = pairwise(metric, queries, reference)
    indices = np.argsort(D, axis=1, kind="stable")[:, :k]
    distances = np.take_along_axis(D, indices, axis=1)
    return distances, indices


def test_pairwise():
    from .lmetric import ManhattanDistance

    X = [[0, 0], [1, 1], [2, 0]]
    D = pairwise(ManhattanDistance(), X)
    assert D.tolist() == [[0, 2, 2], [2, 0, 2], [2, 2, 0]]
    D = pairwise(ManhattanDistance(), X, [[0, 0]])
    assert D.shape == (3, 1)
    try:
        pairwise(ManhattanDistance(), [1, 2, 3])
    except ValueError:
        pass
    else:
        raise AssertionError("1-D input should be rejected")


def test_root_preserves_ranking():
    from .mahalanobis import MahalanobisDistance

    rng = np.random.RandomState(5)
    L = rng.randn(3, 3)
    Q = np.dot(L, L.T) + np.eye(3)
    ref = rng.randn(20, 3)
    queries = rng.randn(4, 3)
    d0, i0 = nearest(MahalanobisDistance(Q), queries, ref, k=5)
    d1, i1 = nearest(MahalanobisDistance(Q, take_root=True), queries, ref, k=5)
    assert (i0 == i1).all()
    assert np.allclose(np.sqrt(d0), d1)


def test_nearest_ties_and_k():
    from .lmetric import ChebyshevDistance

    ref = [[1, 0], [0, 1], [5, 5]]
    dist, idx = nearest(ChebyshevDistance(), [[0, 0]], ref, k=3)
    assert idx.tolist() == [[0, 1, 2]]
    assert dist.tolist() == [[1, 1, 5]]
    for k in (0, 4):
        try:
            nearest(ChebyshevDistance(), [[0, 0]], ref, k=k)
        except ValueError:
            pass
        else:
            raise AssertionError("k=%d should be rejected" % k)
