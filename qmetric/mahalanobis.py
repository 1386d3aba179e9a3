# This program is in the public domain
r"""
Mahalanobis distance

The `Mahalanobis distance <https://en.wikipedia.org/wiki/Mahalanobis_distance>`_
is a stretched Euclidean distance.  Given a square weighting matrix $Q$ of
size $d \times d$, usually the inverse covariance of the data, and two
vectors $x$ and $y$ of length $d$,

.. math::

    d(x, y) = \sqrt{(x - y)^T Q (x - y)}

Like :class:`qmetric.lmetric.LMetric`, the root is optional.  By default
the root is not taken and the quadratic form

.. math::

    d(x, y) = (x - y)^T Q (x - y)

is returned instead.  This is cheaper and preserves the ordering of the
distances, which is all that ranking algorithms such as nearest neighbour
search need.  Use *take_root=True* for a true metric satisfying the
triangle inequality.

Each evaluation multiplies by $Q$, so for repeated searches over a fixed
dataset it may be faster to transform the data by a factor of $Q$ and use
the Euclidean distance instead.

$Q$ should be symmetric positive semidefinite.  This is not checked.  An
indefinite $Q$ can produce a negative quadratic form, and with the root
policy the result is then *nan* with the usual numpy floating point
warning.

Example
-------

    >>> d = MahalanobisDistance([[2, 0], [0, 1]])
    >>> d.evaluate([0, 0], [1, 1])
    3.0
    >>> MahalanobisDistance(d.covariance, take_root=True)([0, 0], [1, 1])
    1.7320508075688772

Without a weighting matrix the size is inferred on first use and the
identity is used, giving the squared Euclidean distance::

    >>> d = MahalanobisDistance()
    >>> d.is_configured
    False
    >>> d.evaluate([0, 0], [3, 4])
    25.0
    >>> d.covariance.shape
    (2, 2)
"""

__all__ = ["MahalanobisDistance"]

import logging

import numpy as np


def _frozen(matrix):
    """Return a read-only float copy of *matrix*."""
    matrix = np.array(matrix, dtype="d")
    matrix.flags.writeable = False
    return matrix


class MahalanobisDistance(object):
    """
    Mahalanobis distance with weighting matrix *covariance*.

    *covariance* is a square matrix which is copied into the object.  If it
    is not given, the matrix starts empty and is set to the identity of the
    appropriate size on the first call to :meth:`evaluate`.

    *take_root* is True if the square root of the quadratic form should be
    returned.  It is slightly faster to leave it at the default of False.

    No locking is done.  If an instance is shared between threads, set the
    covariance before use and do not change it afterward.
    """

    def __init__(self, covariance=None, take_root=False):
        self._take_root = bool(take_root)
        if covariance is None:
            self._covariance = _frozen(np.empty((0, 0)))
        else:
            self._covariance = _frozen(covariance)

    @property
    def take_root(self):
        """True if :meth:`evaluate` returns the root of the quadratic form."""
        return self._take_root

    @property
    def is_configured(self):
        """True once the weighting matrix has been set or inferred."""
        return self._covariance.size > 0

    def get_covariance(self):
        """
        Return a read-only view of the weighting matrix.

        The view tracks the current matrix only until the next call to
        :meth:`set_covariance`, which replaces the matrix rather than
        modifying it.
        """
        return self._covariance.view()

    def set_covariance(self, covariance):
        """
        Replace the weighting matrix with a copy of *covariance*.

        Use an empty matrix to return to the unconfigured state.
        """
        covariance = _frozen(covariance)
        logging.debug("mahalanobis covariance set to shape %s", covariance.shape)
        self._covariance = covariance

    covariance = property(get_covariance, set_covariance)

    def evaluate(self, a, b):
        """
        Return the distance between vectors *a* and *b*.

        Raises ValueError if *a* and *b* differ in shape.  Other mismatches
        are left to numpy, which raises ValueError when the vectors and the
        weighting matrix do not conform.
        """
        a, b = np.asarray(a, dtype="d"), np.asarray(b, dtype="d")
        if a.shape != b.shape:
            raise ValueError("vector shapes %s and %s do not match" % (a.shape, b.shape))
        diff = a - b
        if self._covariance.size == 0:
            logging.debug("mahalanobis covariance defaults to identity of size %d", len(diff))
            self._covariance = _frozen(np.eye(len(diff)))
        value = float(np.dot(diff, np.dot(self._covariance, diff)))
        if self._take_root:
            return float(np.sqrt(value))
        return value

    __call__ = evaluate

    def __repr__(self):
        return "MahalanobisDistance(covariance=%s, take_root=%s)" % (
            self._covariance.tolist(),
            self._take_root,
        )


def test_identity_is_euclidean():
    a, b = np.array([1.0, -2.0, 0.5]), np.array([4.0, 2.0, -1.5])
    euclid = np.linalg.norm(a - b)
    assert abs(MahalanobisDistance(np.eye(3), take_root=True).evaluate(a, b) - euclid) < 1e-12
    assert abs(MahalanobisDistance(np.eye(3)).evaluate(a, b) - euclid**2) < 1e-12


def test_known_values():
    d = MahalanobisDistance([[1, 0], [0, 1]])
    assert d.evaluate([0, 0], [3, 4]) == 25.0
    d = MahalanobisDistance([[1, 0], [0, 1]], take_root=True)
    assert d.evaluate([0, 0], [3, 4]) == 5.0
    d = MahalanobisDistance([[2, 0], [0, 1]])
    assert d.evaluate([0, 0], [1, 1]) == 3.0
    d = MahalanobisDistance([[2, 0], [0, 1]], take_root=True)
    assert abs(d.evaluate([0, 0], [1, 1]) - np.sqrt(3)) < 1e-15


def test_zero_and_symmetry():
    rng = np.random.RandomState(3)
    Q = rng.randn(4, 4)  # arbitrary square matrix, not necessarily symmetric
    d = MahalanobisDistance(Q)
    for _ in range(5):
        a, b = rng.randn(4), rng.randn(4)
        assert d.evaluate(a, a) == 0.0
        assert abs(d.evaluate(a, b) - d.evaluate(b, a)) < 1e-12


def test_scaling():
    rng = np.random.RandomState(7)
    L = rng.randn(3, 3)
    Q = np.dot(L, L.T)
    a, b = rng.randn(3), rng.randn(3)
    c = 4.5
    base = MahalanobisDistance(Q).evaluate(a, b)
    assert abs(MahalanobisDistance(c * Q).evaluate(a, b) - c * base) < 1e-10
    rooted = MahalanobisDistance(c * Q, take_root=True).evaluate(a, b)
    assert abs(rooted - np.sqrt(c) * np.sqrt(base)) < 1e-10


def test_lazy_identity():
    d = MahalanobisDistance()
    assert not d.is_configured
    assert d.covariance.shape == (0, 0)
    assert d.evaluate([1, 1, 1], [2, 3, 4]) == 14.0
    assert d.is_configured
    assert (d.covariance == np.eye(3)).all()

    d = MahalanobisDistance(take_root=True)
    assert d.evaluate([0, 0], [3, 4]) == 5.0
    assert d.covariance.shape == (2, 2)


def test_replace_covariance():
    d = MahalanobisDistance(np.eye(2))
    first = d.evaluate([0, 0], [1, 1])
    d.covariance = [[3, 0], [0, 3]]
    second = d.evaluate([0, 0], [1, 1])
    assert first == 2.0
    assert second == 6.0

    d.set_covariance(np.empty((0, 0)))
    assert not d.is_configured


def test_copy_semantics():
    Q = np.eye(2)
    d = MahalanobisDistance(Q)
    Q[0, 0] = 100.0
    assert d.evaluate([0, 0], [1, 0]) == 1.0

    view = d.covariance
    try:
        view[0, 0] = 5.0
    except ValueError:
        pass
    else:
        raise AssertionError("covariance view should be read-only")
    try:
        view.flags.writeable = True
    except ValueError:
        pass
    else:
        raise AssertionError("covariance view should not be made writeable")
    assert d.evaluate([0, 0], [1, 0]) == 1.0


def test_shape_mismatch():
    d = MahalanobisDistance(np.eye(3))
    for a, b in (([0, 0], [1, 1]), ([1, 2, 3], [0]), ([0], [1, 2, 3])):
        try:
            d.evaluate(a, b)
        except ValueError:
            pass
        else:
            raise AssertionError("expected shape error for %s, %s" % (a, b))

    # unequal vectors are rejected before the size is inferred
    d = MahalanobisDistance()
    try:
        d.evaluate([1, 2, 3], [0])
    except ValueError:
        pass
    else:
        raise AssertionError("expected shape error")
    assert not d.is_configured


def test_negative_form_with_root():
    from .numpyerrors import ignored, raised

    d = MahalanobisDistance([[-1, 0], [0, -1]], take_root=True)
    assert np.isnan(ignored(d.evaluate)([0, 0], [1, 1]))
    try:
        raised(d.evaluate)([0, 0], [1, 1])
    except FloatingPointError:
        pass
    else:
        raise AssertionError("expected floating point error")
    # without the root the negative form is returned unchanged
    assert MahalanobisDistance([[-1, 0], [0, -1]]).evaluate([0, 0], [1, 1]) == -2.0
