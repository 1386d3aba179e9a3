# This program is in the public domain
r"""
$L_p$ metrics

The generalized $L_p$ distance between vectors $x$ and $y$ of length $d$ is

.. math::

    d(x, y) = \left(\sum_{i=1}^d |x_i - y_i|^p\right)^{1/p}

with the limit $p = \infty$ giving $\max_i |x_i - y_i|$.  As with
:class:`qmetric.mahalanobis.MahalanobisDistance`, the root is only taken
when *take_root* is True.  The unrooted sum preserves the order of the
distances and is cheaper to compute.

Predefined metrics::

    ManhattanDistance
        $p = 1$
    SquaredEuclideanDistance
        $p = 2$ without the root
    EuclideanDistance
        $p = 2$ with the root
    ChebyshevDistance
        $p = \infty$

For $p = 1$ and $p = \infty$ the root has no effect.

    >>> EuclideanDistance().evaluate([0, 0], [3, 4])
    5.0
    >>> ManhattanDistance()([0, 0], [3, -4])
    7.0
    >>> LMetric(3, take_root=True)([0, 0, 0], [2, 2, 2]) == 24**(1/3)
    True
"""

__all__ = [
    "LMetric",
    "ManhattanDistance",
    "EuclideanDistance",
    "SquaredEuclideanDistance",
    "ChebyshevDistance",
]

from math import inf

import numpy as np


class LMetric(object):
    """
    $L_p$ distance of order *power*.

    *power* is a positive integer, or *inf* for the maximum norm.

    *take_root* is True if the $1/p$ root of the sum should be returned.
    """

    def __init__(self, power, take_root=False):
        if power != inf and (power < 1 or int(power) != power):
            raise ValueError("power must be a positive integer or inf, not %r" % (power,))
        self.power = power if power == inf else int(power)
        self.take_root = bool(take_root)

    def evaluate(self, a, b):
        """
        Return the distance between vectors *a* and *b*.
        """
        a, b = np.asarray(a, dtype="d"), np.asarray(b, dtype="d")
        if a.shape != b.shape:
            raise ValueError("vector shapes %s and %s do not match" % (a.shape, b.shape))
        diff = np.abs(a - b)
        p = self.power
        if p == 1:
            return float(np.sum(diff))
        elif p == inf:
            return float(np.max(diff))
        elif p == 2:
            total = float(np.dot(diff, diff))
            return float(np.sqrt(total)) if self.take_root else total
        else:
            total = float(np.sum(diff**p))
            return total ** (1.0 / p) if self.take_root else total

    __call__ = evaluate

    def __repr__(self):
        return "%s(power=%s, take_root=%s)" % (self.__class__.__name__, self.power, self.take_root)


class ManhattanDistance(LMetric):
    def __init__(self):
        LMetric.__init__(self, 1)


class SquaredEuclideanDistance(LMetric):
    def __init__(self):
        LMetric.__init__(self, 2, take_root=False)


class EuclideanDistance(LMetric):
    def __init__(self):
        LMetric.__init__(self, 2, take_root=True)


class ChebyshevDistance(LMetric):
    def __init__(self):
        LMetric.__init__(self, inf)


def test_named_metrics():
    a, b = np.array([1.0, -2.0, 3.0]), np.array([-1.0, 2.0, 3.5])
    assert ManhattanDistance()(a, b) == 6.5
    assert SquaredEuclideanDistance()(a, b) == 20.25
    assert EuclideanDistance()(a, b) == 4.5
    assert ChebyshevDistance()(a, b) == 4.0


def test_general_power():
    a, b = np.zeros(2), np.array([1.0, 2.0])
    assert LMetric(3)(a, b) == 9.0
    assert abs(LMetric(3, take_root=True)(a, b) - 9.0 ** (1 / 3)) < 1e-15
    # root has no effect for L1 and L-infinity
    assert LMetric(1, take_root=True)(a, b) == LMetric(1)(a, b) == 3.0
    assert LMetric(inf, take_root=True)(a, b) == 2.0


def test_bad_power():
    for power in (0, -1, 1.5):
        try:
            LMetric(power)
        except ValueError:
            pass
        else:
            raise AssertionError("power %r should be rejected" % power)
    assert LMetric(2.0).power == 2


def test_shape_mismatch():
    try:
        EuclideanDistance()([1, 2, 3], [0])
    except ValueError:
        pass
    else:
        raise AssertionError("unequal vectors should be rejected")


def test_agrees_with_mahalanobis():
    from .mahalanobis import MahalanobisDistance

    rng = np.random.RandomState(11)
    a, b = rng.randn(5), rng.randn(5)
    for root in (False, True):
        m = MahalanobisDistance(np.eye(5), take_root=root)
        l2 = LMetric(2, take_root=root)
        assert abs(m(a, b) - l2(a, b)) < 1e-12
