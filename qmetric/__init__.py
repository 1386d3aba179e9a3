# This program is in the public domain
"""
Qmetric: quadratic form distances for generic numeric algorithms

This package provides the Mahalanobis distance, a Euclidean distance
stretched by a square weighting matrix, together with the family of
$L_p$ metrics that share its *evaluate(a, b)* interface.  Algorithms
such as nearest neighbour search only see that interface, so any of
the metrics can be plugged in without changes.

    >>> from qmetric import MahalanobisDistance
    >>> MahalanobisDistance([[2, 0], [0, 1]]).evaluate([0, 0], [1, 1])
    3.0
"""

__version__ = "0.1.0"

from .metric import DistanceMetric
from .mahalanobis import MahalanobisDistance
from .lmetric import (
    LMetric,
    ManhattanDistance,
    EuclideanDistance,
    SquaredEuclideanDistance,
    ChebyshevDistance,
)
from .search import pairwise, nearest

__all__ = [
    "DistanceMetric",
    "MahalanobisDistance",
    "LMetric",
    "ManhattanDistance",
    "EuclideanDistance",
    "SquaredEuclideanDistance",
    "ChebyshevDistance",
    "pairwise",
    "nearest",
]
