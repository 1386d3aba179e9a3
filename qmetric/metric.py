"""
Interface shared by the distance metrics.

Generic algorithms such as :func:`qmetric.search.nearest` accept any object
with an *evaluate(a, b)* method returning a float.  The protocol is runtime
checkable, so *isinstance(obj, DistanceMetric)* tests for the method.
"""

__all__ = ["DistanceMetric"]

from typing import Protocol, runtime_checkable


@runtime_checkable
class DistanceMetric(Protocol):
    """
    Protocol for a distance metric between two vectors of equal length.
    """

    def evaluate(self, a, b) -> float: ...


def test_protocol():
    from .mahalanobis import MahalanobisDistance
    from .lmetric import EuclideanDistance

    assert isinstance(MahalanobisDistance(), DistanceMetric)
    assert isinstance(EuclideanDistance(), DistanceMetric)
    assert not isinstance(object(), DistanceMetric)
