"""Distance metrics for clustering."""

from typing import Union

from ..base.interfaces import DistanceMetric
from ..base.exceptions import InvalidConfiguration
from .euclidean import EuclideanDistance
from .manhattan import ManhattanDistance


METRICS = {
    'euclidean': EuclideanDistance,
    'manhattan': ManhattanDistance,
}


def get_metric(metric: Union[str, DistanceMetric]) -> DistanceMetric:
    """Resolve a metric instance from a name or pass an instance through.

    Raises:
        InvalidConfiguration: If the name is not registered
    """
    if isinstance(metric, DistanceMetric):
        return metric
    if isinstance(metric, str):
        try:
            return METRICS[metric.lower()]()
        except KeyError:
            raise InvalidConfiguration(
                f"Unknown metric: {metric!r} (expected one of {sorted(METRICS)})"
            ) from None
    raise InvalidConfiguration(f"metric must be str or DistanceMetric, "
                               f"got {type(metric).__name__}")


__all__ = [
    'EuclideanDistance',
    'ManhattanDistance',
    'METRICS',
    'get_metric'
]
