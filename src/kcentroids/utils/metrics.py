"""
Clustering quality metrics.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


def inertia(X: Tensor, labels: Tensor, centers: Tensor,
            metric: Optional[DistanceMetric] = None) -> float:
    """Sum of point-to-assigned-center distances.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (K, d) cluster centers
        metric: Distance metric; squared Euclidean when omitted

    Returns:
        Total distance of the points to their centers
    """
    if metric is None:
        diff = X - centers[labels]
        return torch.sum(diff * diff).item()

    distances = metric.compute(X, centers)
    return torch.gather(distances, 1, labels.long().unsqueeze(1)).sum().item()
