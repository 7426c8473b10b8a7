"""
Euclidean distance metric for clustering.

The default metric of the engine: straight-line distance between a point and
a centroid.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance metric.

    Computes ||x - μ|| for every point x and centroid μ.
    """

    name = 'euclidean'

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Compute Euclidean distances from points to centroids.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids

        Returns:
            (n, K) tensor of distances
        """
        # Differences are formed explicitly so that equidistant centroids
        # produce bit-identical distances.
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"
