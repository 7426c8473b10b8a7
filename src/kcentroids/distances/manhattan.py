"""
Manhattan (city-block) distance metric.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class ManhattanDistance(DistanceMetric):
    """Sum of absolute coordinate differences, sum_i |x_i - μ_i|."""

    name = 'manhattan'

    def compute(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Compute Manhattan distances from points to centroids.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids

        Returns:
            (n, K) tensor of distances
        """
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        return torch.sum(torch.abs(diff), dim=2)
