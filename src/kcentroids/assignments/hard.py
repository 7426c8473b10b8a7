"""
Hard assignment strategy for clustering.

Assigns each point to its nearest centroid based on the distance metric.
"""

from typing import Dict, Set, Tuple
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class HardAssignment:
    """Hard (discrete) assignment to nearest centroid.

    Each point is assigned to exactly one cluster based on minimum distance.
    When several centroids are exactly equidistant the lowest centroid index
    wins, which ``torch.argmin`` guarantees by returning the first minimum.
    """

    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            metric: DistanceMetric) -> Tuple[Tensor, Tensor]:
        """Assign each point to nearest centroid.

        Args:
            points: (n, d) data points
            centroids: (K, d) centroids
            metric: Distance metric used for the comparison

        Returns:
            assignments: (n,) tensor of cluster indices
            distances: (n, K) distance matrix the decision was made on
        """
        distances = metric.compute(points, centroids)
        assignments = torch.argmin(distances, dim=1)

        return assignments, distances

    @staticmethod
    def to_clusters(assignments: Tensor, n_clusters: int) -> Dict[int, Set[int]]:
        """Group point indices by cluster; every index 0..K-1 gets a key."""
        clusters = {k: set() for k in range(n_clusters)}
        for idx, k in enumerate(assignments.tolist()):
            clusters[k].add(idx)
        return clusters
