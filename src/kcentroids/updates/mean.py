"""
Mean update strategy for centroid-based clustering.
"""

from typing import Dict, Set
import torch
from torch import Tensor

from ..base.exceptions import DegenerateClusteringState


class MeanUpdater:
    """Updates centroids as the componentwise mean of their assigned points."""

    def update(self, centroids: Tensor, points: Tensor,
               clusters: Dict[int, Set[int]]) -> None:
        """Overwrite every centroid row in place.

        Args:
            centroids: (K, d) centroids, modified in place
            points: (n, d) data points
            clusters: Mapping from centroid index to member point indices

        Raises:
            DegenerateClusteringState: If a cluster has no members
        """
        for k in range(centroids.shape[0]):
            members = clusters.get(k)
            if not members:
                raise DegenerateClusteringState(
                    f"Cannot update centroid {k}: cluster is empty "
                    f"(repair empty clusters before updating)"
                )
            centroids[k] = points[sorted(members)].mean(dim=0)
