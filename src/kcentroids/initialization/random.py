"""
Random initialization strategy for clustering.

Selects random points from the dataset as initial cluster centers.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy


class RandomDistinctPointsInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement) as initial centers.
    """

    name = 'random'

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        """Initialize centroids with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            generator: Optional CPU generator for reproducible sampling

        Returns:
            (n_clusters, d) tensor of centroids
        """
        n_points = points.shape[0]

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        # Sampling happens on CPU so that a CPU generator works for any device
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        return points[indices.to(points.device)].clone()
