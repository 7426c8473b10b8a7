"""
First-K initialization: the first K points of the dataset become centroids.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy


class FirstKPointsInit(InitializationStrategy):
    """Centroid i starts at points[i] for i in [0, K).

    Deterministic and reproducible, but sensitive to input order: repeated
    points at the front of the dataset give coinciding centroids.
    """

    name = 'first_k'

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        return points[:n_clusters].clone()
