"""
Uniform bounding-box initialization.

Places centroids at random positions inside the region the data occupies
rather than on data points.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy


class UniformBoxInit(InitializationStrategy):
    """Draw each centroid uniformly inside the axis-aligned bounding box of
    the points.

    Centroids placed this way often start far from any point, so the first
    iterations regularly produce empty clusters that the engine has to
    repair.
    """

    name = 'uniform_box'

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        low = points.min(dim=0).values
        high = points.max(dim=0).values

        u = torch.rand(n_clusters, points.shape[1], generator=generator,
                       dtype=points.dtype)
        u = u.to(points.device)

        return low.unsqueeze(0) + u * (high - low).unsqueeze(0)
