"""
Core data structures for the clustering engine.

This module provides the configuration record an engine is built from and
the immutable per-step result handed to callers and visualizers.
"""

from typing import Optional, Dict, FrozenSet, List, Tuple, Union, Any
import numbers
import torch
from torch import Tensor
from dataclasses import dataclass, field

from .exceptions import InvalidConfiguration


# (point_index, donor_cluster, repaired_cluster)
Repair = Tuple[int, int, int]


@dataclass
class EngineConfig:
    """Settings resolved before a run starts.

    Metric and init policy may be given either as a strategy instance or as a
    registered name (``'euclidean'``, ``'manhattan'``; ``'first_k'``,
    ``'random'``, ``'uniform_box'``).
    """

    k: int
    metric: Any = 'euclidean'
    max_iterations: int = 3
    init_policy: Any = 'first_k'
    tol: Optional[float] = None  # None means exact centroid equality
    random_state: Optional[Union[int, torch.Generator]] = None
    dtype: torch.dtype = torch.float64
    device: Optional[Union[str, torch.device]] = None
    verbose: int = 0

    def validate(self, n_points: int) -> None:
        """Check the numeric settings against the size of the point set.

        Raises:
            InvalidConfiguration: If any setting is out of range
        """
        if isinstance(self.k, bool) or not isinstance(self.k, numbers.Integral):
            raise InvalidConfiguration(f"k must be int, got {type(self.k).__name__}")
        self.k = int(self.k)
        if self.k < 1:
            raise InvalidConfiguration(f"k must be at least 1, got {self.k}")
        if self.k > n_points:
            raise InvalidConfiguration(f"k ({self.k}) cannot be larger than "
                                       f"the number of points ({n_points})")
        if isinstance(self.max_iterations, bool) or not isinstance(self.max_iterations, numbers.Integral):
            raise InvalidConfiguration(f"max_iterations must be int, "
                                       f"got {type(self.max_iterations).__name__}")
        self.max_iterations = int(self.max_iterations)
        if self.max_iterations < 0:
            raise InvalidConfiguration(f"max_iterations must be non-negative, "
                                       f"got {self.max_iterations}")
        if self.tol is not None:
            if isinstance(self.tol, bool) or not isinstance(self.tol, numbers.Real):
                raise InvalidConfiguration(f"tol must be a number, got {type(self.tol).__name__}")
            self.tol = float(self.tol)
            if self.tol < 0:
                raise InvalidConfiguration(f"tol must be non-negative, got {self.tol}")


@dataclass(frozen=True)
class StepResult:
    """Snapshot of the engine after one call to ``step()``.

    ``clusters`` maps every centroid index to the frozen set of member point
    indices, ``centroids`` is a (K, d) copy that later steps never touch.
    """

    clusters: Dict[int, FrozenSet[int]]
    centroids: Tensor
    iteration: int
    converged: bool
    cap_exceeded: bool = False
    inertia: Optional[float] = None
    repairs: List[Repair] = field(default_factory=list)

    @property
    def n_clusters(self) -> int:
        return self.centroids.shape[0]

    def labels(self, n_points: Optional[int] = None) -> Tensor:
        """Cluster index per point as an (n,) long tensor.

        Points not present in any cluster (only possible before the first
        assignment) are labelled -1.
        """
        if n_points is None:
            n_points = sum(len(members) for members in self.clusters.values())
        labels = torch.full((n_points,), -1, dtype=torch.long)
        for k, members in self.clusters.items():
            if members:
                labels[list(members)] = k
        return labels

    def cluster_points(self, points: Tensor) -> Dict[int, Tensor]:
        """Member coordinates per cluster, rows ordered by point index."""
        return {
            k: points[sorted(members)] if members else points[:0]
            for k, members in self.clusters.items()
        }

    def cluster_sizes(self) -> List[int]:
        return [len(self.clusters.get(k, ())) for k in range(self.n_clusters)]
