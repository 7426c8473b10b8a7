"""
Core interfaces for the clustering engine.

This module defines the abstract base classes that pluggable components must
implement, so that distance metrics, initialization policies and convergence
rules can be swapped per engine instance.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for point-to-centroid distance computations."""

    #: Registered name used when the metric is selected by string
    name: str = ''

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Compute distances from every point to every centroid.

        Args:
            points: (n, d) tensor of points
            centroids: (K, d) tensor of centroids

        Returns:
            (n, K) tensor of distances
        """
        pass

    def between(self, a: Tensor, b: Tensor) -> float:
        """Distance between two single points of the same dimension."""
        return self.compute(a.reshape(1, -1), b.reshape(1, -1))[0, 0].item()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class InitializationStrategy(ABC):
    """Abstract base class for centroid initialization policies."""

    #: Registered name used when the policy is selected by string
    name: str = ''

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> Tensor:
        """Produce the initial centroids.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of centroids K
            generator: Optional torch generator for random policies

        Returns:
            (K, d) tensor of centroids, owned by the caller
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state.
                Centroid based criteria read ``'centroids'`` and
                ``'previous_centroids'``.

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class Visualizer(ABC):
    """Consumer of per-step clustering results.

    Implementations own everything presentational: a stable colour per
    centroid index, drawing and pacing. They must cope with members moving
    between clusters and with clusters of any size, including transient
    single-member ones.
    """

    @abstractmethod
    def setup(self, n_clusters: int, points: Tensor, centroids: Tensor) -> None:
        """Called once before the first step with the initial centroids."""
        pass

    @abstractmethod
    def on_step(self, result, points: Tensor) -> None:
        """Called after every step with its ``StepResult``."""
        pass
