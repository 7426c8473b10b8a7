"""
Shared assertions and helpers for kcentroids tests.
"""

from __future__ import annotations

from typing import Dict, Iterable, Set

import torch

from kcentroids.base.interfaces import InitializationStrategy


class FixedInit(InitializationStrategy):
    """Initialization that returns a given set of centroids."""

    name = 'fixed'

    def __init__(self, centroids):
        self.centroids = torch.as_tensor(centroids, dtype=torch.float64)

    def initialize(self, points, n_clusters, generator=None):
        assert self.centroids.shape[0] == n_clusters
        return self.centroids.clone()


def assert_partition(clusters: Dict[int, Iterable[int]], n_points: int, k: int) -> None:
    """Clusters are disjoint, keyed 0..k-1, and cover every point index."""
    assert sorted(clusters) == list(range(k))
    seen: Set[int] = set()
    total = 0
    for members in clusters.values():
        members = set(members)
        assert not (seen & members), "clusters overlap"
        seen |= members
        total += len(members)
    assert seen == set(range(n_points))
    assert total == n_points


def assert_no_empty(clusters: Dict[int, Iterable[int]]) -> None:
    for k, members in clusters.items():
        assert len(members) >= 1, f"cluster {k} is empty"


def assert_centroids_are_means(result, points: torch.Tensor) -> None:
    for k, members in result.clusters.items():
        expected = points[sorted(members)].mean(dim=0)
        assert torch.equal(result.centroids[k], expected), (
            f"centroid {k} = {result.centroids[k].tolist()}, "
            f"mean = {expected.tolist()}"
        )
