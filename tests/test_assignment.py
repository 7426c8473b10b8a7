"""
Hard assignment and empty-cluster repair.

Covers:
- nearest-centroid assignment with lowest-index tie-break
- donation of the nearest eligible point to each empty cluster
- refusal to donate from single-member clusters
"""

from __future__ import annotations

import pytest
import torch

from kcentroids.assignments import HardAssignment, EmptyClusterRepair
from kcentroids.base.exceptions import DegenerateClusteringState
from kcentroids.distances import EuclideanDistance, ManhattanDistance


def _t(rows):
    return torch.tensor(rows, dtype=torch.float64)


def test_nearest_centroid():
    points = _t([[0.0, 0.0], [9.0, 9.0], [1.0, 0.0]])
    centroids = _t([[0.0, 0.0], [10.0, 10.0]])

    labels, distances = HardAssignment().compute_assignments(points, centroids, EuclideanDistance())

    assert labels.tolist() == [0, 1, 0]
    assert distances.shape == (3, 2)


def test_tie_goes_to_lowest_centroid_index():
    # (0, 0) is exactly 1 away from all three centroids
    points = _t([[0.0, 0.0]])
    centroids = _t([[0.0, 1.0], [1.0, 0.0], [0.0, -1.0]])

    for metric in (EuclideanDistance(), ManhattanDistance()):
        labels, _ = HardAssignment().compute_assignments(points, centroids, metric)
        assert labels.tolist() == [0]

    centroids = _t([[5.0, 5.0], [1.0, 0.0], [0.0, -1.0]])
    labels, _ = HardAssignment().compute_assignments(points, centroids, EuclideanDistance())
    assert labels.tolist() == [1]


def test_to_clusters_keys_every_centroid():
    clusters = HardAssignment.to_clusters(torch.tensor([2, 0, 2, 2]), 4)
    assert clusters == {0: {1}, 1: set(), 2: {0, 2, 3}, 3: set()}


def test_repair_moves_nearest_point():
    points = _t([[0.0, 0.0], [0.0, 1.0], [10.0, 10.0]])
    centroids = _t([[0.0, 0.0], [100.0, 100.0]])
    clusters = {0: {0, 1, 2}, 1: set()}

    moves = EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())

    assert moves == [(2, 0, 1)]
    assert clusters == {0: {0, 1}, 1: {2}}


def test_repair_handles_several_empty_clusters_in_index_order():
    points = _t([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [3.0, 0.0]])
    centroids = _t([[0.0, 0.0], [50.0, 0.0], [60.0, 0.0]])
    clusters = {0: {0, 1, 2, 3}, 1: set(), 2: set()}

    moves = EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())

    # cluster 1 takes the farthest-right point first, cluster 2 gets the next one
    assert moves == [(3, 0, 1), (2, 0, 2)]
    assert clusters == {0: {0, 1}, 1: {3}, 2: {2}}


def test_repair_never_takes_from_single_member_cluster():
    points = _t([[0.0, 0.0], [5.0, 0.0], [6.0, 0.0], [100.0, 0.0]])
    centroids = _t([[0.0, 0.0], [5.5, 0.0], [-1.0, 0.0]])
    # point 0 is nearest to the empty centroid but is alone in cluster 0
    clusters = {0: {0}, 1: {1, 2, 3}, 2: set()}

    moves = EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())

    assert moves == [(1, 1, 2)]
    assert clusters[0] == {0}
    assert clusters[2] == {1}


def test_repair_tie_goes_to_lowest_point_index():
    points = _t([[0.0, 0.0], [0.0, 0.0], [0.0, 1.0]])
    centroids = _t([[0.0, 0.0], [0.0, 0.0]])
    clusters = {0: {0, 1, 2}, 1: set()}

    moves = EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())

    assert moves == [(0, 0, 1)]


def test_repair_uses_active_metric():
    # Euclidean: (3, 4) is 5 from the origin, (6, 0) is 6 -> (3, 4) is nearer
    # Manhattan: (3, 4) is 7, (6, 0) is 6 -> (6, 0) is nearer
    points = _t([[3.0, 4.0], [6.0, 0.0], [20.0, 20.0]])
    centroids = _t([[20.0, 20.0], [0.0, 0.0]])

    clusters = {0: {0, 1, 2}, 1: set()}
    EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())
    assert clusters[1] == {0}

    clusters = {0: {0, 1, 2}, 1: set()}
    EmptyClusterRepair().repair(points, centroids, clusters, ManhattanDistance())
    assert clusters[1] == {1}


def test_repair_without_donor_is_degenerate():
    points = _t([[0.0, 0.0], [1.0, 0.0]])
    centroids = _t([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0]])
    clusters = {0: {0}, 1: {1}, 2: set()}

    with pytest.raises(DegenerateClusteringState):
        EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance())


def test_repair_noop_when_nothing_empty():
    points = _t([[0.0, 0.0], [1.0, 0.0]])
    centroids = _t([[0.0, 0.0], [1.0, 0.0]])
    clusters = {0: {0}, 1: {1}}

    assert EmptyClusterRepair().repair(points, centroids, clusters, EuclideanDistance()) == []
    assert clusters == {0: {0}, 1: {1}}
