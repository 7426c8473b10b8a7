"""
Empty-cluster repair.

After an assignment pass a centroid may own no points. Before means are
taken, each empty cluster borrows the nearest point from a cluster that can
spare one.
"""

from typing import Dict, Set, List
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric
from ..base.data_structures import Repair
from ..base.exceptions import DegenerateClusteringState


class EmptyClusterRepair:
    """Move the closest donor point into every empty cluster.

    Empty clusters are handled one at a time in index order. For each one,
    the candidates are the points of every cluster holding more than one
    member; the candidate nearest to the empty cluster's current centroid is
    moved. Equal distances resolve to the lowest point index.
    """

    def repair(self, points: Tensor, centroids: Tensor,
               clusters: Dict[int, Set[int]],
               metric: DistanceMetric) -> List[Repair]:
        """Repair ``clusters`` in place.

        Args:
            points: (n, d) data points
            centroids: (K, d) current centroids
            clusters: Mapping from centroid index to member point indices
            metric: Distance metric used to pick the donated point

        Returns:
            List of (point_index, donor_cluster, repaired_cluster) moves

        Raises:
            DegenerateClusteringState: If no cluster can donate a point
        """
        moves = []

        for k in range(centroids.shape[0]):
            if clusters[k]:
                continue

            owner = {}
            for donor, members in clusters.items():
                if len(members) > 1:
                    for idx in members:
                        owner[idx] = donor

            if not owner:
                raise DegenerateClusteringState(
                    f"Cluster {k} is empty and no cluster has more than one "
                    f"member to donate"
                )

            candidates = sorted(owner)
            distances = metric.compute(points[candidates], centroids[k:k + 1])[:, 0]
            best = candidates[int(torch.argmin(distances).item())]
            donor = owner[best]

            clusters[donor].remove(best)
            clusters[k].add(best)
            moves.append((best, donor, k))

        return moves
