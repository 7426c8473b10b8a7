"""
Euclidean vs. Manhattan K-means on the reference dataset.

This example demonstrates:
1. Driving two independent engines step by step with a visualizer
2. How the choice of metric changes cluster membership
3. Running to completion with a larger iteration cap
"""

# Add parent directory to path
import sys
sys.path.append('..')

from kcentroids import ClusterEngine, Visualizer, drive
from kcentroids.datasets import REFERENCE_POINTS, make_uniform_points


class ConsoleVisualizer(Visualizer):
    """Prints each frame instead of drawing it."""

    def __init__(self, title):
        self.title = title

    def setup(self, n_clusters, points, centroids):
        print(f"\n{self.title}: {len(points)} points, {n_clusters} clusters")
        for k, c in enumerate(centroids.tolist()):
            print(f"  centroid {k} starts at {tuple(c)}")

    def on_step(self, result, points):
        print(f"  iteration {result.iteration} (converged={result.converged})")
        for k, members in result.cluster_points(points).items():
            centre = tuple(round(v, 3) for v in result.centroids[k].tolist())
            coords = [tuple(p) for p in members.tolist()]
            print(f"    cluster {k} @ {centre}: {coords}")


def compare_metrics(max_iterations=3):
    for metric in ('euclidean', 'manhattan'):
        engine = ClusterEngine.create(REFERENCE_POINTS, k=3, metric=metric,
                                      max_iterations=max_iterations)
        drive(engine, ConsoleVisualizer(metric.capitalize()))


def run_random_field(n_points=60, k=4, random_state=42):
    points = make_uniform_points(n_points, width=30, depth=30, margin=0.5,
                                 random_state=random_state)
    engine = ClusterEngine.create(points, k=k, max_iterations=100,
                                  init_policy='uniform_box',
                                  random_state=random_state, verbose=1)
    result = engine.run()

    print(f"\nRandom field: {result.iteration} iterations, "
          f"converged={result.converged}, inertia={result.inertia:.3f}")
    print(f"Cluster sizes: {result.cluster_sizes()}")
    repairs = sum(len(r.repairs) for r in engine.history_)
    print(f"Empty clusters repaired along the way: {repairs}")


if __name__ == "__main__":
    compare_metrics()
    run_random_field()
