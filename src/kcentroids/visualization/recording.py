"""
Visualizer implementations and the step driver.

Rendering lives outside this package; what is provided here is the plumbing
that feeds a visualizer, plus a visualizer that simply records frames.
"""

from typing import Dict, List, Optional
from dataclasses import dataclass
from torch import Tensor

from ..base.interfaces import Visualizer
from ..base.data_structures import StepResult


@dataclass(frozen=True)
class Frame:
    """What a visualizer is shown after one step."""

    iteration: int
    centroids: Tensor                   # (K, d), ordered by centroid index
    members: Dict[int, Tensor]          # centroid index -> (m_k, d) member positions
    converged: bool


class RecordingVisualizer(Visualizer):
    """Keeps every frame it is shown, in order.

    Useful for tests and for hosts that render after the fact.
    """

    def __init__(self):
        self.n_clusters: Optional[int] = None
        self.initial_centroids: Optional[Tensor] = None
        self.frames: List[Frame] = []

    def setup(self, n_clusters: int, points: Tensor, centroids: Tensor) -> None:
        self.n_clusters = n_clusters
        self.initial_centroids = centroids.clone()
        self.frames = []

    def on_step(self, result: StepResult, points: Tensor) -> None:
        self.frames.append(Frame(
            iteration=result.iteration,
            centroids=result.centroids,
            members=result.cluster_points(points),
            converged=result.converged
        ))

    def trajectory(self, k: int) -> List[Tensor]:
        """Positions of centroid ``k``, starting with the initial one."""
        positions = [] if self.initial_centroids is None else [self.initial_centroids[k]]
        return positions + [frame.centroids[k] for frame in self.frames]


def drive(engine, visualizer: Visualizer) -> StepResult:
    """Run ``engine`` step by step, showing every result to ``visualizer``.

    Stops on convergence or when the iteration cap is reached. Any pacing
    between frames is the visualizer's business.

    Returns:
        The last StepResult
    """
    visualizer.setup(engine.n_clusters, engine.points, engine.centroids)

    if engine.converged or engine.cap_reached:
        return engine.run()

    while True:
        result = engine.step()
        visualizer.on_step(result, engine.points)
        if result.converged or engine.cap_reached:
            return result
