"""
kcentroids: step-wise K-means clustering with pluggable metrics.

The package provides one engine, :class:`ClusterEngine`, that partitions a
fixed point set into K clusters by nearest-centroid assignment and mean
updates. It can be advanced one iteration at a time, so a visualizer can
observe every intermediate state, or run to completion.

Example usage:
    >>> from kcentroids import ClusterEngine
    >>> from kcentroids.datasets import REFERENCE_POINTS
    >>>
    >>> engine = ClusterEngine.create(REFERENCE_POINTS, k=3, metric='manhattan')
    >>> result = engine.step()
    >>> result.clusters[0]
    >>>
    >>> # or run until convergence / the iteration cap
    >>> final = engine.run()
"""

__version__ = '0.1.0'

from .algorithms.engine import ClusterEngine

from .base import (
    EngineConfig,
    StepResult,
    InvalidConfiguration,
    DegenerateClusteringState,
    IterationCapExceeded
)

from .distances import EuclideanDistance, ManhattanDistance
from .initialization import FirstKPointsInit, RandomDistinctPointsInit, UniformBoxInit
from .utils.convergence import ExactCentroidEquality, CentroidTolerance

from .visualization import (
    Visualizer,
    RecordingVisualizer,
    drive
)

__all__ = [
    # Engine
    'ClusterEngine',
    'EngineConfig',
    'StepResult',

    # Errors
    'InvalidConfiguration',
    'DegenerateClusteringState',
    'IterationCapExceeded',

    # Components
    'EuclideanDistance',
    'ManhattanDistance',
    'FirstKPointsInit',
    'RandomDistinctPointsInit',
    'UniformBoxInit',
    'ExactCentroidEquality',
    'CentroidTolerance',

    # Visualization
    'Visualizer',
    'RecordingVisualizer',
    'drive',

    # Version
    '__version__'
]
