"""Base classes, interfaces and errors for the clustering engine."""

from .interfaces import (
    DistanceMetric,
    InitializationStrategy,
    ConvergenceCriterion,
    Visualizer
)

from .data_structures import (
    EngineConfig,
    StepResult,
    Repair
)

from .exceptions import (
    InvalidConfiguration,
    DegenerateClusteringState,
    IterationCapExceeded
)

__all__ = [
    # Interfaces
    'DistanceMetric',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'Visualizer',

    # Data structures
    'EngineConfig',
    'StepResult',
    'Repair',

    # Errors
    'InvalidConfiguration',
    'DegenerateClusteringState',
    'IterationCapExceeded'
]
