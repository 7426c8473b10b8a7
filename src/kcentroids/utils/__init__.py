"""Utility functions for the clustering engine."""

from .convergence import (
    ExactCentroidEquality,
    CentroidTolerance
)

from .metrics import inertia

from .validation import (
    validate_data,
    check_random_state,
    parse_device
)

__all__ = [
    # Convergence criteria
    'ExactCentroidEquality',
    'CentroidTolerance',

    # Metrics
    'inertia',

    # Validation
    'validate_data',
    'check_random_state',
    'parse_device'
]
