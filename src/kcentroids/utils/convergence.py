"""
Convergence criteria for the clustering engine.

Both criteria compare each centroid with its position at the start of the
iteration:
- Exact equality (default)
- Componentwise absolute tolerance (opt-in)
"""

from typing import Dict, Any
import torch
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


def _max_shift(current: Tensor, previous: Tensor) -> float:
    if current.numel() == 0:
        return 0.0
    return torch.max(torch.abs(current - previous)).item()


class ExactCentroidEquality(ConvergenceCriterion):
    """Converged iff every centroid equals its snapshot componentwise.

    No tolerance is applied, so floating-point oscillation between two
    nearly identical positions never counts as convergence.
    """

    def check(self, current_state: Dict[str, Any]) -> bool:
        current = current_state['centroids']
        previous = current_state['previous_centroids']

        converged = torch.equal(current, previous)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_shift': _max_shift(current, previous),
            'converged': converged
        })

        return converged


class CentroidTolerance(ConvergenceCriterion):
    """Converged iff no centroid coordinate moved by more than ``atol``."""

    def __init__(self, atol: float = 1e-9):
        """
        Args:
            atol: Largest componentwise movement still treated as stationary
        """
        super().__init__()
        if atol < 0:
            raise ValueError(f"atol must be non-negative, got {atol}")
        self.atol = atol

    def check(self, current_state: Dict[str, Any]) -> bool:
        current = current_state['centroids']
        previous = current_state['previous_centroids']

        shift = _max_shift(current, previous)
        converged = shift <= self.atol

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'max_shift': shift,
            'converged': converged
        })

        return converged
