"""Clustering algorithms."""

from .engine import ClusterEngine

__all__ = [
    'ClusterEngine'
]
