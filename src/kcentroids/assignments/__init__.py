"""Assignment strategies for clustering."""

from .hard import HardAssignment
from .repair import EmptyClusterRepair

__all__ = [
    'HardAssignment',
    'EmptyClusterRepair'
]
