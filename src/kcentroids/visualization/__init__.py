"""Visualizer contract and helpers for consuming per-step results."""

from ..base.interfaces import Visualizer
from .recording import Frame, RecordingVisualizer, drive

__all__ = [
    'Visualizer',
    'Frame',
    'RecordingVisualizer',
    'drive'
]
