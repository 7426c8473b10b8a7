"""
Error taxonomy for the clustering engine.
"""


class InvalidConfiguration(ValueError):
    """Raised when an engine cannot be built from the given settings.

    Covers K outside ``[1, n_points]``, a negative iteration cap, unknown
    metric or initialization names and malformed point data.
    """


class DegenerateClusteringState(RuntimeError):
    """Raised when an empty cluster cannot be repaired.

    Computing a mean over an empty cluster would produce a NaN centroid, so
    the engine stops instead.
    """


class IterationCapExceeded(UserWarning):
    """Warning category for ``step()`` calls made after the iteration cap."""
