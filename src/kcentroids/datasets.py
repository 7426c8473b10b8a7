"""
Sample point sets.

``REFERENCE_POINTS`` is the small 2D dataset the interactive demos cluster
into three groups; ``make_uniform_points`` scatters random points over a
rectangular area centred on the origin.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from .utils.validation import check_random_state


REFERENCE_POINTS = (
    (1.0, 1.0),
    (1.0, 6.0),
    (2.0, 1.0),
    (3.0, 9.0),
    (3.0, 10.0),
    (4.0, 6.0),
    (5.0, 6.0),
    (7.0, 2.0),
    (8.0, 1.0),
    (8.0, 9.0),
    (9.0, 1.0),
    (9.0, 9.0),
    (9.0, 10.0),
    (10.0, 3.0),
    (10.0, 5.0),
)


def reference_points(dtype: torch.dtype = torch.float64) -> Tensor:
    """The reference dataset as a (15, 2) tensor."""
    return torch.tensor(REFERENCE_POINTS, dtype=dtype)


def make_uniform_points(n_points: int,
                        width: float = 30.0,
                        depth: float = 30.0,
                        margin: float = 0.0,
                        random_state: Optional[Union[int, torch.Generator]] = None,
                        dtype: torch.dtype = torch.float64) -> Tensor:
    """Random 2D points inside a ``width`` x ``depth`` rectangle.

    The rectangle is centred on the origin and shrunk by ``margin`` on every
    side, so coordinates fall in ``[-width/2 + margin, width/2 - margin)``
    and the equivalent range for ``depth``.

    Args:
        n_points: Number of points
        width: Extent along the first axis
        depth: Extent along the second axis
        margin: Distance kept free along every edge
        random_state: Seed or generator for reproducibility
        dtype: Floating point type of the result

    Returns:
        (n_points, 2) tensor
    """
    if n_points < 0:
        raise ValueError(f"n_points must be non-negative, got {n_points}")

    half_w = width / 2 - margin
    half_d = depth / 2 - margin
    if half_w < 0 or half_d < 0:
        raise ValueError(f"margin {margin} leaves no room in a {width} x {depth} area")

    generator = check_random_state(random_state)
    u = torch.rand(n_points, 2, generator=generator, dtype=dtype)

    low = torch.tensor([-half_w, -half_d], dtype=dtype)
    span = torch.tensor([2 * half_w, 2 * half_d], dtype=dtype)

    return low + u * span
