"""
Input validation utilities.

Converts user supplied point data into tensors and builds random generators,
rejecting inputs the engine cannot work with.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..base.exceptions import InvalidConfiguration


def validate_data(X: Union[Tensor, np.ndarray, list, tuple],
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert point data to an (n, d) tensor.

    The result never shares storage with the input, so callers cannot mutate
    the engine's points through their own array.

    Args:
        X: Input data (tensor, numpy array, or nested sequence)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required

    Returns:
        Validated tensor

    Raises:
        InvalidConfiguration: If validation fails
    """
    if isinstance(X, Tensor):
        X = X.detach().to(dtype=dtype, device=device).clone()
    elif isinstance(X, (np.ndarray, list, tuple)):
        try:
            X = torch.tensor(X, dtype=dtype, device=device)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Cannot convert points to tensor: {e}") from e
    else:
        raise InvalidConfiguration(f"Cannot convert {type(X).__name__} to tensor")

    if X.dim() != 2:
        raise InvalidConfiguration(f"Expected 2D array of points, got {X.dim()}D")

    n_samples, n_features = X.shape

    if n_samples < ensure_min_samples:
        raise InvalidConfiguration(f"Found {n_samples} samples, but need at least "
                                   f"{ensure_min_samples}")

    if n_features < 1:
        raise InvalidConfiguration("Points must have at least one coordinate")

    if ensure_finite:
        if torch.isnan(X).any():
            raise InvalidConfiguration("Input contains NaN values")
        if torch.isinf(X).any():
            raise InvalidConfiguration("Input contains infinite values")

    return X


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create a CPU generator from a random state.

    Args:
        random_state: Seed, generator, or None for a nondeterministic seed

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, (int, np.integer)) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise InvalidConfiguration(f"random_state must be int or Generator, "
                                   f"got {type(random_state).__name__}")


def parse_device(device: Optional[Union[str, torch.device]] = None) -> torch.device:
    """Parse a device specification; None means CPU."""
    if device is None:
        return torch.device('cpu')
    if isinstance(device, torch.device):
        return device
    if isinstance(device, str):
        try:
            return torch.device(device)
        except RuntimeError as e:
            raise InvalidConfiguration(f"Unknown device: {device}") from e
    raise InvalidConfiguration(f"Device must be str or torch.device, "
                               f"got {type(device).__name__}")
