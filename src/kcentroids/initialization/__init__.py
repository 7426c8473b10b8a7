"""Initialization strategies for clustering."""

from typing import Union

from ..base.interfaces import InitializationStrategy
from ..base.exceptions import InvalidConfiguration
from .first_k import FirstKPointsInit
from .random import RandomDistinctPointsInit
from .uniform_box import UniformBoxInit


INIT_POLICIES = {
    'first_k': FirstKPointsInit,
    'random': RandomDistinctPointsInit,
    'uniform_box': UniformBoxInit,
}


def get_init_policy(policy: Union[str, InitializationStrategy]) -> InitializationStrategy:
    """Resolve an initialization strategy from a name or pass an instance through.

    Raises:
        InvalidConfiguration: If the name is not registered
    """
    if isinstance(policy, InitializationStrategy):
        return policy
    if isinstance(policy, str):
        try:
            return INIT_POLICIES[policy.lower()]()
        except KeyError:
            raise InvalidConfiguration(
                f"Unknown init policy: {policy!r} (expected one of {sorted(INIT_POLICIES)})"
            ) from None
    raise InvalidConfiguration(f"init_policy must be str or InitializationStrategy, "
                               f"got {type(policy).__name__}")


__all__ = [
    'FirstKPointsInit',
    'RandomDistinctPointsInit',
    'UniformBoxInit',
    'INIT_POLICIES',
    'get_init_policy'
]
