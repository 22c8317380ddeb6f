"""Module-level shortcuts backed by the default sampler."""

from __future__ import annotations

from bounded_rand._config import get_sampler
from bounded_rand.errors import InvalidRange
from bounded_rand.types import Result

__all__ = ['randbelow', 'sample', 'sample_many']


def sample(bound: int) -> Result[int, InvalidRange]:
    """Draw from ``[0, bound)`` with the default sampler."""
    return get_sampler().sample(bound)


def randbelow(bound: int) -> int:
    """Draw from ``[0, bound)`` with the default sampler, raising on an empty range."""
    return get_sampler().randbelow(bound)


def sample_many(bound: int, count: int) -> Result[list[int], InvalidRange]:
    """Draw ``count`` values from ``[0, bound)`` with the default sampler."""
    return get_sampler().sample_many(bound, count)
