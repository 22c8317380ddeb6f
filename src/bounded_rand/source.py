"""Random sources: anything that yields uniform 32-bit words on demand.

The sampler only needs ``next_u32()``. Seeding, quality and thread safety
belong to the source; none of the sources here reseed on their own.
"""

from __future__ import annotations

import random
from collections.abc import Iterable
from enum import Enum
from typing import Protocol, runtime_checkable

from bounded_rand.errors import SourceExhaustedError

__all__ = [
    'U32_MASK',
    'CountingSource',
    'Mulberry32Source',
    'RandomSource',
    'SequenceSource',
    'SourceKind',
    'SystemSource',
    'XorShift32Source',
    'make_source',
]

U32_MASK = 0xFFFFFFFF

# xorshift32 has no zero state.
_XORSHIFT_ZERO_SEED = 0xA5366B4D


@runtime_checkable
class RandomSource(Protocol):
    """Yields independent words uniform over [0, 2**32)."""

    def next_u32(self) -> int: ...


class SourceKind(Enum):
    """Built-in source implementations selectable by name."""

    SYSTEM = 'system'
    XORSHIFT32 = 'xorshift32'
    MULBERRY32 = 'mulberry32'


class SystemSource:
    """Source backed by the standard library Mersenne Twister.

    Args:
        seed: Seed for the underlying ``random.Random``. None seeds from the OS.
    """

    __slots__ = ('_rng',)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def seed(self, value: int | None) -> None:
        """Reseed the underlying generator."""
        self._rng.seed(value)

    def next_u32(self) -> int:
        return self._rng.getrandbits(32)


class XorShift32Source:
    """Deterministic xorshift32 generator (shifts 13, 17, 5).

    The period is 2**32 - 1 and zero is never produced, so this is for
    reproducible runs rather than exact-uniformity checks.
    """

    __slots__ = ('_state',)

    def __init__(self, seed: int) -> None:
        state = seed & U32_MASK
        if state == 0:
            state = _XORSHIFT_ZERO_SEED
        self._state = state

    def next_u32(self) -> int:
        x = self._state
        x ^= (x << 13) & U32_MASK
        x ^= x >> 17
        x ^= (x << 5) & U32_MASK
        self._state = x
        return x


class Mulberry32Source:
    """Deterministic mulberry32 generator covering the full 32-bit range."""

    __slots__ = ('_state',)

    def __init__(self, seed: int) -> None:
        self._state = seed & U32_MASK

    def next_u32(self) -> int:
        self._state = (self._state + 0x6D2B79F5) & U32_MASK
        a = self._state
        t = ((a ^ (a >> 15)) * (a | 1)) & U32_MASK
        t ^= (t + ((t ^ (t >> 7)) * (t | 61))) & U32_MASK
        return (t ^ (t >> 14)) & U32_MASK


class SequenceSource:
    """Replays a fixed sequence of words once.

    Args:
        values: Words to hand out, each in [0, 2**32).

    Raises:
        ValueError: If a value is outside the 32-bit range.
    """

    __slots__ = ('_index', '_values')

    def __init__(self, values: Iterable[int]) -> None:
        words = list(values)
        for word in words:
            if not 0 <= word <= U32_MASK:
                msg = f'Value {word} is outside [0, 2**32)'
                raise ValueError(msg)
        self._values = words
        self._index = 0

    @property
    def remaining(self) -> int:
        """Number of words not yet handed out."""
        return len(self._values) - self._index

    def next_u32(self) -> int:
        """Return the next word.

        Raises:
            SourceExhaustedError: If every word has been consumed.
        """
        if self._index >= len(self._values):
            raise SourceExhaustedError(self._index)
        word = self._values[self._index]
        self._index += 1
        return word


class CountingSource:
    """Wraps another source and counts how many words were drawn."""

    __slots__ = ('_inner', 'draws')

    def __init__(self, inner: RandomSource) -> None:
        self._inner = inner
        self.draws = 0

    def reset(self) -> None:
        self.draws = 0

    def next_u32(self) -> int:
        self.draws += 1
        return self._inner.next_u32()


def make_source(kind: SourceKind | str = SourceKind.SYSTEM, seed: int | None = None) -> RandomSource:
    """Build a built-in source.

    Args:
        kind: Source kind, as enum or its string value ("system", "xorshift32",
            "mulberry32").
        seed: Seed value. The deterministic sources treat None as 0.

    Returns:
        A new RandomSource.

    Raises:
        ValueError: If ``kind`` names no known source.
    """
    if isinstance(kind, str):
        kind = SourceKind(kind.lower())

    match kind:
        case SourceKind.SYSTEM:
            return SystemSource(seed)
        case SourceKind.XORSHIFT32:
            return XorShift32Source(seed or 0)
        case SourceKind.MULBERRY32:
            return Mulberry32Source(seed or 0)
