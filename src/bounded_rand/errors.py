"""Sampler error types: dual struct+exception for Result and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'InvalidRange',
    'InvalidRangeError',
    'SourceExhaustedError',
]


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Requested bound admits no value - struct variant for Result[int, InvalidRange]."""

    bound: int = 0

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.bound)


class InvalidRangeError(ValueError):
    """Requested bound admits no value - exception variant."""

    def __init__(self, bound: int = 0) -> None:
        self.bound = bound
        super().__init__(f'Invalid range: [0, {bound}) is empty')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for Result-based code."""
        return InvalidRange(self.bound)


class SourceExhaustedError(LookupError):
    """A finite random source has no values left."""

    def __init__(self, consumed: int) -> None:
        self.consumed = consumed
        super().__init__(f'Random source exhausted after {consumed} draws')
