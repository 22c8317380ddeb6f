"""Unbiased bounded integers via Lemire's multiply-and-reject method.

A raw word ``n`` uniform over ``[0, 2**bits)`` is mapped to ``[0, bound)`` by
taking the high half of ``n * bound``. Write ``n * bound = q * 2**bits + r``.
The products fall into ``bound`` intervals ``[q * 2**bits, (q + 1) * 2**bits)``,
and each interval starts with a reject band of width ``2**bits % bound``.
Discarding ``n`` whenever ``r`` lands in that band leaves every ``q`` with
exactly ``2**bits // bound`` preimages, so the accepted ``q`` is uniform.

Since ``2**bits % bound < bound``, any ``r >= bound`` is accepted without
computing the band width, which skips the division on most draws.
"""

from __future__ import annotations

from bounded_rand._logging import get_logger
from bounded_rand.errors import InvalidRange
from bounded_rand.source import RandomSource
from bounded_rand.types import Err, Ok, Result

__all__ = [
    'WORD_BITS',
    'BoundedSampler',
    'rejection_threshold',
    'split',
]

WORD_BITS = 32

logger = get_logger(__name__)


def split(n: int, bound: int, bits: int = WORD_BITS) -> tuple[int, int]:
    """Split ``n * bound`` into ``(n * bound) >> bits`` and ``(n * bound) % 2**bits``.

    The caller guarantees ``bound != 0``.
    """
    product = n * bound
    return product >> bits, product & ((1 << bits) - 1)


def rejection_threshold(bound: int, bits: int = WORD_BITS) -> int:
    """Return ``2**bits % bound``, computed as ``(-bound) % bound`` in word arithmetic."""
    return ((-bound) & ((1 << bits) - 1)) % bound


class BoundedSampler:
    """Draws integers uniform over ``[0, bound)`` from a RandomSource.

    The sampler keeps no state besides its source; sharing one between
    threads is as safe as sharing the source.

    Args:
        source: Supplier of uniform 32-bit words.
        bits: Word width in [1, 32]. Narrower words use the low bits of each
            draw, which keeps them uniform.

    Example:
        ```python
        sampler = BoundedSampler(SystemSource(seed=1))
        sampler.sample(6)  # Ok(value=...)
        sampler.sample(0)  # Err(error=InvalidRange(bound=0))
        ```
    """

    __slots__ = ('_bits', '_mask', '_source')

    def __init__(self, source: RandomSource, *, bits: int = WORD_BITS) -> None:
        if not 1 <= bits <= WORD_BITS:
            msg = f'Word width must be between 1 and {WORD_BITS} bits, got {bits}'
            raise ValueError(msg)
        self._source = source
        self._bits = bits
        self._mask = (1 << bits) - 1

    @property
    def source(self) -> RandomSource:
        return self._source

    @property
    def bits(self) -> int:
        return self._bits

    def _check_bound(self, bound: int) -> None:
        if isinstance(bound, bool) or not isinstance(bound, int):
            msg = f'Bound must be an int, got {type(bound).__name__}'
            raise TypeError(msg)
        if not 0 <= bound <= self._mask:
            msg = f'Bound {bound} does not fit in {self._bits} unsigned bits'
            raise OverflowError(msg)

    def _draw(self) -> int:
        return self._source.next_u32() & self._mask

    def _sample_unchecked(self, bound: int) -> int:
        bits = self._bits
        quotient, remainder = split(self._draw(), bound, bits)
        if remainder >= bound:
            return quotient

        threshold = rejection_threshold(bound, bits)
        while remainder < threshold:
            logger.debug(
                'sample_rejected',
                bound=bound,
                threshold=threshold,
                remainder=remainder,
            )
            quotient, remainder = split(self._draw(), bound, bits)
        return quotient

    def sample(self, bound: int) -> Result[int, InvalidRange]:
        """Draw an integer uniform over ``[0, bound)``.

        Args:
            bound: Exclusive upper bound.

        Returns:
            Ok(value) with ``0 <= value < bound``, or Err(InvalidRange) when
            ``bound`` is 0. No word is drawn in the error case.

        Raises:
            TypeError: If ``bound`` is not an int.
            OverflowError: If ``bound`` is negative or wider than the word.
        """
        self._check_bound(bound)
        if bound == 0:
            logger.debug('invalid_range', bound=bound)
            return Err(InvalidRange(bound))
        return Ok(self._sample_unchecked(bound))

    def randbelow(self, bound: int) -> int:
        """Like ``sample`` but returns the value directly.

        Raises:
            InvalidRangeError: If ``bound`` is 0.
        """
        return self.sample(bound).unwrap()

    def sample_many(self, bound: int, count: int) -> Result[list[int], InvalidRange]:
        """Draw ``count`` independent integers uniform over ``[0, bound)``.

        The bound is validated once; an invalid bound draws nothing.

        Raises:
            ValueError: If ``count`` is negative.
        """
        if count < 0:
            msg = f'count must be non-negative, got {count}'
            raise ValueError(msg)
        self._check_bound(bound)
        if bound == 0:
            logger.debug('invalid_range', bound=bound)
            return Err(InvalidRange(bound))
        return Ok([self._sample_unchecked(bound) for _ in range(count)])

    def __repr__(self) -> str:
        return f'BoundedSampler(source={self._source!r}, bits={self._bits})'
