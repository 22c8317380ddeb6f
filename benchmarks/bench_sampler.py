"""Benchmarks comparing bounded-rand against the standard library.

Run with: pytest benchmarks/bench_sampler.py --benchmark-only -v
"""

import random

from bounded_rand import BoundedSampler, SystemSource, XorShift32Source, rejection_threshold, split

# =============================================================================
# Single draws
# =============================================================================


class TestSingleDraw:
    """Benchmark one bounded draw."""

    def test_sampler_small_bound(self, benchmark):
        """Small bounds almost always take the fast path."""
        sampler = BoundedSampler(SystemSource(seed=1))
        benchmark(sampler.randbelow, 12345)

    def test_sampler_large_bound(self, benchmark):
        """Bounds just above 2**31 reject close to half the draws."""
        sampler = BoundedSampler(SystemSource(seed=1))
        benchmark(sampler.randbelow, 2**31 + 1)

    def test_sampler_result(self, benchmark):
        """Result-returning entry point."""
        sampler = BoundedSampler(SystemSource(seed=1))
        benchmark(sampler.sample, 12345)

    def test_sampler_xorshift(self, benchmark):
        """Pure-Python source."""
        sampler = BoundedSampler(XorShift32Source(1))
        benchmark(sampler.randbelow, 12345)

    def test_stdlib_randrange(self, benchmark):
        """Standard library baseline."""
        rng = random.Random(1)
        benchmark(rng.randrange, 12345)


# =============================================================================
# Batches
# =============================================================================


class TestBatch:
    """Benchmark many draws at once."""

    def test_sampler_sample_many(self, benchmark):
        sampler = BoundedSampler(SystemSource(seed=1))
        benchmark(sampler.sample_many, 12345, 1000)

    def test_stdlib_randrange_loop(self, benchmark):
        rng = random.Random(1)
        benchmark(lambda: [rng.randrange(12345) for _ in range(1000)])


# =============================================================================
# Arithmetic helpers
# =============================================================================


class TestHelpers:
    """Benchmark the split and the threshold the fast path avoids."""

    def test_split(self, benchmark):
        benchmark(split, 0xDEADBEEF, 12345)

    def test_rejection_threshold(self, benchmark):
        benchmark(rejection_threshold, 12345)
