"""bounded-rand: unbiased bounded random integers for Python 3.13+.

Lemire's multiply-and-reject method maps uniform 32-bit words onto
``[0, bound)`` with exact uniformity and, on most draws, no division.

Flat imports (preferred):
    from bounded_rand import sample, randbelow, BoundedSampler, Ok, Err
    from bounded_rand import SystemSource, XorShift32Source, init

Submodule imports (for organization):
    from bounded_rand.sampler import BoundedSampler, split, rejection_threshold
    from bounded_rand.source import RandomSource, SequenceSource
    from bounded_rand.types import Result, Ok, Err
"""

# Configuration
from bounded_rand._config import SamplerConfig, get_config, get_sampler, init

# Logging
from bounded_rand._logging import configure_logging, get_logger

# Default-sampler shortcuts
from bounded_rand.api import randbelow, sample, sample_many

# Errors
from bounded_rand.errors import InvalidRange, InvalidRangeError, SourceExhaustedError

# Sampling
from bounded_rand.sampler import WORD_BITS, BoundedSampler, rejection_threshold, split

# Sources
from bounded_rand.source import (
    CountingSource,
    Mulberry32Source,
    RandomSource,
    SequenceSource,
    SourceKind,
    SystemSource,
    XorShift32Source,
    make_source,
)

# Types
from bounded_rand.types import Err, Ok, Result

__all__ = [
    'WORD_BITS',
    'BoundedSampler',
    'CountingSource',
    'Err',
    'InvalidRange',
    'InvalidRangeError',
    'Mulberry32Source',
    'Ok',
    'RandomSource',
    'Result',
    'SamplerConfig',
    'SequenceSource',
    'SourceExhaustedError',
    'SourceKind',
    'SystemSource',
    'XorShift32Source',
    'configure_logging',
    'get_config',
    'get_logger',
    'get_sampler',
    'init',
    'make_source',
    'randbelow',
    'rejection_threshold',
    'sample',
    'sample_many',
    'split',
]
