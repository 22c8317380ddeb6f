"""Sampler configuration: SamplerConfig, initialization and the default sampler."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from bounded_rand._logging import configure_logging, get_logger
from bounded_rand.sampler import WORD_BITS, BoundedSampler
from bounded_rand.source import SourceKind, make_source

__all__ = [
    'SamplerConfig',
    'get_config',
    'get_sampler',
    'init',
]

SOURCE_ENV = 'BOUNDED_RAND_SOURCE'
SEED_ENV = 'BOUNDED_RAND_SEED'

logger = get_logger(__name__)


@dataclass(frozen=True)
class SamplerConfig:
    """Configuration for the process-wide default sampler.

    Attributes:
        source: Which built-in random source to use.
        seed: Seed for the source. None lets the system source seed itself.
        bits: Word width of the sampler.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    source: SourceKind = SourceKind.SYSTEM
    seed: int | None = None
    bits: int = WORD_BITS
    log_level: str | None = None


# Set by init()
_config: SamplerConfig | None = None
_sampler: BoundedSampler | None = None


def _detect_source() -> SourceKind:
    """Read the source kind from BOUNDED_RAND_SOURCE, defaulting to system."""
    env_source = os.environ.get(SOURCE_ENV, '').lower()
    if not env_source:
        return SourceKind.SYSTEM
    try:
        return SourceKind(env_source)
    except ValueError:
        logging.warning("Unknown %s value '%s', defaulting to system", SOURCE_ENV, env_source)
        return SourceKind.SYSTEM


def _detect_seed() -> int | None:
    """Read the seed from BOUNDED_RAND_SEED, if set to an integer."""
    env_seed = os.environ.get(SEED_ENV, '').strip()
    if not env_seed:
        return None
    try:
        return int(env_seed, 0)
    except ValueError:
        logging.warning("Ignoring non-integer %s value '%s'", SEED_ENV, env_seed)
        return None


def init(
    source: SourceKind | str | None = None,
    seed: int | None = None,
    bits: int = WORD_BITS,
    log_level: str | None = None,
) -> SamplerConfig:
    """Initialize the default sampler.

    Args:
        source: Source kind. Read from BOUNDED_RAND_SOURCE if None.
            Can be SourceKind enum or string ("system", "xorshift32", "mulberry32").
        seed: Source seed. Read from BOUNDED_RAND_SEED if None.
        bits: Sampler word width.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The SamplerConfig that was set.

    Raises:
        ValueError: If ``source`` or ``bits`` is invalid.

    Example:
        ```python
        from bounded_rand import init, sample

        init(source='xorshift32', seed=1234)
        sample(100)
        ```
    """
    config, _ = _initialize(source, seed, bits, log_level)
    return config


def _initialize(
    source: SourceKind | str | None = None,
    seed: int | None = None,
    bits: int = WORD_BITS,
    log_level: str | None = None,
) -> tuple[SamplerConfig, BoundedSampler]:
    """Validate everything, then install the config and sampler."""
    global _config, _sampler  # noqa: PLW0603

    if source is None:
        resolved_source = _detect_source()
    elif isinstance(source, str):
        resolved_source = SourceKind(source.lower())
    else:
        resolved_source = source

    resolved_seed = _detect_seed() if seed is None else seed

    config = SamplerConfig(
        source=resolved_source,
        seed=resolved_seed,
        bits=bits,
        log_level=log_level,
    )
    # Raises on a bad width before any global state changes.
    sampler = BoundedSampler(make_source(config.source, config.seed), bits=config.bits)

    if log_level is not None:
        configure_logging(log_level)
    _config, _sampler = config, sampler

    logger.debug('sampler_initialized', source=config.source.value, bits=config.bits)
    return config, sampler


def get_config() -> SamplerConfig:
    """Get the current sampler configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'Sampler not initialized. Call bounded_rand.init() first.'
        raise RuntimeError(msg)
    return _config


def get_sampler() -> BoundedSampler:
    """Get the default sampler, initializing with defaults on first use."""
    if _sampler is not None:
        return _sampler
    _, sampler = _initialize()
    return sampler
