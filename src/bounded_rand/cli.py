"""CLI entry point: seed a source once and print a few bounded samples."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence

from bounded_rand._logging import configure_logging, get_logger
from bounded_rand.errors import InvalidRange
from bounded_rand.sampler import BoundedSampler
from bounded_rand.source import SourceKind, make_source
from bounded_rand.types import Err

__all__ = ['build_parser', 'main']

EXIT_INVALID_RANGE = 2

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bounded-rand',
        description='Print random integers drawn uniformly from [0, RANGE).',
    )
    parser.add_argument('--range', dest='bound', type=int, default=12345, help='Exclusive upper bound.')
    parser.add_argument('--count', type=int, default=10, help='How many numbers to print.')
    parser.add_argument('--seed', type=int, help='Source seed. Defaults to the current time in seconds.')
    parser.add_argument(
        '--source',
        choices=[kind.value for kind in SourceKind],
        default=SourceKind.SYSTEM.value,
        help='Random source implementation.',
    )
    parser.add_argument('--log-level', default='WARNING', help='Logging level.')
    parser.add_argument('--json-logs', action='store_true', help='Emit logs as JSON.')
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error('--count must be non-negative')
    if not 0 <= args.bound < 2**32:
        parser.error('--range must fit in 32 unsigned bits')

    configure_logging(args.log_level, json_output=args.json_logs)

    # Wall-clock seconds, like the classic srand(time(NULL)).
    seed = int(time.time()) if args.seed is None else args.seed
    sampler = BoundedSampler(make_source(args.source, seed))
    logger.info('seeded', source=args.source, seed=seed)

    result = sampler.sample_many(args.bound, args.count)
    if isinstance(result, Err):
        error: InvalidRange = result.error
        logger.error('invalid_range', bound=error.bound)
        print(f'error: {error.to_exception()}', file=sys.stderr)
        return EXIT_INVALID_RANGE

    for value in result.value:
        print(f'Random number in [0, {args.bound}[: {value}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
