"""Core types: Result, Ok, Err."""

from bounded_rand.types.result import Err, Ok, Result

__all__ = [
    'Err',
    'Ok',
    'Result',
]
