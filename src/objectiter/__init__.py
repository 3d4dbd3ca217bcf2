"""Iteration utilities for plain keyed objects."""

from objectiter.core.types import MISSING
from objectiter.functional.enumerable import (
    each,
    every,
    filter,
    find,
    map,
    reduce,
    reduce_right,
    reject,
    some,
)

__version__ = "0.0.1"

__all__ = [
    "MISSING",
    "each",
    "map",
    "reduce",
    "reduce_right",
    "find",
    "filter",
    "reject",
    "every",
    "some",
]
