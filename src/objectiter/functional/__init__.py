"""Functional primitives for objectiter.

Higher-order helpers that walk the own keys of mappings and plain objects,
applying a callback and collecting or folding the results. They keep no
state between calls and never mutate the source themselves.
"""

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

__all__ = [
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
