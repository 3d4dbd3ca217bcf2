"""Own-key enumeration, callback binding and shared types."""

from objectiter.core.callbacks import accepted_positional, bind_iterator
from objectiter.core.keys import own_items, own_keys, size
from objectiter.core.types import MISSING, Accumulator, Missing

__all__ = [
    "Accumulator",
    "MISSING",
    "Missing",
    "accepted_positional",
    "bind_iterator",
    "own_items",
    "own_keys",
    "size",
]
