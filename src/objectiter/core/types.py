"""Reusable type definitions for the objectiter package.

Type Aliases:
    Source: Anything whose own keys can be enumerated (a mapping, or an
        object carrying instance attributes).
    Iteratee: Callback invoked as ``(value, key, source)``.
    Predicate: Iteratee whose result is read for truthiness.
    Reducer: Callback invoked as ``(memo, value, key, source)``.

``MISSING`` marks an argument the caller left out. It never travels past the
public functions: folds carry their running value as ``Optional[Accumulator]``
so that falsy seeds such as ``0`` or ``""`` are told apart from "no seed".
"""

import typing as tp
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Accumulator",
    "Iteratee",
    "MISSING",
    "Missing",
    "Predicate",
    "Reducer",
    "Source",
]


class Missing(Enum):
    """Marker for an omitted optional argument."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing.MISSING

Source = tp.Any
Iteratee = tp.Callable[..., tp.Any]
Predicate = tp.Callable[..., tp.Any]
Reducer = tp.Callable[..., tp.Any]


@dataclass(frozen=True, slots=True)
class Accumulator:
    """Running value of a fold."""

    value: tp.Any

    @classmethod
    def seed(cls, memo: tp.Any) -> tp.Optional["Accumulator"]:
        """Wrap an explicit seed, or return ``None`` when none was supplied."""
        if memo is MISSING:
            return None
        return cls(memo)
