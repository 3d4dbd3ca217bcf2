"""Own-key enumeration.

A key is *own* when it is stored directly on the source rather than reached
through a parent:

    - ``collections.ChainMap``: only the first map is own; ``parents`` play
      the role of an inheritance chain and are never visited.
    - any other ``Mapping``: every key.
    - any other object: its instance attributes (``vars(obj)``); class
      attributes are inherited and skipped.

Keys are snapshotted before traversal so callbacks may mutate the source.
A key deleted before its turn is skipped, a key added mid-traversal is not
visited, and values are read at visit time.
"""

import typing as tp
from collections import ChainMap
from collections.abc import Mapping

from .types import Source

__all__ = ["own_keys", "own_items", "size"]


def _own_namespace(source: Source) -> tp.Mapping[tp.Any, tp.Any]:
    if isinstance(source, ChainMap):
        return source.maps[0] if source.maps else {}
    if isinstance(source, Mapping):
        return source
    try:
        return vars(source)
    except TypeError:
        raise TypeError(
            f"Cannot enumerate own keys of {type(source).__name__!r} object."
        ) from None


def own_keys(source: Source) -> tp.List[tp.Hashable]:
    """Snapshot the own keys of ``source`` in its default key order.

    Raises:
        TypeError: If ``source`` is ``None`` or has no enumerable keys.
    """
    return list(_own_namespace(source))


def own_items(source: Source) -> tp.Iterator[tp.Tuple[tp.Hashable, tp.Any]]:
    """Yield ``(key, value)`` pairs for the own keys of ``source``.

    The key snapshot is taken on the first ``next()`` call.
    """
    namespace = _own_namespace(source)
    for key in list(namespace):
        if key in namespace:
            yield key, namespace[key]


def size(source: Source) -> int:
    """Number of own keys."""
    return len(_own_namespace(source))
