"""Higher-order iteration over the own keys of keyed objects.

Every operation walks the own keys of ``source`` (see
:mod:`objectiter.core.keys`) in their default order and hands each value to a
caller-supplied callback. Callbacks are invoked as ``(value, key, source)``,
or ``(memo, value, key, source)`` for the folds, and may declare fewer
parameters than that: surplus arguments are dropped from the right. Builtin
types such as ``bool``, ``int`` and ``str`` receive the value alone, so
``filter(source, bool)`` and ``map(source, str)`` work as expected.

Passing ``context`` binds it as the callback's first argument, ahead of the
value. A callback that takes a single parameter then sees only the context,
never the value. This lets an unbound method be used directly::

    >>> from objectiter.functional.enumerable import filter
    >>> class Threshold:
    ...     def __init__(self, limit):
    ...         self.limit = limit
    ...     def above(self, value):
    ...         return value > self.limit
    >>> filter({"a": 1, "b": 5}, Threshold.above, Threshold(2))
    [5]

Tolerance of a ``None`` source differs per operation. ``find``, ``filter``,
``reject``, ``every`` and ``some`` treat it as empty; ``each``, ``map``,
``reduce`` and ``reduce_right`` raise ``TypeError``.

Examples:
    >>> from objectiter.functional.enumerable import map, reduce
    >>> map({"a": 1, "b": 2}, lambda v, k: f"{k}={v}")
    ['a=1', 'b=2']
    >>> reduce({"a": 1, "b": 2, "c": 3}, lambda memo, v: memo + v)
    6
"""

import typing as tp

from objectiter.core.callbacks import bind_iterator
from objectiter.core.keys import own_items
from objectiter.core.types import (
    MISSING,
    Accumulator,
    Iteratee,
    Predicate,
    Reducer,
    Source,
)
from objectiter.logger.logger import logger

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


def each(source: Source, iterator: Iteratee, context: tp.Any = MISSING) -> Source:
    """Call ``iterator`` once per own key of ``source``.

    Args:
        source: Mapping or object to walk.
        iterator: Callback invoked as ``(value, key, source)``.
        context: Optional value passed as the first argument of every call,
            ahead of ``value``. A one-parameter callback receives only it.

    Returns:
        ``source`` itself, for chaining.

    Raises:
        TypeError: If ``source`` is ``None`` or not enumerable.
    """
    call = bind_iterator(iterator, context)
    for key, value in own_items(source):
        call(value, key, source)
    return source


def map(
    source: Source, iterator: Iteratee, context: tp.Any = MISSING
) -> tp.List[tp.Any]:
    """Collect ``iterator(value, key, source)`` for every own key, in order.

    Args:
        source: Mapping or object to walk.
        iterator: Callback invoked as ``(value, key, source)``.
        context: Optional value passed as the first argument of every call,
            ahead of ``value``. A one-parameter callback receives only it.

    Returns:
        A new list with one result per own key.

    Raises:
        TypeError: If ``source`` is ``None`` or not enumerable.
    """
    call = bind_iterator(iterator, context)
    return [call(value, key, source) for key, value in own_items(source)]


def reduce(
    source: Source,
    iterator: Reducer,
    memo: tp.Any = MISSING,
    context: tp.Any = MISSING,
) -> tp.Any:
    """Fold the own values of ``source`` from left to right.

    Without ``memo`` the first value seeds the fold and the reducer is not
    called for it, so a three-key source costs two calls.

    Args:
        source: Mapping or object to fold.
        iterator: Reducer invoked as ``(memo, value, key, source)``.
        memo: Initial accumulator. Any value, including ``None`` or ``0``.
        context: Optional first argument bound to every call.

    Returns:
        The final accumulator.

    Raises:
        TypeError: If ``source`` is ``None``, or has no own keys and no
            ``memo`` was given.
    """
    call = bind_iterator(iterator, context)
    acc = Accumulator.seed(memo)

    for key, value in own_items(source):
        if acc is None:
            acc = Accumulator(value)
        else:
            acc = Accumulator(call(acc.value, value, key, source))

    if acc is None:
        logger.debug("reduce called on an empty source without an initial value")
        raise TypeError("Reduce of empty object with no initial value")
    return acc.value


def reduce_right(
    source: Source,
    iterator: Reducer,
    memo: tp.Any = MISSING,
    context: tp.Any = MISSING,
) -> tp.Any:
    """Fold the own values of ``source`` from right to left.

    Unlike :func:`reduce`, an empty source with no ``memo`` is not an
    error: the result is then ``None``.

    Raises:
        TypeError: If ``source`` is ``None`` or not enumerable.
    """
    call = bind_iterator(iterator, context)
    pairs = list(own_items(source))

    if not pairs:
        return None if memo is MISSING else memo

    acc = Accumulator.seed(memo)
    if acc is None:
        _, value = pairs.pop()
        acc = Accumulator(value)

    for key, value in reversed(pairs):
        acc = Accumulator(call(acc.value, value, key, source))
    return acc.value


def find(
    source: Source, iterator: Predicate, context: tp.Any = MISSING
) -> tp.Optional[tp.Any]:
    """Return the first own value for which ``iterator`` is truthy.

    Returns:
        The matching value, or ``None`` when nothing matches or ``source``
        is ``None``.
    """
    if source is None:
        logger.debug("find called with None source")
        return None

    call = bind_iterator(iterator, context)
    for key, value in own_items(source):
        if call(value, key, source):
            return value
    return None


def filter(
    source: Source, iterator: Predicate, context: tp.Any = MISSING
) -> tp.List[tp.Any]:
    """Collect the own values for which ``iterator`` is truthy, in order."""
    if source is None:
        logger.debug("filter called with None source")
        return []

    call = bind_iterator(iterator, context)
    return [value for key, value in own_items(source) if call(value, key, source)]


def reject(
    source: Source, iterator: Predicate, context: tp.Any = MISSING
) -> tp.List[tp.Any]:
    """Collect the own values for which ``iterator`` is falsy, in order."""
    if source is None:
        logger.debug("reject called with None source")
        return []

    call = bind_iterator(iterator, context)
    return [
        value for key, value in own_items(source) if not call(value, key, source)
    ]


def every(source: Source, iterator: Predicate, context: tp.Any = MISSING) -> bool:
    """Check that ``iterator`` is truthy for all own values.

    Stops at the first failure. Vacuously ``True`` for an empty or ``None``
    source.
    """
    if source is None:
        logger.debug("every called with None source")
        return True

    call = bind_iterator(iterator, context)
    for key, value in own_items(source):
        if not call(value, key, source):
            return False
    return True


def some(source: Source, iterator: Predicate, context: tp.Any = MISSING) -> bool:
    """Check that ``iterator`` is truthy for at least one own value.

    Stops at the first match. ``False`` for an empty or ``None`` source.
    """
    if source is None:
        logger.debug("some called with None source")
        return False

    call = bind_iterator(iterator, context)
    for key, value in own_items(source):
        if call(value, key, source):
            return True
    return False
