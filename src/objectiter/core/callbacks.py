"""Callback binding for the enumerable operations."""

import inspect
import typing as tp

from .types import MISSING, Iteratee

__all__ = ["accepted_positional", "bind_iterator"]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def accepted_positional(fn: tp.Callable[..., tp.Any]) -> tp.Optional[int]:
    """Count the positional parameters ``fn`` accepts.

    Builtin types (``bool``, ``int``, ``str``, ...) count as one-argument
    converters, since most carry no inspectable signature and the rest
    expose optional parameters such as ``str``'s ``encoding``.

    Returns:
        The count, or ``None`` when ``fn`` takes ``*args`` or its signature
        cannot be inspected.
    """
    if isinstance(fn, type) and fn.__module__ == "builtins":
        return 1

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return None

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def bind_iterator(
    iterator: Iteratee, context: tp.Any = MISSING
) -> tp.Callable[..., tp.Any]:
    """Adapt ``iterator`` to be called with an operation's full argument list.

    When ``context`` is supplied it is passed as the first positional
    argument, the way an unbound method receives ``self``. Arguments the
    callback has no room for are dropped from the right.

    Non-callables are returned as-is so that invoking them raises Python's
    own ``TypeError``.
    """
    if not callable(iterator):
        return iterator

    limit = accepted_positional(iterator)
    bound = context is not MISSING

    def call(*args: tp.Any) -> tp.Any:
        if bound:
            args = (context,) + args
        if limit is not None:
            args = args[:limit]
        return iterator(*args)

    return call
