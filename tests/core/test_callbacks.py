import functools

import pytest
from objectiter.core.callbacks import accepted_positional, bind_iterator
from objectiter.core.types import MISSING


def test_accepted_positional_counts():
    assert accepted_positional(lambda: None) == 0
    assert accepted_positional(lambda v: v) == 1
    assert accepted_positional(lambda v, k, src=None: v) == 3
    assert accepted_positional(lambda v, *, flag=True: v) == 1


def test_accepted_positional_unbounded():
    assert accepted_positional(lambda *args: args) is None
    assert accepted_positional(lambda v, *rest: v) is None


def test_accepted_positional_bound_method():
    class Box:
        def get(self, value, key):
            return key

    assert accepted_positional(Box().get) == 2
    assert accepted_positional(Box.get) == 3


def test_bind_iterator_truncates_extra_arguments():
    call = bind_iterator(lambda v: v * 2)
    assert call(4, "key", {"key": 4}) == 8


def test_bind_iterator_passes_everything_to_varargs():
    call = bind_iterator(lambda *args: args)
    assert call(1, "a", {}) == (1, "a", {})


def test_bind_iterator_prepends_context():
    call = bind_iterator(lambda ctx, v, k: (ctx, v, k), "ctx")
    assert call(1, "a", {"a": 1}) == ("ctx", 1, "a")


def test_bind_iterator_none_is_a_real_context():
    call = bind_iterator(lambda ctx, v: (ctx, v), None)
    assert call(1, "a", {}) == (None, 1)


def test_bind_iterator_without_context():
    call = bind_iterator(lambda v, k: (v, k), MISSING)
    assert call(1, "a", {}) == (1, "a")


def test_bind_iterator_partial():
    def scaled(factor, value):
        return factor * value

    call = bind_iterator(functools.partial(scaled, 3))
    assert call(2, "k", {}) == 6


def test_bind_iterator_leaves_non_callables_alone():
    assert bind_iterator(42) == 42
    with pytest.raises(TypeError):
        bind_iterator(None)(1, "a", {})


@pytest.mark.parametrize("converter", [bool, int, str, float, list])
def test_builtin_types_take_one_argument(converter):
    assert accepted_positional(converter) == 1


def test_bind_iterator_builtin_type_gets_value_only():
    assert bind_iterator(str)(5, "k", {"k": 5}) == "5"
    assert bind_iterator(bool)(0, "k", {"k": 0}) is False


def test_bind_iterator_context_fills_single_parameter():
    assert bind_iterator(lambda first: first, "ctx")(1, "a", {}) == "ctx"
