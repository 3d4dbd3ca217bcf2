from collections import ChainMap, OrderedDict
from types import MappingProxyType, SimpleNamespace

import pytest
from objectiter.core.keys import own_items, own_keys, size


def test_dict_keys_follow_insertion_order():
    source = {"b": 1, "a": 2}
    source["c"] = 3
    assert own_keys(source) == ["b", "a", "c"]


def test_other_mappings_are_supported():
    assert own_keys(OrderedDict([("x", 1), ("y", 2)])) == ["x", "y"]
    assert list(own_items(MappingProxyType({"k": "v"}))) == [("k", "v")]


def test_chain_map_parents_are_inherited(chained):
    assert own_keys(chained) == ["own", "also_own"]
    assert dict(own_items(chained)) == {"own": 1, "also_own": 2}
    assert size(chained) == 2


def test_chain_map_child_hides_parent_value():
    parent = {"shared": "parent"}
    child = ChainMap({"shared": "child"}, parent)
    assert list(own_items(child)) == [("shared", "child")]
    assert list(own_items(child.parents)) == [("shared", "parent")]


def test_instance_attributes_are_own(record):
    assert own_keys(record) == ["x", "y"]
    assert "kind" not in own_keys(record)
    assert size(SimpleNamespace()) == 0


def test_none_is_not_enumerable():
    with pytest.raises(TypeError):
        own_keys(None)
    with pytest.raises(TypeError):
        list(own_items(None))


def test_plain_values_are_not_enumerable():
    with pytest.raises(TypeError, match="Cannot enumerate own keys"):
        size(42)


def test_own_items_reads_values_at_visit_time():
    source = {"a": 1, "b": 2}
    items = own_items(source)
    assert next(items) == ("a", 1)
    source["b"] = 20
    assert next(items) == ("b", 20)
