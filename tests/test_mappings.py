"""Tests for mapping introspection."""

from collections import OrderedDict
from types import MappingProxyType

import pytest

from seqkit.mappings import keys, values


def test_keys_and_values_align():
    mapping = {"b": 2, "a": 1, "c": 3}
    assert keys(mapping) == ["b", "a", "c"]
    assert values(mapping) == [2, 1, 3]
    assert dict(zip(keys(mapping), values(mapping), strict=True)) == mapping


def test_empty_mapping():
    assert keys({}) == []
    assert values({}) == []


@pytest.mark.parametrize("mapping", [OrderedDict(x=1, y=2), MappingProxyType({"x": 1, "y": 2})])
def test_other_mapping_types(mapping):
    assert keys(mapping) == ["x", "y"]
    assert values(mapping) == [1, 2]


def test_values_preserve_identity():
    item = object()
    assert values({"k": item})[0] is item


@pytest.mark.parametrize("func", [keys, values])
def test_non_mapping(func):
    with pytest.raises(TypeError, match="mapping must be a mapping"):
        func([("a", 1)])
