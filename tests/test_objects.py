"""
Tests for record helpers: path get/set, cloning and freezing.
"""

from types import MappingProxyType

import pytest

from fnkit import (
    has, get, set_, keys, values, pairs,
    shallow_clone, deep_clone, json_clone, freeze, deep_freeze, equivalent,
)


class Config:
    def __init__(self):
        self.debug = True


class TestAccess:

    def test_has(self):
        assert has({"a": 1}, "a") is True
        assert has({"a": 1}, "b") is False
        assert has([10, 20], 1) is True
        assert has([10, 20], 2) is False
        assert has(Config(), "debug") is True

    def test_keys_values_pairs(self):
        obj = {"a": 1, "b": 2}
        assert keys(obj) == ["a", "b"]
        assert values(obj) == [1, 2]
        assert pairs(obj) == [["a", 1], ["b", 2]]

    def test_keys_of_list_and_object(self):
        assert keys(["x", "y"]) == [0, 1]
        assert keys(Config()) == ["debug"]
        assert values(Config()) == [True]


class TestGet:

    def test_single_key(self):
        assert get({"a": 1}, "a") == 1

    def test_path(self):
        assert get({"a": {"b": {"c": 3}}}, ["a", "b", "c"]) == 3

    def test_list_index_in_path(self):
        assert get({"a": [{"b": 1}, {"b": 2}]}, ["a", 1, "b"]) == 2

    def test_missing(self):
        assert get({"a": 1}, "z") is None
        assert get({"a": {"b": 1}}, ["a", "x", "y"]) is None

    def test_empty_path(self):
        obj = {"a": 1}
        assert get(obj, []) is obj

    def test_curried(self):
        lookup = get({"a": 1, "b": 2})
        assert lookup("b") == 2


class TestSet:

    def test_set_top_level(self):
        assert set_({"a": 1}, "b", 2) == {"a": 1, "b": 2}

    def test_set_nested(self):
        assert set_({"a": {"b": 1}}, ["a", "c"], 2) == {"a": {"b": 1, "c": 2}}

    def test_creates_missing_records(self):
        assert set_({}, ["a", "b", "c"], 1) == {"a": {"b": {"c": 1}}}

    def test_replaces_non_record_intermediate(self):
        assert set_({"a": 5}, ["a", "b"], 1) == {"a": {"b": 1}}

    def test_does_not_mutate(self):
        original = {"a": {"b": 1}, "z": [1]}
        updated = set_(original, ["a", "b"], 2)
        assert original == {"a": {"b": 1}, "z": [1]}
        assert updated["a"]["b"] == 2
        assert updated["z"] is original["z"]

    def test_list_index(self):
        assert set_([1, 2, 3], 1, 9) == [1, 9, 3]

    def test_list_index_past_end_grows(self):
        assert set_([1], [1], "x") == [1, "x"]
        assert set_([1], 3, "x") == [1, None, None, "x"]

    def test_list_grows_without_mutating(self):
        original = [1]
        set_(original, 2, "x")
        assert original == [1]

    def test_list_rejects_non_integer_index(self):
        with pytest.raises(TypeError, match="integer list index, got string"):
            set_([1, 2], "a", 0)

    def test_empty_path_returns_value(self):
        assert set_({"a": 1}, [], "v") == "v"

    def test_rejects_scalars(self):
        with pytest.raises(TypeError, match="got number"):
            set_(5, "a", 1)


class TestClone:

    def test_shallow_clone(self):
        inner = [1]
        obj = {"a": inner}
        c = shallow_clone(obj)
        assert c == obj and c is not obj
        assert c["a"] is inner

    def test_shallow_clone_list(self):
        xs = (1, 2)
        assert shallow_clone(xs) == [1, 2]

    def test_deep_clone(self):
        obj = {"a": [1, {"b": 2}]}
        c = deep_clone(obj)
        assert equivalent(c, obj)
        assert c["a"] is not obj["a"]
        assert c["a"][1] is not obj["a"][1]

    def test_json_clone(self):
        assert json_clone({"a": (1, 2), 1: "x"}) == {"a": [1, 2], "1": "x"}


class TestFreeze:

    def test_freeze_dict(self):
        frozen = freeze({"a": 1})
        assert isinstance(frozen, MappingProxyType)
        with pytest.raises(TypeError):
            frozen["a"] = 2

    def test_freeze_is_snapshot(self):
        src = {"a": 1}
        frozen = freeze(src)
        src["a"] = 2
        assert frozen["a"] == 1

    def test_freeze_list(self):
        assert freeze([1, 2]) == (1, 2)

    def test_deep_freeze(self):
        frozen = deep_freeze({"a": [1, {"b": {2}}]})
        assert isinstance(frozen["a"], tuple)
        assert isinstance(frozen["a"][1], MappingProxyType)
        assert frozen["a"][1]["b"] == frozenset({2})
        with pytest.raises(TypeError):
            frozen["a"][1]["b"] = 3
