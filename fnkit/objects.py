"""
Record helpers.

A record is any mapping; lists are accepted wherever an index works as a
key. Path helpers take a single key or a list of keys, and ``set_`` returns
a new structure instead of modifying its input.
"""

from __future__ import annotations

import copy
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from fnkit.core.curry import curry
from fnkit.core.kinds import is_boolean, is_list, is_record, type_name
from fnkit.lists import head, tail


def _as_path(path: Any) -> list:
    return list(path) if isinstance(path, list) else [path]


@curry
def has(obj: Any, key: Any) -> bool:
    """True if ``obj`` directly holds ``key`` (a mapping key, list index or attribute)."""
    if is_record(obj):
        return key in obj
    if is_list(obj):
        return isinstance(key, int) and not is_boolean(key) and 0 <= key < len(obj)
    return isinstance(key, str) and key in getattr(obj, "__dict__", {})


def _lookup(obj: Any, key: Any) -> Any:
    if is_record(obj) or is_list(obj):
        return obj[key]
    return getattr(obj, key)


def keys(obj: Any) -> list:
    """Field names of a record, indices of a list, or attributes of an object."""
    if is_record(obj):
        return list(obj.keys())
    if is_list(obj):
        return list(range(len(obj)))
    return list(vars(obj))


def values(obj: Any) -> list:
    return [_lookup(obj, k) for k in keys(obj)]


def pairs(obj: Any) -> list:
    return [[k, _lookup(obj, k)] for k in keys(obj)]


@curry
def get(obj: Any, path: Any) -> Any:
    """
    Follow ``path`` into ``obj``; a missing key anywhere yields ``None``.

        get({"a": {"b": 1}}, ["a", "b"]) == 1
        get({"a": 1}, "z") is None
    """
    path = _as_path(path)
    if not path:
        return obj
    p = head(path)
    if has(obj, p):
        return get(_lookup(obj, p), tail(path))
    return None


@curry
def set_(obj: Any, path: Any, val: Any) -> Any:
    """
    Return a copy of ``obj`` with ``val`` stored at ``path``.

    Only the records along the path are copied; anything at an intermediate
    step that is not a record is replaced by a new dict. Setting a list
    index at or past the end grows the list, filling the gap with ``None``.

        set_({"a": {"b": 1}}, ["a", "c"], 2) == {"a": {"b": 1, "c": 2}}
        set_([1], 2, "x") == [1, None, "x"]
    """
    path = _as_path(path)
    if not path:
        return val
    if not (is_record(obj) or is_list(obj)):
        raise TypeError(f"set_ expects a dict or list, got {type_name(obj)}")

    new = shallow_clone(obj)
    p, ps = head(path), tail(path)
    if is_list(obj):
        if not isinstance(p, int) or is_boolean(p):
            raise TypeError(f"set_ expects an integer list index, got {type_name(p)}")
        if p >= len(new):
            new.extend([None] * (p + 1 - len(new)))
    current = _lookup(obj, p) if has(obj, p) else None
    new[p] = set_(current if is_record(current) else {}, ps, val)
    return new


# =============================================================================
# Cloning and freezing
# =============================================================================


def shallow_clone(obj: Any) -> Any:
    """New list for sequences, new dict for mappings, ``copy.copy`` otherwise."""
    if is_list(obj):
        return list(obj)
    if is_record(obj):
        return dict(obj)
    return copy.copy(obj)


def deep_clone(obj: Any) -> Any:
    """Copy lists and mappings recursively; other values are shared."""
    if is_list(obj):
        return [deep_clone(x) for x in obj]
    if is_record(obj):
        return {k: deep_clone(v) for k, v in obj.items()}
    return obj


def json_clone(obj: Any) -> Any:
    """Copy via a JSON round-trip (tuples become lists, keys become strings)."""
    return json.loads(json.dumps(obj))


def freeze(obj: Any) -> Any:
    """
    Return a read-only snapshot of ``obj``.

    Mappings become ``MappingProxyType`` views over a copy, lists become
    tuples, and anything else is returned as is.
    """
    if isinstance(obj, Mapping):
        return MappingProxyType(dict(obj))
    if isinstance(obj, list):
        return tuple(obj)
    return obj


def deep_freeze(obj: Any) -> Any:
    """``freeze`` applied at every level of nested lists, mappings and sets."""
    if isinstance(obj, Mapping):
        return MappingProxyType({k: deep_freeze(v) for k, v in obj.items()})
    if isinstance(obj, (list, tuple)):
        return tuple(deep_freeze(x) for x in obj)
    if isinstance(obj, set):
        return frozenset(obj)
    return obj
