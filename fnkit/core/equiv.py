"""
Structural equivalence.

``equivalent(a, b)`` is a deeper notion of equality than ``is`` or a single
``==``: lists, tuples, mappings and plain objects are compared field by
field, recursively. Rules are tried in order and the first that applies
decides:

    1. identical objects                        -> True
    2. two byte strings                         -> same bytes
    3. two dates / datetimes                    -> same instant
    4. two compiled patterns                    -> same source and flags
    5. two non-composite values                 -> a == b
    6. anything else                            -> same type, same field
                                                   names, equivalent fields

Tuples are read as lists before rule 6, so ``(1, 2)`` and ``[1, 2]`` are
equivalent. A value whose fields cannot be enumerated is never equivalent to
anything but itself.
"""

from __future__ import annotations

import datetime as _dt
from collections.abc import Mapping
from typing import Any

from fnkit import config
from fnkit.core.kinds import COMPOSITE_KINDS, ValueKind, kind_of
from fnkit.logger import logger


def equivalent(a: Any, b: Any, *, cycle_check: bool | None = None) -> bool:
    """
    Test whether ``a`` and ``b`` are structurally equivalent.

    Args:
        a: Any value.
        b: Any value.
        cycle_check: Track visited pairs so self-referential values
            terminate. Defaults to the FNKIT_EQV_CYCLE_CHECK flag.

    Returns:
        True if the values are equivalent.

        equivalent({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}}) is True
        equivalent([1, 2, 3], [1, 2]) is False

    Note:
        A pair of containers met again while it is still being compared is
        assumed equivalent. With cycle_check=False a self-referential value
        recurses until Python raises RecursionError.
    """
    if cycle_check is None:
        cycle_check = config.FNKIT_EQV_CYCLE_CHECK
    return _equivalent(a, b, frozenset() if cycle_check else None)


def _equivalent(a: Any, b: Any, seen: frozenset | None) -> bool:
    if a is b:
        return True

    ka, kb = kind_of(a), kind_of(b)
    if ka is kb is ValueKind.BYTES:
        return _bytes_equal(a, b)
    if ka is kb is ValueKind.DATETIME:
        return _instants_equal(a, b)
    if ka is kb is ValueKind.PATTERN:
        return a.pattern == b.pattern and a.flags == b.flags
    if ka not in COMPOSITE_KINDS and kb not in COMPOSITE_KINDS:
        return bool(a == b)
    return _fields_equivalent(a, b, seen)


def _bytes_equal(a: Any, b: Any) -> bool:
    ba, bb = bytes(a), bytes(b)
    if len(ba) != len(bb):
        return False
    return ba == bb


def _instants_equal(a: _dt.date, b: _dt.date) -> bool:
    # A bare date is a day, not an instant; it never matches a datetime.
    if isinstance(a, _dt.datetime) != isinstance(b, _dt.datetime):
        return False
    return a == b


def _fields_equivalent(a: Any, b: Any, seen: frozenset | None) -> bool:
    if a is None or b is None:
        return False

    if seen is not None:
        pair = (id(a), id(b))
        if pair in seen:
            logger.debug("equivalent: revisited %s/%s pair, assuming equal",
                         type(a).__name__, type(b).__name__)
            return True
        seen = seen | {pair}

    if isinstance(a, tuple):
        a = list(a)
    if isinstance(b, tuple):
        b = list(b)
    if type(a) is not type(b):
        return False

    try:
        fa = dict(_own_fields(a).items())
        fb = dict(_own_fields(b).items())
    except Exception as exc:
        logger.debug("equivalent: cannot enumerate fields of %s: %s",
                     type(a).__name__, exc)
        return False

    if len(fa) != len(fb):
        return False
    if set(fa) != set(fb):
        return False
    return all(_equivalent(fa[k], fb[k], seen) for k in fa)


def _own_fields(value: Any) -> Mapping:
    """
    Return the named fields of a composite value.

    Lists map index -> item, mappings are their own fields, other objects
    expose ``__dict__`` or their ``__slots__``.

    Raises:
        TypeError: If the value has neither.
    """
    if isinstance(value, list):
        return dict(enumerate(value))
    if isinstance(value, Mapping):
        return value
    if hasattr(value, "__dict__"):
        return vars(value)

    slots = {}
    for cls in type(value).__mro__:
        names = cls.__dict__.get("__slots__", ())
        if isinstance(names, str):
            names = (names,)
        for name in names:
            if name in ("__dict__", "__weakref__") or name in slots:
                continue
            if hasattr(value, name):
                slots[name] = getattr(value, name)
    if not slots and not _declares_slots(type(value)):
        raise TypeError(f"{type(value).__name__} has no enumerable fields")
    return slots


def _declares_slots(cls: type) -> bool:
    return any("__slots__" in c.__dict__ for c in cls.__mro__ if c is not object)
