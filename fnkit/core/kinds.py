"""
Value kinds and type predicates.

Every value fnkit inspects falls into exactly one ``ValueKind``. The
equivalence engine dispatches on ``kind_of``; the operator wrappers use the
coarser ``type_name`` families to decide what can be ordered or added.
"""

from __future__ import annotations

import datetime as _dt
import inspect
import numbers
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Closed set of value kinds understood by ``equivalent``."""

    PRIMITIVE = "primitive"
    BYTES = "bytes"
    DATETIME = "datetime"
    PATTERN = "pattern"
    SEQUENCE = "sequence"
    RECORD = "record"
    OPAQUE = "opaque"


# Kinds whose comparison goes through field enumeration or a dedicated rule
# rather than plain ``==``.
COMPOSITE_KINDS = frozenset(
    {
        ValueKind.BYTES,
        ValueKind.DATETIME,
        ValueKind.PATTERN,
        ValueKind.SEQUENCE,
        ValueKind.RECORD,
        ValueKind.OPAQUE,
    }
)

# Compared by value with ``==``. Sets only hold hashable members, so their
# own equality is already structural.
_PRIMITIVE_TYPES = (
    type(None),
    bool,
    numbers.Number,
    str,
    _dt.time,
    _dt.timedelta,
    set,
    frozenset,
)

_BYTES_TYPES = (bytes, bytearray, memoryview)


def kind_of(value: Any) -> ValueKind:
    """Classify ``value`` into its ``ValueKind``."""
    if isinstance(value, _BYTES_TYPES):
        return ValueKind.BYTES
    # datetime.datetime is a subclass of datetime.date
    if isinstance(value, _dt.date):
        return ValueKind.DATETIME
    if isinstance(value, re.Pattern):
        return ValueKind.PATTERN
    if isinstance(value, _PRIMITIVE_TYPES):
        return ValueKind.PRIMITIVE
    # Functions and classes have no meaningful fields; identity/== decides.
    if inspect.isroutine(value) or isinstance(value, type):
        return ValueKind.PRIMITIVE
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    return ValueKind.OPAQUE


# =============================================================================
# Type predicates
# =============================================================================


def is_list(x: Any) -> bool:
    """True for ordered sequences (``list`` or ``tuple``)."""
    return isinstance(x, (list, tuple))


def is_arguments(x: Any) -> bool:
    """True for packed positional arguments, i.e. a ``tuple``."""
    return isinstance(x, tuple)


def is_record(x: Any) -> bool:
    """True for mappings of named fields."""
    return isinstance(x, Mapping)


def is_function(x: Any) -> bool:
    return callable(x) and not is_record(x)


def is_string(x: Any) -> bool:
    return isinstance(x, str)


def is_number(x: Any) -> bool:
    """True for numbers, excluding ``bool``."""
    # Check bool before Number (bool is subclass of int in Python)
    return isinstance(x, numbers.Number) and not isinstance(x, bool)


def is_boolean(x: Any) -> bool:
    return isinstance(x, bool)


def is_null(x: Any) -> bool:
    return x is None


def is_nan(x: Any) -> bool:
    """True only for NaN numbers; ``None`` and non-numbers are not NaN."""
    # NaN is the only value for which == is not reflexive
    return is_number(x) and x != x


def is_bytes(x: Any) -> bool:
    return isinstance(x, _BYTES_TYPES)


def is_datetime(x: Any) -> bool:
    return isinstance(x, _dt.date)


def is_pattern(x: Any) -> bool:
    return isinstance(x, re.Pattern)


def type_name(x: Any) -> str:
    """
    Return the fnkit type name for a value.

    Returns one of: "null", "boolean", "number", "string", "bytes", "list",
    "dict", "datetime", "pattern", "function", or "object".
    """
    if is_null(x):
        return "null"
    if is_boolean(x):
        return "boolean"
    if is_number(x):
        return "number"
    if is_string(x):
        return "string"
    if is_bytes(x):
        return "bytes"
    if is_list(x):
        return "list"
    if is_record(x):
        return "dict"
    if is_datetime(x):
        return "datetime"
    if is_pattern(x):
        return "pattern"
    if is_function(x):
        return "function"
    return "object"
