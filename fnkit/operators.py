"""
Typed operator wrappers.

Unlike the bare Python operators these refuse to mix types: booleans are
not numbers, strings are never added to numbers, and ordering is only
defined within one of three families (numbers, strings, lists of those).
Every binary wrapper is curried, so ``add(1)`` is a function that adds one.
"""

from __future__ import annotations

from typing import Any

from fnkit.core.curry import curry
from fnkit.core.equiv import equivalent
from fnkit.core.kinds import is_boolean, is_number, type_name


_ORDERED_SCALARS = ("number", "string")


def _require_numbers(a: Any, b: Any) -> None:
    if not (is_number(a) and is_number(b)):
        raise TypeError(
            f"Expecting two Number arguments, got: {type_name(a)}, {type_name(b)}"
        )


def _require_booleans(a: Any, b: Any) -> None:
    if not (is_boolean(a) and is_boolean(b)):
        raise TypeError(
            f"Expecting two Boolean arguments, got: {type_name(a)}, {type_name(b)}"
        )


def _ordering_type(a: Any, b: Any) -> str:
    ta, tb = type_name(a), type_name(b)
    if ta != tb:
        raise TypeError(f"Cannot compare type {ta} with type {tb}")
    if ta not in _ORDERED_SCALARS and ta != "list":
        raise TypeError(f"Cannot order values of type {ta}")
    return ta


# =============================================================================
# Equality
# =============================================================================


@curry
def eq(a: Any, b: Any) -> bool:
    """
    Strict equality: same fnkit type and ``==``.

    Python's ``==`` already compares lists and dicts by contents, so two
    distinct lists with equal items are ``eq``; there is no reference-only
    comparison here. ``elem``, ``not_elem`` and ``nub`` inherit this.

        eq(1, 1) is True
        eq(1, True) is False
        eq([1, 2], [1, 2]) is True
    """
    return type_name(a) == type_name(b) and bool(a == b)


@curry
def ne(a: Any, b: Any) -> bool:
    return not eq(a, b)


@curry
def eqv(a: Any, b: Any) -> bool:
    """
    Curried ``equivalent``: deep structural equality.

        eqv({"a": 1}, {"a": 1}) is True
        eqv({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 3}}) is False
    """
    return equivalent(a, b)


# =============================================================================
# Boolean logic
# =============================================================================


def not_(a: Any) -> bool:
    """Negate a boolean. Raises TypeError for anything else."""
    if is_boolean(a):
        return not a
    raise TypeError(f"Expected Boolean value, got: {type_name(a)}")


@curry
def and_(a: Any, b: Any) -> bool:
    _require_booleans(a, b)
    return a and b


@curry
def or_(a: Any, b: Any) -> bool:
    _require_booleans(a, b)
    return a or b


# =============================================================================
# Ordering
# =============================================================================


@curry
def lt(a: Any, b: Any) -> bool:
    """
    Test ``a < b`` for two numbers, two strings or two lists.

    Lists compare element by element; the first element pair that is
    ordered decides, an element pair that is neither ordered nor
    equivalent makes the result False, and when one list is a prefix of
    the other the shorter one is smaller.

        lt(2, 4) is True
        lt([1, 2, 3], [1, 2, 4]) is True
        lt(2, "a")  # TypeError

    Raises:
        TypeError: If the operands are of different types, or of a type
            with no ordering.
    """
    if _ordering_type(a, b) in _ORDERED_SCALARS:
        return a < b
    for x, y in zip(a, b):
        if lt(x, y):
            return True
        if not equivalent(x, y):
            return False
    return len(a) < len(b)


@curry
def gt(a: Any, b: Any) -> bool:
    """Test ``a > b``; same rules as ``lt``."""
    if _ordering_type(a, b) in _ORDERED_SCALARS:
        return a > b
    for x, y in zip(a, b):
        if gt(x, y):
            return True
        if not equivalent(x, y):
            return False
    return len(a) > len(b)


@curry
def le(a: Any, b: Any) -> bool:
    return not_(gt(a, b))


@curry
def ge(a: Any, b: Any) -> bool:
    return not_(lt(a, b))


@curry
def max_(x: Any, y: Any) -> Any:
    """The larger of two orderable values (``x`` on ties)."""
    return x if ge(x, y) else y


@curry
def min_(x: Any, y: Any) -> Any:
    """The smaller of two orderable values (``x`` on ties)."""
    return x if le(x, y) else y


@curry
def compare(x: Any, y: Any) -> int:
    """Return -1, 0 or 1 as ``x`` is less than, equivalent to, or greater than ``y``."""
    if lt(x, y):
        return -1
    return 1 if gt(x, y) else 0


# =============================================================================
# Arithmetic
# =============================================================================


@curry
def add(a: Any, b: Any) -> Any:
    """Add two numbers. Does not concatenate; see ``concat``."""
    _require_numbers(a, b)
    return a + b


@curry
def sub(a: Any, b: Any) -> Any:
    _require_numbers(a, b)
    return a - b


@curry
def mul(a: Any, b: Any) -> Any:
    _require_numbers(a, b)
    return a * b


@curry
def div(a: Any, b: Any) -> Any:
    """True division. Division by zero raises ZeroDivisionError."""
    _require_numbers(a, b)
    return a / b


@curry
def rem(a: Any, b: Any) -> Any:
    """
    Truncated remainder: the result takes the sign of ``a``.

        rem(-1, 5) == -1
    """
    _require_numbers(a, b)
    r = abs(a) % abs(b)
    return -r if a < 0 else r


@curry
def mod(a: Any, b: Any) -> Any:
    """
    Floored modulus: the result takes the sign of ``b``.

        mod(-1, 5) == 4
    """
    _require_numbers(a, b)
    return a % b
