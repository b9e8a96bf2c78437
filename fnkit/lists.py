"""
List and string combinators.

Lists are plain Python lists (tuples are accepted on input). Most helpers
also accept a ``str`` and treat it as a sequence of characters, the way the
accessors ``head``/``tail`` and the folds do. Multi-argument helpers are
curried: ``foldl(add, 0)`` is a summing function.
"""

from __future__ import annotations

import functools
from typing import Any, Callable

from fnkit.core.curry import curry
from fnkit.core.kinds import is_list, is_string, type_name
from fnkit.errors import EmptyError
from fnkit.functions import flip
from fnkit.operators import and_, eq, max_, min_, not_, or_


# =============================================================================
# Construction
# =============================================================================


def _require_string_item(x: Any, xs: str) -> None:
    if not is_string(x):
        raise TypeError(
            "When second argument is string, first argument should also be "
            f"string, got: {type_name(x)}, {type_name(xs)}"
        )


@curry
def cons(x: Any, xs: Any) -> Any:
    """
    Prepend ``x`` to ``xs``, returning a new list (or str).

        cons(0, [1, 2, 3]) == [0, 1, 2, 3]
    """
    if is_string(xs):
        _require_string_item(x, xs)
        return x + xs
    return [x, *xs]


@curry
def append(x: Any, xs: Any) -> Any:
    """
    Append ``x`` to ``xs``, returning a new list (or str).

        append(4, [1, 2, 3]) == [1, 2, 3, 4]
    """
    if is_string(xs):
        _require_string_item(x, xs)
        return xs + x
    return [*xs, x]


@curry
def concat(a: Any, b: Any) -> Any:
    """Join two lists or two strings."""
    if is_list(a) and is_list(b):
        return [*a, *b]
    if is_string(a) and is_string(b):
        return a + b
    raise TypeError(f'Cannot concat types "{type_name(a)}" and "{type_name(b)}"')


@curry
def replicate(n: int, x: Any) -> list:
    return [x] * n


def range_(a: Any, b: Any) -> list:
    """Numbers from ``a`` up to and including ``b`` in steps of one."""
    xs = []
    i = a
    while i <= b:
        xs.append(i)
        i += 1
    return xs


# =============================================================================
# Basic accessors
# =============================================================================


def empty(xs: Any) -> bool:
    return len(xs) == 0


def length(xs: Any) -> int:
    return len(xs)


def head(xs: Any) -> Any:
    """First element of a non-empty list or str."""
    if empty(xs):
        raise EmptyError("head of empty list")
    return xs[0]


def last(xs: Any) -> Any:
    """Last element of a non-empty list or str."""
    if empty(xs):
        raise EmptyError("last of empty list")
    return xs[-1]


def tail(xs: Any) -> Any:
    """Everything but the first element of a non-empty list or str."""
    if empty(xs):
        raise EmptyError("tail of empty list")
    return xs[1:]


def init(xs: Any) -> Any:
    """Everything but the last element of a non-empty list or str."""
    if empty(xs):
        raise EmptyError("init of empty list")
    return xs[:-1]


# =============================================================================
# Folds
# =============================================================================


@curry
def foldl(f: Callable[[Any, Any], Any], z: Any, xs: Any) -> Any:
    """
    Reduce ``xs`` from the left, starting from ``z``.

    ``f`` is called as ``f(acc, x)``.

        foldl(add, 1, [2, 3, 4]) == 10
    """
    return functools.reduce(f, xs, z)


@curry
def foldl1(f: Callable[[Any, Any], Any], xs: Any) -> Any:
    """``foldl`` seeded with the first element. Raises EmptyError on []."""
    return foldl(f, head(xs), tail(xs))


@curry
def foldr(f: Callable[[Any, Any], Any], z: Any, xs: Any) -> Any:
    """
    Reduce ``xs`` from the right, starting from ``z``.

    ``f`` is called as ``f(x, acc)``.

        foldr(add, 4, [1, 2, 3]) == 10
    """
    for x in reversed(xs):
        z = f(x, z)
    return z


@curry
def foldr1(f: Callable[[Any, Any], Any], xs: Any) -> Any:
    """``foldr`` seeded with the last element. Raises EmptyError on []."""
    return foldr(f, last(xs), init(xs))


# =============================================================================
# Transformations and special folds
# =============================================================================


@curry
def map_(f: Callable[[Any], Any], xs: Any) -> list:
    return [f(x) for x in xs]


@curry
def filter_(p: Callable[[Any], bool], xs: Any) -> list:
    return [x for x in xs if p(x)]


def reverse(xs: Any) -> list:
    return foldl(flip(cons), [], xs)


@curry
def concat_map(f: Callable[[Any], Any], xs: Any) -> Any:
    """Map ``f`` over ``xs`` and concatenate the results."""
    return foldl1(concat, map_(f, xs))


@curry
def all_(p: Callable[[Any], bool], xs: Any) -> bool:
    """True if ``p`` holds for every element. ``p`` must return booleans."""
    return foldl(and_, True, map_(p, xs))


@curry
def any_(p: Callable[[Any], bool], xs: Any) -> bool:
    """True if ``p`` holds for some element. ``p`` must return booleans."""
    return foldl(or_, False, map_(p, xs))


def maximum(xs: Any) -> Any:
    return foldl1(max_, xs)


def minimum(xs: Any) -> Any:
    return foldl1(min_, xs)


# =============================================================================
# Sublists
# =============================================================================


@curry
def take(i: int, xs: Any) -> Any:
    return xs[:i]


@curry
def drop(i: int, xs: Any) -> Any:
    return xs[i:]


@curry
def split_at(n: int, xs: Any) -> list:
    return [take(n, xs), drop(n, xs)]


def _prefix_length(p: Callable[[Any], bool], xs: Any) -> int:
    i = 0
    while i < len(xs) and p(xs[i]):
        i += 1
    return i


@curry
def take_while(p: Callable[[Any], bool], xs: Any) -> Any:
    return take(_prefix_length(p, xs), xs)


@curry
def drop_while(p: Callable[[Any], bool], xs: Any) -> Any:
    return drop(_prefix_length(p, xs), xs)


@curry
def span(p: Callable[[Any], bool], xs: Any) -> list:
    """``[take_while(p, xs), drop_while(p, xs)]`` in a single pass."""
    return split_at(_prefix_length(p, xs), xs)


# =============================================================================
# Searching, zipping, sets
# =============================================================================


@curry
def elem(x: Any, xs: Any) -> bool:
    """Membership by strict ``eq``."""
    return any_(eq(x), xs)


@curry
def not_elem(x: Any, xs: Any) -> bool:
    return not_(elem(x, xs))


@curry
def zip_with(f: Callable[[Any, Any], Any], xs: Any, ys: Any) -> list:
    """Combine pairwise with ``f``; stops at the shorter input."""
    return [f(x, y) for x, y in zip(xs, ys)]


@curry
def zip_(xs: Any, ys: Any) -> list:
    return zip_with(lambda x, y: [x, y], xs, ys)


def nub(xs: Any) -> list:
    """Drop repeated elements (by ``eq``), keeping first occurrences."""
    return foldl(lambda ys, x: ys if elem(x, ys) else append(x, ys), [], xs)


def sort(xs: Any) -> list:
    """Return a new sorted list; ``xs`` is left untouched."""
    return sorted(xs)


# =============================================================================
# Strings
# =============================================================================


@curry
def join(sep: str, xs: Any) -> str:
    """
    Join the string forms of ``xs`` with ``sep``; ``None`` becomes "".

        join("-", [1, 2, 3]) == "1-2-3"
    """
    return sep.join("" if x is None else str(x) for x in xs)
