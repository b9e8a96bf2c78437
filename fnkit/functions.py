"""
Function combinators.

All two- and three-argument helpers here are curried, so ``flip(div)`` or
``compose(f)`` return handles waiting for the rest.
"""

from __future__ import annotations

from typing import Any, Callable

from fnkit.core.curry import curry


@curry
def compose(a: Callable[[Any], Any], b: Callable[..., Any]) -> Callable[..., Any]:
    """
    Return a function that applies ``a`` to the result of ``b``.

        add1mul3 = compose(mul(3), add(1))
        add1mul3(2) == 9
    """
    def composed(*args: Any) -> Any:
        return a(b(*args))

    return composed


@curry
def apply(f: Callable[..., Any], args: Any) -> Any:
    """Call ``f`` with the items of ``args`` as positional arguments."""
    return f(*args)


@curry
def flip(f: Callable[[Any, Any], Any], x: Any, y: Any) -> Any:
    """Call a two-argument ``f`` with its arguments swapped."""
    return f(y, x)


def identity(x: Any) -> Any:
    return x


@curry
def until(p: Callable[[Any], bool], f: Callable[[Any], Any], x: Any) -> Any:
    """Apply ``f`` to ``x`` repeatedly until ``p`` holds for the result."""
    r = x
    while not p(r):
        r = f(r)
    return r


def error(msg: str) -> Any:
    """Raise ``RuntimeError(msg)``; usable in expression position."""
    raise RuntimeError(msg)
