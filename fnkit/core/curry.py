"""
Arity-aware currying.

A ``Curried`` handle wraps a target callable, the number of positional
arguments it waits for, and the arguments collected so far. Calling a
handle never changes it: it either returns a new handle holding the longer
argument tuple, or, once enough arguments are present, calls the target
with exactly the first ``arity`` of them and returns the result.

    add3 = curry(lambda a, b, c: a + b + c)

    add3(1)(2)(3) == add3(1, 2, 3) == add3(1, 2)(3) == 6
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable

from fnkit.logger import logger


_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True, repr=False)
class Curried:
    """
    Immutable partial application of ``target``.

    Attributes:
        target: The callable invoked once ``arity`` arguments are collected.
        arity: Number of positional arguments ``target`` is called with.
        args: Arguments collected so far, in call order.
    """

    target: Callable[..., Any]
    arity: int
    args: tuple = ()

    def __post_init__(self) -> None:
        if not callable(self.target):
            raise TypeError(
                f"curry target must be callable, got {type(self.target).__name__}"
            )
        if isinstance(self.arity, bool) or not isinstance(self.arity, int):
            raise TypeError(
                f"arity must be an int, got {type(self.arity).__name__}"
            )
        if self.arity < 0:
            raise ValueError(f"arity must be >= 0, got {self.arity}")

    @property
    def remaining(self) -> int:
        """Number of arguments still needed before ``target`` runs."""
        return max(self.arity - len(self.args), 0)

    def apply(self, *more: Any) -> Any:
        """
        Supply more arguments.

        Returns:
            The target's result if ``arity`` arguments are now available
            (extras are dropped), otherwise a new ``Curried`` handle.
        """
        args = self.args + more
        if len(args) >= self.arity:
            logger.debug(
                "curry: calling %s with %d of %d args",
                _callable_name(self.target), self.arity, len(args),
            )
            return self.target(*args[: self.arity])
        return Curried(self.target, self.arity, args)

    __call__ = apply

    def __getattr__(self, name: str) -> Any:
        # Names only; the signature is the handle's own
        if name in ("__name__", "__qualname__"):
            return getattr(self.target, name)
        raise AttributeError(name)

    def __repr__(self) -> str:
        return (
            f"<curried {_callable_name(self.target)} "
            f"{len(self.args)}/{self.arity}>"
        )


def _callable_name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def declared_arity(fn: Callable[..., Any]) -> int:
    """
    Count the positional parameters ``fn`` requires.

    Parameters with defaults, ``*args``, ``**kwargs`` and keyword-only
    parameters are not counted. A ``Curried`` handle reports the number of
    arguments it still needs.

    Raises:
        TypeError: If ``fn`` has no introspectable signature.
    """
    if isinstance(fn, Curried):
        return fn.remaining
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"cannot determine arity of {fn!r}; use curry_n() with an explicit arity"
        ) from exc
    return sum(
        1
        for p in sig.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def curry_n(n: int, fn: Callable[..., Any], *args: Any) -> Any:
    """
    Curry ``fn`` so it runs once ``n`` positional arguments are collected.

    Useful when ``fn`` takes ``*args`` or has optional parameters.

    Args:
        n: Number of arguments to wait for.
        fn: The function to curry.
        *args: Arguments to pre-apply.

    Returns:
        ``fn``'s result if ``args`` already holds ``n`` or more values,
        otherwise a ``Curried`` handle.

        curry_n(3, lambda *xs: ".".join(map(str, xs)))(1)(2)(3) == "1.2.3"
    """
    return Curried(fn, n).apply(*args)


def curry(fn: Callable[..., Any], *args: Any) -> Any:
    """
    Curry ``fn`` using its own count of required positional parameters.

    Works as a decorator. ``curry`` itself is not curried.

    Raises:
        TypeError: If the arity of ``fn`` cannot be determined.
    """
    n = declared_arity(fn)
    logger.debug("curry: %s has arity %d", _callable_name(fn), n)
    return curry_n(n, fn, *args)
