"""
Lift — Helpers for lifting plain functions and values into promises.
"""

from __future__ import annotations

import functools
from collections.abc import Callable

from kungfu import Result

from redeem.promise import Promise, pure, failed


# ═══════════════════════════════════════════════════════════════════════════════
# lift() — (a -> b) -> (a -> m b)
# ═══════════════════════════════════════════════════════════════════════════════

def lift[V, R](function: Callable[[V], R]) -> Callable[[V], Promise[R]]:
    """
    Turn a plain function into one usable with bind().

    The adapter returns pure(function(v)), or a failed promise if
    function raises. Side-effecting functions lift to Promise[None].

    Example:
        submit(lambda: 21).bind(lift(lambda x: x * 2)).get()  # 42
    """
    @functools.wraps(function)
    def lifted_fn(value: V) -> Promise[R]:
        return catching(function, value)
    return lifted_fn


lifted = lift
"""Decorator spelling of lift()."""


def fmap[V, R](function: Callable[[V], R]) -> Callable[[Promise[V]], Promise[R]]:
    """
    Lift a function to work on promises (liftM :: (a -> b) -> (m a -> m b)).

    Example:
        double_p = fmap(lambda x: x * 2)
        double_p(pure(4)).get()  # 8
    """
    def apply(promise: Promise[V]) -> Promise[R]:
        return promise.map(function)
    return apply


# ═══════════════════════════════════════════════════════════════════════════════
# Settled-promise helpers
# ═══════════════════════════════════════════════════════════════════════════════

def from_result[T](result: Result[T, BaseException]) -> Promise[T]:
    """Lift a kungfu Result into an already-settled promise."""
    p = Promise[T]()
    p.complete(result)
    return p


def catching[R](function: Callable[..., R], *args: object) -> Promise[R]:
    """
    Call function now and capture its return value or exception.

    Example:
        catching(int, "nope").exception()  # ValueError(...)
    """
    try:
        value = function(*args)
    except Exception as e:
        return failed(e)
    return pure(value)


__all__ = (
    "lift",
    "lifted",
    "fmap",
    "from_result",
    "catching",
)
