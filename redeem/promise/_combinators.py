"""
Promise constructors and flattening.
"""

from __future__ import annotations

from redeem._types import Fault
from redeem.promise._cell import Promise

# ═══════════════════════════════════════════════════════════════════════════════
# pure() / failed() — Already-Settled Promises
# ═══════════════════════════════════════════════════════════════════════════════


def pure[T](value: T) -> Promise[T]:
    """
    Promise already resolved with value (aka return :: a -> m a).

    Example:
        pure(3).map(lambda x: x + 1).get()  # 4
    """
    p = Promise[T]()
    p.resolve(value)
    return p


def failed[T](fault: Fault) -> Promise[T]:
    """Promise already failed with fault."""
    p = Promise[T]()
    p.fail(fault)
    return p


# ═══════════════════════════════════════════════════════════════════════════════
# join() — Flatten
# ═══════════════════════════════════════════════════════════════════════════════


def join[T](promise: Promise[Promise[T]]) -> Promise[T]:
    """
    Flatten Promise[Promise[T]] into Promise[T] (join :: m m a -> m a).

    A fault at either level fails the result.
    """
    return promise.flat()


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("pure", "failed", "join")
