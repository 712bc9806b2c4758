"""
Promise — single-assignment cells and their combinators.

    from redeem import promise as P

    total = P.wait_all(P.pure(1), P.pure(2)).map(sum)
    total.get()  # 3
"""

from __future__ import annotations

from redeem.promise._cell import Promise, PromiseState
from redeem.promise._combinators import pure, failed, join
from redeem.promise._wait import wait_all, wait_any

__all__ = (
    "Promise",
    "PromiseState",
    "pure",
    "failed",
    "join",
    "wait_all",
    "wait_any",
)
