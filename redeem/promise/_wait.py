"""
Composite waits over several promises.

Neither combinator starts a thread: the composite settles on the thread
that settles the deciding child.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from kungfu import Ok, Error

from redeem._types import Fault
from redeem.promise._cell import Promise
from redeem.promise._combinators import pure


def _children[T](promises: tuple[Promise[T] | Iterable[Promise[T]], ...]) -> tuple[Promise[T], ...]:
    # wait_all(a, b) and wait_all([a, b]) mean the same thing.
    if len(promises) == 1 and not isinstance(promises[0], Promise):
        return tuple(promises[0])
    return promises  # type: ignore[return-value]


# ═══════════════════════════════════════════════════════════════════════════════
# wait_all() — All Must Succeed
# ═══════════════════════════════════════════════════════════════════════════════


def wait_all[T](*promises: Promise[T] | Iterable[Promise[T]]) -> Promise[list[T]]:
    """
    Collect the values of all promises, in argument order.

    Accepts the promises as arguments or as one iterable. Settles only
    once every child has settled: with the list of values, or with the
    first child fault observed if any child failed.
    Bound the wait with .get(timeout) on the returned promise.

    Example:
        pages = wait_all(submit(fetch_a), submit(fetch_b)).get(timeout=5)
        pages = wait_all([submit(f) for f in fetchers]).get()
    """
    children = _children(promises)
    if not children:
        return pure([])

    result = Promise[list[T]]()
    values: list[Any] = [None] * len(children)
    lock = threading.Lock()
    remaining = len(children)
    first_fault: Fault | None = None

    def collect(index: int, done: Promise[T]) -> None:
        nonlocal remaining, first_fault
        with lock:
            match done._settled_outcome():
                case Error(fault):
                    if first_fault is None:
                        first_fault = fault
                case Ok(value):
                    values[index] = value
            remaining -= 1
            if remaining:
                return
            fault = first_fault
        if fault is not None:
            result.fail(fault)
        else:
            result.resolve(list(values))

    for index, p in enumerate(children):
        p.on_resolve(lambda done, i=index: collect(i, done))

    return result


# ═══════════════════════════════════════════════════════════════════════════════
# wait_any() — First To Settle Wins
# ═══════════════════════════════════════════════════════════════════════════════


def wait_any[T](*promises: Promise[T] | Iterable[Promise[T]]) -> Promise[T]:
    """
    Adopt the outcome of whichever promise settles first.

    Accepts the promises as arguments or as one iterable. Success and
    failure both count. The winner is claimed by the result's own
    first-writer-wins complete(); later children are ignored.

    Example:
        fastest = wait_any(submit(mirror_a), submit(mirror_b)).get()
    """
    children = _children(promises)
    if not children:
        raise ValueError("wait_any() needs at least one promise")

    result = Promise[T]()
    for p in children:
        p.on_resolve(result._adopt)
    return result


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("wait_all", "wait_any")
