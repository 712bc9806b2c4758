"""
Bridge — await promises from asyncio code.

    from redeem.bridge import to_lazy

    result = await to_lazy(submit(blocking_io))
    match result:
        case Ok(value): ...
        case Error(fault): ...
"""

from __future__ import annotations

import asyncio

from kungfu import LazyCoroResult

from redeem._types import Fault, Outcome
from redeem.promise import Promise


def to_lazy[T](promise: Promise[T]) -> LazyCoroResult[T, Fault]:
    """
    Awaitable view of a promise as a kungfu LazyCoroResult.

    Never blocks the event loop: the outcome is handed over with
    call_soon_threadsafe from whichever thread settles the promise.
    """
    async def wait() -> Outcome[T]:
        loop = asyncio.get_running_loop()
        landed: asyncio.Future[Outcome[T]] = loop.create_future()

        def hand_over(done: Promise[T]) -> None:
            loop.call_soon_threadsafe(_set_if_pending, landed, done._settled_outcome())

        promise.on_resolve(hand_over)
        return await landed

    return LazyCoroResult(wait)


def _set_if_pending[V](future: asyncio.Future[V], value: V) -> None:
    if not future.done():
        future.set_result(value)


__all__ = ("to_lazy",)
