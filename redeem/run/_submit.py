"""
submit() — run a blocking computation on a pool, get a promise back.
"""

from __future__ import annotations

import logging
from concurrent.futures import CancelledError, Executor, Future

from redeem._types import Computation
from redeem.promise import Promise
from redeem.run._pool import default_executor

logger = logging.getLogger(__name__)


def submit[T](computation: Computation[T], executor: Executor | None = None) -> Promise[T]:
    """
    Schedule computation and return its promise without blocking.

    Resolves with the return value, fails with whatever it raises.
    Uses the process-wide default pool unless an executor is given.
    A RuntimeError from an executor that was shut down propagates here.

    Example:
        p = submit(lambda: fib(30))
        p.map(print)
    """
    promise = Promise[T]()
    pool = executor if executor is not None else default_executor()

    def settle(future: Future[T]) -> None:
        if future.cancelled():
            promise.fail(CancelledError())
            return
        fault = future.exception()
        if fault is not None:
            logger.debug("Computation %r failed: %r", computation, fault)
            promise.fail(fault)
        else:
            promise.resolve(future.result())

    logger.debug("Submitting %r", computation)
    pool.submit(computation).add_done_callback(settle)
    return promise


__all__ = ("submit",)
