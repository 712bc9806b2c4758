"""
Promise cell — single-assignment state machine.

One threading.Condition guards the outcome slot and the continuation list.
Continuations run on whichever thread settles the promise, outside the lock.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable, Iterable
from enum import Enum, auto
from types import TracebackType
from typing import Any

from kungfu import Ok, Error, Option, Some, Nothing

from redeem._errors import PromiseTimeoutError
from redeem._types import Callback, Fault, Outcome

logger = logging.getLogger(__name__)

# ═══════════════════════════════════════════════════════════════════════════════
# PromiseState — Tri-State View
# ═══════════════════════════════════════════════════════════════════════════════


class PromiseState(Enum):
    """Where a promise is in its lifecycle."""
    PENDING = auto()
    RESOLVED = auto()
    FAILED = auto()


# ═══════════════════════════════════════════════════════════════════════════════
# Promise
# ═══════════════════════════════════════════════════════════════════════════════


class Promise[T]:
    """
    Single-assignment handle to a value that arrives later.

    Settled exactly once, with a value or a fault. The first writer wins;
    later resolve()/fail() calls are ignored.

    Example:
        p = Promise[int]()
        p.on_resolve(lambda done: print(done.peek()))
        p.resolve(42)
        p.get()  # 42
    """

    __slots__ = ("_cond", "_outcome", "_callbacks", "_fault_tb")

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._outcome: Outcome[T] | None = None
        self._fault_tb: TracebackType | None = None
        self._callbacks: list[Callback[T]] = []

    # ───────────────────────────────────────────────────────────────────────────
    # Settling
    # ───────────────────────────────────────────────────────────────────────────

    def resolve(self, value: T) -> bool:
        """Settle with a value. Returns False if already settled."""
        return self.complete(Ok(value))

    def fail(self, fault: Fault) -> bool:
        """Settle with a fault. Returns False if already settled."""
        if not isinstance(fault, BaseException):
            raise TypeError(f"fault must be an exception, got {type(fault).__name__}")
        return self.complete(Error(fault))

    def complete(self, outcome: Outcome[T]) -> bool:
        """
        Settle with a ready-made outcome.

        The compare-and-set happens under the lock; dispatch happens after
        it is released, in registration order.
        """
        with self._cond:
            if self._outcome is not None:
                return False
            self._outcome = outcome
            match outcome:
                case Error(fault):
                    self._fault_tb = fault.__traceback__
            callbacks, self._callbacks = self._callbacks, []
            self._cond.notify_all()

        _cascade(self, callbacks)
        return True

    # ───────────────────────────────────────────────────────────────────────────
    # Continuations
    # ───────────────────────────────────────────────────────────────────────────

    def on_resolve(self, callback: Callback[T]) -> None:
        """
        Register a continuation.

        Runs immediately on the caller's thread if already settled,
        otherwise on the settling thread.
        """
        with self._cond:
            if self._outcome is None:
                self._callbacks.append(callback)
                return
        _cascade(self, (callback,))

    def _dispatch(self, callback: Callback[T]) -> None:
        try:
            callback(self)
        except Exception:
            logger.exception("Continuation %r raised while dispatching %r", callback, self)

    # ───────────────────────────────────────────────────────────────────────────
    # Reading
    # ───────────────────────────────────────────────────────────────────────────

    def get(self, timeout: float | None = None) -> T:
        """
        Block until settled, return the value or re-raise the fault.

        With a timeout (seconds), raises PromiseTimeoutError if still
        pending; the promise itself is left as it was. Every call raises
        the same fault object with its traceback reset to where it was
        when the promise failed.
        """
        with self._cond:
            if not self._cond.wait_for(self._is_settled, timeout):
                raise PromiseTimeoutError(timeout)
            outcome = self._outcome

        match outcome:
            case Error(fault):
                raise fault.with_traceback(self._fault_tb)
            case Ok(value):
                return value

    def peek(self) -> Option[Outcome[T]]:
        """Settled outcome as data, or Nothing() if pending. Never blocks."""
        with self._cond:
            outcome = self._outcome
        if outcome is None:
            return Nothing()
        return Some(outcome)

    def is_resolved(self) -> bool:
        """True once settled, with either a value or a fault."""
        with self._cond:
            return self._outcome is not None

    @property
    def state(self) -> PromiseState:
        with self._cond:
            outcome = self._outcome
        match outcome:
            case Ok(_):
                return PromiseState.RESOLVED
            case Error(_):
                return PromiseState.FAILED
        return PromiseState.PENDING

    def get_or_none(self) -> T | None:
        """Value if resolved with one, None otherwise."""
        with self._cond:
            outcome = self._outcome
        match outcome:
            case Ok(value):
                return value
        return None

    def exception(self) -> Fault | None:
        """Fault if failed, None otherwise."""
        with self._cond:
            outcome = self._outcome
        match outcome:
            case Error(fault):
                return fault
        return None

    def _is_settled(self) -> bool:
        return self._outcome is not None

    def _settled_outcome(self) -> Outcome[T]:
        # Only valid inside a continuation: the outcome is published before dispatch.
        outcome = self._outcome
        assert outcome is not None
        return outcome

    # ───────────────────────────────────────────────────────────────────────────
    # Chaining
    # ───────────────────────────────────────────────────────────────────────────

    def map[R](self, transform: Callable[[T], R]) -> Promise[R]:
        """
        Apply a plain function to the eventual value.

        A fault upstream skips the transform; a fault raised by the
        transform fails the result.

        Example:
            lengths = submit(fetch_page).map(len)
        """
        result = Promise[R]()

        def on_settled(done: Promise[T]) -> None:
            match done._settled_outcome():
                case Ok(value):
                    try:
                        mapped = transform(value)
                    except Exception as e:
                        result.fail(e)
                    else:
                        result.resolve(mapped)
                case Error(fault):
                    result.fail(fault)

        self.on_resolve(on_settled)
        return result

    def bind[R](self, continuation: Callable[[T], Promise[R]]) -> Promise[R]:
        """
        Chain a dependent asynchronous step (monadic bind).

        The result adopts the outcome of the promise returned by
        continuation. It fails right away if this promise fails or if
        continuation itself raises.

        Example:
            user = submit(load_session).bind(lambda s: submit(lambda: load_user(s)))
        """
        result = Promise[R]()

        def on_settled(done: Promise[T]) -> None:
            match done._settled_outcome():
                case Ok(value):
                    try:
                        inner = continuation(value)
                    except Exception as e:
                        result.fail(e)
                        return
                    if not isinstance(inner, Promise):
                        result.fail(TypeError(
                            f"bind continuation must return a Promise, got {type(inner).__name__}"
                        ))
                        return
                    inner.on_resolve(result._adopt)
                case Error(fault):
                    result.fail(fault)

        self.on_resolve(on_settled)
        return result

    def flat[U](self: Promise[Promise[U]]) -> Promise[U]:
        """Flatten a promise of a promise. Same as bind(identity)."""
        return self.bind(_identity)

    def _adopt(self, source: Promise[Any]) -> None:
        self.complete(source._settled_outcome())

    # ───────────────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        with self._cond:
            outcome = self._outcome
        match outcome:
            case Ok(value):
                return f"<Promise resolved value={value!r}>"
            case Error(fault):
                return f"<Promise failed fault={fault!r}>"
        return "<Promise pending>"


# ═══════════════════════════════════════════════════════════════════════════════
# Dispatch Cascade
# ═══════════════════════════════════════════════════════════════════════════════

# Nested dispatches deeper than this on one thread are queued and drained by
# the outermost dispatch on that thread, so long chains never hit the
# recursion limit. Dispatch stays on the settling thread either way.
_MAX_INLINE_DEPTH = 32

_local = threading.local()


def _cascade(promise: Promise[Any], callbacks: Iterable[Callback[Any]]) -> None:
    queue: deque[tuple[Promise[Any], Callback[Any]]] | None = getattr(_local, "queue", None)
    if queue is not None:
        if _local.depth >= _MAX_INLINE_DEPTH:
            queue.extend((promise, callback) for callback in callbacks)
        else:
            _run_nested(promise, callbacks)
        return

    _local.queue = queue = deque()
    _local.depth = 0
    escaped: BaseException | None = None
    try:
        try:
            _run_nested(promise, callbacks)
        except BaseException as e:
            escaped = e
        while queue:
            queued, callback = queue.popleft()
            try:
                _run_nested(queued, (callback,))
            except BaseException as e:
                escaped = escaped or e
    finally:
        _local.queue = None
    if escaped is not None:
        raise escaped


def _run_nested(promise: Promise[Any], callbacks: Iterable[Callback[Any]]) -> None:
    # A BaseException from one continuation must not starve the ones after it.
    _local.depth += 1
    escaped: BaseException | None = None
    try:
        for callback in callbacks:
            try:
                promise._dispatch(callback)
            except BaseException as e:
                escaped = escaped or e
    finally:
        _local.depth -= 1
    if escaped is not None:
        raise escaped


def _identity[V](v: V) -> V:
    return v


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("Promise", "PromiseState")
