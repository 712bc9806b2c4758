"""
Errors raised by redeem itself.

Faults produced by user computations are never wrapped; they travel as-is.
"""

from __future__ import annotations


class PromiseTimeoutError(TimeoutError):
    """Bounded get() gave up before the promise settled. The promise is untouched."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Promise didn't resolve in {timeout} seconds")
        self.timeout = timeout


__all__ = ("PromiseTimeoutError",)
