"""
Core types for redeem.

Re-exports from kungfu + custom type aliases.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

# Re-export from kungfu
from kungfu import Result, Ok, Error, Option, Some, Nothing, LazyCoroResult

if TYPE_CHECKING:
    from redeem.promise._cell import Promise

# ═══════════════════════════════════════════════════════════════════════════════
# Outcome Aliases
# ═══════════════════════════════════════════════════════════════════════════════

type Fault = BaseException
"""Opaque error carried by a failed promise."""

type Outcome[T] = Result[T, Fault]
"""Settled state of a promise as data: Ok(value) or Error(fault)."""

# ═══════════════════════════════════════════════════════════════════════════════
# Continuations
# ═══════════════════════════════════════════════════════════════════════════════

type Callback[T] = Callable[[Promise[T]], None]
"""Continuation invoked once with the settled promise."""

type Computation[T] = Callable[[], T]
"""Zero-argument unit of work handed to a worker pool."""

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    # Re-exports from kungfu
    "Result",
    "Ok",
    "Error",
    "Option",
    "Some",
    "Nothing",
    "LazyCoroResult",
    # Type aliases
    "Fault",
    "Outcome",
    "Callback",
    "Computation",
)
