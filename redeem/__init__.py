"""
redeem — composable thread-based promises.

    from redeem import promise as P   # Cells, bind/map, wait_all/wait_any
    from redeem import run as R       # Submit computations to worker pools
    from redeem import lift as L      # Lift plain functions into promises
"""

from redeem import promise
from redeem import run
from redeem import lift
from redeem import bridge
from redeem._errors import PromiseTimeoutError
from redeem._types import (
    Fault,
    Outcome,
    Callback,
    Computation,
)
from redeem.promise import (
    Promise,
    PromiseState,
    pure,
    failed,
    join,
    wait_all,
    wait_any,
)
from redeem.run import submit, shutdown

__version__ = "0.1.0"

__all__ = (
    "promise",
    "run",
    "lift",
    "bridge",
    "PromiseTimeoutError",
    "Fault",
    "Outcome",
    "Callback",
    "Computation",
    "Promise",
    "PromiseState",
    "pure",
    "failed",
    "join",
    "wait_all",
    "wait_any",
    "submit",
    "shutdown",
)
