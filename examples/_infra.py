"""Shared infrastructure for examples."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from redeem import Promise, shutdown, submit


# Errors
class Failure(Exception):
    pass


# Fake slow work
def sleep(ms: int) -> Promise[str]:
    """Promise resolving to "-> {ms}" after ms milliseconds."""
    def work() -> str:
        time.sleep(ms / 1000)
        return f"-> {ms}"
    return submit(work)


# Helpers
def banner(title: str) -> None:
    print(f"\n{'─' * 50}\n{title}\n{'─' * 50}")


def run(main: Callable[[], None]) -> None:
    logging.basicConfig(level=logging.INFO, format="%(threadName)s %(name)s: %(message)s")
    try:
        main()
    finally:
        shutdown()
