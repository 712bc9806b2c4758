"""
Worker pools — explicit handles plus a lazily created process-wide default.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from redeem.run._config import PoolConfig

logger = logging.getLogger(__name__)

_default: ThreadPoolExecutor | None = None
_default_lock = threading.Lock()

# ═══════════════════════════════════════════════════════════════════════════════
# new_pool() — Caller-Owned Pool
# ═══════════════════════════════════════════════════════════════════════════════


def new_pool(config: PoolConfig | None = None) -> ThreadPoolExecutor:
    """
    Create a fixed-size pool owned by the caller.

    Example:
        with new_pool(PoolConfig(size=4)) as pool:
            submit(work, pool).get()
    """
    config = config if config is not None else PoolConfig()
    logger.debug("Creating worker pool with %d threads", config.size)
    return ThreadPoolExecutor(
        max_workers=config.size,
        thread_name_prefix=config.thread_name_prefix,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Default Pool Lifecycle
# ═══════════════════════════════════════════════════════════════════════════════


def default_executor() -> ThreadPoolExecutor:
    """Process-wide pool, created on first use from PoolConfig.from_env()."""
    global _default
    with _default_lock:
        if _default is None:
            config = PoolConfig.from_env()
            _default = new_pool(config)
            logger.info("Started default worker pool (%d threads)", config.size)
        return _default


def shutdown(wait: bool = False) -> None:
    """
    Tear down the default pool.

    Queued computations are cancelled and their promises fail with
    CancelledError. Running ones cannot be interrupted; they finish on
    their own and settle as usual.
    A later default_executor() call starts a fresh pool.
    """
    global _default
    with _default_lock:
        pool, _default = _default, None
    if pool is None:
        return
    logger.info("Shutting down default worker pool")
    pool.shutdown(wait=wait, cancel_futures=True)


__all__ = ("new_pool", "default_executor", "shutdown")
