"""
Run — submit blocking computations to worker pools as promises.

    from redeem import run as R

    p = R.submit(lambda: expensive())          # default pool
    with R.new_pool(R.PoolConfig(size=4)) as pool:
        q = R.submit(lambda: expensive(), pool)

    R.shutdown()  # at process teardown
"""

from __future__ import annotations

from redeem.run._config import PoolConfig, POOL_SIZE_ENV, DEFAULT_POOL_SIZE
from redeem.run._pool import new_pool, default_executor, shutdown
from redeem.run._submit import submit

__all__ = (
    "PoolConfig",
    "POOL_SIZE_ENV",
    "DEFAULT_POOL_SIZE",
    "new_pool",
    "default_executor",
    "shutdown",
    "submit",
)
