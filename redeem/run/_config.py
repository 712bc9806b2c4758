"""
Worker pool configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

POOL_SIZE_ENV = "REDEEM_POOL_SIZE"
DEFAULT_POOL_SIZE = 16


@dataclass(frozen=True, slots=True)
class PoolConfig:
    """Size and thread naming for a worker pool."""
    size: int = DEFAULT_POOL_SIZE
    thread_name_prefix: str = "redeem"

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Pool size must be positive, got {self.size}")

    @classmethod
    def from_env(cls) -> PoolConfig:
        """
        Read the pool size from REDEEM_POOL_SIZE.

        Example:
            REDEEM_POOL_SIZE=4 python app.py
        """
        raw = os.environ.get(POOL_SIZE_ENV)
        if raw is None or not raw.strip():
            return cls()
        try:
            size = int(raw)
        except ValueError:
            raise ValueError(f"{POOL_SIZE_ENV} must be an integer, got {raw!r}") from None
        return cls(size=size)


__all__ = ("PoolConfig", "POOL_SIZE_ENV", "DEFAULT_POOL_SIZE")
