import time
from collections.abc import Callable, Iterator
from concurrent.futures import ThreadPoolExecutor

import pytest
from redeem import Promise
from redeem.run import PoolConfig, new_pool, shutdown, submit


@pytest.fixture
def pool() -> Iterator[ThreadPoolExecutor]:
    executor = new_pool(PoolConfig(size=8, thread_name_prefix="redeem-test"))
    yield executor
    executor.shutdown(wait=True, cancel_futures=True)


@pytest.fixture(autouse=True)
def _default_pool_teardown() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    yield
    shutdown(wait=True)


@pytest.fixture
def sleeper(pool: ThreadPoolExecutor) -> Callable[[int], Promise[str]]:
    """Promise resolving to "-> {ms}" after ms milliseconds."""

    def sleep(ms: int) -> Promise[str]:
        def work() -> str:
            time.sleep(ms / 1000)
            return f"-> {ms}"

        return submit(work, pool)

    return sleep
