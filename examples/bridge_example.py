"""
Bridge — await pool work from asyncio without blocking the loop.

Level 3: redeem.bridge
Level 2: kungfu.Result
"""

import asyncio

from kungfu import Ok, Error

from redeem import wait_all
from redeem.bridge import to_lazy
from examples._infra import banner, run, sleep


async def amain() -> None:
    banner("Bridge: await wait_all from asyncio")
    result = await to_lazy(wait_all(sleep(100), sleep(50)))

    match result:
        case Ok(values):
            print(f"  ✓ {values}")
        case Error(fault):
            print(f"  ✗ {fault!r}")


def main() -> None:
    asyncio.run(amain())


if __name__ == "__main__":
    run(main)
