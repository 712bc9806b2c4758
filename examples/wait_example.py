"""
Composite waits — all in order, first by time, bounded with a timeout.

Level 3: redeem.promise.wait_all / wait_any
"""

from redeem import PromiseTimeoutError, wait_all, wait_any
from examples._infra import banner, run, sleep


def main() -> None:
    banner("wait_all: input order, not completion order")
    print(f"  {wait_all(sleep(200), sleep(10)).get()}")

    banner("wait_any: first to finish")
    print(f"  {wait_any(sleep(300), sleep(200)).get()}")

    banner("wait_all with a deadline")
    slow = wait_all(sleep(200), sleep(200))
    try:
        slow.get(timeout=0.1)
    except PromiseTimeoutError as e:
        print(f"  ✗ {e}")
    print(f"  ✓ Still arrives: {slow.get()}")


if __name__ == "__main__":
    run(main)
