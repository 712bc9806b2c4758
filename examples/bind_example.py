"""
Bind — chain dependent steps, watch faults propagate.

Level 3: redeem.promise
Level 2: kungfu.Result (peek)
"""

import time

from kungfu import Ok, Error, Some

from redeem import Promise, pure, submit
from examples._infra import banner, run, Failure


def hello() -> str:
    print("  Sleeping 500 ms")
    time.sleep(0.5)
    return "hello world"


def reject(s: str) -> Promise[int]:
    raise Failure(f"hurray, an exception: {s}")


def main() -> None:
    banner("Bind: hash a string")
    hashed = submit(hello).bind(lambda s: pure(hash(s)))
    print("  Main thread keeps going")
    print(f"  ✓ HashCode = {hashed.get()}")

    banner("Bind: failing step")
    broken = submit(hello).bind(reject)
    print("  Main thread keeps going")
    try:
        broken.get()
    except Failure as e:
        print(f"  ✗ {e}")

    match broken.peek():
        case Some(Ok(value)):
            print(f"  peek: value {value}")
        case Some(Error(fault)):
            print(f"  peek: fault {fault!r}")
        case _:
            print("  peek: pending")


if __name__ == "__main__":
    run(main)
