"""
Fibonacci — compute on the pool, print from the continuation.

Level 3: redeem.run.submit
Level 2: redeem.lift
"""

from redeem import Promise, submit
from redeem.lift import lift
from examples._infra import banner, run


def fib(n: int) -> int:
    if n < 0:
        raise ValueError(f"I can compute n-th fibonacci number, where n >= 0, n = {n}")
    if n <= 1:
        return 1
    return fib(n - 2) + fib(n - 1)


def printout(number: int) -> None:
    print(f"  ✓ Computed {number}")


def compute(n: int) -> Promise[None]:
    return submit(lambda: fib(n)).bind(lift(printout))


def main() -> None:
    banner("Fibonacci(27)")

    result = compute(27)
    print("  Started computing!")
    result.get()
    print("  Done computing!")

    banner("Fibonacci(-1)")
    try:
        compute(-1).get()
    except ValueError as e:
        print(f"  ✗ {e}")


if __name__ == "__main__":
    run(main)
