import threading
import time
from collections.abc import Callable

import pytest
from redeem import Promise, PromiseTimeoutError, failed, pure, wait_all, wait_any


Sleeper = Callable[[int], Promise[str]]


def test_wait_all_preserves_input_order(sleeper: Sleeper):
    s = wait_all(sleeper(200), sleeper(10)).get(timeout=5)

    assert s == ["-> 200", "-> 10"]


def test_wait_all_empty_resolves_immediately():
    p = wait_all()

    assert p.is_resolved()
    assert p.get() == []


def test_wait_all_resolves_only_after_every_child():
    a, b = Promise[int](), Promise[int]()
    both = wait_all(a, b)

    b.resolve(2)
    assert not both.is_resolved()
    a.resolve(1)
    assert both.get() == [1, 2]


def test_wait_all_fails_with_child_fault_after_every_child_settles():
    fault = ValueError("child")
    a, b = Promise[int](), Promise[int]()
    both = wait_all(a, b)

    b.fail(fault)
    assert not both.is_resolved()
    a.resolve(1)
    assert both.exception() is fault
    assert a.get() == 1


def test_wait_all_first_failure_wins():
    first, second = ValueError("first"), ValueError("second")
    a, b, c = Promise[int](), Promise[int](), Promise[int]()
    all_three = wait_all(a, b, c)

    c.fail(first)
    a.fail(second)
    b.resolve(3)

    assert all_three.exception() is first


def test_wait_all_with_settled_children():
    assert wait_all(pure(1), pure(2), pure(3)).get() == [1, 2, 3]
    fault = KeyError("k")
    assert wait_all(pure(1), failed(fault)).exception() is fault


def test_wait_all_timeout(sleeper: Sleeper):
    with pytest.raises(PromiseTimeoutError):
        wait_all(sleeper(200), sleeper(200)).get(timeout=0.1)


def test_wait_all_no_timeout(sleeper: Sleeper):
    assert wait_all(sleeper(200), sleeper(200)).get(timeout=2) == ["-> 200", "-> 200"]


def test_wait_all_many_concurrent_children():
    children = [Promise[int]() for _ in range(100)]
    combined = wait_all(*children)

    threads = [threading.Thread(target=c.resolve, args=(i,)) for i, c in enumerate(children)]
    for t in reversed(threads):
        t.start()
    for t in threads:
        t.join()

    assert combined.get(timeout=5) == list(range(100))


def test_wait_any_first_by_time(sleeper: Sleeper):
    s = wait_any(sleeper(300), sleeper(200)).get(timeout=5)

    assert s == "-> 200"


def test_wait_any_adopts_first_failure():
    fault = RuntimeError("fast failure")
    slow, fast = Promise[int](), Promise[int]()
    first = wait_any(slow, fast)

    fast.fail(fault)
    slow.resolve(1)

    assert first.exception() is fault


def test_wait_any_ignores_later_failure():
    a, b = Promise[int](), Promise[int]()
    first = wait_any(a, b)

    a.resolve(1)
    b.fail(RuntimeError("late"))

    assert first.get() == 1


def test_wait_any_none_value_counts_as_success():
    a, b = Promise[None](), Promise[None]()
    first = wait_any(a, b)

    b.resolve(None)
    a.fail(RuntimeError("late"))

    assert first.get() is None
    assert first.exception() is None


def test_wait_any_requires_children():
    with pytest.raises(ValueError):
        wait_any()


def test_wait_any_simultaneous_children_single_winner():
    for _ in range(50):
        children = [Promise[int]() for _ in range(8)]
        first = wait_any(*children)
        seen: list[int] = []
        first.on_resolve(lambda done: seen.append(done.get()))
        barrier = threading.Barrier(len(children))

        def settle(i: int) -> None:
            barrier.wait()
            children[i].resolve(i)

        threads = [threading.Thread(target=settle, args=(i,)) for i in range(len(children))]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 1
        assert seen[0] == first.get()


def test_wait_all_timeout_does_not_hold_children_back():
    a = Promise[int]()
    both = wait_all(a, pure(2))

    def late() -> None:
        time.sleep(0.05)
        a.resolve(1)

    t = threading.Thread(target=late)
    t.start()
    with pytest.raises(PromiseTimeoutError):
        both.get(timeout=0.01)
    t.join()

    assert a.get() == 1
    assert both.get(timeout=1) == [1, 2]


def test_wait_all_first_failure_waits_for_pending_sibling():
    first = ValueError("first")
    a, b, c = Promise[int](), Promise[int](), Promise[int]()
    all_three = wait_all(a, b, c)

    b.fail(first)
    c.resolve(3)
    assert not all_three.is_resolved()
    a.fail(ValueError("second"))

    assert all_three.exception() is first


def test_wait_all_accepts_a_list(sleeper: Sleeper):
    assert wait_all([sleeper(30), sleeper(5)]).get(timeout=5) == ["-> 30", "-> 5"]
    assert wait_all(p for p in (pure(1), pure(2))).get() == [1, 2]


def test_wait_all_empty_list_resolves_immediately():
    p = wait_all([])

    assert p.is_resolved()
    assert p.get() == []


def test_wait_any_accepts_a_list(sleeper: Sleeper):
    assert wait_any([sleeper(300), sleeper(20)]).get(timeout=5) == "-> 20"


def test_wait_any_empty_list_rejected():
    with pytest.raises(ValueError):
        wait_any([])
