import threading

import pytest

from token_traveler.scheduler import ManualScheduler, ThreadingScheduler


def test_manual_scheduler_runs_due_callbacks_in_order() -> None:
    scheduler = ManualScheduler()
    ran = []
    scheduler.call_later(100, lambda: ran.append("b"))
    scheduler.call_later(50, lambda: ran.append("a"))
    scheduler.call_later(100, lambda: ran.append("c"))
    assert scheduler.advance(99) == 1
    assert ran == ["a"]
    assert scheduler.advance(1) == 2
    assert ran == ["a", "b", "c"]
    assert scheduler.now == 100
    assert scheduler.pending == 0


def test_manual_scheduler_runs_chained_callbacks_within_window() -> None:
    scheduler = ManualScheduler()
    times = []

    def first() -> None:
        times.append(scheduler.now)
        scheduler.call_later(10, lambda: times.append(scheduler.now))

    scheduler.call_later(10, first)
    scheduler.advance(30)
    assert times == [10, 20]


def test_manual_scheduler_rejects_negative_delay() -> None:
    scheduler = ManualScheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-1)


def test_threading_scheduler_runs_callback() -> None:
    done = threading.Event()
    ThreadingScheduler().call_later(1, done.set)
    assert done.wait(2.0)


def test_threading_scheduler_survives_failing_callback() -> None:
    done = threading.Event()

    def boom() -> None:
        done.set()
        raise RuntimeError("boom")

    ThreadingScheduler().call_later(1, boom)
    assert done.wait(2.0)
