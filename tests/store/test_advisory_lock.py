from __future__ import annotations

import threading

import pytest

from src.school_erp.school_erp.core.exceptions import LockTimeoutError
from src.school_erp.school_erp.store.locking import AdvisoryLock


def test_run_returns_the_callable_result():
    lock = AdvisoryLock(timeout_seconds=1)

    assert lock.run(lambda: 42, ("fees", "A1")) == 42


def test_held_key_times_out_with_busy_message():
    lock = AdvisoryLock(timeout_seconds=1)
    entered = threading.Event()
    release = threading.Event()

    def _holder():
        with lock.hold(("attendance", "5", "A", "2024-06-01")):
            entered.set()
            release.wait(5)

    t = threading.Thread(target=_holder)
    t.start()
    try:
        assert entered.wait(5)
        with pytest.raises(LockTimeoutError) as exc:
            lock.run(lambda: None, ("attendance", "5", "A", "2024-06-01"), timeout=0.05)
        assert str(exc.value) == "Database busy. Try again later."
    finally:
        release.set()
        t.join()


def test_different_keys_do_not_block_each_other():
    lock = AdvisoryLock(timeout_seconds=1)

    with lock.hold(("attendance", "5", "A", "2024-06-01")):
        assert lock.run(lambda: "ok", ("attendance", "6", "B", "2024-06-01"), timeout=0.05) == "ok"


def test_calls_without_key_share_the_global_mutex():
    lock = AdvisoryLock(timeout_seconds=1)

    with lock.hold():
        with pytest.raises(LockTimeoutError):
            lock.run(lambda: None, timeout=0.05)


def test_lock_is_released_after_an_error():
    lock = AdvisoryLock(timeout_seconds=1)

    def _boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        lock.run(_boom, ("k",))

    assert lock.run(lambda: "again", ("k",), timeout=0.05) == "again"


def test_released_keys_are_dropped_from_the_registry():
    lock = AdvisoryLock(timeout_seconds=1)

    for i in range(1000):
        lock.run(lambda: None, ("attendance", "5", "A", f"day{i}"))

    assert lock.active_keys == 0


def test_waiter_keeps_the_key_alive_until_it_is_done():
    lock = AdvisoryLock(timeout_seconds=1)
    key = ("fees", "A1")

    with lock.hold(key):
        assert lock.active_keys == 1
        with pytest.raises(LockTimeoutError):
            lock.run(lambda: None, key, timeout=0.05)
        assert lock.active_keys == 1
        assert lock.run(lambda: "other", ("fees", "A2")) == "other"
        assert lock.active_keys == 1

    assert lock.active_keys == 0
    assert lock.run(lambda: "again", key, timeout=0.05) == "again"
