from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Callable, Hashable, Iterator, Optional, TypeVar

from ..core.constants import DEFAULT_LOCK_TIMEOUT_SECONDS
from ..core.exceptions import LockTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

GLOBAL_KEY = ("global",)


class _KeyLock:
    __slots__ = ("lock", "users")

    def __init__(self):
        self.lock = threading.Lock()
        # Holders plus waiters; the entry is dropped when this reaches zero.
        self.users = 0


class AdvisoryLock:
    """Cooperative mutex around multi-step store writes.

    Locks are partitioned by resource key, so marking attendance for two
    different classes does not serialize. Calls without a key share one global
    mutex. Only callers that go through this object are excluded; direct store
    access (and every read) is not.

    A key's mutex only exists while someone holds or waits on it, so the
    registry stays as small as the current contention.
    """

    def __init__(self, timeout_seconds: float = DEFAULT_LOCK_TIMEOUT_SECONDS):
        self._timeout = float(timeout_seconds)
        self._locks: dict[Hashable, _KeyLock] = {}
        self._registry_lock = threading.Lock()

    @property
    def active_keys(self) -> int:
        with self._registry_lock:
            return len(self._locks)

    def _checkout(self, key: Hashable) -> _KeyLock:
        with self._registry_lock:
            entry = self._locks.get(key)
            if entry is None:
                entry = _KeyLock()
                self._locks[key] = entry
            entry.users += 1
            return entry

    def _checkin(self, key: Hashable, entry: _KeyLock) -> None:
        with self._registry_lock:
            entry.users -= 1
            if entry.users == 0 and self._locks.get(key) is entry:
                del self._locks[key]

    @contextmanager
    def hold(self, key: Optional[Hashable] = None, *, timeout: Optional[float] = None) -> Iterator[None]:
        key = GLOBAL_KEY if key is None else key
        wait = self._timeout if timeout is None else float(timeout)
        entry = self._checkout(key)
        try:
            if not entry.lock.acquire(timeout=wait):
                logger.warning("Advisory lock %r not acquired within %.1fs", key, wait)
                raise LockTimeoutError("Database busy. Try again later.")
            try:
                yield
            finally:
                entry.lock.release()
        finally:
            self._checkin(key, entry)

    def run(self, fn: Callable[[], T], key: Optional[Hashable] = None, *, timeout: Optional[float] = None) -> T:
        with self.hold(key, timeout=timeout):
            return fn()
