"""A recursive mutex usable as a context manager."""

from __future__ import annotations

import threading
from types import TracebackType

__all__ = ["Mutex"]


class Mutex:
    """Recursive lock: the owning thread may lock it again without blocking."""

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def lock(self) -> None:
        """Block until the mutex is held by the calling thread."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release one level of ownership; raises RuntimeError if not owned."""
        self._lock.release()

    def __enter__(self) -> "Mutex":
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unlock()