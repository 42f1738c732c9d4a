"""Thread pools that bound how many jobs run at once."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

_STOP = object()


class WorkerPool:
    """A fixed number of worker threads draining a bounded job queue.

    Jobs that raise are recovered: the exception is logged and kept in
    ``errors``, and the worker carries on with the next job.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self.errors: list[BaseException] = []
        self._jobs: queue.Queue[Any] = queue.Queue(maxsize=size)
        self._threads: list[threading.Thread] = []
        self._errors_lock = threading.Lock()
        self._closed = False

    def submit(self, job: Callable[[], Any]) -> None:
        """Queue ``job``; blocks while the queue is full."""
        if self._closed:
            raise RuntimeError("submit on a closed pool")
        self._jobs.put(job)

    def _worker(self) -> None:
        while True:
            job = self._jobs.get()
            try:
                if job is _STOP:
                    return
                job()
            except Exception as exc:
                with self._errors_lock:
                    self.errors.append(exc)
                logger.warning("recover r:%s", exc)
            finally:
                self._jobs.task_done()

    def start(self) -> None:
        """Start ``size`` worker threads."""
        if self._closed:
            raise RuntimeError("start on a closed pool")
        for _ in range(self.size):
            thread = threading.Thread(target=self._worker, daemon=True)
            thread.start()
            self._threads.append(thread)

    def wait(self) -> None:
        """Wait until every submitted job has finished, then close the pool."""
        if self._closed:
            raise RuntimeError("pool already closed")
        self._jobs.join()
        self._closed = True
        for _ in self._threads:
            self._jobs.put(_STOP)
        for thread in self._threads:
            thread.join()
        self._threads.clear()

    def __enter__(self) -> "WorkerPool":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> Optional[bool]:
        self.wait()
        return None


class BoundedGroup:
    """A wait group that lets at most ``size`` members be active at once.

    ``add`` blocks while all slots are taken; ``done`` frees one slot.
    A size of zero or less is treated as one.
    """

    def __init__(self, size: int) -> None:
        self.size = size if size > 0 else 1
        self._slots = threading.Semaphore(self.size)
        self._pending = 0
        self._cond = threading.Condition()

    def add(self, delta: int) -> None:
        """Take ``delta`` slots, blocking until they are free."""
        if delta < 0:
            raise ValueError("delta must not be negative")
        for _ in range(delta):
            self._slots.acquire()
        with self._cond:
            self._pending += delta

    def done(self) -> None:
        """Mark one member finished and free its slot."""
        with self._cond:
            if self._pending <= 0:
                raise ValueError("done called more times than add")
            self._pending -= 1
            if self._pending == 0:
                self._cond.notify_all()
        self._slots.release()

    def wait(self) -> None:
        """Block until every added member is done."""
        with self._cond:
            self._cond.wait_for(lambda: self._pending == 0)