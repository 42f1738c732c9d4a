"""A thread-safe FIFO queue and a player that consumes it."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Callable, Optional


class SafeQueue:
    """A first-in, first-out queue guarded by a lock."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()

    def push(self, item: Any) -> None:
        """Add ``item`` at the back."""
        with self._lock:
            self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the front item, or None if the queue is empty."""
        with self._lock:
            return self._items.popleft() if self._items else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class Player:
    """Queues incoming items and plays them one at a time."""

    def __init__(self, handler: Optional[Callable[[Any], None]] = None) -> None:
        self._lock = threading.Lock()
        self._queue = SafeQueue()
        self.handler = handler

    def listen(self, item: Any) -> None:
        """Queue ``item`` for playing."""
        self._queue.push(item)

    def play(self) -> Any:
        """Play the oldest queued item and return it, or None if none is queued."""
        with self._lock:
            item = self._queue.pop()
            if item is not None and self.handler is not None:
                self.handler(item)
            return item