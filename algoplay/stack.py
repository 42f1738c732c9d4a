"""A bounded LIFO stack."""

from __future__ import annotations

from typing import Any


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class Stack:
    """A stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Push ``item``; raise StackFullError when the capacity is reached."""
        if len(self._items) + 1 > self.capacity:
            raise StackFullError("reach cap")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item, or None if the stack is empty."""
        if self._items:
            return self._items.pop()
        return None

    def __len__(self) -> int:
        return len(self._items)

    def full(self) -> bool:
        """True once one more push would bring the stack to its capacity."""
        return len(self._items) + 1 >= self.capacity