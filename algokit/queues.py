"""Bounded queues that raise on overflow and underflow."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueOverflowError(Exception):
    """Raised when adding to a full queue."""


class QueueUnderflowError(IndexError):
    """Raised when removing from an empty queue."""


class DoubleEndedQueue:
    """A bounded queue that accepts and releases items at both ends."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def _check_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise QueueOverflowError("queue overflow")

    def _check_items(self) -> None:
        if not self._items:
            raise QueueUnderflowError("queue underflow")

    def push_front(self, item: Any) -> None:
        """Add *item* at the front."""
        self._check_room()
        self._items.appendleft(item)

    def push_back(self, item: Any) -> None:
        """Add *item* at the rear."""
        self._check_room()
        self._items.append(item)

    def pop_front(self) -> Any:
        """Remove and return the front item."""
        self._check_items()
        return self._items.popleft()

    def pop_back(self) -> Any:
        """Remove and return the rear item."""
        self._check_items()
        return self._items.pop()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"DoubleEndedQueue({list(self._items)!r}, capacity={self.capacity})"


class CircularQueue:
    """A first-in first-out queue stored in a fixed ring of slots."""

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    def enqueue(self, item: Any) -> None:
        """Add *item* at the rear."""
        if self._size == self.capacity:
            raise QueueOverflowError("queue overflow")
        self._slots[(self._head + self._size) % self.capacity] = item
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        if not self._size:
            raise QueueUnderflowError("queue underflow")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return item

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._head + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"