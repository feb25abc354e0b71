"""A bounded single-producer, single-consumer ring-buffer queue."""

from __future__ import annotations

import copy
import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 256


class TrajectoryQueue(Generic[T]):
    """Fixed-size FIFO ring buffer for one producer and one consumer thread.

    ``capacity`` must be a power of two. One slot is always kept free to tell a
    full buffer from an empty one, so at most ``capacity - 1`` items fit.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if (
            isinstance(capacity, bool)
            or not isinstance(capacity, int)
            or capacity <= 0
            or capacity & (capacity - 1)
        ):
            raise ValueError(
                f"TrajectoryQueue capacity must be a power of 2 and greater than 0, got {capacity!r}"
            )
        self._capacity = capacity
        self._mask = capacity - 1
        self._buffer: list[Optional[T]] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Number of slots in the ring buffer."""
        return self._capacity

    def _increment(self, index: int) -> int:
        return (index + 1) & self._mask

    def try_push(self, item: T) -> bool:
        """Append ``item``; return False without storing it if the queue is full."""
        with self._lock:
            next_tail = self._increment(self._tail)
            if next_tail == self._head:
                return False
            self._buffer[self._tail] = item
            self._tail = next_tail
            return True

    def try_pop(self) -> Optional[T]:
        """Remove and return the front item, or None if the queue is empty."""
        with self._lock:
            if self._head == self._tail:
                return None
            item = self._buffer[self._head]
            self._buffer[self._head] = None
            self._head = self._increment(self._head)
            return item

    def try_peek(self) -> Optional[T]:
        """Return a copy of the front item without removing it, or None if empty."""
        with self._lock:
            if self._head == self._tail:
                return None
            return copy.deepcopy(self._buffer[self._head])

    def clear(self) -> None:
        """Drop every item, leaving the queue empty."""
        with self._lock:
            self._buffer = [None] * self._capacity
            self._head = 0
            self._tail = 0

    def is_empty(self) -> bool:
        """True if there is nothing to pop."""
        with self._lock:
            return self._head == self._tail

    def __len__(self) -> int:
        with self._lock:
            return (self._tail + self._capacity - self._head) & self._mask

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"TrajectoryQueue(capacity={self._capacity}, size={len(self)})"