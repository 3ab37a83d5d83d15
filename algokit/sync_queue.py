"""A first-in, first-out queue safe to share between threads."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class ThreadSafeQueue(Generic[T]):
    """A FIFO queue guarded by a lock, with blocking and non-blocking pops."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()
        self._ready = threading.Condition()

    def push(self, value: T) -> None:
        """Append ``value`` and wake one waiting consumer."""
        with self._ready:
            self._items.append(value)
            self._ready.notify()

    def wait_and_pop(self) -> T:
        """Remove and return the oldest item, waiting until one is available."""
        with self._ready:
            self._ready.wait_for(lambda: bool(self._items))
            return self._items.popleft()

    def try_pop(self) -> T:
        """Remove and return the oldest item; raise ``queue.Empty`` when there is none."""
        with self._ready:
            if not self._items:
                raise queue.Empty
            return self._items.popleft()

    def is_empty(self) -> bool:
        """Whether the queue holds no items."""
        with self._ready:
            return not self._items

    def __len__(self) -> int:
        with self._ready:
            return len(self._items)

    def __copy__(self) -> ThreadSafeQueue[T]:
        duplicate: ThreadSafeQueue[T] = ThreadSafeQueue()
        with self._ready:
            duplicate._items = deque(self._items)
        return duplicate