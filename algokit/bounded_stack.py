"""A fixed-capacity last-in, first-out stack."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 20


class BoundedStack(Generic[T]):
    """A stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """Most items the stack can hold."""
        return self._capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if self.is_full():
            raise OverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def top(self) -> T:
        """The top item, left in place; raise IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Whether the stack holds ``capacity`` items."""
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Items from top to bottom."""
        return reversed(self._items)

    def __copy__(self) -> BoundedStack[T]:
        duplicate: BoundedStack[T] = BoundedStack(self._capacity)
        duplicate._items = list(self._items)
        return duplicate

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={self._items!r})"