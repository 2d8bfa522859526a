"""Bounded first-in first-out queue of integers."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Iterator


class IntFifo:
    """A FIFO of integers holding at most ``capacity`` elements at a time."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._items: Deque[int] = deque()

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "IntFifo":
        """A full fifo whose capacity is the number of values given."""
        items = list(values)
        fifo = cls(len(items))
        fifo._items.extend(items)
        return fifo

    @property
    def capacity(self) -> int:
        """Largest number of elements the fifo can hold at once."""
        return self._capacity

    def push(self, value: int) -> None:
        """Append a value at the tail; IndexError when the fifo is full."""
        if self.is_full():
            raise IndexError(f"push to a full fifo of capacity {self._capacity}")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the head value; IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty fifo")
        return self._items.popleft()

    def peek(self, skip: int = 0) -> int:
        """Return the value ``skip`` places after the head without removing it."""
        if skip < 0:
            raise ValueError(f"skip must not be negative, got {skip}")
        if skip >= len(self._items):
            raise IndexError(
                f"cannot skip {skip} elements in a fifo holding {len(self._items)}"
            )
        return self._items[skip]

    def is_full(self) -> bool:
        """True when no more values can be pushed."""
        return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        """True when there is nothing to pop."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from head to tail without consuming anything."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"IntFifo(capacity={self._capacity}, items={list(self._items)!r})"