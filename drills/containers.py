"""Stacks and queues, bounded (array-backed) and unbounded (linked)."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class QueueFullError(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmptyError(IndexError):
    """Raised when dequeueing from an empty queue."""


@dataclass(eq=False)
class _Link:
    value: Any
    next: _Link | None = field(default=None, repr=False)


def _require_positive_size(size: int) -> None:
    if size < 1:
        raise ValueError("size must be at least 1")


class BoundedStack:
    """A stack holding at most ``size`` values."""

    def __init__(self, size: int) -> None:
        _require_positive_size(size)
        self.size = size
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError(f"stack overflow at {value!r}")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Value at 1-based ``position`` counted from the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"incorrect position {position}")
        return self._items[-position]

    def top(self) -> Any:
        """The top value."""
        if self.is_empty():
            raise StackUnderflowError("an empty stack has no top")
        return self._items[-1]

    def bottom(self) -> Any:
        """The bottom value."""
        if self.is_empty():
            raise StackUnderflowError("an empty stack has no bottom")
        return self._items[0]

    def is_empty(self) -> bool:
        """True when the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """True when no more values fit."""
        return len(self._items) == self.size

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(size={self.size}, items={self._items!r})"


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("pop from an empty stack")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        """True when the stack holds nothing."""
        return self._top is None

    def __iter__(self) -> Iterator[Any]:
        """Values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


class BoundedQueue:
    """A linear array queue with ``size`` slots.

    Slots are not reused: once ``size`` values have been enqueued the queue
    is full, even if some of them have since been dequeued.
    """

    def __init__(self, size: int) -> None:
        _require_positive_size(size)
        self.size = size
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        """True when every enqueued value has been dequeued."""
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        """True when the rear has reached the last slot."""
        return len(self._slots) == self.size

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        return f"BoundedQueue(size={self.size}, items={self._slots[self._front:]!r})"


class LinkedQueue:
    """An unbounded first-in, first-out queue built from linked nodes."""

    def __init__(self) -> None:
        self._front: _Link | None = None
        self._rear: _Link | None = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _Link(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        """True when the queue holds nothing."""
        return self._front is None

    def __iter__(self) -> Iterator[Any]:
        """Values from front to rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"