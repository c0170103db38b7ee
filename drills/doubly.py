"""Doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """One link of a doubly linked list."""

    value: Any
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """Nodes linked forwards and backwards, with head and tail pointers."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = DoublyNode(value, None, self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = DoublyNode(value, self.tail, None)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def _node_at(self, position: int) -> DoublyNode:
        node = self.head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("insertion position out of range")
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self._node_at(position - 1)
            node = DoublyNode(value, before, before.next)
            before.next.prev = node
            before.next = node
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError("deletion position out of range")
        node = self._node_at(position)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"