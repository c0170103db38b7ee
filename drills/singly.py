"""Singly linked list with positional edits and in-place reversal."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Node | None = field(default=None, repr=False)


class SinglyLinkedList:
    """A chain of nodes reachable from ``head``, with a tail pointer kept in step."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the first node."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Append ``value`` after the last node."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def _node_at(self, position: int) -> Node:
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
            before.next = Node(value, before.next)
            self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at 1-based ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError("deletion position out of range")
        if position == 1:
            return self.pop_front()
        before = self._node_at(position - 1)
        removed = before.next
        before.next = removed.next
        if removed is self.tail:
            self.tail = before
        removed.next = None
        self._size -= 1
        return removed.value

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        removed = self.head
        self.head = removed.next
        if self.head is None:
            self.tail = None
        removed.next = None
        self._size -= 1
        return removed.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        return self.delete_at(self._size)

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        self.reverse_in_groups(max(self._size, 1))

    def reverse_in_groups(self, k: int) -> None:
        """Reverse each run of ``k`` nodes in place; a shorter last run is reversed too."""
        if k < 1:
            raise ValueError("group size must be at least 1")
        new_head: Node | None = None
        previous_tail: Node | None = None
        current = self.head
        while current is not None:
            group_tail = current
            reversed_head: Node | None = None
            for _ in range(k):
                if current is None:
                    break
                following = current.next
                current.next = reversed_head
                reversed_head = current
                current = following
            if previous_tail is None:
                new_head = reversed_head
            else:
                previous_tail.next = reversed_head
            previous_tail = group_tail
        self.head = new_head
        self.tail = previous_tail

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"