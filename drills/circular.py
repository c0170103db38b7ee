"""Circular singly linked list addressed through its last node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class CircularNode:
    """One link of a circular list."""

    value: Any
    next: CircularNode | None = field(default=None, repr=False)


class CircularLinkedList:
    """Nodes in a ring; ``tail.next`` is the first node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.tail: CircularNode | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> CircularNode | None:
        """The first node, or None when the list is empty."""
        return None if self.tail is None else self.tail.next

    def _nodes(self) -> Iterator[CircularNode]:
        node = self.head
        for _ in range(self._size):
            yield node
            node = node.next

    def _insert_after_node(self, node: CircularNode | None, value: Any) -> CircularNode:
        new = CircularNode(value)
        if node is None:
            new.next = new
            self.tail = new
        else:
            new.next = node.next
            node.next = new
        self._size += 1
        return new

    def insert_after(self, existing: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``existing``.

        In an empty list ``value`` becomes the only node.
        """
        if self.tail is None:
            self._insert_after_node(None, value)
            return
        for node in self._nodes():
            if node.value == existing:
                new = self._insert_after_node(node, value)
                if node is self.tail:
                    self.tail = new
                return
        raise ValueError(f"{existing!r} is not in the list")

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self.tail is None:
            raise ValueError("remove from an empty list")
        previous = self.tail
        for node in self._nodes():
            if node.value == value:
                if self._size == 1:
                    self.tail = None
                else:
                    previous.next = node.next
                    if node is self.tail:
                        self.tail = previous
                node.next = None
                self._size -= 1
                return
            previous = node
        raise ValueError(f"{value!r} is not in the list")

    def push_front(self, value: Any) -> None:
        """Insert ``value`` as the first node."""
        self._insert_after_node(self.tail, value)

    def push_back(self, value: Any) -> None:
        """Insert ``value`` as the last node."""
        self.tail = self._insert_after_node(self.tail, value)

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it becomes the node at 1-based ``position``."""
        if not 1 <= position <= self._size + 1:
            raise IndexError("insertion position out of range")
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self.head
            for _ in range(position - 2):
                before = before.next
            self._insert_after_node(before, value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"