"""Singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """Singly linked list node."""

    data: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list built from an iterable of values."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def find(self, item: Any) -> Optional[Node]:
        """Return the first node holding ``item``, or None."""
        return next((node for node in self._nodes() if node.data == item), None)

    def insert_after(self, node: Node, item: Any) -> Node:
        """Insert ``item`` right after ``node`` and return the new node."""
        new_node = Node(item, node.next)
        node.next = new_node
        return new_node

    def delete(self, node: Node) -> None:
        """Unlink ``node`` from the list."""
        if self.head is None:
            raise IndexError("nothing to delete")
        if node is self.head:
            self.head = node.next
            return
        for previous in self._nodes():
            if previous.next is node:
                previous.next = node.next
                return
        raise ValueError("node is not in this list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[Node] = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous

    def __str__(self) -> str:
        if self.head is None:
            return "List is empty"
        return "".join(f"{value:3d} " for value in self)