"""Doubly linked list with a cursor that edits around the current node."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList:
    """Doubly linked list navigated and edited through a cursor."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._cursor: Optional[_Node] = None
        self._size = 0

    def _insert_first(self, value: Any) -> None:
        node = _Node(value)
        self._head = self._cursor = node
        self._size = 1

    def insert_left(self, value: Any) -> None:
        """Insert before the cursor; the cursor stays on its node."""
        if self._cursor is None:
            self._insert_first(value)
            return
        node = _Node(value)
        cursor = self._cursor
        node.next = cursor
        node.prev = cursor.prev
        if cursor.prev is None:
            self._head = node
        else:
            cursor.prev.next = node
        cursor.prev = node
        self._size += 1

    def insert_right(self, value: Any) -> None:
        """Insert after the cursor; the cursor stays on its node."""
        if self._cursor is None:
            self._insert_first(value)
            return
        node = _Node(value)
        cursor = self._cursor
        node.prev = cursor
        node.next = cursor.next
        if cursor.next is not None:
            cursor.next.prev = node
        cursor.next = node
        self._size += 1

    def move_left(self) -> Any:
        """Move the cursor one node left and return the value there."""
        if self._cursor is None or self._cursor.prev is None:
            raise IndexError("cannot move to the left node")
        self._cursor = self._cursor.prev
        return self._cursor.value

    def move_right(self) -> Any:
        """Move the cursor one node right and return the value there."""
        if self._cursor is None or self._cursor.next is None:
            raise IndexError("cannot move to the right node")
        self._cursor = self._cursor.next
        return self._cursor.value

    def remove(self) -> Any:
        """Remove the node under the cursor and return its value.

        The cursor moves to the following node, or to the preceding one when
        the last node was removed.
        """
        node = self._cursor
        if node is None:
            raise IndexError("cannot remove from an empty list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        self._cursor = node.next if node.next is not None else node.prev
        self._size -= 1
        return node.value

    def current(self) -> Any:
        """Return the value under the cursor."""
        if self._cursor is None:
            raise IndexError("the list is empty")
        return self._cursor.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "List:" + "->".join(str(value) for value in self)