"""Unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None


class BinarySearchTree:
    """Binary search tree that ignores values it already holds."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value)
            return
        node = self._root
        while True:
            if value > node.value:
                if node.right is None:
                    node.right = _Node(value)
                    return
                node = node.right
            elif value < node.value:
                if node.left is None:
                    node.left = _Node(value)
                    return
                node = node.left
            else:
                return

    def __iter__(self) -> Iterator[Any]:
        """Yield the stored values in ascending (in-order) order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)