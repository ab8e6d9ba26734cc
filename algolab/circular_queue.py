"""Fixed-size circular queue that keeps one slot free."""

from __future__ import annotations

from typing import Optional


class QueueFull(Exception):
    """Raised when enqueueing into a full queue."""


class QueueEmpty(Exception):
    """Raised when dequeueing from an empty queue."""


_EMPTY_SLOT = -1


class CircularQueue:
    """Ring buffer of ``capacity`` slots holding at most ``capacity - 1`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Optional[int]] = [None] * capacity
        self._rear = 0
        self._front = 0

    def enqueue(self, value: int) -> None:
        """Add ``value`` at the rear."""
        rear = (self._rear + 1) % len(self._slots)
        if rear == self._front:
            raise QueueFull("queue is full")
        self._rear = rear
        self._slots[rear] = value

    def dequeue(self) -> int:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueEmpty("queue is empty")
        self._front = (self._front + 1) % len(self._slots)
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def status(self) -> str:
        """Render the slots with their indices and the rear and front positions."""
        header = "|" + "".join(f" {i:2d} |" for i in range(len(self._slots)))
        rule = "-" * (1 + 5 * len(self._slots))
        cells = "|" + "".join(
            f" {_EMPTY_SLOT if slot is None else slot:2d} |" for slot in self._slots
        )
        footer = f"rear:{self._rear:2d}, front:{self._front:2d}"
        return "\n".join([header, rule, cells, footer, "============="])