"""Searching in sorted sequences and selecting order statistics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


class BinarySearcher:
    """Binary search over a stored, ascending list of integers."""

    def __init__(self, data: Iterable[int] = ()) -> None:
        self._data: list[int] = list(data)

    def set_data(self, data: Iterable[int]) -> None:
        """Replace the searched data with a copy of ``data``."""
        self._data = list(data)

    def reset(self) -> None:
        """Forget all stored data."""
        self._data.clear()

    def search(self, target: int, left: int = 0, right: Optional[int] = None) -> int:
        """Return the index of ``target`` within ``[left, right]``, or -1."""
        if right is None:
            right = len(self._data) - 1
        while left <= right:
            mid = (left + right) // 2
            value = self._data[mid]
            if target < value:
                right = mid - 1
            elif target > value:
                left = mid + 1
            else:
                return mid
        return -1

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._data)


def fibonacci_search(numbers: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in ascending ``numbers``, or -1."""
    length = len(numbers)
    fib_prev, fib_curr = 0, 1
    fib = fib_prev + fib_curr
    while fib < length:
        fib_prev, fib_curr = fib_curr, fib
        fib = fib_prev + fib_curr

    offset = -1
    while fib > 1:
        index = min(offset + fib_prev, length - 1)
        value = numbers[index]
        if value < target:
            fib = fib_curr
            fib_curr = fib_prev
            fib_prev = fib - fib_curr
            offset = index
        elif value > target:
            fib = fib_prev
            fib_curr = fib_curr - fib_prev
            fib_prev = fib - fib_curr
        else:
            return index

    if fib_curr and offset + 1 < length and numbers[offset + 1] == target:
        return offset + 1
    return -1


def _partition(arr: list, left: int, right: int) -> int:
    pivot = arr[right]
    boundary = left - 1
    for j in range(left, right):
        if arr[j] < pivot:
            boundary += 1
            arr[boundary], arr[j] = arr[j], arr[boundary]
    arr[boundary + 1], arr[right] = arr[right], arr[boundary + 1]
    return boundary + 1


def quickselect(values: Iterable[int], k: int) -> int:
    """Return the ``k``-th smallest value (1-based) of ``values``."""
    arr = list(values)
    if not 1 <= k <= len(arr):
        raise ValueError(f"k must be between 1 and {len(arr)}, got {k}")
    left, right = 0, len(arr) - 1
    while True:
        if left == right:
            return arr[left]
        pivot_index = _partition(arr, left, right)
        length = pivot_index - left + 1
        if length == k:
            return arr[pivot_index]
        if k < length:
            right = pivot_index - 1
        else:
            left = pivot_index + 1
            k -= length