"""Heap sort, merge sort and quick sort, each returning a new list."""

from __future__ import annotations

from collections.abc import Iterable


def _sift_down(arr: list, start: int, end: int) -> None:
    dad = start
    son = 2 * dad + 1
    while son <= end:
        if son + 1 <= end and arr[son] < arr[son + 1]:
            son += 1
        if arr[dad] > arr[son]:
            return
        arr[dad], arr[son] = arr[son], arr[dad]
        dad = son
        son = 2 * dad + 1


def heap_sort(values: Iterable) -> list:
    """Return the values sorted ascending, using a max-heap."""
    arr = list(values)
    size = len(arr)
    for start in range(size // 2 - 1, -1, -1):
        _sift_down(arr, start, size - 1)
    for end in range(size - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        _sift_down(arr, 0, end - 1)
    return arr


def _merge(left: list, right: list) -> list:
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable) -> list:
    """Return the values sorted ascending, by top-down merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable) -> list:
    """Return the values sorted ascending, partitioning around the first element."""
    arr = list(values)
    pending = [(0, len(arr) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        i, j, pivot = left + 1, right, arr[left]
        while True:
            while i < right and arr[i] <= pivot:
                i += 1
            while j > left and arr[j] > pivot:
                j -= 1
            if i < j:
                arr[i], arr[j] = arr[j], arr[i]
            else:
                break
        arr[j], arr[left] = arr[left], arr[j]
        pending.append((left, j - 1))
        pending.append((j + 1, right))
    return arr