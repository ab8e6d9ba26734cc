"""Divide-and-conquer search for the k-th closest pair of points."""

from __future__ import annotations

import heapq
import math
import random
from collections.abc import Iterable
from typing import Optional


def _collect(points: list[tuple[int, int]], left: int, right: int, heap: list) -> None:
    if left + 1 >= right:
        return
    mid = left + (right - left) // 2
    _collect(points, left, mid, heap)
    _collect(points, mid, right, heap)
    for ax, ay in points[left:mid]:
        for bx, by in points[mid:right]:
            dx = ax - bx
            if dx * dx > -heap[0]:
                break
            dy = ay - by
            heapq.heappushpop(heap, -(dx * dx + dy * dy))


def kth_closest_distance(
    points: Iterable[tuple[int, int]], k: int, rng: Optional[random.Random] = None
) -> float:
    """Return the distance of the ``k``-th closest pair among integer ``points``.

    The points are first turned and scaled by a random integer rotation, which
    leaves the answer unchanged but spreads ties in the x coordinate.
    """
    pts = [(int(x), int(y)) for x, y in points]
    count = len(pts)
    if count < 2:
        raise ValueError("at least two points are needed")
    if not 1 <= k <= count * (count - 1) // 2:
        raise ValueError(f"k must be between 1 and the number of pairs, got {k}")
    rng = rng if rng is not None else random.Random()
    rx = rng.randint(1, 10)
    ry = rng.randint(1, 10)
    rotated = sorted((x * rx - y * ry, x * ry + y * rx) for x, y in pts)
    heap = [-math.inf] * k
    _collect(rotated, 0, count, heap)
    return math.sqrt(-heap[0] // (rx * rx + ry * ry))