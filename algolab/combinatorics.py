"""Generators of subsets, permutations and combinations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import product

MAX_SET_SIZE = 20


def subsets(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of ``{1..n}``, leaving elements out before taking them."""
    if not 0 <= n <= MAX_SET_SIZE:
        raise ValueError(f"n must be between 0 and {MAX_SET_SIZE}")
    for mask in product((False, True), repeat=n):
        yield tuple(index + 1 for index, chosen in enumerate(mask) if chosen)


def swap_permutations(items: Iterable) -> Iterator[tuple]:
    """Yield the permutations of ``items`` produced by successive swaps."""
    seq = list(items)

    def permute(idx: int) -> Iterator[tuple]:
        if idx == len(seq):
            yield tuple(seq)
            return
        for i in range(idx, len(seq)):
            seq[idx], seq[i] = seq[i], seq[idx]
            yield from permute(idx + 1)
            seq[idx], seq[i] = seq[i], seq[idx]

    yield from permute(0)


def rotation_permutations(items: Iterable) -> Iterator[tuple]:
    """Yield permutations by rotation; lexicographic when ``items`` is sorted."""

    def permute(seq: list, i: int) -> Iterator[tuple]:
        if i == len(seq):
            yield tuple(seq)
            return
        for j in range(i, len(seq)):
            rotated = [*seq[:i], seq[j], *seq[i:j], *seq[j + 1:]]
            yield from permute(rotated, i + 1)

    yield from permute(list(items), 0)


def _advance_position(current: list[int], m: int) -> int:
    last = len(current) - 1
    if current[last] != m:
        return last
    pos = last - 1
    while current[pos + 1] - current[pos] == 1:
        pos -= 1
    return pos


def combinations(m: int, n: int) -> Iterator[tuple[int, ...]]:
    """Yield every ``n``-element subset of ``{1..m}`` in lexicographic order."""
    if not 1 <= n <= m:
        raise ValueError(f"need 1 <= n <= m, got m={m}, n={n}")
    current = list(range(1, n + 1))
    yield tuple(current)
    while current[0] < m - n + 1:
        pos = _advance_position(current, m)
        current[pos] += 1
        for i in range(pos + 1, n):
            current[i] = current[i - 1] + 1
        yield tuple(current)