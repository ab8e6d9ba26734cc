"""Knuth-Morris-Pratt pattern matching."""

from __future__ import annotations

from collections.abc import Sequence


def failure_function(pattern: Sequence) -> list[int]:
    """Return the failure table: the last index of the longest proper border."""
    fail: list[int] = []
    matched = -1
    for i, symbol in enumerate(pattern):
        if i == 0:
            fail.append(-1)
            continue
        while matched != -1 and pattern[matched + 1] != symbol:
            matched = fail[matched]
        if pattern[matched + 1] == symbol:
            matched += 1
        fail.append(matched)
    return fail


def kmp_count(text: Sequence, pattern: Sequence) -> int:
    """Count occurrences of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    fail = failure_function(pattern)
    last = len(pattern) - 1
    matched = -1
    count = 0
    for symbol in text:
        while matched != -1 and pattern[matched + 1] != symbol:
            matched = fail[matched]
        if pattern[matched + 1] == symbol:
            matched += 1
        if matched == last:
            count += 1
            matched = fail[matched]
    return count