import itertools
import math

import pytest

from algolab.combinatorics import (
    MAX_SET_SIZE,
    combinations,
    rotation_permutations,
    subsets,
    swap_permutations,
)


@pytest.mark.parametrize("n", range(0, 8))
def test_subsets_cover_power_set(n):
    result = list(subsets(n))
    assert len(result) == 2**n
    assert len(set(result)) == len(result)
    assert result[0] == ()
    assert result[-1] == tuple(range(1, n + 1))
    expected = {
        combo
        for size in range(n + 1)
        for combo in itertools.combinations(range(1, n + 1), size)
    }
    assert set(result) == expected


def test_subsets_order_for_two():
    assert list(subsets(2)) == [(), (2,), (1,), (1, 2)]


def test_subsets_rejects_oversized_set():
    with pytest.raises(ValueError):
        list(subsets(MAX_SET_SIZE + 1))


@pytest.mark.parametrize("items", [[1, 2, 3, 4], ["a", "b", "c"], [7]])
def test_swap_permutations_complete(items):
    result = list(swap_permutations(items))
    assert len(result) == math.factorial(len(items))
    assert set(result) == set(itertools.permutations(items))
    assert result[0] == tuple(items)


def test_swap_permutations_order():
    assert list(swap_permutations([1, 2, 3])) == [
        (1, 2, 3),
        (1, 3, 2),
        (2, 1, 3),
        (2, 3, 1),
        (3, 2, 1),
        (3, 1, 2),
    ]


@pytest.mark.parametrize("items", [[1, 2, 3, 4], [1, 2, 3, 4, 5], ["x", "y"]])
def test_rotation_permutations_lexicographic(items):
    assert list(rotation_permutations(items)) == list(itertools.permutations(items))


@pytest.mark.parametrize("m,n", [(5, 3), (6, 1), (6, 6), (10, 4), (19, 2)])
def test_combinations_match_itertools(m, n):
    assert list(combinations(m, n)) == list(itertools.combinations(range(1, m + 1), n))


@pytest.mark.parametrize("m,n", [(3, 4), (5, 0), (0, 0)])
def test_combinations_invalid(m, n):
    with pytest.raises(ValueError):
        list(combinations(m, n))