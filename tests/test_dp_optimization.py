from functools import lru_cache
from itertools import accumulate, combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from contestlib.dp_optimization import divide_and_conquer_dp, knuth_dp


def _square_cost(values):
    prefix = [0, *accumulate(values)]

    def cost(i, j):
        if i > j:
            return 0
        return (prefix[j] - prefix[i - 1]) ** 2

    return cost


def _brute_partition(values, groups):
    n = len(values)
    best = None
    for count in range(1, min(groups, n) + 1):
        for cuts in combinations(range(1, n), count - 1):
            bounds = (0, *cuts, n)
            total = sum(sum(values[a:b]) ** 2 for a, b in zip(bounds, bounds[1:]))
            if best is None or total < best:
                best = total
    return best


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(0, 20), min_size=1, max_size=7), st.integers(0, 4))
def test_divide_and_conquer_matches_brute_force(values, layers):
    result = divide_and_conquer_dp(len(values), layers, _square_cost(values))
    assert len(result) == len(values)
    for j in range(1, len(values) + 1):
        assert result[j - 1] == _brute_partition(values[:j], layers + 1)


def test_zero_layers_is_single_block():
    values = [3, 1, 4, 1, 5]
    cost = _square_cost(values)
    assert divide_and_conquer_dp(len(values), 0, cost) == [cost(1, j) for j in range(1, 6)]


def test_more_layers_never_cost_more():
    values = [5, 2, 8, 1, 9, 3]
    cost = _square_cost(values)
    last = divide_and_conquer_dp(len(values), 0, cost)[-1]
    for layers in range(1, 6):
        current = divide_and_conquer_dp(len(values), layers, cost)[-1]
        assert current <= last
        last = current


@pytest.mark.parametrize("n, layers", [(0, 1), (3, -1)])
def test_divide_and_conquer_rejects_bad_arguments(n, layers):
    with pytest.raises(ValueError):
        divide_and_conquer_dp(n, layers, lambda i, j: 0)


def _merge_cost(values):
    prefix = [0, *accumulate(values)]

    def cost(i, j):
        return 0 if i == j else prefix[j] - prefix[i - 1]

    return cost


def _brute_merge(values):
    cost = _merge_cost(values)

    @lru_cache(maxsize=None)
    def best(i, j):
        if i == j:
            return cost(i, i)
        return min(best(i, k) + best(k + 1, j) for k in range(i, j)) + cost(i, j)

    return best(1, len(values))


def test_knuth_merging_stones():
    assert knuth_dp(4, _merge_cost([1, 2, 3, 4])) == 19


@settings(max_examples=60, deadline=None)
@given(st.lists(st.integers(0, 30), min_size=1, max_size=8))
def test_knuth_matches_brute_force(values):
    assert knuth_dp(len(values), _merge_cost(values)) == _brute_merge(values)


def test_knuth_single_position_uses_leaf_cost():
    assert knuth_dp(1, lambda i, j: 7 * i + j) == 8


def test_knuth_rejects_empty():
    with pytest.raises(ValueError):
        knuth_dp(0, lambda i, j: 0)