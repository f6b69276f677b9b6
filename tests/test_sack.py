from collections import Counter

import pytest
from hypothesis import given, strategies as st

from contestlib.sack import dominating_colour_sums


@st.composite
def coloured_trees(draw):
    n = draw(st.integers(1, 30))
    labels = draw(st.permutations(range(1, n + 1)))
    edges = [
        (labels[draw(st.integers(0, child - 1))], labels[child]) for child in range(1, n)
    ]
    colours = draw(st.lists(st.integers(1, 5), min_size=n, max_size=n))
    return n, colours, edges


def test_small_sample():
    assert dominating_colour_sums(4, [1, 2, 3, 4], [(1, 2), (2, 3), (2, 4)]) == [10, 9, 3, 4]


def test_larger_sample():
    colours = [1, 2, 3, 1, 2, 3, 3, 1, 1, 3, 2, 2, 1, 2, 3]
    edges = [
        (1, 2), (1, 3), (1, 4), (1, 14), (1, 15), (2, 5), (2, 6), (2, 7),
        (3, 8), (3, 9), (3, 10), (4, 11), (4, 12), (4, 13),
    ]
    assert dominating_colour_sums(15, colours, edges) == [
        6, 5, 4, 3, 2, 3, 3, 1, 1, 3, 2, 2, 1, 2, 3,
    ]


def test_colour_count_mismatch():
    with pytest.raises(ValueError):
        dominating_colour_sums(2, [1], [(1, 2)])


@given(coloured_trees())
def test_leaves_and_root(tree):
    n, colours, edges = tree
    answers = dominating_colour_sums(n, colours, edges)
    degree = Counter()
    for a, b in edges:
        degree[a] += 1
        degree[b] += 1
    for node in range(2, n + 1):
        if degree[node] == 1:
            assert answers[node - 1] == colours[node - 1]
    counts = Counter(colours)
    top = max(counts.values())
    assert answers[0] == sum(c for c, k in counts.items() if k == top)


@given(coloured_trees())
def test_uniform_colour(tree):
    n, colours, edges = tree
    answers = dominating_colour_sums(n, [colours[0]] * n, edges)
    assert answers == [colours[0]] * n