import pytest
from hypothesis import given, strategies as st

from contestlib.hld import HeavyLightTree


@st.composite
def weighted_trees(draw):
    n = draw(st.integers(1, 25))
    labels = draw(st.permutations(range(1, n + 1)))
    edges = [
        (labels[draw(st.integers(0, child - 1))], labels[child], draw(st.integers(0, 50)))
        for child in range(1, n)
    ]
    return n, edges


def test_sample_queries_and_change():
    tree = HeavyLightTree(3, [(1, 2, 1), (2, 3, 2)])
    assert tree.query(1, 2) == 1
    assert tree.query(1, 3) == 2
    tree.change(1, 3)
    assert tree.query(1, 2) == 3


def test_bad_edge_index():
    tree = HeavyLightTree(2, [(1, 2, 5)])
    with pytest.raises(IndexError):
        tree.change(2, 1)


def test_bad_edge_count():
    with pytest.raises(ValueError):
        HeavyLightTree(3, [(1, 2, 1)])


@given(weighted_trees(), st.data())
def test_path_maximum_invariants(tree_data, data):
    n, edges = tree_data
    tree = HeavyLightTree(n, edges)
    a, b, c = (data.draw(st.integers(1, n)) for _ in range(3))
    assert tree.query(a, a) == 0
    assert tree.query(a, b) == tree.query(b, a)
    assert tree.query(a, c) <= max(tree.query(a, b), tree.query(b, c))
    for x, y, weight in edges:
        assert tree.query(x, y) == weight


@given(weighted_trees(), st.data())
def test_change_updates_paths(tree_data, data):
    n, edges = tree_data
    tree = HeavyLightTree(n, edges)
    uniform = data.draw(st.integers(0, 100))
    for index in range(1, n):
        tree.change(index, uniform)
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            assert tree.query(a, b) == (0 if a == b else uniform)
    if edges:
        index = data.draw(st.integers(1, n - 1))
        x, y, _ = edges[index - 1]
        tree.change(index, uniform + 1000)
        assert tree.query(x, y) == uniform + 1000