import pytest
from hypothesis import given, strategies as st

from contestlib.lca import BinaryLiftingLCA


@st.composite
def rooted_trees(draw):
    n = draw(st.integers(1, 40))
    labels = draw(st.permutations(range(1, n + 1)))
    edges = [
        (labels[draw(st.integers(0, child - 1))], labels[child]) for child in range(1, n)
    ]
    return n, edges, labels[0]


def _chain(parent, node):
    chain = [node]
    while node in parent:
        node = parent[node]
        chain.append(node)
    return chain


SAMPLE = [(1, 2), (1, 3), (2, 4), (2, 5), (3, 6)]


def test_sample_tree():
    tree = BinaryLiftingLCA(6, SAMPLE, 1)
    assert tree.lca(4, 5) == 2
    assert tree.lca(4, 6) == 1
    assert tree.lca(5, 5) == 5
    assert tree.lca(2, 4) == 2


def test_other_root():
    tree = BinaryLiftingLCA(3, [(3, 1), (3, 2)], 3)
    assert tree.lca(1, 2) == 3


def test_unreachable_node_rejected():
    with pytest.raises(ValueError):
        BinaryLiftingLCA(3, [(1, 2)], 1)


def test_unknown_query_rejected():
    tree = BinaryLiftingLCA(2, [(1, 2)], 1)
    with pytest.raises(ValueError):
        tree.lca(1, 7)


@given(rooted_trees(), st.data())
def test_result_is_lowest_common_ancestor(tree_data, data):
    n, edges, root = tree_data
    parent = {child: par for par, child in edges}
    tree = BinaryLiftingLCA(n, edges, root)
    a = data.draw(st.integers(1, n))
    b = data.draw(st.integers(1, n))
    result = tree.lca(a, b)
    chain_a, chain_b = _chain(parent, a), _chain(parent, b)
    assert result in chain_a and result in chain_b
    below_a = chain_a[chain_a.index(result) - 1] if result != a else None
    below_b = chain_b[chain_b.index(result) - 1] if result != b else None
    assert below_a is None or below_b is None or below_a != below_b
    assert tree.lca(b, a) == result
    assert tree.lca(root, a) == root