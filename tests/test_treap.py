import random

from hypothesis import given
from hypothesis import strategies as st

from contestlib.treap import Treap

ops = st.lists(st.tuples(st.booleans(), st.integers(-20, 20)), max_size=60)


@given(ops, st.integers(0, 1000))
def test_behaves_like_sorted_multiset(operations, seed):
    treap = Treap(random.Random(seed))
    model: list[int] = []
    for is_insert, key in operations:
        if is_insert:
            treap.insert(key)
            model.append(key)
        else:
            treap.erase(key)
            if key in model:
                model.remove(key)
        assert len(treap) == len(model)
    assert list(treap) == sorted(model)
    for key in range(-21, 22):
        assert (key in treap) == (key in model)


@given(st.lists(st.integers(-100, 100), max_size=50))
def test_iteration_is_sorted(keys):
    treap = Treap(random.Random(7))
    for key in keys:
        treap.insert(key)
    assert list(treap) == sorted(keys)


def test_duplicates_are_removed_one_at_a_time():
    treap = Treap(random.Random(1))
    for _ in range(3):
        treap.insert(5)
    treap.erase(5)
    assert list(treap) == [5, 5]
    assert 5 in treap


def test_erasing_missing_key_changes_nothing():
    treap = Treap(random.Random(2))
    for key in (3, 1, 4):
        treap.insert(key)
    treap.erase(9)
    assert list(treap) == [1, 3, 4]
    assert 9 not in treap


def test_default_random_source():
    treap = Treap()
    for key in (2, 8, 5):
        treap.insert(key)
    assert list(treap) == [2, 5, 8]