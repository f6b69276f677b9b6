import pytest
from hypothesis import given
from hypothesis import strategies as st

from contestlib.convex_hull import ConvexHullTrick, LiChaoTree, Line, frog_jumps

small = st.integers(-50, 50)
lines_strategy = st.lists(st.tuples(small, st.integers(-500, 500)), min_size=1, max_size=15)


def _lowest(lines, x):
    return min(Line(m, c).value_at(x) for m, c in lines)


def _highest(lines, x):
    return max(Line(m, c).value_at(x) for m, c in lines)


@given(lines_strategy, st.lists(st.integers(-100, 100), min_size=1, max_size=20))
def test_monotone_queries_give_minimum(lines, xs):
    hull = ConvexHullTrick()
    for m, c in sorted(lines, key=lambda line: -line[0]):
        hull.insert(m, c)
    for x in sorted(xs):
        assert hull.query(x) == _lowest(lines, x)


@given(lines_strategy, st.lists(st.integers(-100, 100), min_size=1, max_size=20))
def test_unordered_queries_give_minimum(lines, xs):
    hull = ConvexHullTrick()
    for m, c in sorted(lines, key=lambda line: -line[0]):
        hull.insert(m, c)
    for x in xs:
        assert hull.query_any(x) == _lowest(lines, x)


def test_equal_slopes_keep_lower_line():
    hull = ConvexHullTrick()
    hull.insert(3, 10)
    hull.insert(3, 4)
    hull.insert(3, 7)
    assert hull.query_any(2) == Line(3, 4).value_at(2)


def test_hull_errors():
    hull = ConvexHullTrick()
    with pytest.raises(LookupError):
        hull.query(0)
    with pytest.raises(LookupError):
        hull.query_any(0)
    hull.insert(1, 0)
    with pytest.raises(ValueError):
        hull.insert(2, 0)
    hull.query(5)
    with pytest.raises(ValueError):
        hull.query(4)


@pytest.mark.parametrize(
    ("heights", "cost", "expected"),
    [
        ([1, 2, 3, 4, 5], 6, 20),
        ([500000, 1000000], 1000000000000, 1250000000000),
        ([1, 3, 4, 5, 10, 11, 12, 13], 5, 62),
    ],
)
def test_frog_examples(heights, cost, expected):
    assert frog_jumps(heights, cost) == expected


def test_frog_needs_stones():
    with pytest.raises(ValueError):
        frog_jumps([], 3)


@given(st.data())
def test_li_chao_gives_maximum(data):
    low = data.draw(st.integers(-20, 20))
    high = data.draw(st.integers(low, low + 30))
    lines = data.draw(lines_strategy)
    tree = LiChaoTree(low, high)
    for m, c in lines:
        tree.add_line(m, c)
    for x in range(low, high + 1):
        assert tree.query(x) == _highest(lines, x)


def test_li_chao_errors():
    with pytest.raises(ValueError):
        LiChaoTree(5, 4)
    tree = LiChaoTree(0, 10)
    with pytest.raises(LookupError):
        tree.query(3)
    tree.add_line(1, 1)
    with pytest.raises(ValueError):
        tree.query(11)