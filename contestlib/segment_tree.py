"""Segment trees: point-add range-min, lazy range-add range-sum, and a persistent sum tree.

All positions are 0-based and ranges are inclusive at both ends.
"""

from __future__ import annotations

import math


def _check_range(n: int, left: int, right: int) -> None:
    if not 0 <= left <= right < n:
        raise IndexError(f"range [{left}, {right}] is not inside 0..{n - 1}")


class MinSegmentTree:
    """Range minimum with point additions."""

    def __init__(self, values) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        n = len(values)
        self._n = n
        self._tree = [0] * n + values
        for k in range(n - 1, 0, -1):
            self._tree[k] = min(self._tree[2 * k], self._tree[2 * k + 1])

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to the value at ``index``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside 0..{self._n - 1}")
        k = index + self._n
        self._tree[k] += delta
        k //= 2
        while k:
            self._tree[k] = min(self._tree[2 * k], self._tree[2 * k + 1])
            k //= 2

    def query(self, left: int, right: int) -> int:
        """Smallest value in positions ``left..right``."""
        _check_range(self._n, left, right)
        best = math.inf
        lo, hi = left + self._n, right + self._n + 1
        while lo < hi:
            if lo & 1:
                best = min(best, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                best = min(best, self._tree[hi])
            lo //= 2
            hi //= 2
        return best


class LazySumSegmentTree:
    """Range sums with range additions, using lazy propagation."""

    def __init__(self, values) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(values)
        self._sum = [0] * (4 * self._n)
        self._lazy = [0] * (4 * self._n)
        self._build(1, 0, self._n - 1, values)

    def _build(self, node: int, lo: int, hi: int, values) -> None:
        if lo == hi:
            self._sum[node] = values[lo]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, values)
        self._build(2 * node + 1, mid + 1, hi, values)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        self._sum[node] += pending * (hi - lo + 1)
        if lo != hi:
            self._lazy[2 * node] += pending
            self._lazy[2 * node + 1] += pending
        self._lazy[node] = 0

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        self._push(node, lo, hi)
        if lo > right or hi < left:
            return
        if left <= lo and hi <= right:
            self._lazy[node] += value
            self._push(node, lo, hi)
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, left, right, value)
        self._add(2 * node + 1, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> int:
        self._push(node, lo, hi)
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def range_add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position in ``left..right``."""
        _check_range(self._n, left, right)
        self._add(1, 0, self._n - 1, left, right, value)

    def query(self, left: int, right: int) -> int:
        """Sum of positions ``left..right``."""
        _check_range(self._n, left, right)
        return self._query(1, 0, self._n - 1, left, right)


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: int, left: _Node | None = None, right: _Node | None = None) -> None:
        self.value = value
        self.left = left
        self.right = right


class PersistentSegmentTree:
    """Sum tree whose versions share structure; versions are numbered from 0.

    The values given form version 0. ``copy`` adds a new version, and ``set``
    replaces a version's content without touching any other version.
    """

    def __init__(self, values) -> None:
        values = list(values)
        if not values:
            raise ValueError("a segment tree needs at least one value")
        self._n = len(values)
        self._versions = [self._build(values, 0, self._n - 1)]

    def _build(self, values, lo: int, hi: int) -> _Node:
        if lo == hi:
            return _Node(values[lo])
        mid = (lo + hi) // 2
        left = self._build(values, lo, mid)
        right = self._build(values, mid + 1, hi)
        return _Node(left.value + right.value, left, right)

    def _set(self, node: _Node, lo: int, hi: int, index: int, value: int) -> _Node:
        if lo == hi:
            return _Node(value)
        mid = (lo + hi) // 2
        if index <= mid:
            left = self._set(node.left, lo, mid, index, value)
            right = node.right
        else:
            left = node.left
            right = self._set(node.right, mid + 1, hi, index, value)
        return _Node(left.value + right.value, left, right)

    def _query(self, node: _Node, lo: int, hi: int, left: int, right: int) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return node.value
        mid = (lo + hi) // 2
        return self._query(node.left, lo, mid, left, right) + self._query(
            node.right, mid + 1, hi, left, right
        )

    def _root(self, version: int) -> _Node:
        if not 0 <= version < len(self._versions):
            raise IndexError(f"no version {version}")
        return self._versions[version]

    def set(self, version: int, index: int, value: int) -> None:
        """Set position ``index`` of ``version`` to ``value``."""
        root = self._root(version)
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside 0..{self._n - 1}")
        self._versions[version] = self._set(root, 0, self._n - 1, index, value)

    def query(self, version: int, left: int, right: int) -> int:
        """Sum of positions ``left..right`` in ``version``."""
        root = self._root(version)
        _check_range(self._n, left, right)
        return self._query(root, 0, self._n - 1, left, right)

    def copy(self, version: int) -> int:
        """Add a new version equal to ``version`` and return its number."""
        self._versions.append(self._root(version))
        return len(self._versions) - 1