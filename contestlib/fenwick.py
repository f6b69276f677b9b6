"""Fenwick (binary indexed) trees for prefix sums in one and two dimensions.

Indices are 1-based: ``prefix_sum(k)`` is the sum of the first ``k`` entries.
"""

from __future__ import annotations


class FenwickTree:
    """Point additions and prefix sums over positions 1..size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, value: int) -> None:
        """Add ``value`` to position ``index``."""
        if not 1 <= index <= self._size:
            raise IndexError(f"index {index} is outside 1..{self._size}")
        while index <= self._size:
            self._tree[index] += value
            index += index & -index

    def prefix_sum(self, index: int) -> int:
        """Sum of positions 1..index; ``prefix_sum(0)`` is 0."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index {index} is outside 0..{self._size}")
        total = 0
        while index > 0:
            total += self._tree[index]
            index -= index & -index
        return total


class FenwickTree2D:
    """Point additions and rectangle sums over cells (1..rows, 1..cols)."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._tree = [[0] * (cols + 1) for _ in range(rows + 1)]

    def add(self, row: int, col: int, value: int) -> None:
        """Add ``value`` to the cell at ``(row, col)``."""
        if not (1 <= row <= self._rows and 1 <= col <= self._cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        i = row
        while i <= self._rows:
            line = self._tree[i]
            j = col
            while j <= self._cols:
                line[j] += value
                j += j & -j
            i += i & -i

    def prefix_sum(self, row: int, col: int) -> int:
        """Sum of the rectangle from ``(1, 1)`` to ``(row, col)``."""
        if not (0 <= row <= self._rows and 0 <= col <= self._cols):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        total = 0
        i = row
        while i > 0:
            line = self._tree[i]
            j = col
            while j > 0:
                total += line[j]
                j -= j & -j
            i -= i & -i
        return total

    def range_sum(self, r1: int, c1: int, r2: int, c2: int) -> int:
        """Sum of the rectangle with corners ``(r1, c1)`` and ``(r2, c2)``, inclusive."""
        if r1 > r2 or c1 > c2:
            raise IndexError("rectangle corners are out of order")
        if r1 < 1 or c1 < 1:
            raise IndexError(f"cell ({r1}, {c1}) is outside the grid")
        return (
            self.prefix_sum(r2, c2)
            - self.prefix_sum(r1 - 1, c2)
            - self.prefix_sum(r2, c1 - 1)
            + self.prefix_sum(r1 - 1, c1 - 1)
        )