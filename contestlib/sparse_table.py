"""Sparse tables for static range-minimum queries in one and two dimensions.

Positions are 0-based and ranges are inclusive at both ends.
"""

from __future__ import annotations


def _levels(values: list) -> list[list]:
    """Level ``k`` holds the minimum of each window of length ``2**k``."""
    levels = [list(values)]
    k = 1
    while 1 << k <= len(values):
        prev = levels[-1]
        half = 1 << (k - 1)
        levels.append([min(a, b) for a, b in zip(prev, prev[half:])])
        k += 1
    return levels


class SparseTable:
    """Minimum of any range of a fixed sequence in constant time."""

    def __init__(self, values) -> None:
        values = list(values)
        if not values:
            raise ValueError("a sparse table needs at least one value")
        self._n = len(values)
        self._levels = _levels(values)

    def query(self, left: int, right: int) -> int:
        """Smallest value in positions ``left..right``."""
        if not 0 <= left <= right < self._n:
            raise IndexError(f"range [{left}, {right}] is not inside 0..{self._n - 1}")
        k = (right - left + 1).bit_length() - 1
        row = self._levels[k]
        return min(row[left], row[right - (1 << k) + 1])


class SparseTable2D:
    """Minimum of any rectangle of a fixed grid in constant time."""

    def __init__(self, grid) -> None:
        rows = [list(row) for row in grid]
        if not rows or not rows[0]:
            raise ValueError("a sparse table needs a non-empty grid")
        cols = len(rows[0])
        if any(len(row) != cols for row in rows):
            raise ValueError("every row of the grid must have the same length")
        self._rows = len(rows)
        self._cols = cols

        per_row = [_levels(row) for row in rows]
        base = [[levels[kc] for levels in per_row] for kc in range(len(per_row[0]))]
        # self._table[kr][kc][r][c] is the minimum of the 2**kr by 2**kc block at (r, c).
        self._table = [base]
        kr = 1
        while 1 << kr <= self._rows:
            prev = self._table[-1]
            half = 1 << (kr - 1)
            self._table.append(
                [
                    [[min(a, b) for a, b in zip(upper, lower)] for upper, lower in zip(lines, lines[half:])]
                    for lines in prev
                ]
            )
            kr += 1

    def query(self, r1: int, c1: int, r2: int, c2: int) -> int:
        """Smallest value in the rectangle with corners ``(r1, c1)`` and ``(r2, c2)``."""
        if not (0 <= r1 <= r2 < self._rows and 0 <= c1 <= c2 < self._cols):
            raise IndexError("rectangle is not inside the grid")
        kr = (r2 - r1 + 1).bit_length() - 1
        kc = (c2 - c1 + 1).bit_length() - 1
        block = self._table[kr][kc]
        top, bottom = r1, r2 - (1 << kr) + 1
        left, right = c1, c2 - (1 << kc) + 1
        return min(block[top][left], block[top][right], block[bottom][left], block[bottom][right])