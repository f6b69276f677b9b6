"""Lower envelopes of lines: the monotone convex hull trick and a Li Chao tree."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class Line:
    """The line ``y = slope * x + intercept``."""

    slope: int
    intercept: int

    def value_at(self, x: int) -> int:
        """Value of the line at ``x``."""
        return self.slope * x + self.intercept


def _meet(a: Line, b: Line) -> Fraction:
    return Fraction(b.intercept - a.intercept, a.slope - b.slope)


class ConvexHullTrick:
    """Minimum over a set of lines, for lines added with non-increasing slopes.

    ``query`` expects non-decreasing arguments and retires lines it has passed;
    ``query_any`` takes arguments in any order by binary search over the lines
    still held.
    """

    def __init__(self) -> None:
        self._lines: list[Line] = []
        self._starts: list[float | Fraction] = []
        self._head = 0
        self._last_query: int | None = None

    def _live(self) -> int:
        return len(self._lines) - self._head

    def insert(self, slope: int, intercept: int) -> None:
        """Add the line ``slope * x + intercept``."""
        line = Line(slope, intercept)
        if self._live() and slope > self._lines[-1].slope:
            raise ValueError("slopes must be inserted in non-increasing order")
        while self._live() and self._lines[-1].slope == slope:
            if self._lines[-1].intercept <= intercept:
                return
            self._lines.pop()
            self._starts.pop()
        while self._live() > 1 and self._starts[-1] >= _meet(self._lines[-1], line):
            self._lines.pop()
            self._starts.pop()
        start = _meet(self._lines[-1], line) if self._live() else -math.inf
        self._lines.append(line)
        self._starts.append(start)

    def query(self, x: int) -> int:
        """Minimum value at ``x``; successive calls need non-decreasing ``x``."""
        if not self._live():
            raise LookupError("no lines have been inserted")
        if self._last_query is not None and x < self._last_query:
            raise ValueError("query arguments must be non-decreasing")
        self._last_query = x
        while self._live() > 1 and self._starts[self._head + 1] <= x:
            self._head += 1
        return self._lines[self._head].value_at(x)

    def query_any(self, x: int) -> int:
        """Minimum value at ``x`` over the lines still held, in any query order."""
        if not self._live():
            raise LookupError("no lines have been inserted")
        index = bisect_right(self._starts, x, self._head, len(self._starts)) - 1
        return self._lines[max(index, self._head)].value_at(x)


def frog_jumps(heights, cost: int) -> int:
    """Least total cost to go from the first stone to the last.

    A jump from height ``a`` to height ``b`` costs ``(a - b) ** 2 + cost``;
    heights must be non-decreasing.
    """
    heights = list(heights)
    if not heights:
        raise ValueError("need at least one stone")
    hull = ConvexHullTrick()
    best = 0
    hull.insert(-2 * heights[0], best + heights[0] ** 2)
    for h in heights[1:]:
        best = hull.query(h) + cost + h * h
        hull.insert(-2 * h, best + h * h)
    return best


class LiChaoTree:
    """Maximum over a set of lines at integer points of ``low..high``."""

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        self._low = low
        self._high = high
        self._nodes: dict[int, Line] = {}

    def add_line(self, slope: int, intercept: int) -> None:
        """Add the line ``slope * x + intercept``."""
        line = Line(slope, intercept)
        node, lo, hi = 1, self._low, self._high
        while True:
            held = self._nodes.get(node)
            if held is None:
                self._nodes[node] = line
                return
            if lo == hi:
                if line.value_at(lo) > held.value_at(lo):
                    self._nodes[node] = line
                return
            mid = (lo + hi) // 2
            if held.slope > line.slope:
                held, line = line, held
            # ``line`` now has the larger slope.
            if line.value_at(mid) > held.value_at(mid):
                self._nodes[node] = line
                line = held
                node, hi = 2 * node, mid
            else:
                self._nodes[node] = held
                node, lo = 2 * node + 1, mid + 1

    def query(self, x: int) -> int:
        """Largest value at ``x`` over all lines added."""
        if not self._low <= x <= self._high:
            raise ValueError(f"x {x} is outside {self._low}..{self._high}")
        best = None
        node, lo, hi = 1, self._low, self._high
        while node in self._nodes:
            value = self._nodes[node].value_at(x)
            if best is None or value > best:
                best = value
            if lo == hi:
                break
            mid = (lo + hi) // 2
            if x <= mid:
                node, hi = 2 * node, mid
            else:
                node, lo = 2 * node + 1, mid + 1
        if best is None:
            raise LookupError("no lines have been added")
        return best