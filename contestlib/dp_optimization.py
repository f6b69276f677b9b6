"""Dynamic-programming speed-ups: divide and conquer over layers, and Knuth's interval optimisation.

Positions are numbered 1..n. ``cost(i, j)`` is the cost of the block of
positions ``i..j``.
"""

from __future__ import annotations

import math
from collections.abc import Callable

Cost = Callable[[int, int], float]


def _fill_layer(prev: list, now: list, cost: Cost, lo: int, hi: int, opt_lo: int, opt_hi: int) -> None:
    if lo > hi:
        return
    mid = (lo + hi) // 2
    best, best_k = math.inf, opt_lo
    for k in range(opt_lo, min(mid, opt_hi) + 1):
        value = prev[k] + cost(k + 1, mid)
        if value < best:
            best, best_k = value, k
    now[mid] = best
    _fill_layer(prev, now, cost, lo, mid - 1, opt_lo, best_k)
    _fill_layer(prev, now, cost, mid + 1, hi, best_k, opt_hi)


def divide_and_conquer_dp(n: int, layers: int, cost: Cost) -> list:
    """Best costs of splitting every prefix into consecutive blocks.

    The first layer is ``cost(1, j)``; each further layer computes
    ``min over k <= j of previous[k] + cost(k + 1, j)``. ``cost(j + 1, j)`` is
    asked for when a block is left empty. The result holds the value for the
    prefix ``1..j`` at index ``j - 1`` after ``layers`` further layers.
    ``cost`` must satisfy the quadrangle inequality for the result to be optimal.
    """
    if n < 1:
        raise ValueError("need at least one position")
    if layers < 0:
        raise ValueError("layers must not be negative")
    prev = [math.inf] + [cost(1, j) for j in range(1, n + 1)]
    for _ in range(layers):
        now = [math.inf] * (n + 1)
        _fill_layer(prev, now, cost, 1, n, 1, n)
        prev = now
    return prev[1:]


def knuth_dp(n: int, cost: Cost) -> float:
    """Least value of ``dp(1, n)`` where ``dp(i, i) = cost(i, i)`` and
    ``dp(i, j) = min over i <= k < j of dp(i, k) + dp(k + 1, j) + cost(i, j)``.

    Optimal split points are searched between those of the neighbouring
    intervals, which is exact when ``cost`` is monotone and satisfies the
    quadrangle inequality.
    """
    if n < 1:
        raise ValueError("need at least one position")
    dp: dict[tuple[int, int], float] = {}
    opt: dict[tuple[int, int], int] = {}
    for i in range(1, n + 1):
        dp[i, i] = cost(i, i)
        opt[i, i] = i
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            lo = opt[i, j - 1]
            hi = max(lo, min(opt[i + 1, j], j - 1))
            best, best_k = math.inf, lo
            for k in range(lo, hi + 1):
                value = dp[i, k] + dp[k + 1, j]
                if value < best:
                    best, best_k = value, k
            dp[i, j] = best + cost(i, j)
            opt[i, j] = best_k
    return dp[1, n]