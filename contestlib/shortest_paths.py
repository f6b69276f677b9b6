"""Shortest paths on undirected weighted graphs with nodes numbered 1..n."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


def _check_node(n: int, node: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _arcs(n: int, edges: Iterable[tuple[int, int, float]]) -> list[tuple[int, int, float]]:
    arcs = []
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        arcs.append((u, v, w))
        arcs.append((v, u, w))
    return arcs


def _relax_until_stable(dist: dict[int, float], arcs, limit: int) -> None:
    passes = 0
    while True:
        changed = False
        for u, v, w in arcs:
            candidate = dist[u] + w
            if candidate < dist[v]:
                dist[v] = candidate
                changed = True
        passes += 1
        if not changed:
            return
        if passes > limit:
            raise NegativeCycleError("graph contains a negative-weight cycle")


def _adjacency(n: int, arcs) -> dict[int, list[tuple[int, float]]]:
    adj: dict[int, list[tuple[int, float]]] = {node: [] for node in range(1, n + 1)}
    for u, v, w in arcs:
        adj[u].append((v, w))
    return adj


def _dijkstra(adj, source: int) -> dict[int, float]:
    dist = {node: math.inf for node in adj}
    dist[source] = 0
    heap = [(0, source)]
    done: set[int] = set()
    while heap:
        d, u = heapq.heappop(heap)
        if u in done:
            continue
        done.add(u)
        for v, w in adj[u]:
            if v in done:
                continue
            candidate = d + w
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist


def bellman_ford(n: int, edges, source: int = 1) -> dict[int, float]:
    """Distances from ``source``; unreachable nodes get ``math.inf``.

    Raises NegativeCycleError if a negative cycle is reachable from ``source``.
    """
    _check_node(n, source)
    arcs = _arcs(n, edges)
    dist = {node: math.inf for node in range(1, n + 1)}
    dist[source] = 0
    _relax_until_stable(dist, arcs, n - 1)
    return dist


def dijkstra(n: int, edges, source: int = 1) -> dict[int, float]:
    """Distances from ``source`` for non-negative weights; unreachable is ``math.inf``."""
    _check_node(n, source)
    return _dijkstra(_adjacency(n, _arcs(n, edges)), source)


def floyd_warshall(n: int, edges) -> dict[tuple[int, int], float]:
    """All-pairs distances keyed by ``(from, to)``."""
    if n < 1:
        raise ValueError("graph needs at least one node")
    dist = [[0 if i == j else math.inf for j in range(n + 1)] for i in range(n + 1)]
    for u, v, w in edges:
        _check_node(n, u)
        _check_node(n, v)
        if w < dist[u][v]:
            dist[u][v] = w
            dist[v][u] = w
    nodes = range(1, n + 1)
    for k in nodes:
        row_k = dist[k]
        for i in nodes:
            row_i = dist[i]
            via = row_i[k]
            if via == math.inf:
                continue
            for j in nodes:
                candidate = via + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
    return {(i, j): dist[i][j] for i in nodes for j in nodes}


def johnson(n: int, edges) -> dict[tuple[int, int], float]:
    """All-pairs distances keyed by ``(from, to)``.

    Raises NegativeCycleError if the graph holds any negative cycle.
    """
    if n < 1:
        raise ValueError("graph needs at least one node")
    arcs = _arcs(n, edges)
    potential = {node: 0 for node in range(1, n + 1)}
    _relax_until_stable(potential, arcs, n)
    reweighted = [(u, v, w + potential[u] - potential[v]) for u, v, w in arcs]
    adj = _adjacency(n, reweighted)
    result: dict[tuple[int, int], float] = {}
    for s in range(1, n + 1):
        for t, d in _dijkstra(adj, s).items():
            result[(s, t)] = d if d == math.inf else d - potential[s] + potential[t]
    return result