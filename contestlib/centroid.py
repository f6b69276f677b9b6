"""Centroids of trees and centroid decomposition; nodes are numbered 1..n."""

from __future__ import annotations

from collections.abc import Iterable


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    count = 0
    for a, b in edges:
        if a not in adj or b not in adj:
            raise ValueError(f"edge ({a}, {b}) uses a node outside 1..{n}")
        adj[a].append(b)
        adj[b].append(a)
        count += 1
    if count != n - 1:
        raise ValueError("a tree on n nodes has exactly n - 1 edges")
    seen = {1}
    stack = [1]
    while stack:
        u = stack.pop()
        for v in adj[u]:
            if v not in seen:
                seen.add(v)
                stack.append(v)
    if len(seen) != n:
        raise ValueError("edges do not form a connected tree")
    return adj


def _subtree_sizes(adj, start: int, removed) -> dict[int, int]:
    parent = {start: None}
    order = []
    stack = [start]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if v != parent[u] and v not in removed:
                parent[v] = u
                stack.append(v)
    size = dict.fromkeys(order, 1)
    for u in reversed(order):
        if parent[u] is not None:
            size[parent[u]] += size[u]
    return size


def _centroid_of(adj, start: int, removed) -> int:
    size = _subtree_sizes(adj, start, removed)
    total = size[start]
    node, came_from = start, None
    while True:
        for v in adj[node]:
            if v != came_from and v not in removed and size[v] * 2 > total:
                node, came_from = v, node
                break
        else:
            return node


def find_centroid(n: int, edges) -> int:
    """Return a centroid: a node whose removal leaves parts of at most n/2 nodes."""
    return _centroid_of(_tree_adjacency(n, edges), 1, frozenset())


def centroid_decomposition(n: int, edges, root: int = 1) -> dict[int, int | None]:
    """Map each node to its parent in the centroid tree (``None`` for the top)."""
    adj = _tree_adjacency(n, edges)
    if root not in adj:
        raise ValueError(f"root {root} is outside 1..{n}")
    removed: set[int] = set()
    parents: dict[int, int | None] = {}
    pending: list[tuple[int, int | None]] = [(root, None)]
    while pending:
        start, above = pending.pop()
        centre = _centroid_of(adj, start, removed)
        removed.add(centre)
        parents[centre] = above
        pending.extend((v, centre) for v in adj[centre] if v not in removed)
    return parents