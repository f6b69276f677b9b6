"""Strongly connected components, articulation points and bridges."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CutResult:
    """Articulation points and bridges found from one DFS root."""

    cut_vertices: list[int] = field(default_factory=list)
    bridges: list[tuple[int, int]] = field(default_factory=list)


def kosaraju(n: int, edges) -> list[list[int]]:
    """Strongly connected components of a directed graph on nodes 0..n-1.

    Components come in topological order of the condensation; nodes inside a
    component are in the order the reverse-graph search reaches them.
    """
    graph: list[list[int]] = [[] for _ in range(n)]
    reverse: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) uses a node outside 0..{n - 1}")
        graph[u].append(v)
        reverse[v].append(u)

    visited = [False] * n
    finished: list[int] = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(graph[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, iter(graph[v])))
                    break
            else:
                stack.pop()
                finished.append(u)

    assigned = [False] * n
    components: list[list[int]] = []
    for start in reversed(finished):
        if assigned[start]:
            continue
        assigned[start] = True
        component = [start]
        stack = [iter(reverse[start])]
        while stack:
            for v in stack[-1]:
                if not assigned[v]:
                    assigned[v] = True
                    component.append(v)
                    stack.append(iter(reverse[v]))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def find_cut_vertices_and_bridges(n: int, edges, root: int = 1) -> CutResult:
    """Articulation points and bridges of the undirected graph part reachable from ``root``.

    Nodes are numbered 1..n; each bridge is given as ``(parent, child)`` in DFS order.
    """
    adj: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if u not in adj or v not in adj:
            raise ValueError(f"edge ({u}, {v}) uses a node outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    if root not in adj:
        raise ValueError(f"root {root} is outside 1..{n}")

    disc = {root: 0}
    low = {root: 0}
    timer = 1
    root_children = 0
    cut: set[int] = set()
    bridges: set[tuple[int, int]] = set()
    stack = [(root, None, iter(adj[root]))]
    while stack:
        u, parent, neighbours = stack[-1]
        descended = False
        for v in neighbours:
            if v not in disc:
                disc[v] = low[v] = timer
                timer += 1
                if u == root:
                    root_children += 1
                stack.append((v, u, iter(adj[v])))
                descended = True
                break
            if v != parent:
                low[u] = min(low[u], disc[v])
        if descended:
            continue
        stack.pop()
        if parent is None:
            continue
        low[parent] = min(low[parent], low[u])
        if parent != root and low[u] >= disc[parent]:
            cut.add(parent)
        if low[u] > disc[parent]:
            bridges.add((parent, u))
    if root_children > 1:
        cut.add(root)
    return CutResult(sorted(cut), sorted(bridges))