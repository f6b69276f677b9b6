"""Path maximum queries on an edge-weighted tree by heavy-light decomposition."""

from __future__ import annotations


class HeavyLightTree:
    """Tree on nodes 1..n with mutable edge weights and path-maximum queries.

    Edges are ``(a, b, weight)`` and are numbered from 1 in the given order.
    Weights are taken as non-negative: an empty path has maximum 0.
    """

    def __init__(self, n: int, edges) -> None:
        if n < 1:
            raise ValueError("a tree needs at least one node")
        edge_list = list(edges)
        if len(edge_list) != n - 1:
            raise ValueError("a tree on n nodes has exactly n - 1 edges")
        adj: dict[int, list[tuple[int, int, int]]] = {node: [] for node in range(1, n + 1)}
        for index, (a, b, weight) in enumerate(edge_list, start=1):
            if a not in adj or b not in adj:
                raise ValueError(f"edge ({a}, {b}) uses a node outside 1..{n}")
            adj[a].append((b, weight, index))
            adj[b].append((a, weight, index))

        parent = {1: 0}
        depth = {1: 0}
        parent_edge: dict[int, tuple[int, int]] = {}
        children: dict[int, list[int]] = {node: [] for node in adj}
        order = []
        stack = [1]
        while stack:
            u = stack.pop()
            order.append(u)
            for v, weight, index in adj[u]:
                if v in depth:
                    continue
                depth[v] = depth[u] + 1
                parent[v] = u
                parent_edge[v] = (weight, index)
                children[u].append(v)
                stack.append(v)
        if len(depth) != n:
            raise ValueError("edges do not form a connected tree")

        size = dict.fromkeys(order, 1)
        for u in reversed(order):
            if parent[u]:
                size[parent[u]] += size[u]

        position: dict[int, int] = {}
        head: dict[int, int] = {}
        counter = 0
        chain_stack = [(1, 1)]
        while chain_stack:
            u, top = chain_stack.pop()
            counter += 1
            position[u] = counter
            head[u] = top
            kids = children[u]
            if not kids:
                continue
            heavy = max(kids, key=size.__getitem__)
            chain_stack.extend((v, v) for v in reversed(kids) if v != heavy)
            chain_stack.append((heavy, top))

        self._n = n
        self._parent = parent
        self._depth = depth
        self._head = head
        self._position = position
        self._edge_position = {index: position[v] for v, (_, index) in parent_edge.items()}
        self._tree = [0] * (2 * n)
        for v, (weight, _) in parent_edge.items():
            self._tree[n + position[v] - 1] = weight
        for k in range(n - 1, 0, -1):
            self._tree[k] = max(self._tree[2 * k], self._tree[2 * k + 1])

    def _range_max(self, left: int, right: int) -> int:
        result = 0
        lo, hi = left - 1 + self._n, right + self._n
        while lo < hi:
            if lo & 1:
                result = max(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = max(result, self._tree[hi])
            lo //= 2
            hi //= 2
        return result

    def change(self, edge_index: int, weight: int) -> None:
        """Set the weight of the edge numbered ``edge_index``."""
        if edge_index not in self._edge_position:
            raise IndexError(f"no edge numbered {edge_index}")
        k = self._n + self._edge_position[edge_index] - 1
        self._tree[k] = weight
        k //= 2
        while k:
            self._tree[k] = max(self._tree[2 * k], self._tree[2 * k + 1])
            k //= 2

    def query(self, a: int, b: int) -> int:
        """Largest edge weight on the path between ``a`` and ``b``."""
        for node in (a, b):
            if node not in self._depth:
                raise ValueError(f"unknown node {node}")
        head, depth, position = self._head, self._depth, self._position
        best = 0
        while head[a] != head[b]:
            if depth[head[a]] < depth[head[b]]:
                a, b = b, a
            best = max(best, self._range_max(position[head[a]], position[a]))
            a = self._parent[head[a]]
        if a == b:
            return best
        if depth[a] > depth[b]:
            a, b = b, a
        return max(best, self._range_max(position[a] + 1, position[b]))