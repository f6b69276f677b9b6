"""Lowest common ancestor on a rooted tree by binary lifting."""

from __future__ import annotations


class BinaryLiftingLCA:
    """Answers lowest-common-ancestor queries on a tree of nodes 1..n.

    ``edges`` are ``(parent, child)`` pairs.
    """

    def __init__(self, n: int, edges, root: int = 1) -> None:
        if not 1 <= root <= n:
            raise ValueError(f"root {root} is outside 1..{n}")
        children: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
        for parent, child in edges:
            if parent not in children or child not in children:
                raise ValueError(f"edge ({parent}, {child}) uses a node outside 1..{n}")
            children[parent].append(child)

        depth = {root: 0}
        direct = {root: root}
        stack = [root]
        while stack:
            u = stack.pop()
            for v in children[u]:
                if v in depth:
                    continue
                depth[v] = depth[u] + 1
                direct[v] = u
                stack.append(v)
        if len(depth) != n:
            raise ValueError("every node must be reachable from the root")

        self._depth = depth
        self._up = [direct]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append({v: prev[prev[v]] for v in prev})

    def lca(self, a: int, b: int) -> int:
        """Return the deepest node that is an ancestor of both ``a`` and ``b``."""
        for node in (a, b):
            if node not in self._depth:
                raise ValueError(f"unknown node {node}")
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        diff = self._depth[a] - self._depth[b]
        for level, table in enumerate(self._up):
            if diff >> level & 1:
                a = table[a]
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._up[0][a]