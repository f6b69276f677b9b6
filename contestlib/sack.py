"""Sum of the most frequent colours in every subtree of a rooted tree."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field


@dataclass
class _ColourBag:
    counts: Counter = field(default_factory=Counter)
    top: int = 0
    total: int = 0

    def add(self, colour: int, times: int = 1) -> None:
        count = self.counts[colour] + times
        self.counts[colour] = count
        if count > self.top:
            self.top = count
            self.total = colour
        elif count == self.top:
            self.total += colour

    def absorb(self, other: "_ColourBag") -> None:
        for colour, times in other.counts.items():
            self.add(colour, times)


def dominating_colour_sums(n: int, colours, edges) -> list[int]:
    """For each node 1..n of the tree rooted at 1, the sum of its subtree's most frequent colours.

    ``colours[i]`` is the colour of node ``i + 1``; the result is indexed the same way.
    """
    colours = list(colours)
    if n < 1:
        raise ValueError("a tree needs at least one node")
    if len(colours) != n:
        raise ValueError("need exactly one colour per node")
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

    parent = {1: 0}
    order = []
    stack = [1]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adj[u]:
            if v not in parent:
                parent[v] = u
                stack.append(v)
    if len(order) != n:
        raise ValueError("edges do not form a connected tree")

    answers = [0] * n
    pending: dict[int, list[_ColourBag]] = {node: [] for node in adj}
    for u in reversed(order):
        bags = pending.pop(u)
        bags.sort(key=lambda bag: len(bag.counts), reverse=True)
        bag = bags[0] if bags else _ColourBag()
        for smaller in bags[1:]:
            bag.absorb(smaller)
        bag.add(colours[u - 1])
        answers[u - 1] = bag.total
        if parent[u]:
            pending[parent[u]].append(bag)
    return answers