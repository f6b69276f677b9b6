"""Huffman coding trees built from symbol frequencies in a text."""

from __future__ import annotations

import heapq
from collections import Counter
from dataclasses import dataclass
from itertools import count


@dataclass
class _Node:
    freq: int
    symbol: str | None = None
    left: _Node | None = None
    right: _Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class HuffmanTree:
    """Prefix code built from how often each character occurs in ``text``."""

    def __init__(self, text: str) -> None:
        counts = Counter(text)
        if not counts:
            raise ValueError("cannot build a Huffman tree from empty text")
        tick = count()
        heap = [(freq, next(tick), _Node(freq, symbol)) for symbol, freq in sorted(counts.items())]
        heapq.heapify(heap)
        while len(heap) > 1:
            right_freq, _, right = heapq.heappop(heap)
            left_freq, _, left = heapq.heappop(heap)
            total = left_freq + right_freq
            heapq.heappush(heap, (total, next(tick), _Node(total, None, left, right)))
        self._root = heap[0][2]

    def codes(self) -> dict[str, str]:
        """Map each character to its code, written as a string of ``0`` and ``1``."""
        result: dict[str, str] = {}
        stack = [(self._root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_leaf:
                result[node.symbol] = prefix
            if node.right is not None:
                stack.append((node.right, prefix + "1"))
            if node.left is not None:
                stack.append((node.left, prefix + "0"))
        return dict(sorted(result.items()))