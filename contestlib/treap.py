"""A randomised balanced binary search tree holding a multiset of keys."""

from __future__ import annotations

import random
from collections.abc import Iterator


class _Node:
    __slots__ = ("key", "priority", "size", "left", "right")

    def __init__(self, key, priority: float) -> None:
        self.key = key
        self.priority = priority
        self.size = 1
        self.left: _Node | None = None
        self.right: _Node | None = None


def _size(node: _Node | None) -> int:
    return node.size if node else 0


def _refresh(node: _Node | None) -> None:
    if node:
        node.size = _size(node.left) + _size(node.right) + 1


def _split(node: _Node | None, key) -> tuple[_Node | None, _Node | None]:
    """Split into keys ``<= key`` and keys ``> key``."""
    if node is None:
        return None, None
    if key >= node.key:
        node.right, right = _split(node.right, key)
        _refresh(node)
        return node, right
    left, node.left = _split(node.left, key)
    _refresh(node)
    return left, node


def _merge(left: _Node | None, right: _Node | None) -> _Node | None:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority > right.priority:
        left.right = _merge(left.right, right)
        _refresh(left)
        return left
    right.left = _merge(left, right.left)
    _refresh(right)
    return right


def _erase(node: _Node | None, key) -> _Node | None:
    if node is None:
        return None
    if key == node.key:
        return _merge(node.left, node.right)
    if key > node.key:
        node.right = _erase(node.right, key)
    else:
        node.left = _erase(node.left, key)
    _refresh(node)
    return node


class Treap:
    """Sorted multiset with logarithmic expected insert and erase."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._root: _Node | None = None

    def insert(self, key) -> None:
        """Add one occurrence of ``key``."""
        left, right = _split(self._root, key)
        self._root = _merge(_merge(left, _Node(key, self._rng.random())), right)

    def erase(self, key) -> None:
        """Remove one occurrence of ``key``; a missing key is left alone."""
        self._root = _erase(self._root, key)

    def __len__(self) -> int:
        return _size(self._root)

    def __contains__(self, key) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.right if key > node.key else node.left
        return False

    def __iter__(self) -> Iterator:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right