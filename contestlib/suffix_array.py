"""Suffix arrays by prefix doubling and longest-common-prefix arrays by Kasai's method."""

from __future__ import annotations


def suffix_array(text: str) -> list[int]:
    """Start positions of the suffixes of ``text`` in sorted order."""
    codes = [ord(ch) + 1 for ch in text]
    codes.append(0)  # sentinel, smaller than every character
    n = len(codes)
    order = sorted(range(n), key=codes.__getitem__)
    classes = [0] * n
    for prev, cur in zip(order, order[1:]):
        classes[cur] = classes[prev] + (codes[cur] != codes[prev])

    length = 1
    while length < n and classes[order[-1]] < n - 1:
        keys = [(classes[i], classes[(i + length) % n]) for i in range(n)]
        order.sort(key=keys.__getitem__)
        fresh = [0] * n
        for prev, cur in zip(order, order[1:]):
            fresh[cur] = fresh[prev] + (keys[cur] != keys[prev])
        classes = fresh
        length *= 2
    return order[1:]


def lcp_array(text: str, suffixes) -> list[int]:
    """Common-prefix lengths of neighbouring suffixes in ``suffixes``.

    Entry ``i`` compares ``suffixes[i]`` with ``suffixes[i - 1]``; entry 0 is 0.
    """
    suffixes = list(suffixes)
    n = len(text)
    if sorted(suffixes) != list(range(n)):
        raise ValueError("suffixes must be a permutation of the positions of text")
    rank = [0] * n
    for r, start in enumerate(suffixes):
        rank[start] = r
    lcp = [0] * n
    k = 0
    for i in range(n):
        r = rank[i]
        if r == 0:
            k = 0
            continue
        j = suffixes[r - 1]
        while i + k < n and j + k < n and text[i + k] == text[j + k]:
            k += 1
        lcp[r] = k
        k = max(k - 1, 0)
    return lcp