"""Square matrix products and powers, optionally modulo a number, with Fibonacci numbers."""

from __future__ import annotations

MOD = 1_000_000_007


def _reduce(value: int, mod: int | None) -> int:
    return value % mod if mod is not None else value


def mat_mul(a, b, mod: int | None = None) -> list[list[int]]:
    """Product of matrices ``a`` and ``b``, reduced modulo ``mod`` when given."""
    a = [list(row) for row in a]
    b = [list(row) for row in b]
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must match rows of the second")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("rows of a matrix must have equal length")
    columns = list(zip(*b))
    return [[_reduce(sum(x * y for x, y in zip(row, col)), mod) for col in columns] for row in a]


def mat_pow(m, power: int, mod: int | None = None) -> list[list[int]]:
    """``m`` raised to a non-negative ``power`` by repeated squaring."""
    m = [list(row) for row in m]
    size = len(m)
    if size == 0 or any(len(row) != size for row in m):
        raise ValueError("matrix must be square and non-empty")
    if power < 0:
        raise ValueError("power must not be negative")
    result = [[_reduce(int(i == j), mod) for j in range(size)] for i in range(size)]
    base = [[_reduce(x, mod) for x in row] for row in m]
    while power:
        if power & 1:
            result = mat_mul(result, base, mod)
        base = mat_mul(base, base, mod)
        power >>= 1
    return result


def fibonacci(n: int, mod: int | None = MOD) -> int:
    """The ``n``-th Fibonacci number (``F(0) = 0``, ``F(1) = 1``) modulo ``mod``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return mat_pow([[1, 1], [1, 0]], n, mod)[0][1]