"""Number-theoretic and recursive classics."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import pairwise

FIBONACCI_MODULUS = 29989


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    """Division rounding toward zero, with the matching remainder."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def ext_euclidean(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a * x + b * y == g``, ``g`` the gcd."""
    if b == 0:
        return a, 1, 0
    quotient, remainder = _trunc_divmod(a, b)
    g, x_b, y_rem = ext_euclidean(b, remainder)
    return g, y_rem, x_b - quotient * y_rem


def _mat_mul(a, b):
    (a00, a01), (a10, a11) = a
    (b00, b01), (b10, b11) = b
    m = FIBONACCI_MODULUS
    return (
        ((a00 * b00 + a01 * b10) % m, (a00 * b01 + a01 * b11) % m),
        ((a10 * b00 + a11 * b10) % m, (a10 * b01 + a11 * b11) % m),
    )


def fibonacci_mod(n: int) -> int:
    """Return the ``n``-th Fibonacci number modulo 29989."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    base = ((1, 1), (1, 0))
    result = ((1, 0), (0, 1))
    exponent = n - 1
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, base)
        base = _mat_mul(base, base)
        exponent >>= 1
    return result[0][0] % FIBONACCI_MODULUS


def binomial(n: int, m: int) -> int:
    """Return C(n, m) built from Pascal's rule."""
    if n < 0 or not 0 <= m <= n:
        raise ValueError(f"need 0 <= m <= n, got n={n}, m={m}")
    row = [1]
    for _ in range(n):
        row = [1, *(left + right for left, right in pairwise(row)), 1]
    return row[m]


def josephus(n: int, k: int) -> int:
    """Return the 0-based index of the survivor among ``n`` people."""
    survivor = 0
    for size in range(2, n + 1):
        survivor = (survivor + k) % size
    return survivor


def josephus_recursive(n: int, k: int) -> int:
    """Recursive form of :func:`josephus`."""
    return (josephus_recursive(n - 1, k) + k) % n if n > 1 else 0


def josephus_order(length: int, k: int) -> list[int]:
    """Return, for each position, the 1-based turn at which it is removed."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if length < 0:
        raise ValueError("length must be non-negative")
    order = [0] * length
    alive = list(range(length))
    position = 0
    for turn in range(1, length + 1):
        position = (position + k - 1) % len(alive)
        order[alive.pop(position)] = turn
    return order


def hanoi_moves(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[tuple[str, str]]:
    """Yield the ``(from, to)`` moves that shift ``n`` disks to ``target``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        yield source, target
        return
    yield from hanoi_moves(n - 1, source, target, spare)
    yield source, target
    yield from hanoi_moves(n - 1, spare, source, target)