"""Dynamic-programming classics."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import lru_cache

__all__ = [
    "catalan",
    "matrix_chain_order",
    "coin_change",
    "fibonacci",
    "wine_profit_top_down",
    "wine_profit_bottom_up",
]


def catalan(n: int) -> int:
    """The ``n``-th Catalan number, with ``catalan(0) == 1``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    table = [1, 1]
    for index in range(2, n + 1):
        table.append(sum(table[j] * table[index - j - 1] for j in range(index)))
    return table[n]


def matrix_chain_order(dimensions: Sequence[int]) -> int:
    """Fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` (from 1) has shape ``dimensions[i-1] x dimensions[i]``.
    """
    dims = list(dimensions)
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")

    @lru_cache(maxsize=None)
    def cost(i: int, j: int) -> int:
        if i == j:
            return 0
        return min(
            cost(i, k) + cost(k + 1, j) + dims[i - 1] * dims[k] * dims[j]
            for k in range(i, j)
        )

    return cost(1, len(dims) - 1)


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or ``-1`` if it cannot be made."""
    denominations = list(coins)
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coins must be positive")
    best: list[float] = [0] + [math.inf] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            best[total] = min(best[total], best[total - coin] + 1)
    return -1 if best[amount] == math.inf else int(best[amount])


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def wine_profit_top_down(prices: Sequence[int]) -> int:
    """Best income from selling bottles from either end, one a year at price times year."""
    wine = list(prices)

    @lru_cache(maxsize=None)
    def best(i: int, j: int) -> int:
        if i > j:
            return 0
        day = len(wine) - (j - i)
        return max(
            wine[i] * day + best(i + 1, j),
            wine[j] * day + best(i, j - 1),
        )

    return best(0, len(wine) - 1)


def wine_profit_bottom_up(prices: Sequence[int]) -> int:
    """The same income as :func:`wine_profit_top_down`, computed from a table."""
    wine = list(prices)
    n = len(wine)
    if n == 0:
        return 0
    table = [[0] * (n + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        table[i][i] = wine[i] * n
        for j in range(i + 1, n):
            day = n - (j - i)
            table[i][j] = max(
                wine[i] * day + table[i + 1][j],
                wine[j] * day + table[i][j - 1],
            )
    return table[0][n - 1]