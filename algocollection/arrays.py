"""Problems over integer sequences: scans, prefix sums and greedy choices."""

from __future__ import annotations

import math
from collections.abc import Iterable
from itertools import accumulate, pairwise

__all__ = [
    "find_sorted_triplet",
    "max_profit",
    "equilibrium_indices",
    "shortest_unsorted_subarray",
    "trapped_rain_water",
    "find_pair_with_sum",
    "min_max",
    "nonnegative_product",
    "reversed_elements",
    "fractional_knapsack",
]


def find_sorted_triplet(nums: Iterable[int]) -> tuple[int, int, int] | None:
    """Find ``a < b < c`` appearing in that order, or ``None`` if there is none."""
    items = list(nums)
    if len(items) < 3:
        return None
    min_num = items[0]
    store_min = min_num
    max_seq = math.inf
    for value in items[1:]:
        if value == min_num:
            continue
        if value < min_num:
            min_num = value
        elif value < max_seq:
            max_seq = value
            store_min = min_num
        elif value > max_seq:
            return (store_min, int(max_seq), value)
    return None


def max_profit(prices: Iterable[int]) -> int:
    """Total gain from buying at every local low and selling at every local high."""
    return sum(after - before for before, after in pairwise(prices) if after > before)


def equilibrium_indices(values: Iterable[int]) -> list[int]:
    """Indices whose left sum equals their right sum, highest index first."""
    items = list(values)
    left_sums = [0, *accumulate(items)][: len(items)]
    found: list[int] = []
    right = 0
    for index in range(len(items) - 1, -1, -1):
        if left_sums[index] == right:
            found.append(index)
        right += items[index]
    return found


def shortest_unsorted_subarray(nums: Iterable[int]) -> int:
    """Length of the shortest run that, once sorted, makes the whole list sorted."""
    items = list(nums)
    size = len(items)
    if size <= 1:
        return 0
    prefix_max = list(accumulate(items, max))
    suffix_min = list(accumulate(reversed(items), min))[::-1]

    def out_of_place(i: int) -> bool:
        too_big = i < size - 1 and items[i] > suffix_min[i + 1]
        too_small = i > 0 and items[i] < prefix_max[i - 1]
        return too_big or too_small

    low = next((i for i in range(size) if out_of_place(i)), None)
    if low is None:
        return 0
    high = next(i for i in range(size - 1, -1, -1) if out_of_place(i))
    return high - low + 1


def trapped_rain_water(heights: Iterable[int]) -> int:
    """Units of water held between bars of the given heights."""
    bars = list(heights)
    if not bars:
        return 0
    left = accumulate(bars, max)
    right = list(accumulate(reversed(bars), max))[::-1]
    return sum(
        max(min(lmax, rmax) - height, 0)
        for lmax, rmax, height in zip(left, right, bars)
    )


def find_pair_with_sum(nums: Iterable[int], target: int) -> tuple[int, int] | None:
    """First pair ``(nums[i], nums[j])`` with ``i < j`` summing to ``target``."""
    items = list(nums)
    for i, first in enumerate(items):
        for second in items[i + 1:]:
            if first + second == target:
                return (first, second)
    return None


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Smallest and largest element as ``(minimum, maximum)``."""
    items = list(values)
    if not items:
        raise ValueError("min_max() requires at least one value")
    return (min(items), max(items))


def nonnegative_product(values: Iterable[int]) -> tuple[list[int], int]:
    """The non-negative elements in order, and their product."""
    kept = [value for value in values if value >= 0]
    return kept, math.prod(kept)


def reversed_elements(values: Iterable[int]) -> list[int]:
    """The elements in reverse order."""
    return list(values)[::-1]


def fractional_knapsack(capacity: int, items: Iterable[tuple[int, int]]) -> float:
    """Best value for ``capacity`` when items are ``(price, weight)`` and may be split."""
    goods = list(items)
    for _, weight in goods:
        if weight <= 0:
            raise ValueError("item weights must be positive")
    by_ratio = sorted(goods, key=lambda item: item[0] / item[1], reverse=True)
    total = 0.0
    remaining = capacity
    for price, weight in by_ratio:
        if remaining <= 0:
            break
        if remaining >= weight:
            total += price
            remaining -= weight
        else:
            total += remaining / weight * price
            remaining = 0
    return total