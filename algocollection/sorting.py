"""Sorting and merging routines over lists of integers."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable
from itertools import accumulate

__all__ = [
    "unique_sorted_union",
    "selection_sort",
    "merge_sort",
    "counting_sort",
    "map_count_sort",
    "heap_sort",
    "four_way_merge_sort",
    "quick_sort",
    "sort_binary",
    "merge_into_vacancies",
]


def unique_sorted_union(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Join two sequences, sort them and keep each distinct value once."""
    combined = sorted([*first, *second])
    # After sorting, a value is kept at its last occurrence only.
    return [
        value
        for position, value in enumerate(combined)
        if position + 1 == len(combined) or combined[position + 1] != value
    ]


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort ascending by swapping each slot with every smaller-or-equal later item."""
    items = list(values)
    size = len(items)
    for i in range(size):
        for k in range(i, size):
            if items[i] >= items[k]:
                items[i], items[k] = items[k], items[i]
    return items


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    lp = rp = 0
    while lp < len(left) and rp < len(right):
        if left[lp] < right[rp]:
            merged.append(left[lp])
            lp += 1
        else:
            merged.append(right[rp])
            rp += 1
    merged.extend(left[lp:])
    merged.extend(right[rp:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Top-down two-way merge sort returning a new list."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def counting_sort(values: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    positions = list(accumulate(counts))
    result = [0] * len(items)
    for value in items:
        positions[value] -= 1
        result[positions[value]] = value
    return result


def map_count_sort(values: Iterable[int]) -> list[int]:
    """Sort by tallying each value and emitting the tallies in key order."""
    result: list[int] = []
    for value, count in sorted(Counter(values).items()):
        result.extend([value] * count)
    return result


def _sift_down(heap: list[int], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and heap[left] > heap[largest]:
            largest = left
        if right < size and heap[right] > heap[largest]:
            largest = right
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Iterable[int]) -> list[int]:
    """Heap sort using a max-heap built in place on a copy."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def _half(n: int) -> int:
    """Halve, truncating toward zero."""
    return n // 2 if n >= 0 else -((-n) // 2)


def _four_way(items: list[int], start: int, end: int) -> None:
    if start >= end:
        return
    quarter2 = _half(start + end)
    quarter1 = _half(start + quarter2 - 1)
    quarter3 = _half(quarter2 + end)
    _four_way(items, start, quarter1)
    _four_way(items, quarter1 + 1, quarter2)
    _four_way(items, quarter2 + 1, quarter3)
    _four_way(items, quarter3 + 1, end)
    items[start:end + 1] = list(
        heapq.merge(
            items[start:quarter1 + 1],
            items[quarter1 + 1:quarter2 + 1],
            items[quarter2 + 1:quarter3 + 1],
            items[quarter3 + 1:end + 1],
        )
    )


def four_way_merge_sort(values: Iterable[int]) -> list[int]:
    """Merge sort that splits each range into four parts."""
    items = list(values)
    _four_way(items, 0, len(items) - 1)
    return items


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort with the last element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = items[high]
        boundary = low
        for i in range(low, high + 1):
            if items[i] <= pivot:
                items[boundary], items[i] = items[i], items[boundary]
                boundary += 1
        boundary -= 1
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return items


def sort_binary(values: Iterable[int]) -> list[int]:
    """Put every zero first; every other entry becomes a one."""
    items = list(values)
    zeros = sum(1 for value in items if value == 0)
    return [0] * zeros + [1] * (len(items) - zeros)


def merge_into_vacancies(x: Iterable[int], y: Iterable[int]) -> list[int]:
    """Merge sorted ``y`` into the zero-marked vacant cells of sorted ``x``.

    The non-zero entries of ``x`` are moved to the front and merged with ``y``
    from the back. Cells past the merged part keep their original values.
    """
    cells = list(x)
    extra = list(y)
    if not cells:
        return []
    if len(extra) > cells.count(0):
        raise ValueError("y has more elements than x has vacant cells")
    rest_x = [value for value in cells if value != 0]
    rest_y = list(extra)
    from_back: list[int] = []
    while rest_x and rest_y:
        if rest_x[-1] > rest_y[-1]:
            from_back.append(rest_x.pop())
        else:
            from_back.append(rest_y.pop())
    while rest_y:
        from_back.append(rest_y.pop())
    merged = rest_x + from_back[::-1]
    return merged + cells[len(merged):]