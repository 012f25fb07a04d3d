"""String searching and enumeration routines."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "kmp_search",
    "longest_unique_substring_length",
    "permutations_by_swapping",
    "subsets",
]


def _failure_table(pattern: str) -> list[int]:
    table = [0] * (len(pattern) + 1)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = table[j]
        if pattern[i] == pattern[j]:
            j += 1
        table[i + 1] = j
    return table


def kmp_search(text: str, pattern: str) -> list[int]:
    """All shifts at which ``pattern`` occurs in ``text``, overlaps included."""
    if not pattern:
        return [0]
    if len(text) < len(pattern):
        return []
    table = _failure_table(pattern)
    shifts: list[int] = []
    j = 0
    for i, char in enumerate(text):
        while j > 0 and char != pattern[j]:
            j = table[j]
        if char == pattern[j]:
            j += 1
            if j == len(pattern):
                shifts.append(i - j + 1)
                j = table[j]
    return shifts


def longest_unique_substring_length(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    start = best = 0
    for index, char in enumerate(s):
        if last_seen.get(char, -1) >= start:
            start = last_seen[char] + 1
        last_seen[char] = index
        best = max(best, index - start + 1)
    return best


def permutations_by_swapping(s: str) -> Iterator[str]:
    """Yield every arrangement of ``s`` in swap-recursion order."""
    chars = list(s)
    if not chars:
        return

    def permute(i: int) -> Iterator[str]:
        if i == len(chars) - 1:
            yield "".join(chars)
            return
        for j in range(i, len(chars)):
            chars[i], chars[j] = chars[j], chars[i]
            yield from permute(i + 1)
            chars[i], chars[j] = chars[j], chars[i]

    yield from permute(0)


def subsets(s: str) -> Iterator[str]:
    """Yield every subsequence of ``s``, leaving each character out before taking it."""

    def build(current: str, i: int) -> Iterator[str]:
        if i == len(s):
            yield current
            return
        yield from build(current, i + 1)
        yield from build(current + s[i], i + 1)

    yield from build("", 0)