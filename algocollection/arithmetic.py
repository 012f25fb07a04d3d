"""Small numeric routines: digit powers, calculators, triangles and puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import NamedTuple

__all__ = [
    "FloatResults",
    "IntegerChain",
    "armstrong_numbers",
    "float_arithmetic",
    "chained_integer_ops",
    "calculate",
    "factorial",
    "max_without_comparison",
    "bitwise_add",
    "to_binary",
    "floyds_triangle",
    "pascals_triangle",
    "tower_of_hanoi",
    "triangular_sum",
]

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


class FloatResults(NamedTuple):
    """The five basic operations on a pair of floats."""

    addition: float
    subtraction: float
    multiplication: float
    division: float
    modulo: float


class IntegerChain(NamedTuple):
    """Values after each step of the chained integer operations."""

    add: int
    sub: int
    mul: int
    div: int
    mod: int


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _trunc_div(a, b)


def armstrong_numbers(limit: int) -> list[int]:
    """Numbers from 1 to ``limit`` equal to the sum of their digits, each raised
    to the number of digits."""
    found: list[int] = []
    for number in range(1, limit + 1):
        digits = [int(d) for d in str(number)]
        if sum(d ** len(digits) for d in digits) == number:
            found.append(number)
    return found


def float_arithmetic(a: float, b: float) -> FloatResults:
    """Sum, difference, product, quotient and ``fmod`` remainder of ``a`` and ``b``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return FloatResults(a + b, a - b, a * b, a / b, math.fmod(a, b))


def chained_integer_ops(a: int, b: int) -> IntegerChain:
    """Apply ``+ b``, ``- b``, ``* b``, ``/ b`` and ``% b`` to ``a`` in turn.

    Division truncates toward zero and the remainder takes the dividend's sign.
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    added = a + b
    subtracted = added - b
    multiplied = subtracted * b
    divided = _trunc_div(multiplied, b)
    remainder = _trunc_mod(divided, b)
    return IntegerChain(added, subtracted, multiplied, divided, remainder)


def calculate(op: str, a: float, b: float) -> float:
    """Apply one of ``+``, ``-``, ``*`` or ``/`` to two operands."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op == "*":
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        return a / b
    raise ValueError(f"operator is not correct: {op!r}")


def factorial(n: int) -> int:
    """Product of the integers from 1 to ``n``; 1 when ``n`` is below 1."""
    return math.prod(range(1, n + 1))


def max_without_comparison(a: int, b: int) -> int:
    """The larger of two integers, computed from their sum and distance."""
    return (a + b + abs(a - b)) // 2


def bitwise_add(a: int, b: int) -> int:
    """Add two 32-bit signed integers with XOR and carries, wrapping on overflow."""
    x = a & _INT32_MASK
    y = b & _INT32_MASK
    while y:
        carry = x & y
        x = x ^ y
        y = (carry << 1) & _INT32_MASK
    return x - (1 << 32) if x & _INT32_SIGN else x


def to_binary(n: int) -> str:
    """Binary digits of a non-negative integer, most significant first."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return "0"
    bits: list[str] = []
    while n:
        n, bit = divmod(n, 2)
        bits.append(str(bit))
    return "".join(reversed(bits))


def floyds_triangle(rows: int) -> list[list[int]]:
    """Rows of consecutive integers from 1, row ``i`` holding ``i`` numbers."""
    triangle: list[list[int]] = []
    start = 1
    for length in range(1, rows + 1):
        triangle.append(list(range(start, start + length)))
        start += length
    return triangle


def pascals_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for _ in range(rows):
        if not triangle:
            triangle.append([1])
            continue
        previous = triangle[-1]
        middle = [left + right for left, right in zip(previous, previous[1:])]
        triangle.append([1, *middle, 1])
    return triangle


def tower_of_hanoi(
    n: int, source: str = "a", spare: str = "b", target: str = "c"
) -> Iterator[tuple[int, str, str]]:
    """Yield ``(disk, from_peg, to_peg)`` moves that shift ``n`` disks to ``target``."""
    if n < 1:
        raise ValueError("at least one disk is needed")

    def solve(count: int, origin: str, via: str, goal: str) -> Iterator[tuple[int, str, str]]:
        if count == 1:
            yield (1, origin, goal)
            return
        yield from solve(count - 1, origin, goal, via)
        yield (count, origin, goal)
        yield from solve(count - 1, via, origin, goal)

    return solve(n, source, spare, target)


def triangular_sum(n: int) -> int:
    """Sum of the integers from 1 to ``n``; 0 when ``n`` is below 1."""
    return sum(range(1, n + 1))