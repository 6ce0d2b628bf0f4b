"""Short arithmetic and array exercises."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import groupby

MOD = 1_000_000_007


class NoSolutionError(ValueError):
    """Raised when a problem instance has no valid answer."""


def collatz_sequence(n: int) -> list[int]:
    """Return the values visited from ``n`` down to 1 by the 3n+1 rule."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = [n]
    while n != 1:
        n = 3 * n + 1 if n % 2 else n // 2
        sequence.append(n)
    return sequence


def missing_number(n: int, numbers: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``numbers`` (which holds the others)."""
    return n * (n + 1) // 2 - sum(numbers)


def longest_repetition(dna: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in run) for _, run in groupby(dna)), default=0)


def increase_array_moves(values: Iterable[int]) -> int:
    """Return the minimum total increments that make ``values`` non-decreasing."""
    moves = 0
    highest: int | None = None
    for value in values:
        if highest is None or value > highest:
            highest = value
        else:
            moves += highest - value
    return moves


def beautiful_permutation(n: int) -> list[int]:
    """Return a permutation of 1..n with no adjacent values differing by one."""
    if n in (2, 3):
        raise NoSolutionError("NO SOLUTION")
    if n == 4:
        return [2, 4, 1, 3]
    second_start = (n + 1) // 2 + 1
    return [
        second_start + i // 2 if i % 2 else 1 + i // 2
        for i in range(n)
    ]


def number_spiral(row: int, col: int) -> int:
    """Return the value at (row, col) of the number spiral, 1-based."""
    if row >= col:
        if row % 2 == 0:
            return row * row - col + 1
        return (row - 1) * (row - 1) + col
    if col % 2 == 1:
        return col * col - row + 1
    return (col - 1) * (col - 1) + row


def two_knights(n: int) -> list[int]:
    """For each k in 1..n, count placements of two non-attacking knights on k x k."""
    return [
        k * k * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2)
        for k in range(1, n + 1)
    ]


def two_sets(n: int) -> tuple[list[int], list[int]]:
    """Split 1..n into two sets of equal sum."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if (n * (n + 1) // 2) % 2:
        raise NoSolutionError("NO")
    if n % 4 == 3:
        first, second, r = [1, 2], [3], 3
    else:
        first, second, r = [1, 4], [2, 3], 4
    while r != n:
        first.extend((r + 2, r + 3))
        second.extend((r + 1, r + 4))
        r += 4
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10^9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    if n < 0:
        raise ValueError("n must not be negative")
    zeros = 0
    while n // 5:
        n //= 5
        zeros += n
    return zeros


def coin_piles(a: int, b: int) -> bool:
    """Tell whether two piles can be emptied by removing (2, 1) or (1, 2) coins."""
    a, b = max(a, b), min(a, b)
    if a > 2 * b:
        return False
    excess = a - b
    b -= excess
    if b < 0:
        return False
    return b % 3 == 0


def digit_countdown_moves(digits: str) -> int:
    """Return the moves needed to bring a digit display down to all zeros.

    Each non-zero digit costs its value, plus one swap to move it to the
    last place unless it is already there.
    """
    if not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("digits must contain only 0-9")
    last = len(digits) - 1
    return sum(
        int(ch) + (position != last)
        for position, ch in enumerate(digits)
        if ch != "0"
    )