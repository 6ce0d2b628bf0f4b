"""Counting, enumeration and construction exercises."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from math import factorial, prod
from string import ascii_lowercase

from .introductory import NoSolutionError


def _next_permutation(items: list) -> bool:
    """Rearrange ``items`` into its next lexicographic permutation, in place."""
    pivot = next(
        (i for i in range(len(items) - 2, -1, -1) if items[i] < items[i + 1]),
        None,
    )
    if pivot is None:
        return False
    successor = next(
        j for j in range(len(items) - 1, pivot, -1) if items[j] > items[pivot]
    )
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    return True


def _check_lowercase(text: str) -> None:
    if any(ch not in ascii_lowercase for ch in text):
        raise ValueError("text must contain only lowercase letters a-z")


def count_arrangements(text: str) -> int:
    """Return the number of distinct strings formed by rearranging ``text``."""
    _check_lowercase(text)
    return factorial(len(text)) // prod(factorial(c) for c in Counter(text).values())


def creating_strings(text: str) -> list[str]:
    """Return every distinct rearrangement of ``text`` in lexicographic order."""
    _check_lowercase(text)
    chars = sorted(text)
    strings = ["".join(chars)]
    while _next_permutation(chars):
        strings.append("".join(chars))
    return strings


def apple_division(weights: Sequence[int]) -> int:
    """Return the smallest difference of sums over all splits into two groups."""
    total = sum(weights)
    subset_sums = {0}
    for weight in weights:
        subset_sums |= {s + weight for s in subset_sums}
    return min(abs(total - 2 * s) for s in subset_sums)


def gray_code(n: int) -> list[str]:
    """Return the reflected Gray code of ``n`` bits."""
    if n <= 0:
        return ["0"]
    codes = ["0", "1"]
    for _ in range(n - 1):
        codes = ["0" + c for c in codes] + ["1" + c for c in reversed(codes)]
    return codes


def _hanoi(n: int, source: int, aux: int, target: int) -> Iterator[tuple[int, int]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi(n - 1, source, target, aux)
    yield source, target
    yield from _hanoi(n - 1, aux, source, target)


def tower_of_hanoi(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` disks from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return list(_hanoi(n, 1, 2, 3))


def palindrome_reorder(text: str) -> str:
    """Rearrange ``text`` into a palindrome built from its letters in sorted order."""
    counts = Counter(text)
    odd = [ch for ch, count in counts.items() if count % 2]
    if len(odd) > 1:
        raise NoSolutionError("NO SOLUTION")
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts))
    return half + "".join(odd) + half[::-1]


def digit_query(position: int) -> int:
    """Return the digit at 1-based ``position`` of the string 123456789101112..."""
    if position < 1:
        raise ValueError("position must be a positive integer")
    width, count, start = 1, 9, 1
    while position > width * count:
        position -= width * count
        width += 1
        count *= 10
        start *= 10
    offset = position - 1
    number = start + offset // width
    return int(str(number)[offset % width])