"""Building a target string from a bank of reusable words, memoized and tabulated."""

from __future__ import annotations

from collections.abc import Sequence


def _check_bank(word_bank: Sequence[str]) -> tuple[str, ...]:
    bank = tuple(word_bank)
    if any(not word for word in bank):
        raise ValueError("words in the bank must not be empty")
    return bank


def can_construct(target: str, word_bank: Sequence[str]) -> bool:
    """Tell whether ``target`` is a concatenation of words from ``word_bank``."""
    bank = _check_bank(word_bank)
    memo: dict[int, bool] = {}

    def solve(start: int) -> bool:
        if start == len(target):
            return True
        if start not in memo:
            memo[start] = any(
                target.startswith(word, start) and solve(start + len(word))
                for word in bank
            )
        return memo[start]

    return solve(0)


def can_construct_table(target: str, word_bank: Sequence[str]) -> list[bool]:
    """Return, for each prefix length 0..len(target), whether it can be built."""
    bank = _check_bank(word_bank)
    table = [False] * (len(target) + 1)
    table[0] = True
    for start, reachable in enumerate(table):
        if not reachable:
            continue
        for word in bank:
            if target.startswith(word, start):
                table[start + len(word)] = True
    return table


def count_construct(target: str, word_bank: Sequence[str]) -> int:
    """Return the number of ways to build ``target`` from words in ``word_bank``."""
    bank = _check_bank(word_bank)
    memo: dict[int, int] = {}

    def solve(start: int) -> int:
        if start == len(target):
            return 1
        if start not in memo:
            memo[start] = sum(
                solve(start + len(word))
                for word in bank
                if target.startswith(word, start)
            )
        return memo[start]

    return solve(0)


def count_construct_table(target: str, word_bank: Sequence[str]) -> list[int]:
    """Return, for each prefix length 0..len(target), the number of ways to build it."""
    bank = _check_bank(word_bank)
    table = [0] * (len(target) + 1)
    table[0] = 1
    for start in range(len(target) + 1):
        ways = table[start]
        if not ways:
            continue
        for word in bank:
            if target.startswith(word, start):
                table[start + len(word)] += ways
    return table