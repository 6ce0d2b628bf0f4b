"""Target-sum problems over a bank of positive numbers, memoized and tabulated.

Every number may be used any number of times.
"""

from __future__ import annotations

from collections.abc import Sequence


def _check_numbers(numbers: Sequence[int]) -> tuple[int, ...]:
    bank = tuple(numbers)
    if any(n <= 0 for n in bank):
        raise ValueError("numbers must all be positive")
    return bank


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def can_sum(target: int, numbers: Sequence[int]) -> bool:
    """Tell whether ``target`` is a sum of values drawn from ``numbers``."""
    bank = _check_numbers(numbers)
    memo: dict[int, bool] = {}

    def solve(remaining: int) -> bool:
        if remaining == 0:
            return True
        if remaining < 0:
            return False
        if remaining not in memo:
            memo[remaining] = any(solve(remaining - n) for n in bank)
        return memo[remaining]

    return solve(target)


def can_sum_table(target: int, numbers: Sequence[int]) -> list[bool]:
    """Return, for every value 0..target, whether it is reachable as a sum."""
    bank = _check_numbers(numbers)
    _check_target(target)
    table = [False] * (target + 1)
    table[0] = True
    for value in range(target):
        if not table[value]:
            continue
        for n in bank:
            if value + n <= target:
                table[value + n] = True
    return table


def how_sum(target: int, numbers: Sequence[int]) -> list[int] | None:
    """Return the first combination found that adds up to ``target``, or None.

    Numbers are tried in the order given, depth first.
    """
    bank = _check_numbers(numbers)
    memo: dict[int, list[int] | None] = {}

    def solve(remaining: int) -> list[int] | None:
        if remaining == 0:
            return []
        if remaining < 0:
            return None
        if remaining not in memo:
            memo[remaining] = None
            for n in bank:
                rest = solve(remaining - n)
                if rest is not None:
                    memo[remaining] = [n, *rest]
                    break
        return memo[remaining]

    return solve(target)


def how_sum_table(target: int, numbers: Sequence[int]) -> list[list[int] | None]:
    """Return, for every value 0..target, some combination reaching it, or None.

    A later combination for the same value replaces an earlier one.
    """
    bank = _check_numbers(numbers)
    _check_target(target)
    table: list[list[int] | None] = [None] * (target + 1)
    table[0] = []
    for value in range(target):
        combination = table[value]
        if combination is None:
            continue
        for n in bank:
            if value + n <= target:
                # The copy is built head-first, which reverses the earlier part.
                table[value + n] = [n, *reversed(combination)]
    return table


def best_sum(target: int, numbers: Sequence[int]) -> list[int] | None:
    """Return a shortest combination adding up to ``target``, or None.

    Among combinations of equal length the first one found is kept.
    """
    bank = _check_numbers(numbers)
    memo: dict[int, list[int] | None] = {}

    def solve(remaining: int) -> list[int] | None:
        if remaining == 0:
            return []
        if remaining < 0:
            return None
        if remaining not in memo:
            shortest: list[int] | None = None
            for n in bank:
                rest = solve(remaining - n)
                if rest is not None and (shortest is None or len(rest) + 1 < len(shortest)):
                    shortest = [n, *rest]
            memo[remaining] = shortest
        return memo[remaining]

    return solve(target)


def best_sum_table(target: int, numbers: Sequence[int]) -> list[list[int] | None]:
    """Return, for every value 0..target, a shortest combination reaching it, or None.

    A combination of equal length found later replaces the earlier one.
    """
    bank = _check_numbers(numbers)
    _check_target(target)
    table: list[list[int] | None] = [None] * (target + 1)
    table[0] = []
    for value in range(target):
        combination = table[value]
        if combination is None:
            continue
        for n in bank:
            if value + n > target:
                continue
            candidate = [n, *reversed(combination)]
            current = table[value + n]
            if current is None or len(current) >= len(candidate):
                table[value + n] = candidate
    return table