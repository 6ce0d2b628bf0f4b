"""Fibonacci numbers and grid-travel counts, memoized and tabulated."""

from __future__ import annotations


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must not be negative")


def fibonacci_sequence(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci numbers, starting 0, 1."""
    _check_non_negative(n=n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    # Filling in ascending order keeps the recursion shallow.
    return [fib(k) for k in range(n)]


def fibonacci_table(n: int) -> list[int]:
    """Return the Fibonacci numbers F(0)..F(n), each value pushed forward to the next two."""
    _check_non_negative(n=n)
    table = [0] * (n + 1)
    if n >= 1:
        table[1] = 1
    for k in range(n):
        if k + 1 <= n and k >= 0 and k + 1 != 1:
            table[k + 1] += table[k]
        if k + 2 <= n:
            table[k + 2] += table[k]
    return table


def grid_traveller(rows: int, cols: int) -> int:
    """Count the paths from the top-left to the bottom-right cell moving only right or down."""
    _check_non_negative(rows=rows, cols=cols)
    memo: dict[tuple[int, int], int] = {}

    def go(r: int, c: int) -> int:
        if r == 0 or c == 0:
            return 0
        if r == 1 and c == 1:
            return 1
        key = (min(r, c), max(r, c))
        if key not in memo:
            memo[key] = go(r - 1, c) + go(r, c - 1)
        return memo[key]

    return go(rows, cols)


def grid_traveller_table(rows: int, cols: int) -> list[list[int]]:
    """Return the path counts for every grid size up to ``rows`` x ``cols``.

    Entry ``[i][j]`` is the number of paths through an i x j grid, so the
    last entry answers the full problem.
    """
    _check_non_negative(rows=rows, cols=cols)
    # One spare row and column take the pushes from the last real cells.
    table = [[0] * (cols + 2) for _ in range(rows + 2)]
    table[1][1] = 1
    for i in range(rows + 1):
        for j in range(cols + 1):
            ways = table[i][j]
            table[i + 1][j] += ways
            table[i][j + 1] += ways
    return [row[: cols + 1] for row in table[: rows + 1]]