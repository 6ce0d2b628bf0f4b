"""Every way of building a target string from a bank of reusable words."""

from __future__ import annotations

from collections.abc import Sequence


def _word_bank(word_bank: Sequence[str]) -> tuple[str, ...]:
    bank = tuple(word_bank)
    if any(not word for word in bank):
        raise ValueError("words in the bank must not be empty")
    return bank


def all_construct(target: str, word_bank: Sequence[str]) -> list[list[str]]:
    """Return every sequence of bank words whose concatenation is ``target``.

    Words are tried in bank order at each position, depth first, so the
    ways come out grouped by their first word. An empty target has one
    way: the empty sequence.
    """
    bank = _word_bank(word_bank)
    memo: dict[int, list[list[str]]] = {}

    def solve(start: int) -> list[list[str]]:
        if start == len(target):
            return [[]]
        if start not in memo:
            memo[start] = [
                [word, *rest]
                for word in bank
                if target.startswith(word, start)
                for rest in solve(start + len(word))
            ]
        return memo[start]

    return [list(way) for way in solve(0)]


def all_construct_table(target: str, word_bank: Sequence[str]) -> list[list[list[str]]]:
    """Return, for each prefix length 0..len(target), every way to build that prefix.

    Ways are collected by sweeping the prefixes from shortest to longest and
    extending each known way by every bank word that follows it.
    """
    bank = _word_bank(word_bank)
    table: list[list[list[str]]] = [[] for _ in range(len(target) + 1)]
    table[0].append([])
    for start, ways in enumerate(table):
        if not ways:
            continue
        for word in bank:
            if target.startswith(word, start):
                table[start + len(word)].extend([*way, word] for way in ways)
    return table