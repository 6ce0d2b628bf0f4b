"""Small recursive classics: searching, sorting, strings and sums."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def binary_search(values: Sequence[Any], item: Any) -> int:
    """Return an index of ``item`` in the sorted ``values``, or -1 if absent.

    The midpoint of the current range is probed first, so among equal
    items the one found is the first midpoint that lands on one of them.
    """
    left, right = 0, len(values) - 1
    while left <= right:
        mid = (left + right) // 2
        probe = values[mid]
        if item == probe:
            return mid
        if item > probe:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def to_binary(n: int) -> str:
    """Return the binary digits of ``n``; zero gives the empty string."""
    if n < 0:
        raise ValueError("n must not be negative")
    digits: list[str] = []
    while n:
        n, bit = divmod(n, 2)
        digits.append(str(bit))
    return "".join(reversed(digits))


def _merge(left: list[T], right: list[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[T]) -> list[T]:
    """Return a new, stably sorted list of ``values``."""
    items = list(values)
    if len(items) < 2:
        return items
    mid = len(items) // 2
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def merge_sort_in_place(values: list[T]) -> None:
    """Sort the list ``values`` in place, stably."""

    def sort_range(start: int, end: int) -> None:
        if start >= end:
            return
        mid = (start + end) // 2
        sort_range(start, mid)
        sort_range(mid + 1, end)
        values[start:end + 1] = _merge(values[start:mid + 1], values[mid + 1:end + 1])

    sort_range(0, len(values) - 1)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    low, high = 0, len(text) - 1
    while low < high:
        if text[low] != text[high]:
            return False
        low += 1
        high -= 1
    return True


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sum_to(n: int) -> int:
    """Return 1 + 2 + ... + n; a value of ``n`` below 1 is returned unchanged."""
    if n <= 0:
        return n
    return n * (n + 1) // 2