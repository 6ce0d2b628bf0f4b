import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.recursion import (
    binary_search,
    is_palindrome,
    merge_sort,
    merge_sort_in_place,
    reverse_string,
    sum_to,
    to_binary,
)


@given(st.lists(st.integers(-50, 50)), st.integers(-50, 50))
def test_binary_search_finds_present_items(values, item):
    values = sorted(values)
    index = binary_search(values, item)
    if item in values:
        assert values[index] == item
    else:
        assert index == -1


def test_binary_search_empty():
    assert binary_search([], 3) == -1


def test_binary_search_exact_positions():
    values = [2, 4, 6, 8, 10]
    for position, value in enumerate(values):
        assert binary_search(values, value) == position


def test_to_binary_of_twelve():
    assert to_binary(12) == "1100"


def test_to_binary_zero_is_empty():
    assert to_binary(0) == ""


@given(st.integers(1, 10**12))
def test_to_binary_round_trip(n):
    digits = to_binary(n)
    assert int(digits, 2) == n
    assert digits == format(n, "b")


def test_to_binary_negative_raises():
    with pytest.raises(ValueError):
        to_binary(-1)


@given(st.lists(st.integers()))
def test_merge_sort_matches_sorted(values):
    original = list(values)
    assert merge_sort(values) == sorted(values)
    assert values == original


@given(st.lists(st.integers()))
def test_merge_sort_in_place(values):
    expected = sorted(values)
    result = merge_sort_in_place(values)
    assert result is None
    assert values == expected


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __lt__(self, other):
            return self.key < other.key

    items = [Key(2, "a"), Key(1, "b"), Key(2, "c"), Key(1, "d")]
    assert [k.tag for k in merge_sort(items)] == ["b", "d", "a", "c"]
    merge_sort_in_place(items)
    assert [k.tag for k in items] == ["b", "d", "a", "c"]


@pytest.mark.parametrize(
    "text, expected",
    [("", True), ("a", True), ("racecar", True), ("abba", True), ("ab", False), ("abca", False)],
)
def test_is_palindrome(text, expected):
    assert is_palindrome(text) is expected


@given(st.text())
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome(text + text[::-1])
    assert is_palindrome(text + "x" + text[::-1])


def test_reverse_string_example():
    assert reverse_string("abc") == "cba"


@given(st.text())
def test_reverse_string_is_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


@given(st.integers(1, 10_000))
def test_sum_to_matches_sum(n):
    assert sum_to(n) == sum(range(1, n + 1))


@pytest.mark.parametrize("n", [0, -1, -7])
def test_sum_to_non_positive_returns_input(n):
    assert sum_to(n) == n