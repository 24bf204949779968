import random

import pytest

from algokit.sorting import bubble_sort, counting_sort, merge_sort, selection_sort

SOURCE_EXAMPLES = [
    ([64, 34, 25, 12, 22, 11, 90], [11, 12, 22, 25, 34, 64, 90]),
    ([64, 25, 12, 22, 11], [11, 12, 22, 25, 64]),
    (
        [12, 5, -6, 3, 8, 0, 18, 15, 30, 16, 87, -25, 50, 9],
        [-25, -6, 0, 3, 5, 8, 9, 12, 15, 16, 18, 30, 50, 87],
    ),
    ([34, 1, 7, 98, 45], [1, 7, 34, 45, 98]),
]


@pytest.mark.parametrize("values, expected", SOURCE_EXAMPLES)
def test_source_examples_bubble_sort(values, expected):
    assert bubble_sort(values) == expected


@pytest.mark.parametrize("values, expected", SOURCE_EXAMPLES)
def test_source_examples_selection_sort(values, expected):
    assert selection_sort(values) == expected


@pytest.mark.parametrize("values, expected", SOURCE_EXAMPLES)
def test_source_examples_merge_sort(values, expected):
    assert merge_sort(values) == expected


@pytest.mark.parametrize("values, expected", SOURCE_EXAMPLES)
def test_source_examples_counting_sort(values, expected):
    assert counting_sort(values) == expected


def test_empty_input():
    assert bubble_sort([]) == []
    assert selection_sort([]) == []
    assert merge_sort([]) == []
    assert counting_sort([]) == []


def test_single_element():
    assert bubble_sort([42]) == [42]
    assert selection_sort([42]) == [42]
    assert merge_sort([42]) == [42]
    assert counting_sort([42]) == [42]


def test_input_not_mutated():
    values = [5, 3, 9, 1, 3]
    original = list(values)
    assert bubble_sort(values) == [1, 3, 3, 5, 9]
    assert values == original
    assert selection_sort(values) == [1, 3, 3, 5, 9]
    assert values == original
    assert merge_sort(values) == [1, 3, 3, 5, 9]
    assert values == original
    assert counting_sort(values) == [1, 3, 3, 5, 9]
    assert values == original


def test_duplicates_and_negatives():
    values = [3, -1, 3, 0, -1, 7, 7, 7, -20]
    expected = [-20, -1, -1, 0, 3, 3, 7, 7, 7]
    assert bubble_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert counting_sort(values) == expected


def test_random_inputs_match_builtin():
    rng = random.Random(1234)
    for _ in range(30):
        values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert selection_sort(values) == expected
        assert merge_sort(values) == expected
        assert counting_sort(values) == expected


def test_accepts_any_iterable():
    assert bubble_sort(iter((4, 2, 8))) == [2, 4, 8]
    assert selection_sort(iter((4, 2, 8))) == [2, 4, 8]
    assert merge_sort(iter((4, 2, 8))) == [2, 4, 8]
    assert counting_sort(iter((4, 2, 8))) == [2, 4, 8]


def test_comparison_sorts_handle_strings():
    words = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert selection_sort(words) == expected
    assert merge_sort(words) == expected


def test_already_sorted_and_reversed():
    values = list(range(20))
    reversed_values = values[::-1]
    assert bubble_sort(values) == values
    assert bubble_sort(reversed_values) == values
    assert selection_sort(values) == values
    assert selection_sort(reversed_values) == values
    assert merge_sort(values) == values
    assert merge_sort(reversed_values) == values
    assert counting_sort(values) == values
    assert counting_sort(reversed_values) == values