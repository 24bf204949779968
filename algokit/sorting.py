"""Comparison and counting sorts that return a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by repeated adjacent swaps."""
    result = list(items)
    for end in range(len(result) - 1, 0, -1):
        for i in range(end):
            if result[i] > result[i + 1]:
                result[i], result[i + 1] = result[i + 1], result[i]
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by repeated minimum selection."""
    result = list(items)
    for start in range(len(result) - 1):
        smallest = min(range(start, len(result)), key=result.__getitem__)
        result[start], result[smallest] = result[smallest], result[start]
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
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


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted by top-down merging."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return the integers in ascending order, using counts over their range."""
    values = list(items)
    if not values:
        return []
    low = min(values)
    counts = [0] * (max(values) - low + 1)
    for value in values:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]