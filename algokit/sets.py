"""Set operations on sequences, following list order and multiplicity."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import product
from typing import Any


def _merge(a: Sequence[Any], b: Sequence[Any], keep_common: bool) -> list[Any]:
    result: list[Any] = []
    i = j = 0
    while i < len(a) and j < len(b):
        if a[i] < b[j]:
            result.append(a[i])
            i += 1
        elif b[j] < a[i]:
            result.append(b[j])
            j += 1
        else:
            if keep_common:
                result.append(a[i])
            i += 1
            j += 1
    result.extend(a[i:])
    result.extend(b[j:])
    return result


def sorted_union(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return the union of two ascending sequences, in ascending order."""
    return _merge(a, b, keep_common=True)


def intersection(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return each element of *a* once for every equal element in *b*."""
    return [x for x in a for y in b if x == y]


def difference(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return the elements of *a* that do not occur in *b*."""
    return [x for x in a if x not in b]


def symmetric_difference(a: Sequence[Any], b: Sequence[Any]) -> list[Any]:
    """Return the elements in exactly one of two ascending sequences, in
    ascending order."""
    return _merge(a, b, keep_common=False)


def is_subset(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """Return whether every element of *a* occurs in *b*."""
    return all(x in b for x in a)


def cartesian_product(a: Sequence[Any], b: Sequence[Any]) -> list[tuple[Any, Any]]:
    """Return every pair (x, y) with x from *a* and y from *b*, row by row."""
    return list(product(a, b))


def complement(a: Sequence[Any], universe: Sequence[Any]) -> list[Any]:
    """Return the elements of *universe* that are not in *a*."""
    return [u for u in universe if u not in a]