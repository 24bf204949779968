"""Algorithms over one-dimensional integer sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, combinations, pairwise


def max_histogram_area(heights: Sequence[int]) -> int:
    """Return the largest rectangle area under a histogram of bar *heights*."""
    stack: list[int] = []
    best = 0

    def pop_area(right: int) -> int:
        top = stack.pop()
        width = right - stack[-1] - 1 if stack else right
        return heights[top] * width

    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] > height:
            best = max(best, pop_area(i))
        stack.append(i)
    while stack:
        best = max(best, pop_area(len(heights)))
    return best


def min_chocolates(scores: Sequence[int]) -> int:
    """Return the fewest chocolates to hand out so each student gets one or
    more and a student scoring higher than a neighbour gets more than them."""
    if not scores:
        return 0
    left = [1]
    for previous, current in pairwise(scores):
        left.append(left[-1] + 1 if current > previous else 1)
    right = [1]
    for following, current in pairwise(reversed(scores)):
        right.append(right[-1] + 1 if current > following else 1)
    right.reverse()
    return sum(map(max, left, right))


def largest_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous subarray, or 0 if every sum is
    negative."""
    best = 0
    lowest_prefix = 0
    for prefix in accumulate(values):
        best = max(best, prefix - lowest_prefix)
        lowest_prefix = min(lowest_prefix, prefix)
    return best


def linear_search(values: Sequence[int], key: int) -> int:
    """Return the index of the first occurrence of *key*, or -1."""
    return next((i for i, value in enumerate(values) if value == key), -1)


def longest_arithmetic_subarray(values: Sequence[int]) -> int:
    """Return the length of the longest contiguous run with a constant step."""
    if len(values) < 2:
        return len(values)
    steps = [b - a for a, b in pairwise(values)]
    best = current = 2
    for previous, step in pairwise(steps):
        current = current + 1 if step == previous else 2
        best = max(best, current)
    return best


def longest_consecutive_sequence(nums: Sequence[int]) -> int:
    """Return the length of the longest run of consecutive integers in *nums*,
    in any order."""
    present = set(nums)
    best = 0
    for start in present:
        if start - 1 in present:
            continue
        end = start
        while end + 1 in present:
            end += 1
        best = max(best, end - start + 1)
    return best


def kadane(values: Sequence[int]) -> int:
    """Return the largest contiguous subarray sum, floored at 0."""
    if not values:
        raise ValueError("values must not be empty")
    current = best = 0
    for value in values:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def max_circular_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest subarray sum when *values* wraps around, floored
    at 0."""
    wrapped = sum(values) + kadane([-value for value in values])
    return max(wrapped, kadane(values))


def maximum_xor_pair(values: Sequence[int]) -> int:
    """Return the largest XOR of two distinct positions, or 0 with fewer than
    two values."""
    return max((a ^ b for a, b in combinations(values, 2)), default=0)


def median_of_sorted(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two ascending sequences."""
    if len(nums1) > len(nums2):
        nums1, nums2 = nums2, nums1
    x, y = len(nums1), len(nums2)
    if x + y == 0:
        raise ValueError("at least one value is required")
    low, high = 0, x
    while low <= high:
        px = (low + high) // 2
        py = (x + y + 1) // 2 - px
        left_x = nums1[px - 1] if px else float("-inf")
        right_x = nums1[px] if px < x else float("inf")
        left_y = nums2[py - 1] if py else float("-inf")
        right_y = nums2[py] if py < y else float("inf")
        if left_x <= right_y and left_y <= right_x:
            if (x + y) % 2 == 0:
                return (max(left_x, left_y) + min(right_x, right_y)) / 2
            return float(max(left_x, left_y))
        if left_x > right_y:
            high = px - 1
        else:
            low = px + 1
    raise ValueError("inputs must be sorted in ascending order")