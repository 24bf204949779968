"""String searching and comparison algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def compute_lps(pattern: str) -> list[int]:
    """Return, for each prefix of *pattern*, the length of its longest proper
    prefix that is also a suffix."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return the start index of every occurrence of *pattern* in *text*.

    Occurrences may overlap.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    lps = compute_lps(pattern)
    matches: list[int] = []
    matched = 0
    for index, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = lps[matched - 1]
        if char == pattern[matched]:
            matched += 1
        if matched == len(pattern):
            matches.append(index - matched + 1)
            matched = lps[matched - 1]
    return matches


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in *strs*."""
    if not strs:
        return ""
    prefix: list[str] = []
    for chars in zip(*strs):
        if any(char != chars[0] for char in chars):
            break
        prefix.append(chars[0])
    return "".join(prefix)


def min_window(s: str, t: str) -> str:
    """Return the shortest substring of *s* holding every character of *t*
    (with multiplicity), or an empty string if there is none.

    Among windows of equal length the leftmost one is returned.
    """
    if len(s) < len(t):
        return ""
    need = Counter(t)
    required = len(need)
    formed = 0
    left = 0
    best_start = -1
    best_len: int | None = None
    for right, char in enumerate(s):
        if char in need:
            need[char] -= 1
            if need[char] == 0:
                formed += 1
        if formed != required:
            continue
        while formed == required and left <= right:
            leaving = s[left]
            if leaving in need:
                need[leaving] += 1
                if need[leaving] > 0:
                    formed -= 1
            left += 1
        size = right - left + 2
        if best_len is None or size < best_len:
            best_start = left - 1
            best_len = size
    if best_len is None:
        return ""
    return s[best_start:best_start + best_len]


def is_palindrome(s: str) -> bool:
    """Return whether *s* reads the same backwards."""
    return s == s[::-1]


def longest_word(sentence: str) -> str:
    """Return the longest space-separated word of *sentence*.

    On a tie the first such word wins; an empty sentence gives "".
    """
    return max(sentence.split(" "), key=len)