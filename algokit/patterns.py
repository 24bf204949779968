"""Whole-string pattern matching with small regex and wildcard languages."""

from __future__ import annotations


def regex_match(s: str, p: str) -> bool:
    """Return whether *p* matches all of *s*.

    '.' matches any single character and '*' matches zero or more of the
    preceding element.
    """
    if p.startswith("*"):
        raise ValueError("'*' must follow an element")
    columns = len(s) + 1
    rows: list[list[bool]] = [[False] * columns]
    rows[0][0] = True
    for i, token in enumerate(p, start=1):
        row = [False] * columns
        if token == "*":
            row[0] = rows[i - 2][0]
        for j, char in enumerate(s, start=1):
            if token == char or token == ".":
                row[j] = rows[i - 1][j - 1]
            elif token == "*":
                row[j] = rows[i - 2][j]
                if p[i - 2] in (".", char):
                    row[j] = row[j] or row[j - 1]
        rows.append(row)
    return rows[-1][-1]


def wildcard_match(s: str, p: str) -> bool:
    """Return whether *p* matches all of *s*.

    '?' matches any single character and '*' matches any sequence,
    including the empty one.
    """
    previous = [False] * (len(s) + 1)
    previous[0] = True
    for token in p:
        current = [False] * (len(s) + 1)
        current[0] = token == "*" and previous[0]
        for j, char in enumerate(s, start=1):
            if previous[j - 1] and (char == token or token == "?"):
                current[j] = True
            if token == "*" and (previous[j - 1] or previous[j] or current[j - 1]):
                current[j] = True
        previous = current
    return previous[-1]