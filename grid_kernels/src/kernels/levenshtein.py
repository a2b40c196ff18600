"""Levenshtein edit distance."""

from __future__ import annotations

from typing import List


def levenshtein(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning ``a`` into ``b``.

    Insertions, deletions and substitutions each cost one. Characters are
    compared as code points. Only two rows of the DP table are kept.
    """
    m, n = len(a), len(b)
    prev: List[int] = list(range(n + 1))
    curr: List[int] = [0] * (n + 1)
    for i in range(1, m + 1):
        curr[0] = i
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            curr[j] = min(
                curr[j - 1] + 1,  # insert
                prev[j] + 1,  # delete
                prev[j - 1] + cost,  # substitute
            )
        prev, curr = curr, prev
    return prev[n]


__all__ = ["levenshtein"]
