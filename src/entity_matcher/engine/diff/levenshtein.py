"""
levenshtein.py

Does: Character alignment from a Levenshtein DP table. On backtrack a
      substitution (emitted as removed + added) is preferred, then a deletion,
      then an insertion.
Returns: levenshtein_diff(source, target) -> DiffResult.
"""

from __future__ import annotations

from ..types import DiffResult, DiffSegment
from .script import segment, summarize

__all__ = ["edit_table", "levenshtein_diff"]


def edit_table(a: str, b: str) -> list[list[int]]:
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1])
    return dp


def levenshtein_diff(source: str, target: str) -> DiffResult:
    dp = edit_table(source, target)
    # built back to front, reversed at the end
    out: list[DiffSegment] = []
    i, j = len(source), len(target)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and source[i - 1] == target[j - 1]:
            out.append(segment("unchanged", source[i - 1]))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            out.append(segment("added", target[j - 1]))
            out.append(segment("removed", source[i - 1]))
            i -= 1
            j -= 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            out.append(segment("removed", source[i - 1]))
            i -= 1
        else:
            out.append(segment("added", target[j - 1]))
            j -= 1
    out.reverse()
    return summarize(out)
