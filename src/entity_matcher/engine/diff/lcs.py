"""
lcs.py

Does: Character alignment from a longest-common-subsequence DP table.
      Backtracking favours deletions on ties, so removed chars come before
      added ones inside a changed run.
Returns: lcs_diff(source, target) -> DiffResult.
"""

from __future__ import annotations

from ..types import DiffResult, DiffSegment
from .script import segment, summarize

__all__ = ["lcs_table", "lcs_diff"]


def lcs_table(a: str, b: str) -> list[list[int]]:
    """dp[i][j] = LCS length of a[:i] and b[:j]."""
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        ai = a[i - 1]
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if ai == b[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def lcs_diff(source: str, target: str) -> DiffResult:
    dp = lcs_table(source, target)
    out: list[DiffSegment] = []
    i, j = len(source), len(target)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and source[i - 1] == target[j - 1]:
            out.append(segment("unchanged", source[i - 1]))
            i -= 1
            j -= 1
        elif i > 0 and (j == 0 or dp[i - 1][j] >= dp[i][j - 1]):
            out.append(segment("removed", source[i - 1]))
            i -= 1
        else:
            out.append(segment("added", target[j - 1]))
            j -= 1
    out.reverse()
    return summarize(out)
