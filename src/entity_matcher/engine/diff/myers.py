"""
myers.py

Does: Greedy Myers O((m+n)·d) alignment. The forward pass keeps the furthest
      x reached on every diagonal k = x - y and snapshots that frontier at the
      start of each depth d; the backtrack walks the snapshots from the end
      point, turning snakes into unchanged runs and the single step of each
      depth into an added (y advanced) or removed (x advanced) char.
Returns: myers_diff(source, target) -> DiffResult.
"""

from __future__ import annotations

import logging

from ..types import DiffResult, DiffSegment
from .lcs import lcs_diff
from .script import segment, summarize

__all__ = ["myers_diff"]

log = logging.getLogger(__name__)


def _forward(a: str, b: str) -> tuple[list[list[int]], int] | None:
    m, n = len(a), len(b)
    offset = m + n
    v = [0] * (2 * offset + 2)
    trace: list[list[int]] = []
    for d in range(offset + 1):
        trace.append(v[:])
        for k in range(-d, d + 1, 2):
            if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
                x = v[offset + k + 1]  # down: insertion
            else:
                x = v[offset + k - 1] + 1  # right: deletion
            y = x - k
            while x < m and y < n and a[x] == b[y]:
                x += 1
                y += 1
            v[offset + k] = x
            if x >= m and y >= n:
                return trace, d
    return None


def _backtrack(a: str, b: str, trace: list[list[int]], depth: int) -> list[DiffSegment]:
    offset = len(a) + len(b)
    out: list[DiffSegment] = []
    x, y = len(a), len(b)
    for d in range(depth, -1, -1):
        v = trace[d]
        k = x - y
        if k == -d or (k != d and v[offset + k - 1] < v[offset + k + 1]):
            prev_k = k + 1
        else:
            prev_k = k - 1
        prev_x = v[offset + prev_k]
        prev_y = prev_x - prev_k
        while x > prev_x and y > prev_y:
            out.append(segment("unchanged", a[x - 1]))
            x -= 1
            y -= 1
        if d > 0:
            if x == prev_x:
                out.append(segment("added", b[y - 1]))
                y -= 1
            else:
                out.append(segment("removed", a[x - 1]))
                x -= 1
    out.reverse()
    return out


def myers_diff(source: str, target: str) -> DiffResult:
    found = _forward(source, target)
    if found is None:
        log.warning("Myers pass did not terminate for %r / %r; using LCS", source, target)
        return lcs_diff(source, target)
    trace, depth = found
    return summarize(_backtrack(source, target, trace, depth))
