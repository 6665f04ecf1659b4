# src/entity_matcher/engine/diff/core.py
"""
core.py

Does: Pick one of the three aligners by name and handle the empty-side cases
      they share.
Returns: char_diff(source, target, algorithm) -> DiffResult.
Used by: Selection/rendering collaborators showing how a match differs from
         its source.
"""

from __future__ import annotations

from typing import Callable, Literal

from ..types import DiffResult
from .lcs import lcs_diff
from .levenshtein import levenshtein_diff
from .myers import myers_diff
from .script import segment, summarize

__all__ = ["DiffAlgorithm", "DIFF_ALGORITHMS", "char_diff"]

DiffAlgorithm = Literal["lcs", "levenshtein", "myers"]

_ALIGNERS: dict[str, Callable[[str, str], DiffResult]] = {
    "lcs": lcs_diff,
    "levenshtein": levenshtein_diff,
    "myers": myers_diff,
}
DIFF_ALGORITHMS: tuple[str, ...] = tuple(_ALIGNERS)


def char_diff(source: str, target: str, algorithm: DiffAlgorithm = "lcs") -> DiffResult:
    """
    Does: Align `source` against `target` one character at a time.
    Returns: Tagged segments plus added/removed/unchanged counts and
             ratio = unchanged / total (1.0 when both sides are empty, 0.0
             when exactly one is).
    Raises: ValueError for an unknown algorithm name.
    """
    try:
        aligner = _ALIGNERS[algorithm]
    except KeyError:
        raise ValueError(
            f"Unknown diff algorithm {algorithm!r}; expected one of {DIFF_ALGORITHMS}"
        ) from None

    source = source or ""
    target = target or ""
    if not source and not target:
        return summarize([])
    if not target:
        return summarize([segment("removed", c) for c in source])
    if not source:
        return summarize([segment("added", c) for c in target])
    return aligner(source, target)
