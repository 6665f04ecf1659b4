"""
script.py

Does: Shared helpers for edit scripts: segment constructor, aggregate counts
      and the unchanged / total ratio, plus replay of either side.
Used by: The lcs, levenshtein and myers aligners and diff.core.
"""

from __future__ import annotations

from typing import Iterable

from ..types import DiffKind, DiffResult, DiffSegment

__all__ = ["segment", "summarize", "replay_source", "replay_target"]


def segment(kind: DiffKind, char: str) -> DiffSegment:
    return {"kind": kind, "char": char}


def summarize(segments: list[DiffSegment]) -> DiffResult:
    """Count segment kinds; ratio is 1.0 for an empty script."""
    added = sum(1 for s in segments if s["kind"] == "added")
    removed = sum(1 for s in segments if s["kind"] == "removed")
    unchanged = len(segments) - added - removed
    total = added + removed + unchanged
    return {
        "segments": segments,
        "added": added,
        "removed": removed,
        "unchanged": unchanged,
        "ratio": unchanged / total if total else 1.0,
    }


def _replay(segments: Iterable[DiffSegment], keep: DiffKind) -> str:
    return "".join(s["char"] for s in segments if s["kind"] in ("unchanged", keep))


def replay_source(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the source string (unchanged + removed)."""
    return _replay(segments, "removed")


def replay_target(segments: Iterable[DiffSegment]) -> str:
    """Rebuild the target string (unchanged + added)."""
    return _replay(segments, "added")
