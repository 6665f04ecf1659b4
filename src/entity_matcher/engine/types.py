# entity_matcher/engine/types.py
from __future__ import annotations

"""
types.py.

Does: Define the plain-data records produced by a comparison run (candidates,
per-source results, selection states, diff scripts, progress ticks).
Everything here is a TypedDict over primitives so hosts can serialize it
verbatim and rebuild it without any engine behavior attached.
"""

from typing import Literal, Optional, TypedDict

__all__ = [
    "DiffKind",
    "SelectionStatus",
    "MatchCandidate",
    "SourceResult",
    "SelectionState",
    "DiffSegment",
    "DiffResult",
    "RunProgress",
    "SummaryRow",
]

__docformat__ = "google"

DiffKind = Literal["unchanged", "added", "removed"]
SelectionStatus = Literal["unselected", "temp_selected", "locked"]


class MatchCandidate(TypedDict):
    target_text: str
    score: float
    target_index: int


class SourceResult(TypedDict):
    source_text: str
    source_index: int
    candidates: list[MatchCandidate]


class SelectionState(TypedDict):
    status: SelectionStatus
    candidate: Optional[MatchCandidate]


class DiffSegment(TypedDict):
    kind: DiffKind
    char: str


class DiffResult(TypedDict):
    segments: list[DiffSegment]
    added: int
    removed: int
    unchanged: int
    ratio: float


class RunProgress(TypedDict):
    index: int  # 1-based count of finished sources
    total: int
    source_text: str


class SummaryRow(TypedDict):
    source_index: int
    source_text: str
    match_text: Optional[str]
    score: Optional[float]
    percent: Optional[int]
    locked: bool
