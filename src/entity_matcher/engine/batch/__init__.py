# src/entity_matcher/engine/batch/__init__.py
"""
batch.

Does: Facade for ranking sources against targets, driving a run unit by unit,
      and the per-source selection state machine.
"""

from __future__ import annotations

from .matcher import match_all, match_source, top_candidate
from .runner import ComparisonRun, ProgressCallback, iter_results
from .selection import ALTERNATIVES_LIMIT, SelectionBoard

__all__ = [
    # Matching
    "match_source",
    "match_all",
    "top_candidate",
    # Runs
    "ComparisonRun",
    "ProgressCallback",
    "iter_results",
    # Selection
    "SelectionBoard",
    "ALTERNATIVES_LIMIT",
]

__docformat__ = "google"
