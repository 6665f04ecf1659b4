# src/entity_matcher/engine/__init__.py
"""
engine.

Does: Public surface of the similarity/diff engine: options and run context,
      scoring, ranking, runs, selection and character diffs.
Used by: entity_matcher.demo and host applications.
"""

from __future__ import annotations

from .batch import ComparisonRun, SelectionBoard, iter_results, match_all, match_source
from .diff import DIFF_ALGORITHMS, char_diff
from .errors import InvalidOptionsError, RunInProgressError
from .fuzzy import (
    edit_distance,
    edit_similarity,
    fuse_score,
    phonetic_similarity,
    score_band,
    to_percent,
)
from .options import (
    ComparisonOptions,
    MatchContext,
    ScoreWeights,
    build_context,
    load_options,
)
from .orchestrator import compare_lists, load_sample, match_diff, split_lines
from .text import NormalizationOptions, apply_synonyms, normalize_text, parse_synonyms

__all__ = [
    # Options
    "ComparisonOptions",
    "NormalizationOptions",
    "ScoreWeights",
    "MatchContext",
    "build_context",
    "load_options",
    # Text
    "normalize_text",
    "parse_synonyms",
    "apply_synonyms",
    # Scoring
    "edit_distance",
    "edit_similarity",
    "phonetic_similarity",
    "fuse_score",
    "to_percent",
    "score_band",
    # Batch
    "match_source",
    "match_all",
    "iter_results",
    "ComparisonRun",
    "SelectionBoard",
    # Diff
    "char_diff",
    "DIFF_ALGORITHMS",
    # High level
    "compare_lists",
    "match_diff",
    "split_lines",
    "load_sample",
    # Errors
    "InvalidOptionsError",
    "RunInProgressError",
]

__docformat__ = "google"
