# src/entity_matcher/engine/fuzzy/scoring.py
from __future__ import annotations

"""
scoring.py

Does: Fuse edit similarity and Jaro-Winkler into one score, after
      normalization and synonym substitution, with exact-match and
      synonym-equivalence short-circuits. Also the display helpers
      (nearest percent, similarity band).
Returns: fuse_score(), prepare(), to_percent(), score_band().
Used by: batch.matcher and hosts rendering scores.
"""

import math
from typing import Literal

from ..options import MatchContext
from ..text.normalize import normalize_text
from ..text.synonyms import apply_synonyms
from .metrics import edit_similarity, phonetic_similarity

__all__ = [
    "ScoreBand",
    "prepare",
    "fuse_score",
    "to_percent",
    "score_band",
]

__docformat__ = "google"

ScoreBand = Literal["exact", "similar", "medium", "low"]

# ── Tunables ─────────────────────────────────────────────────────────────────
SIMILAR_BAND_MIN = 0.8
MEDIUM_BAND_MIN = 0.5


def prepare(text: str, context: MatchContext) -> str:
    """
    Does: Normalize `text` with the run's options, then substitute synonyms.
    Returns: The string the metrics actually compare.
    """
    normalized = normalize_text(text, context.options.normalization)
    return apply_synonyms(context.synonyms, normalized)


def fuse_score(a: str, b: str, context: MatchContext) -> float:
    """
    Does: Weighted edit + phonetic similarity of two raw entity names.

    1. identical raw strings → 1.0
    2. exactly one raw side empty → 0.0
    3. equal after normalization + synonyms → 1.0
    4. else edit * w.edit + phonetic * w.phonetic on the prepared strings

    Returns: Float; inside [0,1] whenever the weights sum to at most 1.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    pa = prepare(a, context)
    pb = prepare(b, context)
    if pa == pb:
        return 1.0

    w = context.options.weights
    return edit_similarity(pa, pb) * w.edit + phonetic_similarity(pa, pb) * w.phonetic


def to_percent(score: float) -> int:
    """Does: Round to the nearest whole percent, halves rounding up (0.125 → 13)."""
    return int(math.floor(score * 100 + 0.5))


def score_band(score: float) -> ScoreBand:
    """Does: Bucket a score the way result tables colour it."""
    if score == 1.0:
        return "exact"
    if score >= SIMILAR_BAND_MIN:
        return "similar"
    if score >= MEDIUM_BAND_MIN:
        return "medium"
    return "low"
