# src/entity_matcher/engine/fuzzy/__init__.py
"""
fuzzy.

Does: Facade exposing the distance metrics and the fused scorer.

Returns: Public API for edit/phonetic similarity, fused scores and score display helpers.
Used by: Batch matching and hosts that score single pairs.
"""

from __future__ import annotations

# ── Metrics ─────────────────────────────────────────────────────────────────
from .metrics import (
    common_prefix_len,
    edit_distance,
    edit_similarity,
    jaro_similarity,
    phonetic_similarity,
)

# ── Scoring ─────────────────────────────────────────────────────────────────
from .scoring import (
    ScoreBand,
    fuse_score,
    prepare,
    score_band,
    to_percent,
)

__all__ = [
    # Metrics
    "edit_distance",
    "edit_similarity",
    "jaro_similarity",
    "phonetic_similarity",
    "common_prefix_len",
    # Scoring
    "ScoreBand",
    "prepare",
    "fuse_score",
    "to_percent",
    "score_band",
]

__docformat__ = "google"
