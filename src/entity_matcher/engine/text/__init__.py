# entity_matcher/engine/text/__init__.py
"""
text.

Does: Facade for text preparation: normalization pipeline and synonym tables.
Returns: normalize_text/normalize_term, parse_synonyms/apply_synonyms and friends.
Used by: Options/context construction and the fused scorer.
"""

from __future__ import annotations

# ── Normalization ───────────────────────────────────────────────────────────
from .normalize import (
    FULLWIDTH_MAP,
    NormalizationOptions,
    fold_fullwidth,
    normalize_term,
    normalize_text,
    strip_invisible,
    strip_punctuation,
)

# ── Synonyms ────────────────────────────────────────────────────────────────
from .synonyms import (
    EMPTY_TABLE,
    REPRESENTATIVE_POLICIES,
    RepresentativePolicy,
    SynonymTable,
    apply_synonyms,
    parse_synonyms,
    synonym_groups,
)

__all__ = [
    # Normalization
    "NormalizationOptions",
    "normalize_text",
    "normalize_term",
    "fold_fullwidth",
    "strip_invisible",
    "strip_punctuation",
    "FULLWIDTH_MAP",
    # Synonyms
    "RepresentativePolicy",
    "REPRESENTATIVE_POLICIES",
    "SynonymTable",
    "EMPTY_TABLE",
    "parse_synonyms",
    "apply_synonyms",
    "synonym_groups",
]

__docformat__ = "google"
