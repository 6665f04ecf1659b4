# src/entity_matcher/engine/diff/__init__.py
"""
diff.

Does: Facade over the character-level aligners (LCS, Levenshtein, Myers).
Returns: char_diff plus the individual aligners and replay helpers.
"""

from __future__ import annotations

from .core import DIFF_ALGORITHMS, DiffAlgorithm, char_diff
from .lcs import lcs_diff
from .levenshtein import levenshtein_diff
from .myers import myers_diff
from .script import replay_source, replay_target, summarize

__all__ = [
    "DiffAlgorithm",
    "DIFF_ALGORITHMS",
    "char_diff",
    "lcs_diff",
    "levenshtein_diff",
    "myers_diff",
    "replay_source",
    "replay_target",
    "summarize",
]

__docformat__ = "google"
