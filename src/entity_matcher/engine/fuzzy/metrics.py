# src/entity_matcher/engine/fuzzy/metrics.py
from __future__ import annotations

"""
metrics.py

Does: The two distance metrics behind the fused score: unit-cost Levenshtein
      (edit distance + length-normalized similarity) and Jaro-Winkler with a
      0.7 boost threshold and a 4-char prefix cap.
Returns: edit_distance(), edit_similarity(), jaro_similarity(), phonetic_similarity().
Used by: fuzzy.scoring (fuse_score) and tests.
"""

from rapidfuzz.distance import Levenshtein

__all__ = [
    "edit_distance",
    "edit_similarity",
    "jaro_similarity",
    "phonetic_similarity",
    "common_prefix_len",
]

__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
WINKLER_BOOST_THRESHOLD = 0.7
WINKLER_SCALING = 0.1
WINKLER_PREFIX_CAP = 4


# ─────────────────────────────────────────────────────────────────────────────
# 1) EDIT DISTANCE
# ─────────────────────────────────────────────────────────────────────────────

def edit_distance(a: str, b: str) -> int:
    """
    Does: Classic Levenshtein distance (insert/delete/substitute all cost 1).
    Returns: Non-negative int, symmetric in its arguments.
    """
    return Levenshtein.distance(a or "", b or "")


def edit_similarity(a: str, b: str) -> float:
    """
    Does: 1 - distance / max(len(a), len(b)).
    Returns: 1.0 when a == b (both empty included); 0.0 when only one is empty.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    return 1.0 - edit_distance(a, b) / max(len(a), len(b))


# ─────────────────────────────────────────────────────────────────────────────
# 2) JARO / JARO-WINKLER
# ─────────────────────────────────────────────────────────────────────────────

def common_prefix_len(a: str, b: str, cap: int = WINKLER_PREFIX_CAP) -> int:
    n = min(len(a), len(b), cap)
    i = 0
    while i < n and a[i] == b[i]:
        i += 1
    return i


def jaro_similarity(a: str, b: str) -> float:
    """
    Does: Plain Jaro score with a window of max(len)//2 - 1 and greedy
          left-to-right matching.
    Returns: Float in [0,1]; 0.0 when the window is negative or nothing matches.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    len_a, len_b = len(a), len(b)
    window = max(len_a, len_b) // 2 - 1
    if window < 0:
        return 0.0

    a_flags = [False] * len_a
    b_flags = [False] * len_b
    matches = 0
    for i, ch in enumerate(a):
        lo = max(0, i - window)
        hi = min(i + window + 1, len_b)
        for j in range(lo, hi):
            if b_flags[j] or b[j] != ch:
                continue
            a_flags[i] = b_flags[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    # matched chars out of order, counted once per mismatching pair slot
    transpositions = 0
    k = 0
    for i, ch in enumerate(a):
        if not a_flags[i]:
            continue
        while not b_flags[k]:
            k += 1
        if ch != b[k]:
            transpositions += 1
        k += 1

    m = float(matches)
    return (m / len_a + m / len_b + (m - transpositions / 2) / m) / 3


def phonetic_similarity(a: str, b: str) -> float:
    """
    Does: Jaro-Winkler: Jaro plus 0.1 * prefix(≤4) * (1 - jaro) once Jaro ≥ 0.7.
    Returns: Float clamped to [0,1]; identical → 1.0, either empty → 0.0.
    """
    jaro = jaro_similarity(a, b)
    if jaro < WINKLER_BOOST_THRESHOLD or jaro >= 1.0:
        return jaro
    boosted = jaro + WINKLER_SCALING * common_prefix_len(a, b) * (1.0 - jaro)
    return max(0.0, min(1.0, boosted))
