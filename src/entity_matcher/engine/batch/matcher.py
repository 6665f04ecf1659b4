# src/entity_matcher/engine/batch/matcher.py
"""
matcher.py

Does: Score one source string against every target, keep candidates at or
      above the threshold and rank them (score desc, lower target index first).
Returns: match_source() -> SourceResult, match_all() -> list[SourceResult].
Used by: batch.runner (one call per unit of work) and direct callers.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..fuzzy.scoring import fuse_score
from ..options import MatchContext
from ..types import MatchCandidate, SourceResult

__all__ = ["match_source", "match_all", "top_candidate"]

log = logging.getLogger(__name__)


def match_source(
    source: str,
    targets: Sequence[str],
    context: MatchContext,
    source_index: int = 0,
) -> SourceResult:
    threshold = context.options.threshold
    candidates: list[MatchCandidate] = []
    for j, target in enumerate(targets):
        score = fuse_score(source, target, context)
        if score >= threshold:
            candidates.append({"target_text": target, "score": score, "target_index": j})

    # list.sort is stable, so equal scores keep ascending target order
    candidates.sort(key=lambda c: c["score"], reverse=True)
    log.debug(
        "source #%d %r: %d/%d candidate(s) >= %.2f",
        source_index, source, len(candidates), len(targets), threshold,
    )
    return {"source_text": source, "source_index": source_index, "candidates": candidates}


def match_all(
    sources: Sequence[str],
    targets: Sequence[str],
    context: MatchContext,
) -> list[SourceResult]:
    """Does: Sequential match_source over every source, in order."""
    return [match_source(s, targets, context, i) for i, s in enumerate(sources)]


def top_candidate(result: SourceResult) -> MatchCandidate | None:
    candidates = result["candidates"]
    return candidates[0] if candidates else None
