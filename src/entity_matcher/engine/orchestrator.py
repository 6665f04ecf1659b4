# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry points tying the pieces together for a host:
      split pasted columns into lists, run a full comparison, and diff a
      source against the match currently chosen for it.
Returns:
  - compare_lists(sources, targets, options, progress) -> ComparisonRun (finished)
  - match_diff(run, index, algorithm) -> DiffResult | None
  - split_lines(text) -> list[str]
  - load_sample() -> {"sources": [...], "targets": [...], "synonym_spec": str}
Used by: CLI demo, notebooks, UI hosts.
"""

import logging
from typing import Any, Optional, Sequence

from .batch.runner import ComparisonRun, ProgressCallback
from .diff.core import DiffAlgorithm, char_diff
from .options import ComparisonOptions, build_context
from .types import DiffResult
from .utils.load_config import ConfigTypeError, load_config

logger = logging.getLogger(__name__)

SAMPLE_FILE = "sample_entities"

__all__ = [
    "compare_lists",
    "match_diff",
    "split_lines",
    "load_sample",
]


def split_lines(text: Optional[str]) -> list[str]:
    """One entity per line; lines are trimmed and blank ones dropped."""
    if not text:
        return []
    return [line.strip() for line in text.splitlines() if line.strip()]


def load_sample() -> dict[str, Any]:
    """Bundled demo lists (company names in several spellings)."""
    data = load_config(SAMPLE_FILE, mode="raw")
    if not isinstance(data, dict) or not {"sources", "targets"} <= set(data):
        raise ConfigTypeError(f"{SAMPLE_FILE}.json: expected 'sources' and 'targets' lists")
    return {
        "sources": list(data["sources"]),
        "targets": list(data["targets"]),
        "synonym_spec": data.get("synonym_spec", ""),
    }


def compare_lists(
    sources: Sequence[str],
    targets: Sequence[str],
    options: Optional[ComparisonOptions] = None,
    progress: Optional[ProgressCallback] = None,
) -> ComparisonRun:
    """Build the run context once, then score every source against all targets."""
    run = ComparisonRun(build_context(options))
    run.start(sources, targets, progress=progress)
    return run


def match_diff(
    run: ComparisonRun,
    index: int,
    algorithm: Optional[DiffAlgorithm] = None,
) -> DiffResult | None:
    """Character diff between source `index` and its effective match, if any."""
    match = run.board.effective_match(index)
    if match is None:
        return None
    algo = algorithm or run.context.options.diff_algorithm
    return char_diff(run.board.result(index)["source_text"], match["target_text"], algo)  # type: ignore[arg-type]
