# src/entity_matcher/engine/batch/selection.py
"""
Per-source match selection.
---------------------------
Does:
- Track, for each source index, whether the user has picked a candidate
  (temp_selected), frozen one (locked) or left the ranking alone (unselected)
- Enforce the transition table in one place:
    select_candidate  unselected/temp → temp(c)          locked → no-op
    clear_selection   unselected/temp → unselected       locked → no-op
    toggle_lock       locked → unselected
                      else → locked(temp or top), no-op without any candidate
    register          top score == 1.0 → locked(top), temp discarded
- Resolve the effective match (locked → temp → top → None) and the
  "other matches" list shown next to it
- Snapshot / restore as plain data for hosts that persist a session
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterator, Mapping, Optional

from ..fuzzy.scoring import to_percent
from ..types import MatchCandidate, SelectionState, SourceResult, SummaryRow
from ..utils.log import debug
from .matcher import top_candidate

__all__ = ["SelectionBoard", "ALTERNATIVES_LIMIT"]

logger = logging.getLogger(__name__)

ALTERNATIVES_LIMIT = 5

_UNSELECTED: SelectionState = {"status": "unselected", "candidate": None}


class SelectionBoard:
    """Selection state machine keyed by source index."""

    def __init__(self) -> None:
        self._results: dict[int, SourceResult] = {}
        self._states: dict[int, SelectionState] = {}

    # ── Results ──────────────────────────────────────────────────────────────

    def register(self, result: SourceResult) -> SelectionState:
        """Record a freshly computed result and auto-lock an exact top match."""
        index = result["source_index"]
        self._results[index] = result
        self._states.setdefault(index, dict(_UNSELECTED))  # type: ignore[arg-type]
        top = top_candidate(result)
        if top is not None and top["score"] == 1.0:
            self._states[index] = {"status": "locked", "candidate": top}
            debug(f"#{index} auto-locked on {top['target_text']!r}", topic="selection")
        return self.state(index)

    def reset(self) -> None:
        """Forget every result and selection (a new run starts from scratch)."""
        self._results.clear()
        self._states.clear()

    def result(self, index: int) -> SourceResult:
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._results))

    def _require(self, index: int) -> None:
        if index not in self._results:
            raise KeyError(f"No result registered for source index {index}")

    # ── Transitions ──────────────────────────────────────────────────────────

    def state(self, index: int) -> SelectionState:
        self._require(index)
        return copy.deepcopy(self._states[index])

    def is_locked(self, index: int) -> bool:
        self._require(index)
        return self._states[index]["status"] == "locked"

    def select_candidate(self, index: int, candidate: MatchCandidate) -> SelectionState:
        if not self.is_locked(index):
            self._states[index] = {"status": "temp_selected", "candidate": candidate}
        return self.state(index)

    def clear_selection(self, index: int) -> SelectionState:
        if not self.is_locked(index):
            self._states[index] = dict(_UNSELECTED)  # type: ignore[assignment]
        return self.state(index)

    def toggle_lock(self, index: int) -> SelectionState:
        if self.is_locked(index):
            self._states[index] = dict(_UNSELECTED)  # type: ignore[assignment]
            debug(f"#{index} released", topic="selection")
            return self.state(index)

        current = self._states[index]
        candidate = current["candidate"] or top_candidate(self._results[index])
        if candidate is not None:
            self._states[index] = {"status": "locked", "candidate": candidate}
            debug(f"#{index} locked on {candidate['target_text']!r}", topic="selection")
        return self.state(index)

    # ── Views ────────────────────────────────────────────────────────────────

    def effective_match(self, index: int) -> Optional[MatchCandidate]:
        """Locked candidate, else the temp pick, else the top-ranked one."""
        self._require(index)
        chosen = self._states[index]["candidate"]
        if chosen is not None:
            return chosen
        return top_candidate(self._results[index])

    def alternatives(self, index: int, limit: int = ALTERNATIVES_LIMIT) -> list[MatchCandidate]:
        """Other candidates offered for picking; empty while locked."""
        if self.is_locked(index):
            return []
        chosen = self.effective_match(index)
        others = [
            c for c in self._results[index]["candidates"]
            if chosen is None or c["target_text"] != chosen["target_text"]
        ]
        return others[:limit]

    def summary_rows(self) -> list[SummaryRow]:
        rows: list[SummaryRow] = []
        for index in self:
            match = self.effective_match(index)
            rows.append({
                "source_index": index,
                "source_text": self._results[index]["source_text"],
                "match_text": match["target_text"] if match else None,
                "score": match["score"] if match else None,
                "percent": to_percent(match["score"]) if match else None,
                "locked": self.is_locked(index),
            })
        return rows

    # ── Plain-data round trip ────────────────────────────────────────────────

    def snapshot(self) -> dict[str, Any]:
        return {
            "results": [copy.deepcopy(self._results[i]) for i in self],
            "states": {str(i): copy.deepcopy(self._states[i]) for i in self},
        }

    @classmethod
    def restore(cls, data: Mapping[str, Any]) -> SelectionBoard:
        """Rebuild a board verbatim; no auto-lock is re-applied on restore."""
        board = cls()
        for result in data.get("results", []):
            index = int(result["source_index"])
            board._results[index] = copy.deepcopy(result)
            board._states[index] = dict(_UNSELECTED)  # type: ignore[assignment]
        for key, state in (data.get("states") or {}).items():
            index = int(key)
            if index not in board._results:
                logger.warning("Dropping selection state for unknown index %d", index)
                continue
            if state.get("status") not in ("unselected", "temp_selected", "locked"):
                raise ValueError(f"Unknown selection status {state.get('status')!r}")
            board._states[index] = copy.deepcopy(state)  # type: ignore[assignment]
        return board
