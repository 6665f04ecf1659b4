# src/entity_matcher/engine/batch/runner.py
"""
runner.py

Does: Drive a comparison run as a sequence of units of work, one per source
      string in ascending order. Each unit is one source-vs-all-targets pass;
      between units the driver yields control back to the host, reports
      progress and honours a cooperative cancellation flag.
Returns: iter_results() generator and the ComparisonRun driver.
Used by: orchestrator.compare_lists, CLI demo, hosts with their own event loop.
"""

from __future__ import annotations

import logging
from typing import Callable, Generator, Iterator, Optional, Sequence

from ..errors import RunInProgressError
from ..options import MatchContext
from ..types import RunProgress, SourceResult
from ..utils.log import debug
from .matcher import match_source
from .selection import SelectionBoard

__all__ = ["ProgressCallback", "iter_results", "ComparisonRun"]

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[RunProgress], None]


def iter_results(
    sources: Sequence[str],
    targets: Sequence[str],
    context: MatchContext,
) -> Iterator[SourceResult]:
    """Does: Lazily produce one SourceResult per source; each next() is one unit."""
    for index, source in enumerate(sources):
        yield match_source(source, targets, context, index)


class ComparisonRun:
    """
    One comparison run over a fixed context.

    `steps()` hands control back after every unit (a host event loop can
    interleave redraws); `start()` drains it and calls `progress` per unit.
    `cancel()` stops before the next unit; results produced so far stay in
    `results` and in `board`. Every new run clears `board` first.
    """

    def __init__(self, context: MatchContext, board: Optional[SelectionBoard] = None):
        self.context = context
        self.board = board if board is not None else SelectionBoard()
        self.results: list[SourceResult] = []
        self.completed = False
        self._active = False
        self._cancelled = False
        self._stepper: Optional[Generator[RunProgress, None, None]] = None

    @property
    def active(self) -> bool:
        return self._active

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        """Request a stop; takes effect before the next unit starts."""
        if not self._active:
            return
        self._cancelled = True
        logger.info("Run cancelled after %d unit(s)", len(self.results))
        stepper = self._stepper
        # a suspended stepper would never reach its cleanup on its own
        if stepper is not None and not stepper.gi_running:
            stepper.close()
            self._active = False
            self._stepper = None

    def steps(self, sources: Sequence[str], targets: Sequence[str]) -> Iterator[RunProgress]:
        """Begin a run and return the per-unit progress iterator."""
        if self._active:
            raise RunInProgressError("A comparison run is already active; cancel it first")
        self._active = True
        self._cancelled = False
        self.completed = False
        self.results = []
        self.board.reset()
        self._stepper = self._drive(list(sources), list(targets))
        return self._stepper

    def start(
        self,
        sources: Sequence[str],
        targets: Sequence[str],
        progress: Optional[ProgressCallback] = None,
    ) -> list[SourceResult]:
        """Run every unit to completion (or cancellation) and return the results."""
        steps = self.steps(sources, targets)
        try:
            for tick in steps:
                if progress is not None:
                    progress(tick)
        finally:
            # a raising callback must not leave the run marked active
            steps.close()
        return self.results

    def _drive(
        self, sources: list[str], targets: list[str]
    ) -> Generator[RunProgress, None, None]:
        total = len(sources)
        units = iter_results(sources, targets, self.context)
        logger.info("Run started: %d source(s) x %d target(s)", total, len(targets))
        try:
            while not self._cancelled:
                result = next(units, None)
                if result is None:
                    self.completed = True
                    break
                self.results.append(result)
                self.board.register(result)
                tick: RunProgress = {
                    "index": result["source_index"] + 1,
                    "total": total,
                    "source_text": result["source_text"],
                }
                debug(f"{tick['index']}/{total} {tick['source_text']!r}", topic="run")
                yield tick
        finally:
            self._active = False
            self._stepper = None
            if self.completed:
                logger.info("Run finished: %d result(s)", len(self.results))
