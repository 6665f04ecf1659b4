"""Exceptions raised by the matching engine.

The engine is total for text input; only misconfiguration and misuse of the
run driver surface as errors.
"""

from __future__ import annotations

__all__ = ["InvalidOptionsError", "RunInProgressError"]


class InvalidOptionsError(ValueError):
    """Raise when comparison options are out of range or of the wrong type."""


class RunInProgressError(RuntimeError):
    """Raise when a run is started while another one is still active."""
