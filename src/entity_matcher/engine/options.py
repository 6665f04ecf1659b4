# src/entity_matcher/engine/options.py
"""Comparison options, their validation, and the per-run match context.

`ComparisonOptions` is what a host collects from its settings form;
`MatchContext` is the immutable value threaded through every scoring call of a
run (options + the synonym table parsed once from `options.synonym_spec`).

Defaults live in `data/comparison_defaults.json` and are read through
`load_config`, so a deployment can ship its own defaults via DATA_DIR.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, replace
from numbers import Real
from typing import Any, Mapping

from .diff.core import DIFF_ALGORITHMS
from .errors import InvalidOptionsError
from .text.normalize import NormalizationOptions
from .text.synonyms import REPRESENTATIVE_POLICIES, SynonymTable, parse_synonyms
from .utils.load_config import load_config

__all__ = [
    "ScoreWeights",
    "ComparisonOptions",
    "MatchContext",
    "build_context",
    "load_options",
    "options_from_dict",
    "options_to_dict",
]

log = logging.getLogger(__name__)

DEFAULTS_FILE = "comparison_defaults"


def _check_unit(name: str, value: Any) -> float:
    """Reject bools, non-numbers, NaN and anything outside [0, 1]."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidOptionsError(f"{name} must be a number in [0, 1], got {value!r}")
    value = float(value)
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidOptionsError(f"{name} must be in [0, 1], got {value!r}")
    return value


@dataclass(frozen=True)
class ScoreWeights:
    """Weights of the edit and phonetic similarities. Need not sum to 1."""

    edit: float = 0.6
    phonetic: float = 0.4

    def __post_init__(self) -> None:
        object.__setattr__(self, "edit", _check_unit("weights.edit", self.edit))
        object.__setattr__(self, "phonetic", _check_unit("weights.phonetic", self.phonetic))


@dataclass(frozen=True)
class ComparisonOptions:
    threshold: float = 0.0
    normalization: NormalizationOptions = field(default_factory=NormalizationOptions)
    weights: ScoreWeights = field(default_factory=ScoreWeights)
    synonym_spec: str = ""
    representative_policy: str = "first"
    diff_algorithm: str = "lcs"

    def __post_init__(self) -> None:
        object.__setattr__(self, "threshold", _check_unit("threshold", self.threshold))
        if not isinstance(self.normalization, NormalizationOptions):
            raise InvalidOptionsError("normalization must be NormalizationOptions")
        if not isinstance(self.weights, ScoreWeights):
            raise InvalidOptionsError("weights must be ScoreWeights")
        if not isinstance(self.synonym_spec, str):
            raise InvalidOptionsError("synonym_spec must be a string")
        if self.representative_policy not in REPRESENTATIVE_POLICIES:
            raise InvalidOptionsError(
                f"representative_policy must be one of {REPRESENTATIVE_POLICIES}, "
                f"got {self.representative_policy!r}"
            )
        if self.diff_algorithm not in DIFF_ALGORITHMS:
            raise InvalidOptionsError(
                f"diff_algorithm must be one of {DIFF_ALGORITHMS}, got {self.diff_algorithm!r}"
            )


@dataclass(frozen=True)
class MatchContext:
    """Read-only state shared by every unit of one run."""

    options: ComparisonOptions
    synonyms: SynonymTable


def build_context(options: ComparisonOptions | None = None) -> MatchContext:
    """Parse the synonym spec once and freeze it together with `options`."""
    options = options or ComparisonOptions()
    table = parse_synonyms(options.synonym_spec, options.representative_policy)
    log.debug("Built match context: %d synonym term(s)", len(table))
    return MatchContext(options=options, synonyms=table)


# ── Plain-data round trip ─────────────────────────────────────────────────────

def options_from_dict(data: Mapping[str, Any]) -> ComparisonOptions:
    """Build options from a plain mapping (config file or stored session)."""
    norm = data.get("normalization") or {}
    weights = data.get("weights") or {}
    try:
        return ComparisonOptions(
            threshold=data.get("threshold", 0.0),
            normalization=NormalizationOptions(
                ignore_punctuation=bool(norm.get("ignore_punctuation", True)),
                fold_fullwidth=bool(norm.get("fold_fullwidth", True)),
                strip_invisible=bool(norm.get("strip_invisible", True)),
            ),
            weights=ScoreWeights(
                edit=weights.get("edit", 0.6),
                phonetic=weights.get("phonetic", 0.4),
            ),
            synonym_spec=data.get("synonym_spec") or "",
            representative_policy=data.get("representative_policy", "first"),
            diff_algorithm=data.get("diff_algorithm", "lcs"),
        )
    except AttributeError as e:
        raise InvalidOptionsError(f"Malformed options mapping: {e}") from e


def options_to_dict(options: ComparisonOptions) -> dict[str, Any]:
    return {
        "threshold": options.threshold,
        "weights": {"edit": options.weights.edit, "phonetic": options.weights.phonetic},
        "normalization": {
            "ignore_punctuation": options.normalization.ignore_punctuation,
            "fold_fullwidth": options.normalization.fold_fullwidth,
            "strip_invisible": options.normalization.strip_invisible,
        },
        "synonym_spec": options.synonym_spec,
        "representative_policy": options.representative_policy,
        "diff_algorithm": options.diff_algorithm,
    }


_DEFAULT_KEYS = frozenset(
    {"threshold", "weights", "normalization", "synonym_spec", "representative_policy", "diff_algorithm"}
)


def _check_defaults(data: dict[str, Any]) -> dict[str, Any]:
    """Reject unknown keys and non-object sections in a defaults file."""
    unknown = sorted(set(data) - _DEFAULT_KEYS)
    if unknown:
        raise ValueError(f"unknown option key(s): {unknown}")
    for section in ("weights", "normalization"):
        if not isinstance(data.get(section, {}), dict):
            raise ValueError(f"'{section}' must be an object")
    return data


def load_options(**overrides: Any) -> ComparisonOptions:
    """
    Read the bundled defaults file and apply keyword overrides.

    Overrides may be top-level fields (`threshold=0.5`) or already-built
    `NormalizationOptions` / `ScoreWeights` instances.
    A malformed defaults file raises ConfigParseError.
    """
    data = load_config(DEFAULTS_FILE, mode="validated_dict", validator=_check_defaults)
    base = options_from_dict(data)
    return replace(base, **overrides) if overrides else base
