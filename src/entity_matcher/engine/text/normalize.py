# entity_matcher/engine/text/normalize.py
# ──────────────────────────────────────────────────────────────
# Deterministic cleanup applied to every entity name before scoring
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Strip invisible characters, fold full-width ASCII to half-width, drop
      punctuation, case-fold and collapse whitespace, in that fixed order.
Returns: NormalizationOptions, normalize_text(), normalize_term(), fold_fullwidth().
Used by: Synonym parsing/substitution and the fused scorer.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "NormalizationOptions",
    "normalize_text",
    "normalize_term",
    "fold_fullwidth",
    "strip_invisible",
    "strip_punctuation",
    "FULLWIDTH_MAP",
]


@dataclass(frozen=True)
class NormalizationOptions:
    """Optional cleanup steps. Case-fold and whitespace collapse always run."""

    ignore_punctuation: bool = True
    fold_fullwidth: bool = True
    strip_invisible: bool = True


# C0/C1 controls, general-punctuation spaces and zero-width marks,
# line/paragraph separators, ideographic space, BOM.
_INVISIBLE_RE = re.compile(
    r"[\u0000-\u001f\u007f-\u009f\u2000-\u200f\u2028-\u202f\u205f-\u206f\u3000\ufeff]"
)

# Word chars and CJK unified ideographs survive, as does whitespace.
_PUNCT_RE = re.compile(r"[^\w\u4e00-\u9fff\s]")

_WS_RE = re.compile(r"\s+")

_FULLWIDTH_PUNCT = (
    ("！", "!"), ("＂", '"'), ("＃", "#"), ("＄", "$"), ("％", "%"), ("＆", "&"),
    ("＇", "'"), ("（", "("), ("）", ")"), ("＊", "*"), ("＋", "+"), ("，", ","),
    ("－", "-"), ("．", "."), ("／", "/"), ("：", ":"), ("；", ";"), ("＜", "<"),
    ("＝", "="), ("＞", ">"), ("？", "?"), ("＠", "@"), ("［", "["), ("＼", "\\"),
    ("］", "]"), ("＾", "^"), ("＿", "_"), ("｀", "`"), ("｛", "{"), ("｜", "|"),
    ("｝", "}"), ("～", "~"), ("　", " "),
)


def _build_fullwidth_map() -> dict[int, str]:
    table: dict[int, str] = {}
    for i in range(10):
        table[0xFF10 + i] = chr(0x30 + i)
    for i in range(26):
        table[0xFF21 + i] = chr(0x41 + i)  # Ａ-Ｚ
        table[0xFF41 + i] = chr(0x61 + i)  # ａ-ｚ
    for full, half in _FULLWIDTH_PUNCT:
        table[ord(full)] = half
    return table


# str.translate table; characters outside it pass through unchanged
FULLWIDTH_MAP: dict[int, str] = _build_fullwidth_map()


# ──────────────────────────────────────────────────────────────
# 1) Individual steps
# ──────────────────────────────────────────────────────────────


def strip_invisible(text: str) -> str:
    """Does: Remove control and zero-width/invisible code points."""
    return _INVISIBLE_RE.sub("", text)


def fold_fullwidth(text: str) -> str:
    """Does: Map full-width letters, digits and punctuation to ASCII."""
    return text.translate(FULLWIDTH_MAP)


def strip_punctuation(text: str) -> str:
    """Does: Drop anything that is not a word char, CJK ideograph or whitespace."""
    return _PUNCT_RE.sub("", text)


# ──────────────────────────────────────────────────────────────
# 2) Pipelines
# ──────────────────────────────────────────────────────────────


def normalize_text(text: Optional[str], options: Optional[NormalizationOptions] = None) -> str:
    """
    Does: Run the cleanup pipeline on `text`:
          - strip invisible chars (optional)
          - full-width → half-width (optional)
          - drop punctuation (optional)
          - case-fold, collapse whitespace, trim (always)
    Returns: Normalized string; "" for None/empty input.
    """
    if not text:
        return ""
    opts = options or NormalizationOptions()
    s = str(text)
    # invisible chars go first so the punctuation pass never sees them
    if opts.strip_invisible:
        s = strip_invisible(s)
    if opts.fold_fullwidth:
        s = fold_fullwidth(s)
    if opts.ignore_punctuation:
        s = strip_punctuation(s)
    return _WS_RE.sub(" ", s.casefold()).strip()


def normalize_term(text: Optional[str]) -> str:
    """Does: Case-fold + trim only (synonym keys and representatives)."""
    if not text:
        return ""
    return str(text).casefold().strip()
