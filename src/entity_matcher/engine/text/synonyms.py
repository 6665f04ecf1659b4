# entity_matcher/engine/text/synonyms.py
from __future__ import annotations

"""
synonyms.py

Does: Parse a grouped synonym spec ("腾讯控股有限公司,腾讯；百度在线网络技术公司,百度")
      into an immutable term → representative table, and rewrite normalized text
      by literal substring substitution, longest key first, in a single pass.
Returns: SynonymTable, parse_synonyms(), apply_synonyms(), synonym_groups().
Used by: Run context construction and the fused scorer.
"""

import logging
import re
from collections.abc import Iterator, Mapping
from typing import Literal

from ..errors import InvalidOptionsError
from ..utils.log import debug
from .normalize import normalize_term

__all__ = [
    "RepresentativePolicy",
    "REPRESENTATIVE_POLICIES",
    "SynonymTable",
    "EMPTY_TABLE",
    "parse_synonyms",
    "apply_synonyms",
    "synonym_groups",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

RepresentativePolicy = Literal["first", "shortest"]
REPRESENTATIVE_POLICIES: tuple[str, ...] = ("first", "shortest")


class SynonymTable(Mapping[str, str]):
    """
    Read-only term → representative mapping for one run.

    Keys are ordered once, longest first (insertion order on equal length),
    so substitution never re-sorts per call.
    """

    __slots__ = ("_table", "_keys_longest_first")

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table: dict[str, str] = dict(table or {})
        self._keys_longest_first: tuple[str, ...] = tuple(
            sorted((k for k in self._table if k), key=len, reverse=True)
        )

    def __getitem__(self, term: str) -> str:
        return self._table[term]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"SynonymTable({self._table!r})"

    @property
    def keys_longest_first(self) -> tuple[str, ...]:
        return self._keys_longest_first


EMPTY_TABLE = SynonymTable()

_GROUP_SPLIT_RE = re.compile(r"[\n;；]+")
_TERM_SPLIT_RE = re.compile(r"[,，\s]+")


# ─────────────────────────────────────────────────────────────────────────────
# Parsing
# ─────────────────────────────────────────────────────────────────────────────

def _split_groups(spec: str) -> list[str]:
    # input without any group separator comes back as a single group
    groups = (g.strip() for g in _GROUP_SPLIT_RE.split(spec))
    return [g for g in groups if g]


def _group_terms(group: str) -> list[str]:
    """Normalized, de-duplicated terms of one group, in listed order."""
    seen: dict[str, None] = {}
    for raw in _TERM_SPLIT_RE.split(group):
        term = normalize_term(raw)
        if term:
            seen.setdefault(term, None)
    return list(seen)


def _pick_representative(terms: list[str], policy: str) -> str:
    if policy == "first":
        return terms[0]
    # shortest; min() keeps the earliest term on equal length
    return min(terms, key=len)


def parse_synonyms(spec: str | None, policy: RepresentativePolicy = "first") -> SynonymTable:
    """
    Does: Build the term → representative table for one comparison run.

    Groups are separated by newline, ';' or '；'; terms inside a group by ',',
    '，' or whitespace. Terms are case-folded and trimmed. Groups with fewer
    than two distinct terms are skipped. Every term of a group, the
    representative included, maps to the representative.

    Args:
        spec: Raw synonym text as typed by the user.
        policy: "first" keeps the first listed term, "shortest" the shortest one.

    Returns:
        Read-only mapping. When a term appears in several groups, the last
        group wins.

    Raises:
        InvalidOptionsError: Unknown policy.
    """
    if policy not in REPRESENTATIVE_POLICIES:
        raise InvalidOptionsError(
            f"representative_policy must be one of {REPRESENTATIVE_POLICIES}, got {policy!r}"
        )
    if not spec or not spec.strip():
        return EMPTY_TABLE

    table: dict[str, str] = {}
    skipped = 0
    for group in _split_groups(spec):
        terms = _group_terms(group)
        if len(terms) < 2:
            skipped += 1
            continue
        representative = _pick_representative(terms, policy)
        for term in terms:
            table[term] = representative
        debug(f"group {terms!r} -> {representative!r}", topic="synonyms")

    if skipped:
        log.debug("Skipped %d synonym group(s) with fewer than two terms", skipped)
    return SynonymTable(table)


# ─────────────────────────────────────────────────────────────────────────────
# Substitution
# ─────────────────────────────────────────────────────────────────────────────

def _claim_spans(keys: tuple[str, ...], text: str) -> list[tuple[int, int, str]]:
    """Non-overlapping (start, end, key) hits, longer keys claiming first."""
    taken = [False] * len(text)
    spans: list[tuple[int, int, str]] = []
    for key in keys:
        size = len(key)
        pos = text.find(key)
        while pos != -1:
            end = pos + size
            if any(taken[pos:end]):
                pos = text.find(key, pos + 1)
                continue
            taken[pos:end] = [True] * size
            spans.append((pos, end, key))
            pos = text.find(key, end)
    spans.sort()
    return spans


def apply_synonyms(table: Mapping[str, str], text: str) -> str:
    """
    Does: Replace every occurrence of every key with its representative.

    Keys claim their occurrences longest first, so "腾讯控股有限公司" is never
    split by "腾讯" and a shorter key cannot eat into a longer overlapping one.
    All hits are located on the original text before any splice, so replaced
    text is never rescanned by later (shorter) keys.

    Returns:
        Rewritten text; `text` unchanged when the table is empty.
    """
    if not text or not table:
        return text
    if not isinstance(table, SynonymTable):
        table = SynonymTable(table)

    spans = _claim_spans(table.keys_longest_first, text)
    if not spans:
        return text
    parts: list[str] = []
    cursor = 0
    for start, end, key in spans:
        parts.append(text[cursor:start])
        parts.append(table[key])
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)



def synonym_groups(table: SynonymTable) -> dict[str, list[str]]:
    """Does: Invert the table into representative → member terms (for display)."""
    groups: dict[str, list[str]] = {}
    for term, rep in table.items():
        groups.setdefault(rep, []).append(term)
    return groups
