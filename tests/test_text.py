# tests/test_text.py
from __future__ import annotations

import importlib

import pytest

"""
text tests
==========

Does: Validate the normalization pipeline (step order, each optional step,
      totality) and synonym parsing/substitution (separators, policies,
      longest-first, single pass).
"""

norm = importlib.import_module("entity_matcher.engine.text.normalize")
syn = importlib.import_module("entity_matcher.engine.text.synonyms")
errors = importlib.import_module("entity_matcher.engine.errors")

ZWSP = chr(0x200B)
BOM = chr(0xFEFF)
IDEO_SPACE = chr(0x3000)


def _opts(**kw):
    return norm.NormalizationOptions(**kw)


# ──────────────────────────────────────────────────────────────────────────────
# normalize_text
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("value", [None, ""])
def test_empty_input_normalizes_to_empty_string(value):
    assert norm.normalize_text(value) == ""
    assert norm.normalize_text(value, _opts(ignore_punctuation=False)) == ""


def test_case_fold_and_whitespace_always_apply():
    bare = _opts(ignore_punctuation=False, fold_fullwidth=False, strip_invisible=False)
    assert norm.normalize_text("  Hello \n\n  WORLD  ", bare) == "hello world"


def test_fullwidth_letters_and_digits_fold_to_ascii():
    full = "".join(chr(0xFF21 + i) for i in range(3)) + "".join(chr(0xFF11 + i) for i in range(3))
    assert norm.normalize_text(full) == "abc123"


def test_fullwidth_left_alone_when_folding_disabled():
    full_upper = "".join(chr(0xFF21 + i) for i in range(3))
    full_lower = "".join(chr(0xFF41 + i) for i in range(3))
    out = norm.normalize_text(full_upper, _opts(fold_fullwidth=False, ignore_punctuation=False))
    assert out == full_lower


def test_fullwidth_map_covers_letters_digits_and_punctuation():
    assert len(norm.FULLWIDTH_MAP) >= 26 * 2 + 10 + 30
    assert norm.fold_fullwidth("（深圳）") == "(深圳)"
    assert norm.fold_fullwidth("汉字") == "汉字"


def test_invisible_chars_are_removed_not_spaced():
    text = "a\tb" + ZWSP + "c" + BOM
    assert norm.normalize_text(text, _opts(ignore_punctuation=False)) == "abc"


def test_invisible_chars_kept_when_stripping_disabled():
    out = norm.normalize_text("a" + ZWSP + "b", _opts(strip_invisible=False, ignore_punctuation=False))
    assert out == "a" + ZWSP + "b"
    # a tab is plain whitespace once it survives the invisible pass
    out = norm.normalize_text("a\tb", _opts(strip_invisible=False))
    assert out == "a b"


def test_ideographic_space_dropped_before_folding():
    text = "阿里" + IDEO_SPACE + "巴巴"
    assert norm.normalize_text(text) == "阿里巴巴"
    assert norm.normalize_text(text, _opts(strip_invisible=False)) == "阿里 巴巴"


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Baidu, Inc.", "baidu inc"),
        ("Alibaba.com", "alibabacom"),
        ("腾讯科技（深圳）有限公司", "腾讯科技深圳有限公司"),
        ("snake_case-name", "snake_casename"),
        ("!!!", ""),
    ],
)
def test_punctuation_stripping(raw, expected):
    assert norm.normalize_text(raw) == expected


def test_punctuation_kept_when_disabled():
    assert norm.normalize_text("Baidu, Inc.", _opts(ignore_punctuation=False)) == "baidu, inc."


def test_normalize_term_only_folds_and_trims():
    assert norm.normalize_term("  Tencent, Inc ") == "tencent, inc"
    assert norm.normalize_term(None) == ""


# ──────────────────────────────────────────────────────────────────────────────
# parse_synonyms
# ──────────────────────────────────────────────────────────────────────────────
def test_single_group_maps_every_term_to_first_listed():
    table = syn.parse_synonyms("腾讯控股有限公司,腾讯")
    assert dict(table) == {"腾讯控股有限公司": "腾讯控股有限公司", "腾讯": "腾讯控股有限公司"}


def test_shortest_policy_picks_shortest_term():
    table = syn.parse_synonyms("腾讯控股有限公司,腾讯", policy="shortest")
    assert dict(table) == {"腾讯控股有限公司": "腾讯", "腾讯": "腾讯"}


def test_shortest_policy_keeps_earliest_on_equal_length():
    table = syn.parse_synonyms("abc,xyz,abcd", policy="shortest")
    assert table["xyz"] == "abc"


def test_all_group_and_term_separators():
    spec = "阿里巴巴集团,阿里\n腾讯控股有限公司，腾讯；百度在线网络技术公司 百度;ByteDance\t字节跳动"
    table = syn.parse_synonyms(spec)
    assert table["阿里"] == "阿里巴巴集团"
    assert table["腾讯"] == "腾讯控股有限公司"
    assert table["百度"] == "百度在线网络技术公司"
    assert table["字节跳动"] == "bytedance"
    assert len(table) == 8


def test_terms_are_case_folded():
    table = syn.parse_synonyms("Tencent, TENCENT Holdings")
    assert table["tencent"] == "tencent"
    assert table["holdings"] == "tencent"


@pytest.mark.parametrize("spec", [None, "", "   ", "solo", "abc;def,DEF", ",,;；"])
def test_degenerate_specs_give_empty_table(spec):
    assert dict(syn.parse_synonyms(spec)) == {}


def test_table_is_read_only():
    table = syn.parse_synonyms("a1,b1")
    with pytest.raises(TypeError):
        table["c1"] = "a1"  # type: ignore[index]


def test_unknown_policy_rejected():
    with pytest.raises(errors.InvalidOptionsError):
        syn.parse_synonyms("a,b", policy="longest")  # type: ignore[arg-type]


def test_synonym_groups_inverts_table():
    table = syn.parse_synonyms("腾讯控股有限公司,腾讯;百度公司,百度")
    groups = syn.synonym_groups(table)
    assert sorted(groups["腾讯控股有限公司"]) == sorted(["腾讯控股有限公司", "腾讯"])
    assert sorted(groups["百度公司"]) == sorted(["百度公司", "百度"])


# ──────────────────────────────────────────────────────────────────────────────
# apply_synonyms
# ──────────────────────────────────────────────────────────────────────────────
def test_both_forms_resolve_to_same_representative():
    table = syn.parse_synonyms("腾讯控股有限公司,腾讯")
    assert syn.apply_synonyms(table, "腾讯") == syn.apply_synonyms(table, "腾讯控股有限公司")


def test_longer_key_not_shadowed_by_substring_key():
    table = syn.parse_synonyms("腾讯控股有限公司,腾讯", policy="shortest")
    assert syn.apply_synonyms(table, "腾讯控股有限公司音乐") == "腾讯音乐"


def test_substitution_is_global():
    table = syn.parse_synonyms("alibaba,ali")
    assert syn.apply_synonyms(table, "ali and ali") == "alibaba and alibaba"


def test_replacements_are_not_rescanned():
    table = syn.parse_synonyms("nyc,bigapple;newyork,ny")
    assert syn.apply_synonyms(table, "bigapple") == "nyc"
    assert syn.apply_synonyms(table, "ny") == "newyork"
    assert syn.apply_synonyms(table, "nyc") == "nyc"


def test_empty_table_or_text_passthrough():
    assert syn.apply_synonyms(syn.EMPTY_TABLE, "abc") == "abc"
    assert syn.apply_synonyms(syn.parse_synonyms("a,b"), "") == ""


def test_regex_metacharacters_in_terms_are_literal():
    table = syn.parse_synonyms("a.b,c+d")
    assert syn.apply_synonyms(table, "axb c+d") == "axb a.b"


def test_longer_key_wins_over_earlier_overlapping_key():
    table = syn.parse_synonyms("P,ab;Q,bcd")
    assert syn.apply_synonyms(table, "abcd") == "aq"
    assert syn.apply_synonyms(table, "ab bcd") == "p q"


def test_overlap_between_same_key_occurrences():
    table = syn.parse_synonyms("x,aa")
    assert syn.apply_synonyms(table, "aaa") == "xa"


def test_keys_ordered_once_longest_first():
    table = syn.parse_synonyms("ab,abcd;xyz,q")
    assert table.keys_longest_first == ("abcd", "xyz", "ab", "q")


def test_plain_mapping_accepted():
    assert syn.apply_synonyms({"腾讯": "tencent"}, "腾讯音乐") == "tencent音乐"
