# tests/test_options.py
"""Option validation, plain-data round trip and defaults loading."""

from __future__ import annotations

import importlib
import json

import pytest

options_mod = importlib.import_module("entity_matcher.engine.options")
errors = importlib.import_module("entity_matcher.engine.errors")
LC = importlib.import_module("entity_matcher.engine.utils.load_config")
norm = importlib.import_module("entity_matcher.engine.text.normalize")


@pytest.fixture(autouse=True)
def _bundled_data(monkeypatch):
    monkeypatch.delenv("DATA_DIR", raising=False)
    monkeypatch.delenv("ENTITY_MATCHER_DATA_DIR", raising=False)
    LC.clear_config_cache()


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────

def test_defaults():
    opts = options_mod.ComparisonOptions()
    assert opts.threshold == 0.0
    assert (opts.weights.edit, opts.weights.phonetic) == (0.6, 0.4)
    assert opts.normalization == norm.NormalizationOptions(True, True, True)
    assert opts.synonym_spec == ""
    assert opts.representative_policy == "first"
    assert opts.diff_algorithm == "lcs"


@pytest.mark.parametrize("bad", [-0.01, 1.01, float("nan"), "0.5", True, None])
def test_threshold_out_of_range_rejected(bad):
    with pytest.raises(errors.InvalidOptionsError):
        options_mod.ComparisonOptions(threshold=bad)


def test_integer_threshold_coerced_to_float():
    assert options_mod.ComparisonOptions(threshold=1).threshold == 1.0


@pytest.mark.parametrize("edit,phonetic", [(-0.1, 0.4), (0.6, 1.5), (float("nan"), 0.4)])
def test_weights_out_of_range_rejected(edit, phonetic):
    with pytest.raises(errors.InvalidOptionsError):
        options_mod.ScoreWeights(edit=edit, phonetic=phonetic)


def test_weights_need_not_sum_to_one():
    w = options_mod.ScoreWeights(edit=1.0, phonetic=1.0)
    assert (w.edit, w.phonetic) == (1.0, 1.0)


@pytest.mark.parametrize(
    "field,value",
    [
        ("representative_policy", "longest"),
        ("diff_algorithm", "patience"),
        ("synonym_spec", None),
        ("normalization", {"ignore_punctuation": True}),
        ("weights", (0.5, 0.5)),
    ],
)
def test_bad_fields_rejected(field, value):
    with pytest.raises(errors.InvalidOptionsError):
        options_mod.ComparisonOptions(**{field: value})


def test_invalid_options_error_is_value_error():
    assert issubclass(errors.InvalidOptionsError, ValueError)


def test_options_are_frozen():
    opts = options_mod.ComparisonOptions()
    with pytest.raises(AttributeError):
        opts.threshold = 0.5  # type: ignore[misc]


# ─────────────────────────────────────────────────────────────────────────────
# Context
# ─────────────────────────────────────────────────────────────────────────────

def test_build_context_parses_synonyms_once():
    opts = options_mod.ComparisonOptions(synonym_spec="腾讯控股有限公司,腾讯", representative_policy="shortest")
    ctx = options_mod.build_context(opts)
    assert ctx.options is opts
    assert dict(ctx.synonyms) == {"腾讯控股有限公司": "腾讯", "腾讯": "腾讯"}


def test_build_context_without_options():
    ctx = options_mod.build_context()
    assert ctx.options == options_mod.ComparisonOptions()
    assert len(ctx.synonyms) == 0


# ─────────────────────────────────────────────────────────────────────────────
# Plain data
# ─────────────────────────────────────────────────────────────────────────────

def test_dict_roundtrip_through_json():
    opts = options_mod.ComparisonOptions(
        threshold=0.7,
        normalization=norm.NormalizationOptions(ignore_punctuation=False),
        weights=options_mod.ScoreWeights(edit=0.5, phonetic=0.5),
        synonym_spec="a1,b1",
        representative_policy="shortest",
        diff_algorithm="myers",
    )
    data = json.loads(json.dumps(options_mod.options_to_dict(opts)))
    assert options_mod.options_from_dict(data) == opts


def test_from_dict_fills_missing_keys():
    opts = options_mod.options_from_dict({"threshold": 0.3})
    assert opts == options_mod.ComparisonOptions(threshold=0.3)


def test_from_dict_rejects_malformed_sections():
    with pytest.raises(errors.InvalidOptionsError):
        options_mod.options_from_dict({"weights": [0.5, 0.5]})


# ─────────────────────────────────────────────────────────────────────────────
# load_options
# ─────────────────────────────────────────────────────────────────────────────

def test_load_options_reads_bundled_defaults():
    assert options_mod.load_options() == options_mod.ComparisonOptions()


def test_load_options_applies_overrides():
    opts = options_mod.load_options(threshold=0.5, diff_algorithm="levenshtein")
    assert opts.threshold == 0.5
    assert opts.diff_algorithm == "levenshtein"
    assert opts.weights == options_mod.ScoreWeights()


def test_load_options_validates_overrides():
    with pytest.raises(errors.InvalidOptionsError):
        options_mod.load_options(threshold=2)


def test_load_options_from_custom_data_dir(tmp_path, monkeypatch):
    (tmp_path / "comparison_defaults.json").write_text(
        json.dumps({"threshold": 0.8, "representative_policy": "shortest"}), encoding="utf-8"
    )
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    opts = options_mod.load_options()
    assert opts.threshold == 0.8
    assert opts.representative_policy == "shortest"
    assert opts.diff_algorithm == "lcs"


@pytest.mark.parametrize(
    "payload",
    [
        {"threshold": 0.5, "cutoff": 0.2},
        {"weights": [0.5, 0.5]},
        {"normalization": "all"},
    ],
)
def test_load_options_rejects_malformed_defaults_file(tmp_path, monkeypatch, payload):
    (tmp_path / "comparison_defaults.json").write_text(json.dumps(payload), encoding="utf-8")
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    with pytest.raises(LC.ConfigParseError):
        options_mod.load_options()
