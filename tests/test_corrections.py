"""Tests for the vocabulary correction filter."""

import json

import pytest

from smart_minutes.domain import DEFAULT_CORRECTIONS, CorrectionFilter, load_corrections


@pytest.fixture
def corrections() -> CorrectionFilter:
    return CorrectionFilter(DEFAULT_CORRECTIONS)


def test_whole_word_is_replaced(corrections):
    assert corrections.apply("The young team met.") == "The yoong team met."


def test_match_is_case_insensitive(corrections):
    assert corrections.apply("Young people") == "yoong people"


def test_word_inside_another_word_is_left_alone(corrections):
    assert corrections.apply("youngster youngest") == "youngster youngest"


def test_phrase_replacement(corrections):
    text = "Thank you, sir. Have a good day in the office."

    assert corrections.apply(text) == "Thank you sa pag attend office."


def test_text_without_matches_is_unchanged(corrections):
    assert corrections.apply("Nothing to fix here.") == "Nothing to fix here."


def test_filter_is_idempotent_on_its_own_output(corrections):
    once = corrections.apply("young young")

    assert corrections.apply(once) == once


def test_rules_apply_in_order():
    rules = CorrectionFilter({"alpha": "beta", "beta": "gamma"})

    assert rules.apply("alpha") == "gamma"


def test_replacement_text_is_literal():
    rules = CorrectionFilter({"price": r"\1 $5"})

    assert rules.apply("the price") == r"the \1 $5"


def test_load_corrections_defaults_when_no_path():
    assert load_corrections(None) == DEFAULT_CORRECTIONS


def test_load_corrections_reads_json(tmp_path):
    path = tmp_path / "corrections.json"
    path.write_text(json.dumps({"colour": "color"}), encoding="utf-8")

    assert load_corrections(path) == {"colour": "color"}


def test_load_corrections_rejects_non_string_values(tmp_path):
    path = tmp_path / "corrections.json"
    path.write_text(json.dumps({"colour": 1}), encoding="utf-8")

    with pytest.raises(ValueError):
        load_corrections(path)
