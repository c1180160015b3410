"""Unit tests for dictionary tier validation."""

from __future__ import annotations

import pytest

from hanzi_pinyin.models import DictionaryTier
from hanzi_pinyin.validation import collect_tier_errors, validate_dictionary_tier


def test_validate_dictionary_tier_accepts_well_formed_entries() -> None:
    validate_dictionary_tier(DictionaryTier("words", {"拼音": "pīn yīn", "T恤": "T xù"}))


def test_collect_tier_errors_flags_each_problem() -> None:
    tier = DictionaryTier("words", {"abc": "pīn", "拼": "拼", "音": "yin1"})

    errors = collect_tier_errors(tier)

    assert errors == [
        "words: term 'abc' has no Han characters",
        "words: value '拼' for '拼' contains Han characters",
        "words: value 'yin1' for '音' contains digits",
    ]


def test_validate_dictionary_tier_truncates_long_error_lists() -> None:
    tier = DictionaryTier("words", {f"x{idx}": "pīn" for idx in range(30)})

    with pytest.raises(ValueError, match=r"failed with 30 errors:[\s\S]*and 5 more"):
        validate_dictionary_tier(tier)
