"""Integration tests for the packaged surname data and pypinyin-backed tiers."""

from __future__ import annotations

from hanzi_pinyin import ascii_convert, convert, name, unicode_convert
from hanzi_pinyin.dictionary.builtin import character_tier, phrase_tier, surname_tier
from hanzi_pinyin.validation import collect_tier_errors


def test_builtin_tiers_are_populated() -> None:
    assert character_tier().entries["拼"] == "pīn"
    assert phrase_tier().max_term_length >= 2
    assert surname_tier().entries["单"] == "shàn"
    assert collect_tier_errors(surname_tier()) == []


def test_module_level_facade_with_builtin_dictionaries() -> None:
    assert convert("拼音") == ["pin", "yin"]
    assert unicode_convert("拼音") == ["pīn", "yīn"]
    assert ascii_convert("拼音") == ["pin1", "yin1"]


def test_module_level_name_uses_surname_readings() -> None:
    assert name("冒顿单于").ascii() == ["mo4", "du2", "chan2", "yu2"]
    assert name("单").none() == ["shan"]
    assert convert("单") == ["dan"]


def test_builtin_punctuation_sentence() -> None:
    tokens = convert("你好，世界。")

    assert tokens[2] == ","
    assert tokens[-1] == "."
    assert len(tokens) == 6
