"""Unit tests for Stage 2 dictionary replacement."""

from __future__ import annotations

from hanzi_pinyin.models import DictionaryTier
from hanzi_pinyin.stages.stage2_romanize import replace_terms, romanize


def test_replace_terms_prefers_longest_term_regardless_of_entry_order() -> None:
    tier = DictionaryTier("words", {"拼": "pìn", "音": "yìn", "拼音": "pīn yīn"})

    assert replace_terms("拼音拼", tier).split() == ["pīn", "yīn", "pìn"]


def test_replace_terms_leaves_unknown_characters_in_place() -> None:
    tier = DictionaryTier("words", {"拼": "pīn"})

    assert replace_terms("拼龘", tier) == " pīn 龘"


def test_replace_terms_with_empty_tier_is_identity() -> None:
    assert replace_terms("拼音", DictionaryTier("empty")) == "拼音"


def test_romanize_falls_through_tiers_in_priority_order() -> None:
    phrases = DictionaryTier("phrases", {"拼音": "pīn yīn"})
    characters = DictionaryTier("characters", {"拼": "pìn", "好": "hǎo"})

    assert romanize("拼音好", [phrases, characters]).split() == ["pīn", "yīn", "hǎo"]


def test_romanize_skips_remaining_tiers_once_no_han_remains() -> None:
    phrases = DictionaryTier("phrases", {"拼音": "pīn yīn"})
    # would rewrite already romanized text if it were consulted
    rewriting = DictionaryTier("rewriting", {"pīn": "XX"})

    assert romanize("拼音", [phrases, rewriting]).split() == ["pīn", "yīn"]


def test_romanize_consults_surname_tiers_first() -> None:
    general = DictionaryTier("general", {"单": "dān", "于": "yú"})
    surnames = DictionaryTier("surnames", {"单": "shàn"})

    assert romanize("单于", [general]).split() == ["dān", "yú"]
    assert romanize("单于", [general], surnames=[surnames]).split() == ["shàn", "yú"]


def test_romanize_without_han_is_identity() -> None:
    tier = DictionaryTier("words", {"拼": "pīn"})

    assert romanize("\tabc, 123", [tier]) == "\tabc, 123"
