"""Unit tests for immutable data models."""

from __future__ import annotations

import dataclasses

import pytest

from hanzi_pinyin.models import ConvertResult, DictionaryTier
from hanzi_pinyin.tones import ToneStyle


def test_convert_result_derives_styles_without_mutation() -> None:
    result = ConvertResult("pīn yīn , lüè")

    assert result.unicode() == ["pīn", "yīn", ",", "lüè"]
    assert result.none() == ["pin", "yin", ",", "lue"]
    assert result.ascii() == ["pin1", "yin1", ",", "lue4"]
    assert result.text == "pīn yīn , lüè"


def test_convert_result_render_joins_with_delimiter() -> None:
    assert ConvertResult("pīn yīn").render(ToneStyle.ASCII, "-") == "pin1-yin1"


def test_empty_convert_result_has_no_tokens() -> None:
    result = ConvertResult("")

    assert result.none() == []
    assert result.unicode() == []
    assert result.ascii() == []
    assert result.render() == ""


def test_convert_result_is_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        ConvertResult("pīn").text = "yīn"  # type: ignore[misc]


def test_dictionary_tier_entries_are_read_only_copies() -> None:
    source = {"拼": "pīn"}
    tier = DictionaryTier("words", source)
    source["音"] = "yīn"

    assert dict(tier.entries) == {"拼": "pīn"}
    with pytest.raises(TypeError):
        tier.entries["音"] = "yīn"  # type: ignore[index]
