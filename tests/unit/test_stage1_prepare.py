"""Unit tests for Stage 1 input preparation."""

from __future__ import annotations

from hanzi_pinyin.stages.stage1_prepare import SEGMENT_MARKER, contains_han, is_han, prepare


def test_prepare_marks_every_ascii_run() -> None:
    assert prepare("拼音abc_1-2拼音") == f"拼音{SEGMENT_MARKER}abc_1-2拼音"
    assert prepare("A1 B2") == f"{SEGMENT_MARKER}A1 {SEGMENT_MARKER}B2"


def test_prepare_drops_symbols_and_control_characters() -> None:
    assert prepare("拼\x00音😀+") == "拼音"


def test_prepare_keeps_punctuation_marks_and_other_letters() -> None:
    assert prepare("你好，世界。～é") == "你好，世界。～é"


def test_prepare_keeps_whitespace() -> None:
    assert prepare("拼 音\n") == "拼 音\n"


def test_han_detection_covers_extension_blocks() -> None:
    assert is_han("拼")
    assert is_han("㐀")
    assert is_han("\U00020000")
    assert not is_han("a")
    assert not is_han("，")
    assert contains_han("pīn 音")
    assert not contains_han("pīn yīn")
