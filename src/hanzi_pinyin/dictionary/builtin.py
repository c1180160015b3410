"""Built-in dictionary tiers: packaged surnames and pypinyin reading data."""

from __future__ import annotations

import functools
from importlib import resources
import logging
import unicodedata

from pypinyin import constants as pypinyin_constants

from hanzi_pinyin.dictionary.parser import DictionaryEntry, iter_dictionary_lines
from hanzi_pinyin.models import DictionaryTier

logger = logging.getLogger(__name__)

SURNAMES_RESOURCE = "surnames.dict"


def _first_reading(readings: str) -> str:
    return unicodedata.normalize("NFC", readings.split(",")[0].strip())


@functools.lru_cache(maxsize=None)
def surname_tier() -> DictionaryTier:
    """Load the packaged surname dictionary.

    Returns:
        Tier named ``builtin:surnames``.
    """

    resource = resources.files("hanzi_pinyin") / "data" / SURNAMES_RESOURCE
    text = resource.read_text(encoding="utf-8")
    mapping: dict[str, str] = {}
    for item in iter_dictionary_lines(text.splitlines()):
        if isinstance(item, DictionaryEntry):
            mapping.setdefault(item.term, item.pinyin)
    return DictionaryTier(name="builtin:surnames", entries=mapping)


@functools.lru_cache(maxsize=None)
def phrase_tier() -> DictionaryTier:
    """Collect multi-character phrases from ``pypinyin.constants.PHRASES_DICT``.

    Each phrase keeps the first reading of every syllable, space-joined.

    Returns:
        Tier named ``builtin:phrases``.
    """

    mapping: dict[str, str] = {}
    for phrase, syllable_groups in pypinyin_constants.PHRASES_DICT.items():
        if len(phrase) < 2 or len(syllable_groups) != len(phrase):
            continue
        readings = [_first_reading(group[0]) for group in syllable_groups if group]
        if len(readings) != len(phrase):
            continue
        mapping[phrase] = " ".join(readings)
    logger.debug("Built %d phrase entries from pypinyin", len(mapping))
    return DictionaryTier(name="builtin:phrases", entries=mapping)


@functools.lru_cache(maxsize=None)
def character_tier() -> DictionaryTier:
    """Collect single-character readings from ``pypinyin.constants.PINYIN_DICT``.

    Returns:
        Tier named ``builtin:characters``.
    """

    mapping: dict[str, str] = {}
    for code_point, readings in pypinyin_constants.PINYIN_DICT.items():
        reading = _first_reading(str(readings))
        if reading:
            mapping[chr(code_point)] = reading
    logger.debug("Built %d character entries from pypinyin", len(mapping))
    return DictionaryTier(name="builtin:characters", entries=mapping)
