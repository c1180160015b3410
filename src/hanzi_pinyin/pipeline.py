"""Top-level orchestration of the romanization stages."""

from __future__ import annotations

from dataclasses import dataclass, field
import functools
from typing import Iterable

from hanzi_pinyin.dictionary.builtin import character_tier, phrase_tier, surname_tier
from hanzi_pinyin.dictionary.repository import load_tiers
from hanzi_pinyin.models import ConvertResult, DictionaryTier, RomanizerConfig
from hanzi_pinyin.stages.stage1_prepare import prepare
from hanzi_pinyin.stages.stage2_romanize import romanize
from hanzi_pinyin.stages.stage3_punctuate import collapse_whitespace, normalize_punctuation
from hanzi_pinyin.tones import ToneStyle


@dataclass(frozen=True)
class Romanizer:
    """Chinese-to-pinyin converter bound to one immutable configuration.

    Dictionary tiers are loaded eagerly by :meth:`from_config`, so conversions
    never touch the disk and an instance can be shared between threads.

    Attributes:
        config: Settings the instance was built from.
        dictionaries: General tiers, highest priority first.
        surnames: Tiers consulted before ``dictionaries`` in name mode.
    """

    config: RomanizerConfig = field(default_factory=RomanizerConfig)
    dictionaries: tuple[DictionaryTier, ...] = ()
    surnames: tuple[DictionaryTier, ...] = ()

    @classmethod
    def from_config(cls, config: RomanizerConfig | None = None) -> "Romanizer":
        """Load every configured tier and return a ready romanizer.

        Raises:
            DictionaryLoadError: In strict mode, if a dictionary cannot be used.
        """

        config = config or RomanizerConfig()
        dictionaries = load_tiers(config.dictionary_paths, strict=config.strict)
        surnames = load_tiers(config.surname_paths, strict=config.strict)
        if config.use_builtin:
            dictionaries = (*dictionaries, phrase_tier(), character_tier())
            surnames = (*surnames, surname_tier())
        return cls(config=config, dictionaries=dictionaries, surnames=surnames)

    def romanize(self, text: str, surnames: bool = False) -> ConvertResult:
        """Run all stages and return the tone-marked intermediate result.

        Args:
            text: Raw Chinese text, possibly mixed with Latin letters and digits.
            surnames: Give surname readings precedence over general vocabulary.
        """

        prepared = prepare(text)
        replaced = romanize(
            prepared,
            dictionaries=self.dictionaries,
            surnames=self.surnames if surnames else (),
        )
        return ConvertResult(collapse_whitespace(normalize_punctuation(replaced)))

    def convert(self, text: str) -> list[str]:
        """Toneless tokens, e.g. ``["pin", "yin"]``."""

        return self.romanize(text).none()

    def unicode_convert(self, text: str) -> list[str]:
        """Tone-marked tokens, e.g. ``["pīn", "yīn"]``."""

        return self.romanize(text).unicode()

    def ascii_convert(self, text: str) -> list[str]:
        """Tone-numbered tokens, e.g. ``["pin1", "yin1"]``."""

        return self.romanize(text).ascii()

    def name(self, text: str) -> ConvertResult:
        """Romanize a personal name with surname readings taking precedence."""

        return self.romanize(text, surnames=True)

    def join(self, tokens: Iterable[str]) -> str:
        """Join tokens with the configured output delimiter."""

        return self.config.delimiter.join(tokens)

    def render(self, text: str, style: ToneStyle = ToneStyle.NONE, surnames: bool = False) -> str:
        """Convert ``text`` and join the styled tokens for display."""

        return self.romanize(text, surnames=surnames).render(style, self.config.delimiter)


@functools.lru_cache(maxsize=1)
def default_romanizer() -> Romanizer:
    """Shared romanizer using the built-in dictionaries only."""

    return Romanizer.from_config(RomanizerConfig())


def convert(text: str) -> list[str]:
    """Convert ``text`` to toneless pinyin tokens with the default romanizer."""

    return default_romanizer().convert(text)


def unicode_convert(text: str) -> list[str]:
    """Convert ``text`` to tone-marked pinyin tokens with the default romanizer."""

    return default_romanizer().unicode_convert(text)


def ascii_convert(text: str) -> list[str]:
    """Convert ``text`` to tone-numbered pinyin tokens with the default romanizer."""

    return default_romanizer().ascii_convert(text)


def name(text: str) -> ConvertResult:
    """Romanize a personal name with the default romanizer."""

    return default_romanizer().name(text)
