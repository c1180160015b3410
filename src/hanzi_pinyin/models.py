"""Data models shared by the romanization stages.

Configuration, loaded dictionary tiers, and conversion results are immutable so a
single romanizer can be shared freely once its dictionaries are loaded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from hanzi_pinyin.tones import ToneStyle, format_tokens

TOKEN_DELIMITER = " "


@dataclass(frozen=True)
class RomanizerConfig:
    """Settings fixed when a :class:`~hanzi_pinyin.pipeline.Romanizer` is built.

    Attributes:
        dictionary_paths: General dictionaries, highest priority first.
        surname_paths: Surname dictionaries consulted only in name mode.
        delimiter: Separator used when tokens are joined for display.
        strict: Raise on missing or malformed dictionaries instead of skipping.
        use_builtin: Append the packaged surname tier and the pypinyin tiers
            after the configured dictionaries.
    """

    dictionary_paths: tuple[Path, ...] = ()
    surname_paths: tuple[Path, ...] = ()
    delimiter: str = TOKEN_DELIMITER
    strict: bool = False
    use_builtin: bool = True


@dataclass(frozen=True)
class DictionaryTier:
    """One loaded dictionary: exact-match terms mapped to tone-marked pinyin."""

    name: str
    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @cached_property
    def max_term_length(self) -> int:
        """Length of the longest term, ``0`` for an empty tier."""

        return max((len(term) for term in self.entries), default=0)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class ConvertResult:
    """Tone-marked romanization with one space-delimited token per syllable.

    The style methods derive new token lists and never modify ``text``.
    """

    text: str

    def tokens(self, style: ToneStyle = ToneStyle.UNICODE) -> list[str]:
        """Split the result into tokens rendered in ``style``.

        Returns:
            Token list; empty when the romanized text is empty.
        """

        if not self.text:
            return []
        return format_tokens(self.text.split(TOKEN_DELIMITER), style)

    def none(self) -> list[str]:
        """Toneless tokens, e.g. ``["pin", "yin"]``."""

        return self.tokens(ToneStyle.NONE)

    def unicode(self) -> list[str]:
        """Tone-marked tokens, e.g. ``["pīn", "yīn"]``."""

        return self.tokens(ToneStyle.UNICODE)

    def ascii(self) -> list[str]:
        """Tone-numbered tokens, e.g. ``["pin1", "yin1"]``."""

        return self.tokens(ToneStyle.ASCII)

    def render(self, style: ToneStyle = ToneStyle.NONE, delimiter: str = TOKEN_DELIMITER) -> str:
        """Join the styled tokens with ``delimiter`` for display."""

        return delimiter.join(self.tokens(style))
