"""Tone representation for romanized output.

Dictionary values carry Unicode tone diacritics (``pīn``). The formatter derives
two ASCII renderings from them: a tone digit suffix (``pin1``) and a toneless
spelling (``pin``). Finals are matched as whole units so that compound finals
such as ``üē`` are never rewritten one glyph at a time.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence


class ToneStyle(str, Enum):
    """Output representation requested from the tone formatter."""

    NONE = "none"
    UNICODE = "unicode"
    ASCII = "ascii"


def _final_rows(plain: str, marked: Sequence[str]) -> list[tuple[str, tuple[str, int]]]:
    return [(glyph, (plain, tone)) for tone, glyph in enumerate(marked, start=1)]


TONE_TABLE: dict[str, tuple[str, int]] = dict(
    [
        # simple vowels
        *_final_rows("a", ("ā", "á", "ǎ", "à")),
        *_final_rows("o", ("ō", "ó", "ǒ", "ò")),
        *_final_rows("e", ("ē", "é", "ě", "è")),
        *_final_rows("i", ("ī", "í", "ǐ", "ì")),
        *_final_rows("u", ("ū", "ú", "ǔ", "ù")),
        *_final_rows("v", ("ǖ", "ǘ", "ǚ", "ǜ")),
        # compound finals
        *_final_rows("ai", ("āi", "ái", "ǎi", "ài")),
        *_final_rows("ei", ("ēi", "éi", "ěi", "èi")),
        *_final_rows("ui", ("uī", "uí", "uǐ", "uì")),
        *_final_rows("ao", ("āo", "áo", "ǎo", "ào")),
        *_final_rows("ou", ("ōu", "óu", "ǒu", "òu")),
        *_final_rows("iu", ("īu", "íu", "ǐu", "ìu")),
        *_final_rows("ie", ("iē", "ié", "iě", "iè")),
        *_final_rows("ue", ("üē", "üé", "üě", "üè")),
        *_final_rows("er", ("ēr", "ér", "ěr", "èr")),
        # nasal finals
        *_final_rows("an", ("ān", "án", "ǎn", "àn")),
        *_final_rows("en", ("ēn", "én", "ěn", "èn")),
        *_final_rows("in", ("īn", "ín", "ǐn", "ìn")),
        *_final_rows("un", ("ūn", "ún", "ǔn", "ùn")),
        # velar nasal finals
        *_final_rows("ang", ("āng", "áng", "ǎng", "àng")),
        *_final_rows("eng", ("ēng", "éng", "ěng", "èng")),
        *_final_rows("ing", ("īng", "íng", "ǐng", "ìng")),
        *_final_rows("ong", ("ōng", "óng", "ǒng", "òng")),
        # syllabic nasals (interjections such as 嗯 and 呣)
        ("ń", ("n", 2)),
        ("ň", ("n", 3)),
        ("ǹ", ("n", 4)),
        ("ḿ", ("m", 2)),
    ]
)

# Longest glyph spans first so compound finals win over the vowels inside them.
_ORDERED_TONE_ENTRIES = sorted(TONE_TABLE.items(), key=lambda item: len(item[0]), reverse=True)


def strip_tone(token: str) -> str:
    """Return ``token`` with every tone-marked final replaced by its plain spelling.

    Args:
        token: One romanized syllable, punctuation mark, or ASCII run.

    Returns:
        The toneless spelling. Tokens without tone marks are returned unchanged.
    """

    for glyph, (plain, _tone) in _ORDERED_TONE_ENTRIES:
        if glyph in token:
            token = token.replace(glyph, plain)
    return token


def tone_to_number(token: str) -> str:
    """Rewrite a tone-marked syllable as ASCII with a trailing tone digit.

    Only the first (longest) matching final is rewritten, so at most one digit
    is appended. Neutral-tone syllables keep their spelling without a digit.

    Args:
        token: One romanized syllable, punctuation mark, or ASCII run.

    Returns:
        Numbered syllable such as ``lue4`` for ``lüè``.
    """

    for glyph, (plain, tone) in _ORDERED_TONE_ENTRIES:
        if glyph in token:
            return f"{token.replace(glyph, plain)}{tone}"
    return token


def format_tokens(tokens: Sequence[str], style: ToneStyle) -> list[str]:
    """Render tone-marked tokens in the requested output style.

    Args:
        tokens: Tokens split from a romanized string.
        style: Output representation.

    Returns:
        New list of tokens; the input sequence is not modified.
    """

    style = ToneStyle(style)
    if style is ToneStyle.UNICODE:
        return list(tokens)
    if style is ToneStyle.ASCII:
        return [tone_to_number(token) for token in tokens]
    return [strip_tone(token) for token in tokens]
