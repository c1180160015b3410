"""Stage 3: Space out punctuation and collapse whitespace into single delimiters."""

from __future__ import annotations

from hanzi_pinyin.models import TOKEN_DELIMITER
from hanzi_pinyin.stages.stage1_prepare import SEGMENT_MARKER

# Order matters: multi-glyph marks must be replaced before their single-glyph parts.
PUNCTUATION_TABLE: tuple[tuple[str, str], ...] = (
    ("，", ","),
    ("。", "."),
    ("！", "!"),
    ("？", "?"),
    ("：", ":"),
    ("；", ";"),
    ("‘", "'"),
    ("’", "'"),
    ("“", '"'),
    ("”", '"'),
    ("「", "["),
    ("」", "]"),
    ("『", "["),
    ("』", "]"),
    ("（", "("),
    ("）", ")"),
    ("〔", "["),
    ("〕", "]"),
    ("【", "["),
    ("】", "]"),
    ("{", "{"),
    ("}", "}"),
    ("……", "..."),
    ("——", "-"),
    ("—", "-"),
    ("/", "/"),
    ("\\", "\\"),
    ("～", "~"),
    ("《", "<"),
    ("》", ">"),
    ("〈", "<"),
    ("〉", ">"),
    ("·", "·"),
    ("、", ","),
)

PUNCTUATION_GLYPHS = frozenset(glyph for glyph, _ in PUNCTUATION_TABLE)


def normalize_punctuation(text: str) -> str:
    """Rewrite Chinese punctuation to ASCII, each preceded by a space.

    Args:
        text: Romanized text from Stage 2.

    Returns:
        Text where every recognized mark stands apart from the syllable before it.
    """

    for glyph, replacement in PUNCTUATION_TABLE:
        if glyph in text:
            text = text.replace(glyph, f" {replacement}")
    return text


def collapse_whitespace(text: str) -> str:
    """Turn segment markers into spaces and squeeze all whitespace runs.

    Returns:
        Trimmed text with exactly one space between tokens.
    """

    return TOKEN_DELIMITER.join(text.replace(SEGMENT_MARKER, " ").split())
