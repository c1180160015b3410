"""Stage 1: Protect ASCII runs and drop characters outside the supported set."""

from __future__ import annotations

import re
import unicodedata

# Inserted before ASCII runs; turned back into a plain space after replacement.
SEGMENT_MARKER = "\t"

HAN_RE = re.compile(
    "["
    "\u3007"
    "\u3400-\u4dbf"
    "\u4e00-\u9fff"
    "\uf900-\ufaff"
    "\U00020000-\U0002ebef"
    "\U0002f800-\U0002fa1f"
    "\U00030000-\U0003134f"
    "]"
)
ASCII_RUN_RE = re.compile(r"[A-Za-z0-9_-]+")
ALLOWED_CATEGORY_PREFIXES = ("L", "M", "N", "P", "Z")
# Math symbols that the punctuation stage rewrites (wave dash).
PRESERVED_SYMBOLS = frozenset("～~")


def is_han(char: str) -> bool:
    """Return whether ``char`` is a Han ideograph."""

    return HAN_RE.fullmatch(char) is not None


def contains_han(text: str) -> bool:
    """Return whether any Han ideograph remains in ``text``."""

    return HAN_RE.search(text) is not None


def _is_allowed(char: str) -> bool:
    if char == SEGMENT_MARKER or char.isspace() or char in PRESERVED_SYMBOLS:
        return True
    if is_han(char):
        return True
    return unicodedata.category(char).startswith(ALLOWED_CATEGORY_PREFIXES)


def prepare(text: str) -> str:
    """Prepare raw input for dictionary replacement.

    A segment marker is placed before every run of ``[A-Za-z0-9_-]`` so the run
    stays a separate token once whitespace is collapsed. Symbols, control
    characters, and other code points outside letters, marks, numbers,
    punctuation, and separators are removed without error.

    Args:
        text: Raw input text.

    Returns:
        Text ready for :func:`~hanzi_pinyin.stages.stage2_romanize.romanize`.
    """

    marked = ASCII_RUN_RE.sub(lambda match: SEGMENT_MARKER + match.group(0), text)
    return "".join(char for char in marked if _is_allowed(char))
