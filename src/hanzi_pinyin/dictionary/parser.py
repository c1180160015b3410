"""Parsing utilities for ``<term>:<pinyin>`` dictionary files."""

from __future__ import annotations

from dataclasses import dataclass
import unicodedata
from typing import Iterable, Iterator

ENTRY_SEPARATOR = ":"


@dataclass(frozen=True)
class DictionaryEntry:
    """One dictionary line mapping a Chinese term to tone-marked pinyin."""

    term: str
    pinyin: str
    line_number: int


@dataclass(frozen=True)
class MalformedLine:
    """A non-comment line that could not be parsed into an entry."""

    line_number: int
    text: str
    reason: str


def parse_dictionary_line(line: str, line_number: int) -> DictionaryEntry | MalformedLine | None:
    """Parse one dictionary line.

    The term and value are split on the first colon and stripped. Values are
    normalized to NFC so decomposed tone marks match the tone table.

    Args:
        line: Raw line including any trailing newline.
        line_number: 1-based position in the source file.

    Returns:
        ``DictionaryEntry`` for a valid line, ``MalformedLine`` when the
        separator, term, or value is missing, or ``None`` for blank and
        ``#`` comment lines.
    """

    stripped = line.lstrip("\ufeff").strip()
    if not stripped or stripped.startswith("#"):
        return None
    if ENTRY_SEPARATOR not in stripped:
        return MalformedLine(line_number, stripped, "missing ':' separator")

    term, pinyin = (part.strip() for part in stripped.split(ENTRY_SEPARATOR, 1))
    if not term:
        return MalformedLine(line_number, stripped, "empty term")
    if not pinyin:
        return MalformedLine(line_number, stripped, "empty pinyin")
    return DictionaryEntry(
        term=unicodedata.normalize("NFC", term),
        pinyin=" ".join(unicodedata.normalize("NFC", pinyin).split()),
        line_number=line_number,
    )


def iter_dictionary_lines(
    lines: Iterable[str],
) -> Iterator[DictionaryEntry | MalformedLine]:
    """Yield parsed entries and malformed-line records in file order.

    Args:
        lines: Iterable of raw dictionary lines.

    Yields:
        One item per non-blank, non-comment line.
    """

    for line_number, line in enumerate(lines, start=1):
        parsed = parse_dictionary_line(line, line_number)
        if parsed is not None:
            yield parsed
