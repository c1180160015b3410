"""TSV read/write helpers for batch conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Sequence

TSV_HEADER = ["source", "pinyin"]


def read_source_lines(input_path: Path) -> Iterator[str]:
    """Yield non-blank lines of a UTF-8 text file without trailing newlines."""

    with input_path.open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\r\n")
            if line.strip():
                yield line


def write_tsv(
    rows: Sequence[tuple[str, str]], output_path: Path, include_header: bool = True
) -> None:
    """Write ``(source, pinyin)`` pairs to a TSV file.

    Tabs inside the source text are replaced by spaces so every row keeps
    exactly two columns.

    Args:
        rows: Source lines paired with their rendered romanization.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for source, pinyin in rows:
            handle.write("\t".join([source.replace("\t", " "), pinyin]))
            handle.write("\n")
