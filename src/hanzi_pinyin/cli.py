"""CLI entrypoint for converting Chinese text to pinyin."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from hanzi_pinyin.dictionary.repository import DictionaryLoadError
from hanzi_pinyin.io.tsv_io import read_source_lines, write_tsv
from hanzi_pinyin.models import RomanizerConfig
from hanzi_pinyin.pipeline import Romanizer
from hanzi_pinyin.tones import ToneStyle


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the conversion command.
    """

    parser = argparse.ArgumentParser(description="Convert Chinese text to pinyin.")
    parser.add_argument("text", nargs="*", help="Text to convert; one output line per argument.")
    parser.add_argument(
        "--style",
        choices=[style.value for style in ToneStyle],
        default=ToneStyle.NONE.value,
        help="Tone representation: none (pin), unicode (pīn), or ascii (pin1).",
    )
    parser.add_argument(
        "--name", action="store_true", help="Apply surname readings before general vocabulary."
    )
    parser.add_argument("--delimiter", default=" ", help="Separator between output syllables.")
    parser.add_argument(
        "--dict",
        dest="dictionaries",
        action="append",
        type=Path,
        default=[],
        help="Additional '<term>:<pinyin>' dictionary, highest priority first (repeatable).",
    )
    parser.add_argument(
        "--surnames",
        action="append",
        type=Path,
        default=[],
        help="Additional surname dictionary (repeatable).",
    )
    parser.add_argument(
        "--no-builtin",
        action="store_true",
        help="Use only the dictionaries given on the command line.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on missing or malformed dictionaries instead of skipping them.",
    )
    parser.add_argument("--input", type=Path, default=None, help="Text file to convert line by line.")
    parser.add_argument("--output", type=Path, default=None, help="Destination TSV for --input.")
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument("--verbose", action="store_true", help="Log dictionary loading details.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments to printed or written output.

    Returns:
        Zero exit status on success.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.input is None and not args.text:
        parser.error("provide TEXT arguments or --input")
    if args.input is not None and args.output is None:
        parser.error("--input requires --output")
    if args.input is not None and not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")

    config = RomanizerConfig(
        dictionary_paths=tuple(args.dictionaries),
        surname_paths=tuple(args.surnames),
        delimiter=args.delimiter,
        strict=args.strict,
        use_builtin=not args.no_builtin,
    )
    try:
        romanizer = Romanizer.from_config(config)
    except DictionaryLoadError as exc:
        raise SystemExit(f"Dictionary error: {exc}") from exc

    style = ToneStyle(args.style)

    for text in args.text:
        print(romanizer.render(text, style=style, surnames=args.name))

    if args.input is not None:
        rows = [
            (line, romanizer.render(line, style=style, surnames=args.name))
            for line in read_source_lines(args.input)
        ]
        write_tsv(rows, output_path=args.output, include_header=not args.no_header)
        print(f"Wrote {len(rows)} rows to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
