"""Repository that loads ``<term>:<pinyin>`` dictionary files into memory."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
from pathlib import Path

from hanzi_pinyin.dictionary.parser import DictionaryEntry, MalformedLine, iter_dictionary_lines
from hanzi_pinyin.models import DictionaryTier
from hanzi_pinyin.validation import validate_dictionary_tier

logger = logging.getLogger(__name__)


class DictionaryLoadError(ValueError):
    """Raised in strict mode when a dictionary file cannot be used."""


@dataclass(frozen=True)
class DictionaryRepository:
    """Read-only, path-scoped dictionary loaded once on first access.

    In lenient mode a missing or unreadable file yields an empty tier and
    malformed lines are skipped, each with a logged warning. In strict mode
    both conditions raise :class:`DictionaryLoadError`, and the loaded tier is
    validated before it is returned.
    """

    path: Path
    strict: bool = False

    @cached_property
    def entries(self) -> tuple[DictionaryEntry, ...]:
        """Load and cache parsed entries from disk.

        Returns:
            Entries in file order.

        Raises:
            DictionaryLoadError: In strict mode, if the file is missing,
                unreadable, or contains a malformed line.
        """

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                parsed = list(iter_dictionary_lines(handle))
        except (OSError, UnicodeDecodeError) as exc:
            if self.strict:
                raise DictionaryLoadError(f"Cannot read dictionary {self.path}: {exc}") from exc
            logger.warning("Dictionary %s unavailable, skipping: %s", self.path, exc)
            return ()

        entries: list[DictionaryEntry] = []
        for item in parsed:
            if isinstance(item, MalformedLine):
                if self.strict:
                    raise DictionaryLoadError(
                        f"{self.path}:{item.line_number}: {item.reason}: '{item.text}'"
                    )
                logger.warning(
                    "Skipping malformed line %s:%d (%s)", self.path, item.line_number, item.reason
                )
                continue
            entries.append(item)
        return tuple(entries)

    @cached_property
    def tier(self) -> DictionaryTier:
        """Build and cache the lookup tier for this file.

        The first occurrence of a duplicated term wins.

        Raises:
            DictionaryLoadError: In strict mode, if loading or validation fails.
        """

        mapping: dict[str, str] = {}
        for entry in self.entries:
            mapping.setdefault(entry.term, entry.pinyin)
        tier = DictionaryTier(name=str(self.path), entries=mapping)
        if self.strict:
            try:
                validate_dictionary_tier(tier)
            except ValueError as exc:
                raise DictionaryLoadError(str(exc)) from exc
        logger.debug("Loaded %d terms from %s", len(tier), self.path)
        return tier


def load_tiers(paths: tuple[Path, ...], strict: bool = False) -> tuple[DictionaryTier, ...]:
    """Load several dictionary files, preserving their priority order."""

    return tuple(DictionaryRepository(path, strict=strict).tier for path in paths)
