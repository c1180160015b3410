"""Validation helpers for loaded dictionary tiers."""

from __future__ import annotations

import re

from hanzi_pinyin.models import DictionaryTier
from hanzi_pinyin.stages.stage1_prepare import contains_han

DIGIT_RE = re.compile(r"[0-9]")
MAX_REPORTED_ERRORS = 25


def collect_tier_errors(tier: DictionaryTier) -> list[str]:
    """List entries that would corrupt blind replacement.

    A term must contain a Han character, otherwise it could rewrite pinyin
    produced by an earlier tier. A value must not contain Han characters, which
    would re-trigger replacement, nor ASCII digits, which would be confused with
    tone numbers.

    Args:
        tier: Loaded dictionary tier.

    Returns:
        Human-readable problem descriptions in entry order.
    """

    errors: list[str] = []
    for term, pinyin in tier.entries.items():
        if not contains_han(term):
            errors.append(f"{tier.name}: term '{term}' has no Han characters")
        if contains_han(pinyin):
            errors.append(f"{tier.name}: value '{pinyin}' for '{term}' contains Han characters")
        if DIGIT_RE.search(pinyin):
            errors.append(f"{tier.name}: value '{pinyin}' for '{term}' contains digits")
    return errors


def validate_dictionary_tier(tier: DictionaryTier) -> None:
    """Validate one tier before it is used for conversion.

    Args:
        tier: Loaded dictionary tier.

    Raises:
        ValueError: If any entry violates the term/value constraints.
    """

    errors = collect_tier_errors(tier)
    if errors:
        preview = "\n".join(f"- {item}" for item in errors[:MAX_REPORTED_ERRORS])
        rest = len(errors) - min(MAX_REPORTED_ERRORS, len(errors))
        more = f"\n- ... and {rest} more" if rest > 0 else ""
        raise ValueError(
            f"Dictionary validation failed with {len(errors)} errors:\n{preview}{more}"
        )
