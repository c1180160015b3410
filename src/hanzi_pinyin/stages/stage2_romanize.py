"""Stage 2: Replace Chinese terms with tone-marked pinyin, tier by tier."""

from __future__ import annotations

from typing import Sequence

from hanzi_pinyin.models import DictionaryTier
from hanzi_pinyin.stages.stage1_prepare import contains_han


def replace_terms(text: str, tier: DictionaryTier) -> str:
    """Substitute every term of ``tier`` found in ``text``.

    Scanning is left to right and always takes the longest term starting at the
    current position, so a phrase is consumed before the characters inside it.
    Each substituted value is padded with spaces to keep syllables apart; the
    padding is collapsed by Stage 3.

    Args:
        text: Working text, possibly already partially romanized.
        tier: Loaded dictionary tier.

    Returns:
        Text with all matched terms replaced.
    """

    max_length = tier.max_term_length
    if max_length == 0:
        return text

    entries = tier.entries
    pieces: list[str] = []
    idx = 0
    while idx < len(text):
        for length in range(min(max_length, len(text) - idx), 0, -1):
            value = entries.get(text[idx : idx + length])
            if value is not None:
                pieces.append(f" {value} ")
                idx += length
                break
        else:
            pieces.append(text[idx])
            idx += 1
    return "".join(pieces)


def romanize(
    text: str,
    dictionaries: Sequence[DictionaryTier],
    surnames: Sequence[DictionaryTier] = (),
) -> str:
    """Run the surname tiers, then the general tiers, over prepared text.

    Remaining tiers are skipped as soon as the text holds no Han characters.

    Args:
        text: Output of Stage 1.
        dictionaries: General tiers, highest priority first.
        surnames: Surname tiers; pass an empty sequence outside name mode.

    Returns:
        Text with tone-marked pinyin in place of every known term.
    """

    for tier in (*surnames, *dictionaries):
        if not contains_han(text):
            break
        text = replace_terms(text, tier)
    return text
