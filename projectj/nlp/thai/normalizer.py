"""Thai RTGS text normalization utilities."""

import re
import unicodedata
from typing import List

# Combining diacritical marks (U+0300–U+036F)
_COMBINING_MARKS_RE = re.compile(r"[\u0300-\u036f]")


def strip_diacritics(text: str) -> str:
    """
    Remove tone marks and other combining diacritics from RTGS text.

    Some RTGS notations write tones with accents (``sà-wàt``, ``khâo``).
    The text is decomposed (NFD) so that the accents become separate
    combining marks, which are then dropped.

    Args:
        text: RTGS-romanized text, possibly with tone accents

    Returns:
        Text with combining marks removed (case untouched)
    """
    return _COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFD", text))


def normalize_rtgs(text: str) -> str:
    """Strip diacritics and lowercase a single RTGS syllable for matching."""
    return strip_diacritics(text).lower()


def split_syllables(rtgs: str) -> List[str]:
    """Split hyphen-delimited RTGS into syllables, dropping empty segments."""
    return [part for part in rtgs.split("-") if part]
