"""Thai language processing module."""

from .normalizer import normalize_rtgs, split_syllables, strip_diacritics
from .phonetics import (
    CODA_KEYS,
    CODA_TO_KATAKANA,
    ONSET_LIST,
    ONSET_TO_KATAKANA,
    VOWEL_PATTERNS,
    SyllableParts,
    SyllableTranscoder,
    ThaiTransliterator,
    rtgs_to_katakana,
)

__all__ = [
    'CODA_KEYS',
    'CODA_TO_KATAKANA',
    'ONSET_LIST',
    'ONSET_TO_KATAKANA',
    'VOWEL_PATTERNS',
    'SyllableParts',
    'SyllableTranscoder',
    'ThaiTransliterator',
    'normalize_rtgs',
    'rtgs_to_katakana',
    'split_syllables',
    'strip_diacritics',
]
