"""Japanese language processing module."""

from .phonetics import (
    MORA_TO_THAI,
    JapanesePhonetics,
    JapaneseTransliterator,
    mora_to_thai_phonetic,
    normalize_mora,
)

__all__ = [
    'MORA_TO_THAI',
    'JapanesePhonetics',
    'JapaneseTransliterator',
    'mora_to_thai_phonetic',
    'normalize_mora',
]
