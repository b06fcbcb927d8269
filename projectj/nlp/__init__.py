"""Phonetic processing module for projectj

This module provides language-specific reading aids: Japanese romaji moras
rendered in Thai script for Thai learners, and Thai RTGS syllables rendered
in Katakana for Japanese learners.
"""

from .base import BaseTransliterator

def get_transliterator(language: str) -> BaseTransliterator:
    """Get the transliterator for the language being learned.

    Args:
        language: Language code ('ja'/'jp' for Japanese romaji → Thai,
            'th' for Thai RTGS → Katakana)

    Returns:
        Language-specific transliterator instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.phonetics import JapaneseTransliterator
        return JapaneseTransliterator()
    elif language == 'th':
        from .thai.phonetics import ThaiTransliterator
        return ThaiTransliterator()
    else:
        raise ValueError(f"Unsupported language for transliteration: {language}")

__all__ = [
    'BaseTransliterator',
    'get_transliterator',
]
