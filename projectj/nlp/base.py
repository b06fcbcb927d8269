from abc import ABC, abstractmethod
from typing import Iterable, List


class BaseTransliterator(ABC):
    """Abstract base class for phonetic reading aids.

    Implementations are pure: no I/O, no state changes after construction,
    and total over all input strings (unknown input falls back to a
    best-effort rendering instead of raising).
    """

    source_language: str = ""
    target_script: str = ""

    @abstractmethod
    def transliterate(self, text: str) -> str:
        """Render one romanized unit (mora or syllable group) in the target script"""
        pass

    def transliterate_all(self, items: Iterable[str]) -> List[str]:
        """Transliterate each item independently, preserving order."""
        return [self.transliterate(item) for item in items]
