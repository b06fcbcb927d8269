"""Static vocabulary loading and phonetic hint resolution."""

import json
import os
from typing import Iterable, List, Optional

from pydantic import ValidationError

from projectj import VOCABULARY_DIR, VOCABULARY_FILES
from projectj.logger import logger
from projectj.nlp.japanese.phonetics import JapanesePhonetics, mora_to_thai_phonetic
from projectj.nlp.thai.phonetics import rtgs_to_katakana
from projectj.schema import PitchSyllable, ThaiSyllable, VocabEntry, Vocabulary


class VocabularyError(Exception):
    """Raised when a vocabulary file cannot be read or does not match the schema."""
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid vocabulary file '{path}': {reason}")
        self.path = path
        self.reason = reason


def load_vocabulary(path: str) -> List[VocabEntry]:
    """Load and validate a vocabulary JSON file (a list of entries)."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise VocabularyError(path, "file not found")
    except json.JSONDecodeError as e:
        raise VocabularyError(path, f"invalid JSON: {e.msg} (line {e.lineno})")

    try:
        entries = Vocabulary.model_validate(data).root
    except ValidationError as e:
        raise VocabularyError(path, f"{e.error_count()} validation error(s)\n{e}")

    logger.info(f"Loaded {len(entries)} vocabulary entries from {path}")
    return entries


def load_language(language: str, data_dir: Optional[str] = None) -> List[VocabEntry]:
    """Load the bundled vocabulary for a learned language ('ja' or 'th')."""
    language = language.lower()
    if language == 'jp':
        language = 'ja'
    if language not in VOCABULARY_FILES:
        raise ValueError(f"Unsupported vocabulary language: {language}")
    return load_vocabulary(os.path.join(data_dir or VOCABULARY_DIR, VOCABULARY_FILES[language]))


def save_vocabulary(entries: Iterable[VocabEntry], path: str) -> None:
    """Write entries as UTF-8 JSON, omitting unset optional fields."""
    entries = list(entries)
    data = Vocabulary(entries).model_dump(mode="json", exclude_none=True)
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.write("\n")
    logger.info(f"💾 Saved {len(entries)} vocabulary entries to {path}")


_phonetics: Optional[JapanesePhonetics] = None


def _get_phonetics() -> JapanesePhonetics:
    """pykakasi is slow to set up, so one processor is shared for the process."""
    global _phonetics
    if _phonetics is None:
        _phonetics = JapanesePhonetics()
    return _phonetics


def mora_romaji(syllable: PitchSyllable) -> str:
    """Romaji of a mora, derived from its kana when the data leaves it empty."""
    if syllable.roman.strip():
        return syllable.roman
    return "".join(_get_phonetics().to_romaji(syllable.kana))


def thai_hint(syllable: PitchSyllable) -> str:
    """Thai phonetic aid for a Japanese mora; the precomputed value wins."""
    if syllable.thai is not None:
        return syllable.thai
    return mora_to_thai_phonetic(mora_romaji(syllable))


def katakana_hint(syllable: ThaiSyllable) -> str:
    """Katakana phonetic aid for a Thai syllable; the precomputed value wins."""
    if syllable.katakana is not None:
        return syllable.katakana
    return rtgs_to_katakana(syllable.roman)


def syllable_hints(entry: VocabEntry) -> List[str]:
    """Phonetic aid for every syllable of *entry*, in order."""
    hints = []
    for syllable in entry.syllables:
        if isinstance(syllable, PitchSyllable):
            hints.append(thai_hint(syllable))
        else:
            hints.append(katakana_hint(syllable))
    return hints


def annotate_entry(entry: VocabEntry) -> VocabEntry:
    """Return a copy of *entry* with every missing phonetic aid filled in.

    Hints already present in the data are kept as they are.
    """
    syllables = []
    for syllable in entry.syllables:
        if isinstance(syllable, PitchSyllable):
            syllables.append(syllable.model_copy(update={
                "roman": mora_romaji(syllable),
                "thai": thai_hint(syllable),
            }))
        else:
            syllables.append(syllable.model_copy(update={"katakana": katakana_hint(syllable)}))
    return entry.model_copy(update={"syllables": syllables})


def annotate_vocabulary(entries: Iterable[VocabEntry]) -> List[VocabEntry]:
    """Annotate all entries, logging how many hints had to be computed."""
    annotated = []
    computed = 0
    for entry in entries:
        computed += sum(
            1 for s in entry.syllables
            if (s.thai if isinstance(s, PitchSyllable) else s.katakana) is None
        )
        annotated.append(annotate_entry(entry))
    logger.info(f"Annotated {len(annotated)} entries ({computed} hints computed)")
    return annotated
