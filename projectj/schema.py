from enum import Enum
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator


class Language(str, Enum):
    ja = "ja"
    th = "th"


class ToneName(str, Enum):
    mid = "mid"
    low = "low"
    falling = "falling"
    high = "high"
    rising = "rising"


class DiffStatus(str, Enum):
    correct = "correct"
    wrong = "wrong"
    missing = "missing"
    extra = "extra"


class PitchSyllable(BaseModel):
    kana: str = Field(..., min_length=1)
    roman: str
    isHigh: bool
    isAccentDrop: bool = False  # pitch drops after this mora
    thai: Optional[str] = None  # precomputed Thai phonetic aid
    model_config = ConfigDict(extra="forbid")


class ThaiSyllable(BaseModel):
    thai: str = Field(..., min_length=1)
    roman: str  # RTGS
    tone: ToneName
    katakana: Optional[str] = None  # precomputed Katakana phonetic aid
    model_config = ConfigDict(extra="forbid")


TTS_LANGUAGES = {"ja-JP": Language.ja, "th-TH": Language.th}


class VocabEntry(BaseModel):
    id: str = Field(..., min_length=1)
    category: str
    word: str = Field(..., min_length=1)
    reading: str            # hiragana/katakana for JP, Thai script for TH
    romanization: str       # romaji for JP, RTGS for TH
    ipa: Optional[str] = None
    syllables: Union[List[PitchSyllable], List[ThaiSyllable]]
    meaningTh: str
    meaningJa: str
    exampleSentence: str
    exampleTranslation: str
    ttsLang: Literal["ja-JP", "th-TH"]
    notes: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _syllables_match_language(self) -> "VocabEntry":
        expected = PitchSyllable if self.ttsLang == "ja-JP" else ThaiSyllable
        for syllable in self.syllables:
            if not isinstance(syllable, expected):
                raise ValueError(
                    f"entry {self.id!r} ({self.ttsLang}) must use {expected.__name__} syllables"
                )
        return self

    @property
    def language(self) -> Language:
        return TTS_LANGUAGES[self.ttsLang]


class Vocabulary(RootModel[List[VocabEntry]]):
    pass


class CharDiffToken(BaseModel):
    char: str
    status: DiffStatus


class Feedback(BaseModel):
    th: str
    ja: str


class Assessment(BaseModel):
    ok: bool
    transcribed: str
    accuracy: int = Field(..., ge=0, le=100)
    charDiff: List[CharDiffToken]
    feedback: Feedback
    error: Optional[str] = None
