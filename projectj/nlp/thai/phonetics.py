"""Thai RTGS → Katakana phonetic approximation.

Each RTGS syllable is decomposed into onset, coda and vowel nucleus by
greedy matching against ordered rule tables, and the Katakana rendering is
composed from the matched pieces. The result is a reading aid for Japanese
learners, not a phonological transcription.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from projectj.nlp.base import BaseTransliterator
from projectj.nlp.thai.normalizer import normalize_rtgs, split_syllables

# Vowel class indices into the Katakana base tuples
VOWEL_A, VOWEL_I, VOWEL_U, VOWEL_E, VOWEL_O = range(5)

# Onset clusters. Order matters: clusters must come before their
# single-letter prefixes ("kh" before "k"). Do not sort.
ONSET_LIST: Tuple[str, ...] = (
    'ng', 'kh', 'ph', 'th', 'ch', 'tr', 'pr', 'pl',
    'k', 's', 't', 'n', 'p', 'f', 'm', 'y', 'r', 'l', 'w', 'h', 'd', 'b',
)

# Katakana base per onset, indexed by vowel class (a, i, u, e, o)
ONSET_TO_KATAKANA: Mapping[str, Tuple[str, str, str, str, str]] = MappingProxyType({
    #        a       i       u       e       o
    'kh': ('カ',   'キ',   'ク',   'ケ',   'コ'),
    'ph': ('パ',   'ピ',   'プ',   'ペ',   'ポ'),
    'th': ('タ',   'ティ', 'トゥ', 'テ',   'ト'),
    'ch': ('チャ', 'チ',   'チュ', 'チェ', 'チョ'),
    'tr': ('チャ', 'チ',   'チュ', 'チェ', 'チョ'),
    'pr': ('プラ', 'プリ', 'プル', 'プレ', 'プロ'),
    'pl': ('プラ', 'プリ', 'プル', 'プレ', 'プロ'),
    'ng': ('ンガ', 'ンギ', 'ング', 'ンゲ', 'ンゴ'),
    'k':  ('カ',   'キ',   'ク',   'ケ',   'コ'),
    's':  ('サ',   'シ',   'ス',   'セ',   'ソ'),
    't':  ('タ',   'ティ', 'トゥ', 'テ',   'ト'),
    'n':  ('ナ',   'ニ',   'ヌ',   'ネ',   'ノ'),
    'p':  ('パ',   'ピ',   'プ',   'ペ',   'ポ'),
    'f':  ('ファ', 'フィ', 'フ',   'フェ', 'フォ'),
    'm':  ('マ',   'ミ',   'ム',   'メ',   'モ'),
    'y':  ('ヤ',   'イ',   'ユ',   'イェ', 'ヨ'),
    'r':  ('ラ',   'リ',   'ル',   'レ',   'ロ'),
    'l':  ('ラ',   'リ',   'ル',   'レ',   'ロ'),
    'w':  ('ワ',   'ウィ', 'ウ',   'ウェ', 'ウォ'),
    'h':  ('ハ',   'ヒ',   'フ',   'ヘ',   'ホ'),
    'd':  ('ダ',   'ディ', 'ドゥ', 'デ',   'ド'),
    'b':  ('バ',   'ビ',   'ブ',   'ベ',   'ボ'),
    '':   ('ア',   'イ',   'ウ',   'エ',   'オ'),
})

# Vowel nucleus patterns → (vowel class, Katakana suffix after the base).
# Longest patterns first. Diphthongs take the class of their first element
# and spell the second element as the suffix.
VOWEL_PATTERNS: Tuple[Tuple[str, Tuple[int, str]], ...] = (
    ('uea', (VOWEL_U, 'ア')),
    ('uaa', (VOWEL_U, 'アー')),
    ('iaa', (VOWEL_I, 'アー')),
    ('ia',  (VOWEL_I, 'ア')),
    ('ua',  (VOWEL_U, 'ア')),
    ('aaw', (VOWEL_O, 'ー')),
    ('aae', (VOWEL_E, 'ー')),
    ('ooe', (VOWEL_U, 'ー')),
    ('aa',  (VOWEL_A, 'ー')),
    ('ii',  (VOWEL_I, 'ー')),
    ('uu',  (VOWEL_U, 'ー')),
    ('ee',  (VOWEL_E, 'ー')),
    ('oo',  (VOWEL_O, 'ー')),
    ('aw',  (VOWEL_O, '')),
    ('ae',  (VOWEL_E, '')),
    ('oe',  (VOWEL_U, '')),
    ('a',   (VOWEL_A, '')),
    ('i',   (VOWEL_I, '')),
    ('u',   (VOWEL_U, '')),
    ('e',   (VOWEL_E, '')),
    ('o',   (VOWEL_O, '')),
)

# Final consonants, checked against the end of the syllable in this order
CODA_KEYS: Tuple[str, ...] = ('ng', 'k', 't', 'p', 'n', 'm', 'w', 'y')

CODA_TO_KATAKANA: Mapping[str, str] = MappingProxyType({
    'ng': 'ング',
    'k':  'ク',
    't':  'ト',
    'p':  'プ',
    'n':  'ン',
    'm':  'ム',
    'w':  'ウ',
    'y':  'イ',
})


@dataclass(frozen=True)
class SyllableParts:
    """One RTGS syllable split into onset, nucleus and coda."""
    onset: str
    nucleus: str
    coda: str


@dataclass(frozen=True, eq=False)
class SyllableTranscoder:
    """Rule tables for RTGS → Katakana conversion.

    The tables are read-only; a single default instance is shared by the
    module-level functions. Other instances can be built with custom
    tables, e.g. to check matching behaviour in isolation.
    """
    onsets: Tuple[str, ...] = ONSET_LIST
    onset_katakana: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: ONSET_TO_KATAKANA)
    vowel_patterns: Tuple[Tuple[str, Tuple[int, str]], ...] = VOWEL_PATTERNS
    codas: Tuple[str, ...] = CODA_KEYS
    coda_katakana: Mapping[str, str] = field(default_factory=lambda: CODA_TO_KATAKANA)

    def match_onset(self, syllable: str) -> str:
        """Return the first listed onset that prefixes *syllable*, or ''."""
        for onset in self.onsets:
            if syllable.startswith(onset):
                return onset
        return ''

    def match_coda(self, rest: str) -> str:
        """Return the first listed coda ending *rest*.

        A coda is only taken if at least one character stays behind for
        the vowel nucleus.
        """
        for coda in self.codas:
            if rest.endswith(coda) and len(rest) > len(coda):
                return coda
        return ''

    def match_vowel(self, nucleus: str) -> Tuple[int, str]:
        """Return (vowel class, suffix) of the first pattern prefixing *nucleus*."""
        for pattern, result in self.vowel_patterns:
            if nucleus.startswith(pattern):
                return result
        return VOWEL_A, ''

    def split(self, syllable: str) -> SyllableParts:
        """Decompose a single RTGS syllable (diacritics and case are normalized)."""
        rest = normalize_rtgs(syllable)
        onset = self.match_onset(rest)
        rest = rest[len(onset):]
        coda = self.match_coda(rest)
        if coda:
            rest = rest[:-len(coda)]
        return SyllableParts(onset=onset, nucleus=rest, coda=coda)

    def syllable_to_katakana(self, syllable: str) -> str:
        """Convert one RTGS syllable to Katakana."""
        parts = self.split(syllable)
        bases = self.onset_katakana.get(parts.onset)
        if bases is None:
            bases = self.onset_katakana['']
        vowel, suffix = self.match_vowel(parts.nucleus)
        return bases[vowel] + suffix + self.coda_katakana.get(parts.coda, '')

    def to_katakana(self, rtgs: str) -> str:
        """Convert hyphen-delimited RTGS (``sa-wat``) to Katakana."""
        return "".join(self.syllable_to_katakana(part) for part in split_syllables(rtgs))


DEFAULT_TRANSCODER = SyllableTranscoder()


def rtgs_to_katakana(rtgs: str, transcoder: Optional[SyllableTranscoder] = None) -> str:
    """Return a Katakana approximation of an RTGS-romanized Thai word.

    Syllables are separated by hyphens and converted independently; the
    results are joined without a separator. Never raises: unknown onsets,
    vowels and codas fall back to the vowel-only base, the "a" vowel and no
    coda suffix.

    >>> rtgs_to_katakana("sa-wat")
    'サワト'
    """
    return (transcoder or DEFAULT_TRANSCODER).to_katakana(rtgs)


class ThaiTransliterator(BaseTransliterator):
    """RTGS Thai → Katakana reading aid for Japanese speakers."""

    source_language = "th"
    target_script = "katakana"

    def __init__(self, transcoder: Optional[SyllableTranscoder] = None):
        self.transcoder = transcoder or DEFAULT_TRANSCODER

    def transliterate(self, text: str) -> str:
        return self.transcoder.to_katakana(text)
