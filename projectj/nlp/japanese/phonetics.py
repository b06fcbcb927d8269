"""Japanese phonetic processing utilities.

Romaji moras are rendered with the Thai transcription used in Thai–Japanese
textbooks (ko → โค, shi → ชิ, tsu → สึ).
"""

import re
from types import MappingProxyType
from typing import List, Mapping

import jaconv
import pykakasi

from projectj.nlp.base import BaseTransliterator

MORA_TO_THAI: Mapping[str, str] = MappingProxyType({
    # bare vowels
    'a': 'อา', 'i': 'อิ', 'u': 'อุ', 'e': 'เอ', 'o': 'โอ',
    # syllabic N
    'n': 'น', 'nn': 'น',
    # K row
    'ka': 'คา', 'ki': 'คิ', 'ku': 'คุ', 'ke': 'เค', 'ko': 'โค',
    # S row
    'sa': 'ซา', 'shi': 'ชิ', 'si': 'ชิ', 'su': 'ซุ', 'se': 'เซ', 'so': 'โซ',
    # T row
    'ta': 'ทา', 'chi': 'ชิ', 'ti': 'ทิ', 'tsu': 'สึ', 'tu': 'ทุ', 'te': 'เท', 'to': 'โท',
    # N row
    'na': 'นา', 'ni': 'นิ', 'nu': 'นุ', 'ne': 'เน', 'no': 'โน',
    # H row
    'ha': 'ฮา', 'hi': 'ฮิ', 'fu': 'ฝุ', 'hu': 'ฮุ', 'he': 'เฮ', 'ho': 'โฮ',
    # M row
    'ma': 'มา', 'mi': 'มิ', 'mu': 'มุ', 'me': 'เม', 'mo': 'โม',
    # Y row
    'ya': 'ยา', 'yu': 'ยุ', 'yo': 'โย',
    # R row
    'ra': 'รา', 'ri': 'ริ', 'ru': 'รุ', 're': 'เร', 'ro': 'โร',
    # W row
    'wa': 'วา', 'wi': 'วิ', 'we': 'เว', 'wo': 'โวะ',
    # G row (voiced k)
    'ga': 'กา', 'gi': 'กิ', 'gu': 'กุ', 'ge': 'เก', 'go': 'โก',
    # Z row
    'za': 'ซา', 'ji': 'จิ', 'zi': 'จิ', 'zu': 'ซุ', 'ze': 'เซ', 'zo': 'โซ',
    # D row
    'da': 'ดา', 'di': 'ดิ', 'du': 'ดุ', 'de': 'เด', 'do': 'โด',
    # B row
    'ba': 'บา', 'bi': 'บิ', 'bu': 'บุ', 'be': 'เบ', 'bo': 'โบ',
    # P row
    'pa': 'ปา', 'pi': 'ปิ', 'pu': 'ปุ', 'pe': 'เป', 'po': 'โป',
    # yōon
    'kya': 'คยา', 'kyu': 'คยุ', 'kyo': 'คโย',
    'sha': 'ชา', 'shu': 'ชุ', 'sho': 'โช',
    'cha': 'ชา', 'chu': 'ชุ', 'cho': 'โช',
    'nya': 'นยา', 'nyu': 'นยุ', 'nyo': 'นโย',
    'hya': 'ฮยา', 'hyu': 'ฮยุ', 'hyo': 'ฮโย',
    'mya': 'มยา', 'myu': 'มยุ', 'myo': 'มโย',
    'rya': 'รยา', 'ryu': 'รยุ', 'ryo': 'รโย',
    'gya': 'กยา', 'gyu': 'กยุ', 'gyo': 'กโย',
    'ja': 'จา', 'ju': 'จุ', 'jo': 'โจ',
    'bya': 'บยา', 'byu': 'บยุ', 'byo': 'บโย',
    'pya': 'ปยา', 'pyu': 'ปยุ', 'pyo': 'ปโย',
})

_SEPARATORS_RE = re.compile(r"[-\s]")

# Small kana that merge with the preceding kana into one mora
_SMALL_KANA = frozenset("ゃゅょぁぃぅぇぉゎ")

_LONG_VOWEL_MARK = "ー"


def normalize_mora(roman: str) -> str:
    """Lowercase *roman* and strip hyphens and whitespace ("KY-O" → "kyo")."""
    return _SEPARATORS_RE.sub("", roman.lower())


def mora_to_thai_phonetic(roman: str) -> str:
    """Return the Thai-script approximation of a romaji mora.

    Unknown moras come back normalized but otherwise unchanged, so the
    function never raises and only returns '' for empty input.
    """
    key = normalize_mora(roman)
    return MORA_TO_THAI.get(key, key)


class JapanesePhonetics:
    """Japanese phonetic transcription processor."""

    def __init__(self):
        """Initialize the phonetics processor with pykakasi."""
        self._kks = pykakasi.kakasi()

    @staticmethod
    def to_moras(kana: str) -> List[str]:
        """Split *kana* (hiragana or katakana) into hiragana moras.

        Small ya/yu/yo and small vowels are attached to the preceding kana
        (きょ is one mora); the long-vowel mark "ー" stays its own mora.
        """
        moras: List[str] = []
        for ch in jaconv.kata2hira(kana):
            if ch in _SMALL_KANA and moras and moras[-1] != _LONG_VOWEL_MARK:
                moras[-1] += ch
            elif not ch.isspace():
                moras.append(ch)
        return moras

    def to_romaji(self, kana: str) -> List[str]:
        """Convert *kana* to a list of Hepburn moras aligned with :meth:`to_moras`.

        Long-vowel mark "ー" is expanded into the preceding vowel so that
        Romaji and kana moras stay the same length.
        """
        romaji: List[str] = []

        for mora in self.to_moras(kana):
            if mora == _LONG_VOWEL_MARK:
                # Prolong the previous vowel; default to a bare hyphen if
                # this is the first mora (degenerate case).
                prev = romaji[-1] if romaji else "-"
                match = re.search(r"[aeiou]$", prev)
                romaji.append(match.group(0) if match else "-")
                continue

            romaji.append("".join(item["hepburn"] for item in self._kks.convert(mora)))

        return romaji

    def to_thai(self, kana: str) -> List[str]:
        """Thai phonetic aid for each mora of *kana*."""
        return [mora_to_thai_phonetic(ro) for ro in self.to_romaji(kana)]


class JapaneseTransliterator(BaseTransliterator):
    """Japanese romaji mora → Thai reading aid for Thai speakers."""

    source_language = "ja"
    target_script = "thai"

    def transliterate(self, text: str) -> str:
        return mora_to_thai_phonetic(text)
