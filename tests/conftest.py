"""Test configuration and fixtures."""
import json
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

REPO_DATA_DIR = os.path.join(os.path.dirname(__file__), '..', 'projectj', 'data', 'vocabulary')


@pytest.fixture
def vocabulary_dir():
    """Directory with the bundled vocabulary files."""
    return os.path.abspath(REPO_DATA_DIR)


@pytest.fixture
def japanese_entry_data():
    """A Japanese vocabulary entry with one precomputed Thai hint."""
    return {
        "id": "ja-test-001",
        "category": "greetings",
        "word": "おはよう",
        "reading": "おはよう",
        "romanization": "ohayou",
        "syllables": [
            {"kana": "お", "roman": "o", "isHigh": False, "isAccentDrop": False},
            {"kana": "は", "roman": "ha", "isHigh": True, "isAccentDrop": False},
            {"kana": "よ", "roman": "yo", "isHigh": True, "isAccentDrop": False, "thai": "โยะ"},
            {"kana": "う", "roman": "u", "isHigh": True, "isAccentDrop": False},
        ],
        "meaningTh": "อรุณสวัสดิ์",
        "meaningJa": "おはよう",
        "exampleSentence": "おはようございます。",
        "exampleTranslation": "อรุณสวัสดิ์ครับ",
        "ttsLang": "ja-JP",
    }


@pytest.fixture
def thai_entry_data():
    """A Thai vocabulary entry with one precomputed Katakana hint."""
    return {
        "id": "th-test-001",
        "category": "food",
        "word": "ข้าว",
        "reading": "ข้าว",
        "romanization": "khaaw-suay",
        "syllables": [
            {"thai": "ข้าว", "roman": "khaaw", "tone": "falling"},
            {"thai": "สวย", "roman": "suay", "tone": "rising", "katakana": "スワイ"},
        ],
        "meaningTh": "ข้าวสวย",
        "meaningJa": "ご飯",
        "exampleSentence": "กินข้าวหรือยัง",
        "exampleTranslation": "ご飯食べた？",
        "ttsLang": "th-TH",
    }


@pytest.fixture
def vocabulary_file(tmp_path, japanese_entry_data, thai_entry_data):
    """Vocabulary JSON file containing both sample entries."""
    path = tmp_path / "vocabulary.json"
    path.write_text(
        json.dumps([japanese_entry_data, thai_entry_data], ensure_ascii=False),
        encoding="utf-8",
    )
    return str(path)
