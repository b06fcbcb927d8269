#!/usr/bin/env python3
"""Command-line access to the phonetic aids, vocabulary annotation and scoring.

Examples:
    python main.py mora ko shi tsu
    python main.py rtgs sa-wat-dii khop-khun
    python main.py mora --kana とうきょう コーヒー
    python main.py annotate ja --output ja.annotated.json
    python main.py score "sawatdii" "sawaddee"
"""
import argparse
import json
import os
import sys

from projectj.logger import logger
from projectj.nlp import get_transliterator
from projectj.nlp.japanese.phonetics import JapanesePhonetics, mora_to_thai_phonetic
from projectj.scoring import assess
from projectj.vocabulary import (
    VocabularyError,
    annotate_vocabulary,
    load_language,
    load_vocabulary,
    save_vocabulary,
    syllable_hints,
)


def cmd_transliterate(args: argparse.Namespace) -> int:
    if getattr(args, "kana", False):
        return cmd_kana(args)
    language = 'ja' if args.command == 'mora' else 'th'
    transliterator = get_transliterator(language)
    for text, result in zip(args.text, transliterator.transliterate_all(args.text)):
        print(f"{text}\t{result}")
    return 0


def cmd_kana(args: argparse.Namespace) -> int:
    phonetics = JapanesePhonetics()
    for text in args.text:
        romaji = phonetics.to_romaji(text)
        thai = [mora_to_thai_phonetic(ro) for ro in romaji]
        print(f"{text}\t{'-'.join(romaji)}\t{''.join(thai)}")
    return 0


def cmd_annotate(args: argparse.Namespace) -> int:
    try:
        if os.path.isfile(args.source):
            entries = load_vocabulary(args.source)
        else:
            entries = load_language(args.source)
    except (VocabularyError, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1

    annotated = annotate_vocabulary(entries)
    if args.output:
        save_vocabulary(annotated, args.output)
    else:
        for entry in annotated:
            print(f"{entry.word}\t{entry.romanization}\t{' '.join(syllable_hints(entry))}")
    return 0


def cmd_score(args: argparse.Namespace) -> int:
    result = assess(args.expected, args.transcribed)
    print(json.dumps(result.model_dump(mode="json", exclude_none=True), ensure_ascii=False, indent=2))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Thai ⇄ Japanese pronunciation helpers"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    mora = subparsers.add_parser("mora", help="Japanese romaji mora → Thai phonetic aid")
    mora.add_argument("text", nargs="+", help="Romaji moras, e.g. ko shi kyo")
    mora.add_argument("--kana", action="store_true", help="Read the arguments as kana words and split them into moras")
    mora.set_defaults(func=cmd_transliterate)

    rtgs = subparsers.add_parser("rtgs", help="Thai RTGS word → Katakana phonetic aid")
    rtgs.add_argument("text", nargs="+", help="Hyphen-delimited RTGS words, e.g. sa-wat-dii")
    rtgs.set_defaults(func=cmd_transliterate)

    annotate = subparsers.add_parser("annotate", help="Fill missing phonetic aids in a vocabulary file")
    annotate.add_argument("source", help="Language code ('ja', 'th') or path to a vocabulary JSON file. "
                                         "Bundled vocabulary is read from PROJECTJ_DATA_DIR/vocabulary when set")
    annotate.add_argument("--output", "-o", help="Write the annotated vocabulary to this JSON file")
    annotate.set_defaults(func=cmd_annotate)

    score = subparsers.add_parser("score", help="Score a transcription against the expected romanization")
    score.add_argument("expected", help="Expected romanization")
    score.add_argument("transcribed", help="What the speech recognizer heard")
    score.set_defaults(func=cmd_score)

    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
