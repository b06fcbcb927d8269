"""Pronunciation accuracy scoring.

Compares the expected romanization of a word against what the speech
recognizer heard. Both strings are lowercased and stripped of whitespace
before comparison.
"""

import math
import re
from typing import List

from projectj.schema import Assessment, CharDiffToken, DiffStatus, Feedback

EXCELLENT_THRESHOLD = 90
GOOD_THRESHOLD = 70
FAIR_THRESHOLD = 50

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_for_scoring(text: str) -> str:
    """Lowercase *text* and remove all whitespace."""
    return _WHITESPACE_RE.sub("", text.lower())


def levenshtein(a: str, b: str) -> int:
    """Edit distance between *a* and *b* (unit cost insert/delete/substitute)."""
    if len(a) < len(b):
        return levenshtein(b, a)

    if len(b) == 0:
        return len(a)

    previous_row = list(range(len(b) + 1))

    for i, ca in enumerate(a):
        current_row = [i + 1]
        for j, cb in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (ca != cb)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def calc_accuracy(expected: str, transcribed: str) -> int:
    """Score 0–100 of how closely *transcribed* matches *expected*.

    Returns 0 when there is nothing to compare against.
    """
    a = normalize_for_scoring(expected)
    b = normalize_for_scoring(transcribed)
    if not a:
        return 0
    dist = levenshtein(a, b)
    # round half up
    return max(0, math.floor((len(a) - dist) / len(a) * 100 + 0.5))


def char_diff(expected: str, transcribed: str) -> List[CharDiffToken]:
    """Position-by-position comparison of the two normalized strings.

    Positions present in both are ``correct`` or ``wrong`` (reported with the
    transcribed character); positions only in *expected* are ``missing`` and
    positions only in *transcribed* are ``extra``.
    """
    exp = normalize_for_scoring(expected)
    got = normalize_for_scoring(transcribed)
    result: List[CharDiffToken] = []

    for i in range(max(len(exp), len(got))):
        ec = exp[i] if i < len(exp) else None
        gc = got[i] if i < len(got) else None
        if ec is not None and gc is not None:
            status = DiffStatus.correct if ec == gc else DiffStatus.wrong
            result.append(CharDiffToken(char=gc, status=status))
        elif ec is not None:
            result.append(CharDiffToken(char=ec, status=DiffStatus.missing))
        else:
            result.append(CharDiffToken(char=gc, status=DiffStatus.extra))

    return result


def build_feedback(accuracy: int) -> Feedback:
    """Encouragement message in Thai and Japanese for an accuracy score."""
    if accuracy >= EXCELLENT_THRESHOLD:
        return Feedback(
            th='🎉 ยอดเยี่ยมมาก! การออกเสียงของคุณถูกต้องมาก!',
            ja='🎉 素晴らしい！発音がとても正確です！',
        )
    elif accuracy >= GOOD_THRESHOLD:
        return Feedback(
            th='👍 ดีมาก! ลองฝึกอีกนิดเพื่อให้ชัดขึ้น',
            ja='👍 よくできました！もう少し練習するとさらに上手になります',
        )
    elif accuracy >= FAIR_THRESHOLD:
        return Feedback(
            th='💪 พยายามดีนะ! ลองฟังเสียงตัวอย่างอีกรอบแล้วฝึกใหม่',
            ja='💪 頑張っています！もう一度お手本の音声を聞いて練習してみましょう',
        )
    else:
        return Feedback(
            th='🔄 ลองใหม่นะ! กดปุ่ม 🔊 เพื่อฟังตัวอย่างก่อน',
            ja='🔄 もう一度試してみましょう！🔊ボタンでお手本を聞いてから練習してください',
        )


def assess(expected: str, transcribed: str) -> Assessment:
    """Score a transcription against the expected romanization."""
    transcribed = transcribed.strip()
    accuracy = calc_accuracy(expected, transcribed)
    return Assessment(
        ok=True,
        transcribed=transcribed,
        accuracy=accuracy,
        charDiff=char_diff(expected, transcribed),
        feedback=build_feedback(accuracy),
    )


def failed_assessment(message: str) -> Assessment:
    """Assessment returned to the learner when transcription failed."""
    return Assessment(
        ok=False,
        transcribed="",
        accuracy=0,
        charDiff=[],
        feedback=Feedback(
            th=f"เกิดข้อผิดพลาด: {message}",
            ja=f"エラーが発生しました: {message}",
        ),
        error=message,
    )
