from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hangul_ime.domain.conjugation import Conjugator, default_conjugator


class SegmentRole(Enum):
    STEM = "stem"
    ENDING = "ending"
    RAW = "raw"  # not conjugatable; show the word as given


@dataclass(frozen=True)
class TextSegment:
    text: str
    role: SegmentRole


def polite_present_segments(word: str, conjugator: Optional[Conjugator] = None) -> list[TextSegment]:
    """Return the stem/ending segments for a flashcard back.

    Falls back to a single RAW segment holding the word when it has no
    polite-present form.
    """
    conj = (conjugator or default_conjugator()).conjugate_polite_present(word)
    if conj is None:
        return [TextSegment(word, SegmentRole.RAW)]
    return [
        TextSegment(conj.stem, SegmentRole.STEM),
        TextSegment(conj.ending, SegmentRole.ENDING),
    ]


def segments_text(segments: list[TextSegment]) -> str:
    return "".join(s.text for s in segments)
