from __future__ import annotations

"""Hangul Unicode tables and syllable arithmetic (domain layer).

This module has no I/O and no third-party dependencies.

It centralises:
- Compatibility jamo ordering for initials (choseong), vowels (jungseong)
  and finals (jongseong)
- O(1) classification/index lookups
- The Unicode Hangul Syllables formula in both directions
- The compound final (double batchim) table

Notes:
    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
    i.e. 0xAC00 + initial * 588 + vowel * 28 + final
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping


# -----------------------------------------------------------------------------
# Formula constants
# -----------------------------------------------------------------------------

SYLLABLE_BASE: Final[int] = 0xAC00
SYLLABLE_LAST: Final[int] = 0xD7A3

INITIAL_COUNT: Final[int] = 19
VOWEL_COUNT: Final[int] = 21
FINAL_COUNT: Final[int] = 28
BLOCK_SPAN: Final[int] = VOWEL_COUNT * FINAL_COUNT  # 588

# ㅇ carries no sound in initial position; used for vowel-only syllables
NULL_INITIAL_INDEX: Final[int] = 11


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)

# (existing final, newly typed consonant) -> compound final
COMPOUND_FINALS: Final[Mapping[tuple[str, str], str]] = MappingProxyType({
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
})


# -----------------------------------------------------------------------------
# Internal lookup maps
# -----------------------------------------------------------------------------

_CHO_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
_JUNG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
_JONG_MAP: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG) if j}


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

def initial_index(ch: str) -> int | None:
    return _CHO_MAP.get(ch)


def vowel_index(ch: str) -> int | None:
    return _JUNG_MAP.get(ch)


def final_index(ch: str) -> int | None:
    """Return the 1-based final index of `ch` (0 is reserved for "no final")."""
    return _JONG_MAP.get(ch)


def is_initial(ch: str) -> bool:
    return ch in _CHO_MAP


def is_vowel(ch: str) -> bool:
    return ch in _JUNG_MAP


def is_final(ch: str) -> bool:
    return ch in _JONG_MAP


def is_syllable(ch: str) -> bool:
    return len(ch) == 1 and SYLLABLE_BASE <= ord(ch) <= SYLLABLE_LAST


def combine_finals(first: str, second: str) -> str | None:
    """Return the compound final for `first` + `second`, or None if they don't fuse."""
    return COMPOUND_FINALS.get((first, second))


# -----------------------------------------------------------------------------
# Syllable arithmetic
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SyllableParts:
    """Index triple of a precomposed syllable block."""

    initial: int
    vowel: int
    final: int = 0

    @property
    def final_jamo(self) -> str:
        return JONGSEONG[self.final]

    def recompose(self) -> str:
        return syllable_from_indices(self.initial, self.vowel, self.final)

    def with_final(self, final: int) -> "SyllableParts":
        return SyllableParts(self.initial, self.vowel, final)


def syllable_from_indices(initial: int, vowel: int, final: int = 0) -> str:
    """Compose a syllable block from (initial, vowel, final) indices.

    Raises:
        ValueError: if any index is outside its table.
    """
    if not (0 <= initial < INITIAL_COUNT and 0 <= vowel < VOWEL_COUNT and 0 <= final < FINAL_COUNT):
        raise ValueError(
            "Invalid syllable indices: initial=%r vowel=%r final=%r" % (initial, vowel, final)
        )
    return chr(SYLLABLE_BASE + initial * BLOCK_SPAN + vowel * FINAL_COUNT + final)


def decompose(ch: str) -> SyllableParts | None:
    """Split a precomposed syllable block into its index triple.

    Returns None for anything that is not a single code point in U+AC00..U+D7A3.
    """
    if not is_syllable(ch):
        return None
    offset = ord(ch) - SYLLABLE_BASE
    return SyllableParts(
        initial=offset // BLOCK_SPAN,
        vowel=(offset % BLOCK_SPAN) // FINAL_COUNT,
        final=offset % FINAL_COUNT,
    )


def null_initial_block(vowel: str) -> str:
    """Return ㅇ + `vowel` as a block (e.g. "ㅏ" -> "아")."""
    vi = _JUNG_MAP[vowel]
    return syllable_from_indices(NULL_INITIAL_INDEX, vi, 0)


def compose_lvt(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a Hangul syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Returns:
        A composed Hangul syllable (e.g., "간") or "" if inputs are invalid.
    """
    l = (lead or "").strip()
    v = (vowel or "").strip()
    t = (tail or "").strip()

    if not l or not v:
        return ""

    li = _CHO_MAP.get(l)
    vi = _JUNG_MAP.get(v)
    ti = _JONG_MAP.get(t) if t else 0

    if li is None or vi is None or ti is None:
        return ""

    return syllable_from_indices(li, vi, ti)


def compose_cv(lead: str, vowel: str) -> str:
    """Compose a Hangul syllable from a leading consonant and a vowel."""
    return compose_lvt(lead, vowel, "")
