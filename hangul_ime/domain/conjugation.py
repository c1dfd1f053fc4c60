from __future__ import annotations

"""Polite-present (-아요/-어요/-해요) conjugation.

Returns the stem and the ending as two separate strings so callers can style
them independently (e.g. the ending in a highlight colour on a flashcard).

Rules, in order:
1. The word must end in the dictionary suffix 다, otherwise there is no result.
2. ...하다 -> 해 + 요
3. Exact irregular match -> table value
4. Base stem = word minus 다
   - last char not a syllable block -> base + 어요
   - ...오 / ...보 / ...주 contract to ...와 / ...봐 / ...줘 + 요
   - vowel ㅏ or ㅗ -> base + 아요, anything else -> base + 어요
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, Mapping

from hangul_ime.domain.hangul_unicode import decompose

logger = logging.getLogger(__name__)


DICTIONARY_SUFFIX: Final[str] = "다"
HADA_SUFFIX: Final[str] = "하다"

# Vowel indices (JUNGSEONG order) that take -아요
_BRIGHT_VOWELS: Final[frozenset[int]] = frozenset({0, 8})  # ㅏ, ㅗ

# Final syllable of the base stem -> contracted syllable
_CONTRACTIONS: Final[dict[str, str]] = {
    "오": "와",
    "보": "봐",
    "주": "줘",
}


@dataclass(frozen=True)
class PolitePresent:
    stem: str
    ending: str

    def __str__(self) -> str:
        return self.stem + self.ending


HAE_YO: Final[PolitePresent] = PolitePresent("해", "요")

DEFAULT_IRREGULARS: Final[Mapping[str, PolitePresent]] = MappingProxyType({
    "돕다": PolitePresent("도와", "요"),
    "곱다": PolitePresent("고와", "요"),
    "걷다": PolitePresent("걸어", "요"),
    "묻다": PolitePresent("물어", "요"),
    "듣다": PolitePresent("들어", "요"),
    "모르다": PolitePresent("몰라", "요"),
    "빠르다": PolitePresent("빨라", "요"),
})


class Conjugator:
    """Polite-present conjugator over a fixed irregular table."""

    def __init__(self, irregulars: Mapping[str, PolitePresent] | None = None) -> None:
        table = DEFAULT_IRREGULARS if irregulars is None else irregulars
        self._irregulars: Mapping[str, PolitePresent] = MappingProxyType(dict(table))

    @property
    def irregulars(self) -> Mapping[str, PolitePresent]:
        return self._irregulars

    def conjugate_polite_present(self, word: str) -> PolitePresent | None:
        w = (word or "").strip()
        if not w.endswith(DICTIONARY_SUFFIX):
            return None

        if w.endswith(HADA_SUFFIX):
            return HAE_YO

        override = self._irregulars.get(w)
        if override is not None:
            return override

        base = w[: -len(DICTIONARY_SUFFIX)]
        if not base:
            logger.debug("No stem before %r in %r", DICTIONARY_SUFFIX, w)
            return None

        last = base[-1]
        parts = decompose(last)
        if parts is None:
            return PolitePresent(base, "어요")

        contracted = _CONTRACTIONS.get(last)
        if contracted is not None:
            return PolitePresent(base[:-1] + contracted, "요")

        ending = "아요" if parts.vowel in _BRIGHT_VOWELS else "어요"
        return PolitePresent(base, ending)


_DEFAULT_CONJUGATOR: Conjugator | None = None


def default_conjugator() -> Conjugator:
    """Return the process-wide conjugator, loading the irregular table on first use."""
    global _DEFAULT_CONJUGATOR
    if _DEFAULT_CONJUGATOR is None:
        from hangul_ime.domain.conjugation_rules import load_irregulars

        _DEFAULT_CONJUGATOR = Conjugator(load_irregulars())
    return _DEFAULT_CONJUGATOR


def conjugate_polite_present(word: str) -> PolitePresent | None:
    return default_conjugator().conjugate_polite_present(word)
