from __future__ import annotations

"""Syllable composer: folds one keystroke at a time into a text buffer.

The buffer is a plain `str` owned by the caller. Every function here is pure:
it takes the current buffer and returns the new one. Only the trailing one or
two code points are ever inspected or replaced; earlier text is never touched.

Anything that is not a compatibility jamo is appended literally, so mixed
Korean/Latin/punctuation typing never blocks.
"""

import logging
from typing import Iterable

from hangul_ime.domain.enums import JamoClass, KeyKind
from hangul_ime.domain.hangul_unicode import (
    SyllableParts,
    combine_finals,
    compose_cv,
    compose_lvt,
    decompose,
    final_index,
    is_final,
    is_initial,
    is_syllable,
    is_vowel,
    null_initial_block,
)

logger = logging.getLogger(__name__)


def classify(ch: str) -> JamoClass:
    """Classify a trailing buffer element.

    Initials win over finals, so FINAL_ONLY is left for the compound finals.
    """
    if is_syllable(ch):
        return JamoClass.SYLLABLE
    if is_initial(ch):
        return JamoClass.INITIAL
    if is_vowel(ch):
        return JamoClass.VOWEL
    if is_final(ch):
        return JamoClass.FINAL_ONLY
    return JamoClass.LITERAL


def _start_unit(char: str) -> str:
    # New unit after something that cannot absorb `char`
    if is_vowel(char):
        return null_initial_block(char)
    return char


def _onto_block(last: str, parts: SyllableParts, char: str) -> str:
    """Return the replacement for a trailing syllable block `last` after typing `char`."""
    if is_final(char):
        if parts.final == 0:
            return parts.with_final(final_index(char)).recompose()

        compound = combine_finals(parts.final_jamo, char)
        if compound is not None:
            return parts.with_final(final_index(compound)).recompose()

        if is_initial(char):
            return last + char
        # Compound finals cannot start a syllable; they overwrite the final
        logger.debug("Overwriting final %r of %r with %r", parts.final_jamo, last, char)
        return parts.with_final(final_index(char)).recompose()

    # A complete block never gains a second vowel or initial
    return last + _start_unit(char)


def compose(buffer: str, char: str) -> str:
    """Return `buffer` after typing `char`.

    Examples:
        compose("", "ㄱ") -> "ㄱ"
        compose("ㄱ", "ㅏ") -> "가"
        compose("가", "ㄴ") -> "간"
        compose("간", "ㅈ") -> "갅"
        compose("각", "ㅏ") -> "각아"
    """
    if not char:
        return buffer

    if not buffer:
        return _start_unit(char)

    head, last = buffer[:-1], buffer[-1]
    kind = classify(last)

    if kind is JamoClass.SYLLABLE:
        parts = decompose(last)
        return head + _onto_block(last, parts, char)

    if kind is JamoClass.INITIAL:
        if is_vowel(char):
            return head + compose_cv(last, char)
        return buffer + char

    if kind is JamoClass.VOWEL:
        if len(buffer) >= 2 and is_initial(buffer[-2]) and is_final(char):
            return buffer[:-2] + compose_lvt(buffer[-2], last, char)
        return buffer + _start_unit(char)

    if kind is JamoClass.FINAL_ONLY:
        return buffer + _start_unit(char)

    return buffer + char


def backspace(buffer: str) -> str:
    """Drop exactly one code point. A composed block is removed whole."""
    return buffer[:-1]


def append_space(buffer: str) -> str:
    """Append a literal space; trailing bare jamo are left as they are."""
    return buffer + " "


def apply_key(buffer: str, key: str) -> str:
    """Route a key (character, space or backspace) to the matching operation."""
    kind = KeyKind.for_key(key)
    if kind is KeyKind.SPACE:
        return append_space(buffer)
    if kind is KeyKind.BACKSPACE:
        return backspace(buffer)
    return compose(buffer, key)


def compose_sequence(keys: Iterable[str], buffer: str = "") -> str:
    for key in keys:
        buffer = apply_key(buffer, key)
    return buffer
