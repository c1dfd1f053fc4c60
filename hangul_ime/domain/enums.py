from __future__ import annotations

from enum import Enum
from typing import Final


SPACE_KEY: Final[str] = " "
BACKSPACE_KEYS: Final[frozenset[str]] = frozenset({"Backspace", "⌫"})


class KeyKind(Enum):
    CHARACTER = "character"
    SPACE = "space"
    BACKSPACE = "backspace"

    @classmethod
    def for_key(cls, key: str) -> "KeyKind":
        if key == SPACE_KEY:
            return cls.SPACE
        if key in BACKSPACE_KEYS:
            return cls.BACKSPACE
        return cls.CHARACTER


class JamoClass(Enum):
    """Classification of a single input symbol for composition."""

    INITIAL = "initial"
    VOWEL = "vowel"
    FINAL_ONLY = "final_only"  # compound finals such as ㄳ, never an initial
    SYLLABLE = "syllable"
    LITERAL = "literal"
