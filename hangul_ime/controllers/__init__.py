"""
Controller package exports.

Provides a stable import surface for callers wiring keyboards, flashcards
and word lists to the domain layer.
"""

from .conjugation_presenter import SegmentRole, TextSegment, polite_present_segments  # noqa: F401
from .input_dispatcher import InputDispatcher, KeyDebouncer  # noqa: F401
from .lexicon_repository import LexiconEntry, LexiconRepository, PartOfSpeech  # noqa: F401

__all__ = [
    "InputDispatcher",
    "KeyDebouncer",
    "LexiconEntry",
    "LexiconRepository",
    "PartOfSpeech",
    "SegmentRole",
    "TextSegment",
    "polite_present_segments",
]
