from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterable

import yaml

from hangul_ime.domain.conjugation import DICTIONARY_SUFFIX

logger = logging.getLogger(__name__)


def _default_data_dir() -> Path:
    """Return the project-root data directory.

    Assumes this file lives at: <root>/hangul_ime/controllers/lexicon_repository.py
    """
    return Path(__file__).resolve().parents[2] / "data"


class PartOfSpeech(Enum):
    NOUN = "noun"
    VERB_ADJ = "verbAdj"


_POS_ALIASES: dict[str, PartOfSpeech] = {
    "noun": PartOfSpeech.NOUN,
    "n": PartOfSpeech.NOUN,
    "verbadj": PartOfSpeech.VERB_ADJ,
    "verb": PartOfSpeech.VERB_ADJ,
    "adjective": PartOfSpeech.VERB_ADJ,
    "adj": PartOfSpeech.VERB_ADJ,
    "v": PartOfSpeech.VERB_ADJ,
}


@dataclass(frozen=True)
class LexiconEntry:
    ko: str
    en: str
    pos: PartOfSpeech


@dataclass(frozen=True)
class LexiconRepository:
    """Load the read-only word bank (Korean word -> part of speech + English).

    Supported YAML shapes (intentionally tolerant):

    1) A list of dict items
        - [{ko: 사과, en: apple, pos: noun}, {word: 가다, translation: to go, type: verb}]

    2) A dict containing that list under a common key
        - {lexicon: [...]} or {words: [...]} or {items: [...]}

    Notes:
    - A missing or unknown part of speech is guessed from the word: dictionary
      forms ending in 다 are verbs/adjectives, everything else is a noun.
    - Items without both a Korean word and a translation are skipped.
    """

    project_root: Path | None = None

    @property
    def data_dir(self) -> Path:
        if self.project_root is not None:
            return self.project_root / "data"
        return _default_data_dir()

    def _read_yaml(self, filename: str) -> Any:
        path = self.data_dir / filename
        if not path.exists() or not path.is_file():
            return None

        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeError):
            return None

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            logger.warning("Malformed lexicon file %s: %s", path, e)
            return None

    @staticmethod
    def _as_nonempty_str(value: Any) -> str | None:
        if isinstance(value, str):
            s = value.strip()
            return s if s else None
        return None

    @classmethod
    def _pick_str(cls, mapping: Any, keys: Iterable[str]) -> str | None:
        if not isinstance(mapping, dict):
            return None
        for k in keys:
            s = cls._as_nonempty_str(mapping.get(k))
            if s is not None:
                return s
        return None

    @staticmethod
    def _iter_items(container: Any, preferred_keys: Iterable[str]) -> list[Any]:
        if isinstance(container, list):
            return container
        if isinstance(container, dict):
            for k in preferred_keys:
                v = container.get(k)
                if isinstance(v, list):
                    return v
        return []

    @staticmethod
    def _resolve_pos(raw: str | None, ko: str) -> PartOfSpeech:
        if raw is not None:
            pos = _POS_ALIASES.get(raw.lower())
            if pos is not None:
                return pos
        return PartOfSpeech.VERB_ADJ if ko.endswith(DICTIONARY_SUFFIX) else PartOfSpeech.NOUN

    def _load_entries(self) -> list[LexiconEntry]:
        data = self._read_yaml("lexicon.yaml")
        items = self._iter_items(data, preferred_keys=("lexicon", "words", "items"))

        out: list[LexiconEntry] = []
        for item in items:
            ko = self._pick_str(item, ("ko", "korean", "word"))
            en = self._pick_str(item, ("en", "english", "translation", "meaning"))
            if ko is None or en is None:
                continue
            pos = self._resolve_pos(self._pick_str(item, ("pos", "type", "part_of_speech")), ko)
            out.append(LexiconEntry(ko=ko, en=en, pos=pos))
        return out

    # --- Public API ---

    def entries(self) -> list[LexiconEntry]:
        return self._load_entries()

    def entries_for_pos(self, pos: PartOfSpeech) -> list[LexiconEntry]:
        return [e for e in self._load_entries() if e.pos is pos]

    def lookup(self, ko: str) -> LexiconEntry | None:
        key = (ko or "").strip()
        for e in self._load_entries():
            if e.ko == key:
                return e
        return None

    def korean_for(self, en: str) -> str | None:
        """Reverse lookup: English gloss (case-insensitive) -> Korean word."""
        key = (en or "").strip().lower()
        if not key:
            return None
        for e in self._load_entries():
            if e.en.lower() == key:
                return e.ko
        return None
