from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

import yaml

from hangul_ime.domain.conjugation import DEFAULT_IRREGULARS, DICTIONARY_SUFFIX, PolitePresent

logger = logging.getLogger(__name__)


_IRREGULARS_FILENAME: Final[str] = "irregulars.yaml"
_DEFAULT_ENDING: Final[str] = "요"


def _project_root() -> Path:
    # hangul_ime/domain/conjugation_rules.py -> hangul_ime/domain -> hangul_ime -> <project_root>
    return Path(__file__).resolve().parents[2]


def default_irregulars_path() -> Path:
    return _project_root() / "data" / _IRREGULARS_FILENAME


# ---------------------------------------------------------------------
# YAML loading
# ---------------------------------------------------------------------

def _read_yaml(path: Path) -> Any:
    if not path.exists() or not path.is_file():
        logger.debug("Irregulars file missing: %s", path)
        return None
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeError) as e:
        logger.debug("Failed to read irregulars file %s: %s", path, e)
        return None
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        logger.warning("Malformed irregulars file %s: %s", path, e)
        return None


def _parse_entry(value: Any) -> PolitePresent | None:
    """Accept `"stem"`, `[stem, ending]` or `{stem: ..., ending: ...}`."""
    if isinstance(value, str):
        stem = value.strip()
        return PolitePresent(stem, _DEFAULT_ENDING) if stem else None

    if isinstance(value, (list, tuple)) and len(value) == 2:
        stem, ending = value
    elif isinstance(value, dict):
        stem, ending = value.get("stem"), value.get("ending", _DEFAULT_ENDING)
    else:
        return None

    if not isinstance(stem, str) or not isinstance(ending, str):
        return None
    stem, ending = stem.strip(), ending.strip()
    if not stem or not ending:
        return None
    return PolitePresent(stem, ending)


def parse_irregulars(data: Any) -> dict[str, PolitePresent]:
    """Parse a loaded YAML document into word -> PolitePresent."""
    if isinstance(data, dict) and isinstance(data.get("irregulars"), dict):
        data = data["irregulars"]
    if not isinstance(data, dict):
        return {}

    out: dict[str, PolitePresent] = {}
    for word, value in data.items():
        if not isinstance(word, str) or not word.strip().endswith(DICTIONARY_SUFFIX):
            logger.warning("Skipping irregular entry %r: not a dictionary form", word)
            continue
        parsed = _parse_entry(value)
        if parsed is None:
            logger.warning("Skipping irregular entry %r: unreadable value %r", word, value)
            continue
        out[word.strip()] = parsed
    return out


def load_irregulars(path: Path | str | None = None) -> dict[str, PolitePresent]:
    """Return the built-in irregular table with entries from YAML merged on top.

    Failure is non-fatal; the built-in table is always present.
    """
    p = Path(path) if path is not None else default_irregulars_path()
    table = dict(DEFAULT_IRREGULARS)
    table.update(parse_irregulars(_read_yaml(p)))
    return table
