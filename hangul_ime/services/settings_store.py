from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any

import yaml

from hangul_ime.controllers.input_dispatcher import DEFAULT_DEBOUNCE_MS

logger = logging.getLogger(__name__)


class SettingsStore:
    """YAML-backed settings store.

    Responsibilities:
      - Load/save settings.yaml atomically
      - Provide typed helpers for the input settings

    Layout:
        input:
          debounce_ms: 150
    """

    def __init__(self, settings_path: str | None = None) -> None:
        if settings_path is None:
            # <project_root>/settings.yaml
            project_root = Path(__file__).resolve().parents[2]
            self._path = project_root / "settings.yaml"
        else:
            self._path = Path(settings_path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> dict[str, Any]:
        p = self._path
        if not p.exists():
            return {}
        try:
            with p.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, UnicodeError, yaml.YAMLError) as e:
            logger.warning("Failed to read settings %s: %s", p, e)
            return {}
        return data if isinstance(data, dict) else {}

    def save(self, data: dict[str, Any]) -> None:
        p = self._path
        p.parent.mkdir(parents=True, exist_ok=True)
        tmp = p.with_suffix(p.suffix + ".tmp")
        with tmp.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data or {}, f, allow_unicode=True, sort_keys=True)
        os.replace(str(tmp), str(p))

    def _input_section(self, settings: dict[str, Any]) -> dict[str, Any]:
        section = settings.get("input") or {}
        return section if isinstance(section, dict) else {}

    def get_debounce_ms(self) -> int:
        v = self._input_section(self.load()).get("debounce_ms", DEFAULT_DEBOUNCE_MS)
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v) or v < 0:
            logger.debug("Invalid debounce_ms %r in settings; using default", v)
            return DEFAULT_DEBOUNCE_MS
        return int(v)

    def set_debounce_ms(self, value: int) -> None:
        val = int(value)
        if val < 0:
            raise ValueError("debounce_ms must be >= 0, got %r" % (value,))
        s = self.load()
        section = self._input_section(s)
        section["debounce_ms"] = val
        s["input"] = section
        self.save(s)
