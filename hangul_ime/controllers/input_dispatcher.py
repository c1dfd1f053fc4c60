from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from hangul_ime.domain.composer import apply_key

logger = logging.getLogger(__name__)


DEFAULT_DEBOUNCE_MS: int = 150


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class KeyPress:
    key: str
    timestamp_ms: float


class KeyDebouncer:
    """Drops a repeat of the last accepted key inside the debounce window.

    Touch screens can fire two "down" events for one tap. Only the most recent
    accepted key is remembered; a rejected event leaves that record untouched.
    """

    def __init__(self, window_ms: float = DEFAULT_DEBOUNCE_MS) -> None:
        if window_ms < 0:
            raise ValueError("Debounce window must be >= 0 ms, got %r" % (window_ms,))
        self._window_ms = float(window_ms)
        self._last: Optional[KeyPress] = None

    @property
    def window_ms(self) -> float:
        return self._window_ms

    @property
    def last(self) -> Optional[KeyPress]:
        return self._last

    def accept(self, key: str, now_ms: float) -> bool:
        last = self._last
        if last is not None and last.key == key and (now_ms - last.timestamp_ms) < self._window_ms:
            return False
        self._last = KeyPress(key, now_ms)
        return True

    def reset(self) -> None:
        self._last = None


class InputDispatcher:
    """Turns discrete key events into buffer updates.

    Owns the current text buffer and a single debounce record. Callers must
    feed events one at a time; nothing here is thread-safe.
    """

    def __init__(
        self,
        buffer: str = "",
        *,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._buffer = buffer
        self._debouncer = KeyDebouncer(debounce_ms)
        self._clock = clock or _monotonic_ms

    @property
    def buffer(self) -> str:
        return self._buffer

    @property
    def debouncer(self) -> KeyDebouncer:
        return self._debouncer

    def set_buffer(self, text: str) -> None:
        self._buffer = text or ""

    def dispatch_key(self, key: str, now_ms: Optional[float] = None) -> str:
        """Apply one key event and return the (possibly unchanged) buffer."""
        now = self._clock() if now_ms is None else now_ms
        if not self._debouncer.accept(key, now):
            logger.debug("Discarded duplicate key %r at %.1f ms", key, now)
            return self._buffer
        self._buffer = apply_key(self._buffer, key)
        return self._buffer

    def commit(self) -> str:
        """Return the stripped buffer and start over with an empty one."""
        text = self._buffer.strip()
        self._buffer = ""
        self._debouncer.reset()
        return text
