# tests/conftest.py
import pytest

from hangul_ime.domain import conjugation
from hangul_ime.domain.conjugation import Conjugator


@pytest.fixture(autouse=True)
def fresh_default_conjugator(monkeypatch):
    """Force the process-wide conjugator to reload its table in every test."""
    monkeypatch.setattr(conjugation, "_DEFAULT_CONJUGATOR", None)


@pytest.fixture
def conjugator() -> Conjugator:
    # Built-in irregulars only, independent of data/irregulars.yaml
    return Conjugator()


class FakeClock:
    """Millisecond clock driven by the test."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = float(start)

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
