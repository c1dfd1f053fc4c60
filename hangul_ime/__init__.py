"""Hangul input composition and polite-present conjugation."""

__version__ = "0.1.0"
