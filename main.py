from __future__ import annotations

"""Command-line caller for the composition and conjugation engine.

    python main.py compose ㄱ ㅏ ㄴ          -> 간
    python main.py compose ㅎㅏㄴ space ㄱㅡㄹ  -> 한 글
    python main.py conjugate 가다 먹다 공부하다
    python main.py words --pos verbAdj
"""

import argparse
import logging
import sys
from typing import Iterable, Sequence

from hangul_ime.controllers.conjugation_presenter import SegmentRole, polite_present_segments
from hangul_ime.controllers.input_dispatcher import InputDispatcher
from hangul_ime.controllers.lexicon_repository import LexiconRepository, PartOfSpeech
from hangul_ime.domain.conjugation import conjugate_polite_present
from hangul_ime.services.settings_store import SettingsStore

logger = logging.getLogger(__name__)

_KEY_TOKENS = {
    "space": " ",
    "backspace": "Backspace",
    "bs": "Backspace",
}


def _expand_keys(tokens: Iterable[str]) -> list[str]:
    """Turn CLI tokens into single key events ("ㄱㅏ" -> ["ㄱ", "ㅏ"])."""
    keys: list[str] = []
    for tok in tokens:
        named = _KEY_TOKENS.get(tok.lower())
        if named is not None:
            keys.append(named)
        else:
            keys.extend(tok)
    return keys


def _cmd_compose(args: argparse.Namespace, store: SettingsStore) -> int:
    dispatcher = InputDispatcher(debounce_ms=store.get_debounce_ms())
    now = 0.0
    for key in _expand_keys(args.keys):
        dispatcher.dispatch_key(key, now_ms=now)
        now += args.interval_ms
    print(dispatcher.buffer)
    return 0


def _cmd_conjugate(args: argparse.Namespace, store: SettingsStore) -> int:
    for word in args.words:
        conj = conjugate_polite_present(word)
        if conj is None:
            print("{}\t-".format(word))
        else:
            print("{}\t{}+{}".format(word, conj.stem, conj.ending))
    return 0


def _cmd_words(args: argparse.Namespace, store: SettingsStore) -> int:
    repo = LexiconRepository()
    entries = repo.entries() if args.pos is None else repo.entries_for_pos(PartOfSpeech(args.pos))
    if not entries:
        logger.warning("No lexicon entries found in %s", repo.data_dir)
        return 1
    for e in entries:
        if e.pos is PartOfSpeech.VERB_ADJ:
            segs = polite_present_segments(e.ko)
            shown = " ".join(
                "[{}]".format(s.text) if s.role is SegmentRole.ENDING else s.text for s in segs
            )
        else:
            shown = e.ko
        print("{}\t{}\t{}".format(e.ko, e.en, shown))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hangul composition and polite-present conjugation.")
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    p_compose = sub.add_parser("compose", help="Type jamo keys and print the composed text.")
    p_compose.add_argument("keys", nargs="+", help="Jamo (ㄱ ㅏ or ㄱㅏ), 'space' or 'backspace'.")
    p_compose.add_argument(
        "--interval-ms",
        type=float,
        default=1000.0,
        help="Simulated time between key events (below the debounce window repeats are dropped).",
    )
    p_compose.set_defaults(func=_cmd_compose)

    p_conj = sub.add_parser("conjugate", help="Print the polite-present form of dictionary words.")
    p_conj.add_argument("words", nargs="+")
    p_conj.set_defaults(func=_cmd_conjugate)

    p_words = sub.add_parser("words", help="List the word bank with polite-present forms.")
    p_words.add_argument("--pos", choices=[p.value for p in PartOfSpeech], default=None)
    p_words.set_defaults(func=_cmd_words)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    store = SettingsStore(args.settings)
    return args.func(args, store)


if __name__ == "__main__":
    sys.exit(main())
