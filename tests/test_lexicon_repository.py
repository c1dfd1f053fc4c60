from pathlib import Path

from hangul_ime.controllers.lexicon_repository import (
    LexiconEntry,
    LexiconRepository,
    PartOfSpeech,
)


def _write_lexicon(root: Path, text: str) -> None:
    data_dir = root / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "lexicon.yaml").write_text(text, encoding="utf-8")


def test_repo_empty_when_no_data_dir(tmp_path: Path) -> None:
    repo = LexiconRepository(project_root=tmp_path)
    assert repo.entries() == []
    assert repo.lookup("사과") is None


def test_repo_reads_list_of_dicts(tmp_path: Path) -> None:
    _write_lexicon(
        tmp_path,
        "- {ko: 사과, en: apple, pos: noun}\n"
        "- {ko: 가다, en: to go, pos: verbAdj}\n",
    )
    repo = LexiconRepository(project_root=tmp_path)
    assert repo.entries() == [
        LexiconEntry("사과", "apple", PartOfSpeech.NOUN),
        LexiconEntry("가다", "to go", PartOfSpeech.VERB_ADJ),
    ]


def test_repo_reads_wrapped_list_and_alternate_keys(tmp_path: Path) -> None:
    _write_lexicon(
        tmp_path,
        "words:\n"
        "  - {word: 먹다, translation: to eat, type: verb}\n"
        "  - {korean: 학교, english: school}\n"
        "  - {ko: 빈칸}\n",
    )
    repo = LexiconRepository(project_root=tmp_path)
    assert repo.entries() == [
        LexiconEntry("먹다", "to eat", PartOfSpeech.VERB_ADJ),
        LexiconEntry("학교", "school", PartOfSpeech.NOUN),
    ]


def test_unknown_pos_is_guessed_from_the_word(tmp_path: Path) -> None:
    _write_lexicon(
        tmp_path,
        "- {ko: 좋다, en: to be good, pos: other}\n"
        "- {ko: 친구, en: friend}\n",
    )
    repo = LexiconRepository(project_root=tmp_path)
    assert [e.pos for e in repo.entries()] == [PartOfSpeech.VERB_ADJ, PartOfSpeech.NOUN]


def test_filter_lookup_and_reverse_lookup(tmp_path: Path) -> None:
    _write_lexicon(
        tmp_path,
        "- {ko: 사과, en: Apple, pos: noun}\n"
        "- {ko: 가다, en: to go, pos: verbAdj}\n",
    )
    repo = LexiconRepository(project_root=tmp_path)
    assert [e.ko for e in repo.entries_for_pos(PartOfSpeech.VERB_ADJ)] == ["가다"]
    assert repo.lookup(" 가다 ") == LexiconEntry("가다", "to go", PartOfSpeech.VERB_ADJ)
    assert repo.korean_for("apple") == "사과"
    assert repo.korean_for("banana") is None
    assert repo.korean_for("") is None


def test_malformed_yaml_gives_empty_lexicon(tmp_path: Path) -> None:
    _write_lexicon(tmp_path, "- {ko: 사과, en: [\n")
    assert LexiconRepository(project_root=tmp_path).entries() == []


def test_bundled_word_bank_loads() -> None:
    repo = LexiconRepository()
    assert repo.lookup("가다") is not None
    assert repo.entries_for_pos(PartOfSpeech.NOUN)
