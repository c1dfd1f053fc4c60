import pytest

from hangul_ime.domain.hangul_unicode import (
    CHOSEONG,
    COMPOUND_FINALS,
    JONGSEONG,
    JUNGSEONG,
    SyllableParts,
    combine_finals,
    compose_cv,
    compose_lvt,
    decompose,
    final_index,
    initial_index,
    is_final,
    is_initial,
    is_syllable,
    is_vowel,
    null_initial_block,
    syllable_from_indices,
    vowel_index,
)


def test_table_sizes():
    assert len(CHOSEONG) == 19
    assert len(JUNGSEONG) == 21
    assert len(JONGSEONG) == 28
    assert JONGSEONG[0] == ""


def test_decompose_recompose_identity_over_every_block():
    for i in range(19):
        for v in range(21):
            for f in range(28):
                block = syllable_from_indices(i, v, f)
                assert decompose(block) == SyllableParts(i, v, f)


def test_block_range_endpoints():
    assert syllable_from_indices(0, 0, 0) == "가"
    assert syllable_from_indices(18, 20, 27) == "힣"
    assert decompose("힣") == SyllableParts(18, 20, 27)


@pytest.mark.parametrize("i,v,f", [(-1, 0, 0), (19, 0, 0), (0, 21, 0), (0, 0, 28), (0, -1, 0)])
def test_syllable_from_indices_rejects_out_of_range(i, v, f):
    with pytest.raises(ValueError):
        syllable_from_indices(i, v, f)


@pytest.mark.parametrize("ch", ["ㄱ", "ㅏ", "a", " ", "", "가나", chr(0xABFF), chr(0xD7A4)])
def test_decompose_non_block_is_none(ch):
    assert decompose(ch) is None
    assert not is_syllable(ch)


def test_classification_sets():
    assert is_initial("ㄱ") and is_final("ㄱ") and not is_vowel("ㄱ")
    assert is_initial("ㄸ") and not is_final("ㄸ")
    assert is_final("ㄳ") and not is_initial("ㄳ")
    assert is_vowel("ㅢ") and not is_initial("ㅢ") and not is_final("ㅢ")
    assert not is_final("")


def test_index_lookups():
    assert initial_index("ㅇ") == 11
    assert vowel_index("ㅗ") == 8
    # final indices are 1-based; 0 means "no final"
    assert final_index("ㄱ") == 1
    assert final_index("ㅎ") == 27
    assert final_index("ㄵ") == 5
    assert final_index("ㄸ") is None
    assert initial_index("x") is None


def test_compound_final_table():
    assert len(COMPOUND_FINALS) == 11
    for (first, second), compound in COMPOUND_FINALS.items():
        assert is_final(first) and is_initial(second)
        assert is_final(compound) and not is_initial(compound)
    assert combine_finals("ㄱ", "ㅅ") == "ㄳ"
    assert combine_finals("ㄹ", "ㅎ") == "ㅀ"
    assert combine_finals("ㅅ", "ㄱ") is None
    assert combine_finals("ㄱ", "ㄱ") is None


def test_compound_final_table_is_read_only():
    with pytest.raises(TypeError):
        COMPOUND_FINALS[("ㄷ", "ㄷ")] = "ㄸ"


def test_null_initial_block():
    assert null_initial_block("ㅏ") == "아"
    assert null_initial_block("ㅣ") == "이"


def test_compose_cv_basic():
    assert compose_cv("ㄱ", "ㅏ") == "가"
    assert compose_cv("ㄴ", "ㅣ") == "니"


def test_compose_cv_invalid():
    assert compose_cv("", "ㅏ") == ""
    assert compose_cv("ㄱ", "") == ""
    assert compose_cv("ㅏ", "ㄱ") == ""


def test_compose_lvt():
    assert compose_lvt("ㄱ", "ㅏ", "ㄴ") == "간"
    assert compose_lvt("ㄷ", "ㅏ", "ㄺ") == "닭"
    assert compose_lvt("ㄱ", "ㅏ", "ㄸ") == ""
