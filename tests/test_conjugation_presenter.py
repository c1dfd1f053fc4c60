from hangul_ime.controllers.conjugation_presenter import (
    SegmentRole,
    TextSegment,
    polite_present_segments,
    segments_text,
)


def test_stem_and_ending_are_separate_segments(conjugator):
    segs = polite_present_segments("가다", conjugator)
    assert segs == [
        TextSegment("가", SegmentRole.STEM),
        TextSegment("아요", SegmentRole.ENDING),
    ]
    assert segments_text(segs) == "가아요"


def test_hada_verb_segments(conjugator):
    segs = polite_present_segments("공부하다", conjugator)
    assert [s.role for s in segs] == [SegmentRole.STEM, SegmentRole.ENDING]
    assert segments_text(segs) == "해요"


def test_falls_back_to_raw_word(conjugator):
    segs = polite_present_segments("사과", conjugator)
    assert segs == [TextSegment("사과", SegmentRole.RAW)]
    assert segments_text(segs) == "사과"


def test_uses_default_conjugator_when_none_given():
    segs = polite_present_segments("먹다")
    assert segments_text(segs) == "먹어요"
