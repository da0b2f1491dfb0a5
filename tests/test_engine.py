"""Unit tests for the annotation engine.

WHY: annotate() is the public contract every renderer relies on. These
tests pin the reference scenarios and the structural guarantees: exact
reconstruction, paragraph counts, bold bounds and disabled-mode output.

HOW: Scenario tests check concrete segments; property-style tests loop
over SAMPLE_TEXTS with every strength, enabled flag and segmenter.

RULES:
- Word-level CJK expectations use the FixedSegmenter fixture
- Property loops include the real jieba segmenter
"""

import re

import pytest

from bionic_reader.core.engine import annotate, annotate_cjk, annotate_latin, build_document
from bionic_reader.core.ir import ParagraphMode, ReadingSettings, Segment
from bionic_reader.core.policy import InvalidStrengthError
from bionic_reader.core.segmenters import CharacterSegmenter, JiebaSegmenter

from conftest import SAMPLE_TEXTS


def _expected_paragraphs(text):
    return [p for p in re.split(r"\n+", text) if p]


@pytest.fixture(scope="module")
def jieba_segmenter():
    return JiebaSegmenter()


class TestMixedLanguageScenario:
    """'Hello world.\\n你好世界。' at strength 2."""

    def test_two_paragraphs_with_modes(self, mixed_text, word_segmenter):
        paragraphs = annotate(mixed_text, True, 2, word_segmenter)
        assert len(paragraphs) == 2
        assert paragraphs[0].mode == ParagraphMode.LATIN
        assert paragraphs[1].mode == ParagraphMode.CJK

    def test_latin_paragraph(self, mixed_text, word_segmenter):
        latin = annotate(mixed_text, True, 2, word_segmenter)[0]
        assert latin.segments == (
            Segment(leading="", bold="Hel", normal="lo", trailing=""),
            Segment(leading="", bold="wor", normal="ld", trailing="."),
        )

    def test_cjk_paragraph_with_word_segmenter(self, mixed_text, word_segmenter):
        cjk = annotate(mixed_text, True, 2, word_segmenter)[1]
        assert cjk.segments == (
            Segment(bold="你", normal="好"),
            Segment(bold="世", normal="界"),
            Segment.passthrough("。"),
        )
        assert word_segmenter.calls == [("你好世界。", "zh")]

    def test_cjk_paragraph_strength_three(self, mixed_text, word_segmenter):
        cjk = annotate(mixed_text, True, 3, word_segmenter)[1]
        assert [s.bold for s in cjk.segments] == ["你好", "世界", ""]

    def test_cjk_paragraph_strength_one(self, mixed_text, word_segmenter):
        cjk = annotate(mixed_text, True, 1, word_segmenter)[1]
        assert [s.bold for s in cjk.segments] == ["你", "世", ""]

    def test_cjk_falls_back_to_characters(self, mixed_text):
        cjk = annotate(mixed_text, True, 2)[1]
        assert cjk.segments == (
            Segment(bold="你"),
            Segment(bold="好"),
            Segment(bold="世"),
            Segment(bold="界"),
            Segment.passthrough("。"),
        )


class TestLatinAnnotation:
    """Latin paragraphs: per-token decomposition and bolding."""

    def test_short_word_strength_two(self):
        segment = annotate_latin("a", 2).segments[0]
        assert segment.bold == "a"
        assert segment.normal == ""

    def test_strength_three_override(self):
        segment = annotate_latin("extraordinary", 3).segments[0]
        assert segment.bold_length == 8
        assert segment.bold == "extraord"
        assert segment.normal == "inary"

    def test_length_eight_by_strength(self):
        lengths = [annotate_latin("absolute", s).segments[0].bold_length for s in (1, 2, 3)]
        assert lengths == [4, 4, 5]

    def test_punctuation_not_bolded(self):
        segment = annotate_latin("(don't)", 2).segments[0]
        assert segment == Segment(leading="(", bold="don", normal="'t", trailing=")")

    def test_passthrough_token(self):
        paragraph = annotate_latin("wait — what", 2)
        assert paragraph.segments[1] == Segment.passthrough("—")
        assert paragraph.segments[1].bold_length == 0

    def test_double_spaces_keep_empty_segments(self):
        paragraph = annotate_latin("a  b", 2)
        assert len(paragraph.segments) == 3
        assert paragraph.segments[1] == Segment()
        assert paragraph.text == "a  b"

    def test_whitespace_paragraph(self):
        paragraph = annotate_latin("   ", 2)
        assert all(s == Segment() for s in paragraph.segments)
        assert paragraph.text == "   "


class TestCJKAnnotation:
    """CJK paragraphs: segmenter pieces, symbols pass through."""

    def test_ascii_word_inside_cjk_paragraph(self):
        segmenter = CharacterSegmenter()
        paragraph = annotate_cjk("用Go", 2, segmenter)
        assert [s.bold for s in paragraph.segments] == ["用", "G", "o"]

    def test_spaces_and_kana_pass_through(self):
        paragraph = annotate_cjk("日本 の", 2)
        assert paragraph.segments[2] == Segment.passthrough(" ")
        assert paragraph.segments[3] == Segment.passthrough("の")


class TestDisabled:
    """With bionic off, each paragraph is one verbatim segment."""

    @pytest.mark.parametrize("strength", [1, 2, 3])
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_one_passthrough_segment_per_paragraph(self, text, strength):
        paragraphs = annotate(text, False, strength)
        assert [p.text for p in paragraphs] == _expected_paragraphs(text)
        for paragraph in paragraphs:
            assert paragraph.mode == ParagraphMode.PLAIN
            assert len(paragraph.segments) == 1
            assert paragraph.segments[0].leading == paragraph.text
            assert paragraph.segments[0].bold_length == 0


class TestStructuralProperties:
    """Reconstruction, paragraph counts and bold bounds for all inputs."""

    @pytest.mark.parametrize("enabled", [True, False])
    @pytest.mark.parametrize("strength", [1, 2, 3])
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_reconstruction_and_count(self, text, strength, enabled, jieba_segmenter):
        expected = _expected_paragraphs(text)
        for segmenter in (None, CharacterSegmenter(), jieba_segmenter):
            paragraphs = annotate(text, enabled, strength, segmenter)
            assert len(paragraphs) == len(expected)
            assert [p.text for p in paragraphs] == expected

    @pytest.mark.parametrize("strength", [1, 2, 3])
    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_bold_within_core(self, text, strength, jieba_segmenter):
        for paragraph in annotate(text, True, strength, jieba_segmenter):
            assert paragraph.segments
            for segment in paragraph.segments:
                assert 0 <= segment.bold_length <= len(segment.core)
                if segment.core:
                    assert segment.bold_length >= 1

    def test_empty_input(self):
        assert annotate("", True, 2) == ()

    def test_only_newlines(self):
        assert annotate("\n\n\n", True, 2) == ()

    def test_deterministic(self, mixed_text):
        assert annotate(mixed_text, True, 2) == annotate(mixed_text, True, 2)


class TestInvalidStrength:
    """Out-of-range strength fails fast, whatever the other inputs."""

    @pytest.mark.parametrize("strength", [0, 4, True, 2.5])
    def test_rejected_when_enabled(self, strength):
        with pytest.raises(InvalidStrengthError):
            annotate("Hello", True, strength)

    def test_rejected_when_disabled(self):
        with pytest.raises(InvalidStrengthError):
            annotate("Hello", False, 9)

    def test_rejected_for_empty_text(self):
        with pytest.raises(InvalidStrengthError):
            annotate("", True, 0)


class TestBuildDocument:
    """build_document wraps annotate() for the formatters."""

    def test_carries_settings_and_source(self, mixed_text):
        settings = ReadingSettings(enabled=True, strength=3)
        document = build_document(mixed_text, settings, source_filename="notes.txt")
        assert document.settings == settings
        assert document.source_filename == "notes.txt"
        assert document.paragraphs == annotate(mixed_text, True, 3)
