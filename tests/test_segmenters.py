"""Tests for the word segmenters and their registry.

WHY: CJK annotation is only as good as its segmentation, and a segmenter
that drops or reorders characters would break reconstruction of every
Chinese paragraph.

HOW: Each segmenter is checked for exact coverage of its input; the
registry is checked for caching and for a clear error on unknown names.
"""

import pytest

from bionic_reader.core.segmenters import (
    SEGMENTERS,
    CharacterSegmenter,
    JiebaSegmenter,
    WordSegmenter,
    get_segmenter,
)


class TestCharacterSegmenter:

    def test_one_piece_per_character(self):
        assert CharacterSegmenter().segment("你好。") == ["你", "好", "。"]

    def test_empty(self):
        assert CharacterSegmenter().segment("") == []

    def test_name(self):
        assert CharacterSegmenter().name == "characters"


class TestJiebaSegmenter:

    @pytest.fixture(scope="class")
    def segmenter(self):
        return JiebaSegmenter()

    @pytest.mark.parametrize("text", [
        "你好世界。",
        "我爱Python编程，真的！",
        "“引号”里的文字 和 空格",
        "第3.5版 发布于2024年",
    ])
    def test_pieces_cover_input(self, segmenter, text):
        pieces = segmenter.segment(text)
        assert "".join(pieces) == text
        assert all(pieces)

    def test_groups_multi_character_words(self, segmenter):
        pieces = segmenter.segment("我们在学习中文")
        assert any(len(piece) > 1 for piece in pieces)

    def test_punctuation_is_separate(self, segmenter):
        assert segmenter.segment("你好世界。")[-1] == "。"

    def test_name(self, segmenter):
        assert segmenter.name == "jieba"


class TestRegistry:

    def test_registered_names(self):
        assert set(SEGMENTERS) == {"jieba", "characters"}

    def test_instances_are_shared(self):
        first = get_segmenter("characters")
        assert isinstance(first, WordSegmenter)
        assert get_segmenter("characters") is first

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown segmenter 'icu'"):
            get_segmenter("icu")
