"""Unit tests for script classification, paragraph splitting and tokens.

WHY: Tokenization decides what counts as a word, what is punctuation and
where paragraphs break. Mistakes here corrupt reconstruction (lost
spaces) or bold punctuation.

HOW: Each helper is tested directly with small inputs covering the
documented edge cases: newline runs, double spaces, contractions,
hyphenation, accented letters, and punctuation-only tokens.
"""

import pytest

from bionic_reader.core.script import contains_cjk, is_cjk_char
from bionic_reader.core.tokenizer import (
    is_cjk_passthrough,
    match_latin_token,
    split_latin_tokens,
    split_paragraphs,
)


class TestScriptClassifier:
    """Only U+4E00..U+9FA5 counts as CJK."""

    @pytest.mark.parametrize("char", ["你", "好", "一", "龥"])
    def test_cjk_ideographs(self, char):
        assert is_cjk_char(char)

    @pytest.mark.parametrize("char", ["a", "é", "。", "の", "한", "龦", "㐀", " ", ""])
    def test_non_cjk(self, char):
        assert not is_cjk_char(char)

    def test_multi_character_string_is_not_a_char(self):
        assert not is_cjk_char("你好")

    def test_contains_cjk_anywhere(self):
        assert contains_cjk("Hello 世 world")
        assert not contains_cjk("Hello world")
        assert not contains_cjk("ひらがなとカタカナ")
        assert not contains_cjk("")


class TestSplitParagraphs:
    """Paragraphs are the non-empty pieces between newline runs."""

    def test_single_paragraph(self):
        assert split_paragraphs("Hello world.") == ["Hello world."]

    def test_newline_runs_collapse(self):
        assert split_paragraphs("a\nb\n\n\nc") == ["a", "b", "c"]

    def test_leading_and_trailing_newlines_dropped(self):
        assert split_paragraphs("\n\nabc\n") == ["abc"]

    def test_empty_text(self):
        assert split_paragraphs("") == []

    def test_only_newlines(self):
        assert split_paragraphs("\n\n\n") == []

    def test_whitespace_paragraph_kept_verbatim(self):
        assert split_paragraphs("a\n   \nb") == ["a", "   ", "b"]

    def test_no_trimming(self):
        assert split_paragraphs("  indented\ttext  ") == ["  indented\ttext  "]


class TestSplitLatinTokens:
    """Latin paragraphs split on the literal space character only."""

    def test_single_spaces(self):
        assert split_latin_tokens("one two three") == ["one", "two", "three"]

    def test_double_space_yields_empty_token(self):
        assert split_latin_tokens("a  b") == ["a", "", "b"]

    def test_tabs_stay_inside_tokens(self):
        assert split_latin_tokens("a\tb c") == ["a\tb", "c"]


class TestMatchLatinToken:
    """Tokens decompose into (prefix, core, suffix) or pass through."""

    @pytest.mark.parametrize("token,expected", [
        ("Hello", ("", "Hello", "")),
        ("world.", ("", "world", ".")),
        ("(don't)", ("(", "don't", ")")),
        ("well-known,", ("", "well-known", ",")),
        ("café...", ("", "café", "...")),
        ("naïve?", ("", "naïve", "?")),
        ("--hello", ("--", "hello", "")),
        ("\"quoted\"", ("\"", "quoted", "\"")),
        ("snake_case", ("", "snake_case", "")),
        ("42%", ("", "42", "%")),
    ])
    def test_decomposition(self, token, expected):
        assert match_latin_token(token) == expected

    @pytest.mark.parametrize("token", ["", "—", "...", "e.g.", "a\tb", "привет"])
    def test_no_core_passes_through(self, token):
        assert match_latin_token(token) is None


class TestCJKPassthrough:
    """Whitespace and symbol pieces are not annotated in CJK mode."""

    @pytest.mark.parametrize("piece", [" ", "\t", "。", "，", "！", "“", "の", "ｂ"])
    def test_passthrough(self, piece):
        assert is_cjk_passthrough(piece)

    @pytest.mark.parametrize("piece", ["你", "你好", "Python", "3", "x。"])
    def test_annotated(self, piece):
        assert not is_cjk_passthrough(piece)
