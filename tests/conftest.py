"""Shared test fixtures for the bionic_reader test suite.

WHY: Several test modules need the same sample texts, a deterministic
word segmenter, and an environment free of BIONIC_* overrides.
Centralizing them here avoids duplication.

HOW: Pytest fixtures provide the mixed-language sample, a fixed-answer
word segmenter (so CJK word tests do not depend on jieba's dictionary),
and an autouse fixture that clears reading-default environment variables.

RULES:
- MIXED_TEXT is the reference scenario: one Latin and one CJK paragraph
- FixedSegmenter returns pre-cut pieces and falls back to characters
- No test sees BIONIC_* variables unless it sets them itself
"""

from typing import Dict, List

import pytest

from bionic_reader.core.ir import ReadingSettings
from bionic_reader.core.segmenters import CharacterSegmenter, WordSegmenter


MIXED_TEXT = "Hello world.\n你好世界。"

SAMPLE_TEXTS: List[str] = [
    "",
    "Hello world.",
    MIXED_TEXT,
    "\n\nFirst paragraph.\n\n\nSecond  one, with  double spaces.\n",
    "   ",
    "(Don't) panic — it's well-known, e.g. a café... naïve?",
    "我爱Python编程，真的！\nThe end",
    "“引号”里的文字 和 空格",
    "--- *** ...",
    "snake_case and <tags> & ampersands",
]


class FixedSegmenter(WordSegmenter):
    """Word segmenter with canned answers, for deterministic tests."""

    def __init__(self, answers: Dict[str, List[str]]):
        self._answers = answers
        self.calls: List[tuple] = []

    @property
    def name(self) -> str:
        return "fixed"

    def segment(self, text, locale="zh"):
        self.calls.append((text, locale))
        if text in self._answers:
            return list(self._answers[text])
        return list(text)


@pytest.fixture(autouse=True)
def _clean_reading_env(monkeypatch):
    """Remove BIONIC_* reading defaults so tests see built-in defaults."""
    for name in ("BIONIC_ENABLED", "BIONIC_STRENGTH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mixed_text():
    """Latin paragraph followed by a Chinese paragraph."""
    return MIXED_TEXT


@pytest.fixture
def word_segmenter():
    """Segmenter that cuts the sample Chinese paragraph into words."""
    return FixedSegmenter({"你好世界。": ["你好", "世界", "。"]})


@pytest.fixture
def character_segmenter():
    return CharacterSegmenter()


@pytest.fixture
def default_settings():
    return ReadingSettings(enabled=True, strength=2)
