"""Word segmenters for CJK paragraphs.

WHY: Chinese text has no spaces, so "one word" must come from a
dictionary-based segmenter. Such a segmenter is not always wanted (tests,
minimal installs), and it is expensive to build. The engine therefore
depends on a small interface, and callers inject an instance that is
built once and reused.

HOW: WordSegmenter is an ABC with a single ``segment(text, locale)``
method. CharacterSegmenter cuts text into single characters and is the
engine's fallback when nothing is injected. JiebaSegmenter wraps a
private jieba.Tokenizer in accurate mode. get_segmenter() resolves a
configured name to a cached, shared instance.

RULES:
- segment() returns pieces in order; "".join(pieces) == text
- Segmenters hold no per-call state and are safe to share
- get_segmenter() raises ValueError for unknown names
- Adding a segmenter = one subclass + one SEGMENTERS entry
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Dict, List

import jieba

logger = logging.getLogger(__name__)


class WordSegmenter(ABC):
    """Capability interface for locale-aware word segmentation."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'jieba'."""

    @abstractmethod
    def segment(self, text: str, locale: str = "zh") -> List[str]:
        """Split ``text`` into ordered word pieces covering it exactly."""


class CharacterSegmenter(WordSegmenter):
    """One piece per character. Deterministic in every environment."""

    @property
    def name(self) -> str:
        return "characters"

    def segment(self, text: str, locale: str = "zh") -> List[str]:
        return list(text)


class JiebaSegmenter(WordSegmenter):
    """Dictionary-based Chinese word segmentation backed by jieba.

    The tokenizer loads its prefix dictionary lazily on the first call;
    later calls reuse it.
    """

    def __init__(self) -> None:
        self._tokenizer = jieba.Tokenizer()

    @property
    def name(self) -> str:
        return "jieba"

    def segment(self, text: str, locale: str = "zh") -> List[str]:
        return self._tokenizer.lcut(text, cut_all=False)


SEGMENTERS: Dict[str, type] = {
    "jieba": JiebaSegmenter,
    "characters": CharacterSegmenter,
}


@lru_cache(maxsize=None)
def get_segmenter(name: str) -> WordSegmenter:
    """Return the shared segmenter instance registered under ``name``."""
    try:
        segmenter_cls = SEGMENTERS[name]
    except KeyError:
        raise ValueError(
            "Unknown segmenter '{}'. Available segmenters: {}".format(
                name, ", ".join(sorted(SEGMENTERS))
            )
        ) from None
    logger.info("Initialising %s word segmenter", name)
    return segmenter_cls()
