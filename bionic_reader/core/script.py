"""Script classification: does text contain CJK ideographs?

WHY: Latin and CJK text need different tokenization and different
bold-length rules. The choice is made once per paragraph, based on
whether any CJK Unified Ideograph appears in it.

RULES:
- Only U+4E00..U+9FA5 counts as CJK (no Extension blocks, no kana/hangul)
- One CJK character anywhere makes the whole paragraph CJK mode
"""

from __future__ import annotations

import re

# CJK Unified Ideographs, basic block up to U+9FA5.
_CJK_RE = re.compile(r"[\u4e00-\u9fa5]")


def is_cjk_char(char: str) -> bool:
    """True if ``char`` is a single CJK Unified Ideograph."""
    return len(char) == 1 and _CJK_RE.match(char) is not None


def contains_cjk(text: str) -> bool:
    """True if ``text`` holds at least one CJK Unified Ideograph."""
    return _CJK_RE.search(text) is not None
