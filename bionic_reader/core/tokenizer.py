"""Paragraph splitting and mode-dependent tokenization.

WHY: The engine annotates word by word, but "word" means different things
in the two scripts. Latin text is split on spaces and each token is peeled
into punctuation and a word body; CJK text is cut by a word segmenter
because it has no spaces at all.

HOW: split_paragraphs() cuts the text on newline runs. For Latin mode,
split_latin_tokens() splits on the literal space character and
match_latin_token() extracts (prefix, core, suffix) with a single regex.
For CJK mode, is_cjk_passthrough() decides which segmenter pieces are
rendered verbatim.

RULES:
- Paragraphs: split on one or more "\\n"; empty pieces dropped, no trimming
- Latin tokens: split on " " only (tabs and other spaces stay in the token)
- Empty Latin tokens (double spaces) are kept, not collapsed
- \\w and \\W use ASCII semantics; accented Latin (U+00C0..U+017F), CJK
  (U+4E00..U+9FFF), apostrophe and hyphen are added to the word body
- A token without a word body is a pass-through token
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from bionic_reader.core.script import contains_cjk

_NEWLINES_RE = re.compile(r"\n+")

# prefix (non-word) + core (word, accented Latin, CJK, ' and -) + suffix (non-word)
_LATIN_TOKEN_RE = re.compile(
    r"(\W*)([\w\u00c0-\u017f\u4e00-\u9fff'-]+)(\W*)",
    re.ASCII,
)

_ASCII_WORD_RE = re.compile(r"\w", re.ASCII)


def split_paragraphs(text: str) -> List[str]:
    """Split ``text`` into its non-empty newline-delimited paragraphs.

    Whitespace-only paragraphs are returned as-is; only pieces that are
    completely empty (leading/trailing newlines) are dropped.
    """
    return [p for p in _NEWLINES_RE.split(text) if p]


def split_latin_tokens(paragraph: str) -> List[str]:
    """Split a Latin-mode paragraph on the single space character."""
    return paragraph.split(" ")


def match_latin_token(token: str) -> Optional[Tuple[str, str, str]]:
    """Decompose a token into (prefix, core, suffix).

    Returns None when the token has no extractable word body, e.g. "—",
    "..." or "e.g." (a word character sits between two punctuation runs).

    Examples:
        "world."   -> ("", "world", ".")
        "(don't)"  -> ("(", "don't", ")")
        "—"        -> None
    """
    match = _LATIN_TOKEN_RE.fullmatch(token)
    if match is None:
        return None
    prefix, core, suffix = match.groups()
    return prefix, core, suffix


def is_cjk_passthrough(piece: str) -> bool:
    """True if a segmenter piece must be rendered verbatim in CJK mode.

    RULES:
    - Whitespace-only pieces pass through
    - Pieces with neither an ASCII word character nor a CJK ideograph
      (punctuation such as "。" or "，", symbols) pass through
    - Everything else is annotated
    """
    if not piece.strip():
        return True
    return not contains_cjk(piece) and _ASCII_WORD_RE.search(piece) is None
