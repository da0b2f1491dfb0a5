"""Markdown formatter with bold word prefixes.

WHY: Markdown is the lightest rich format; it pastes straight into note
apps, chat tools and static site generators, all of which render
``**bold**`` natively.

HOW: Each paragraph is flattened into runs of (is_bold, text): segment
parts and separators in order, with adjacent runs of the same kind
merged. Bold runs are wrapped in ``**``; Markdown control characters in
the source text are escaped so they are not mistaken for formatting.
Paragraphs are separated by a blank line.

RULES:
- Adjacent bold parts are merged (CJK "**你好**", never "**你****好**")
- Characters \\ ` * _ [ ] < > # are backslash-escaped
- Leading spaces and tabs become &#32; / &#9; so indentation survives
- Output suffix: "-bionic.md"
- Media type: "text/markdown"
"""

from __future__ import annotations

import re
from typing import List, Tuple

from bionic_reader.core.ir import AnnotatedDocument, Paragraph
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

_MARKDOWN_SPECIAL_RE = re.compile(r"([\\`*_\[\]<>#])")
_LEADING_WHITESPACE_RE = re.compile(r"^[ \t]+")
_WHITESPACE_ENTITIES = {" ": "&#32;", "\t": "&#9;"}


def escape_markdown(text: str) -> str:
    """Backslash-escape characters that Markdown treats as markup."""
    return _MARKDOWN_SPECIAL_RE.sub(r"\\\1", text)


def escape_indentation(line: str) -> str:
    """Replace leading spaces and tabs with character references.

    Indentation would otherwise turn the paragraph into a code block, and
    a whitespace-only paragraph into a blank line.
    """
    return _LEADING_WHITESPACE_RE.sub(
        lambda m: "".join(_WHITESPACE_ENTITIES[c] for c in m.group(0)), line
    )


def _runs(paragraph: Paragraph) -> List[Tuple[bool, str]]:
    """Flatten a paragraph into merged (is_bold, text) runs."""
    runs: List[Tuple[bool, str]] = []

    def _push(is_bold: bool, text: str) -> None:
        if not text:
            return
        if runs and runs[-1][0] == is_bold:
            runs[-1] = (is_bold, runs[-1][1] + text)
        else:
            runs.append((is_bold, text))

    for index, segment in enumerate(paragraph.segments):
        if index:
            _push(False, paragraph.separator)
        _push(False, segment.leading)
        _push(True, segment.bold)
        _push(False, segment.normal)
        _push(False, segment.trailing)
    return runs


def _render_paragraph(paragraph: Paragraph) -> str:
    parts = []
    for is_bold, text in _runs(paragraph):
        text = escape_markdown(text)
        parts.append("**{}**".format(text) if is_bold else text)
    return escape_indentation("".join(parts))


class MarkdownFormatter(BaseFormatter):
    """Formatter that emphasizes word prefixes with Markdown bold."""

    @property
    def name(self) -> str:
        return "Markdown"

    def format(self, document: AnnotatedDocument) -> List[FormatterOutput]:
        content = "\n\n".join(_render_paragraph(p) for p in document.paragraphs)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-bionic.md",
                content=content,
                media_type="text/markdown",
            )
        ]
