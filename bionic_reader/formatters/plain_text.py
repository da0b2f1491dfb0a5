"""Plain text formatter: the annotated document with emphasis dropped.

WHY: Plain text is the baseline rendering. It proves that the segments
reconstruct the source exactly, and gives a clean, reflowed copy of the
input (blank lines collapsed to a single paragraph break).

HOW: Each paragraph is rebuilt by joining segment text with the
paragraph's separator. Paragraphs are separated by a blank line.

RULES:
- Paragraph text is byte-for-byte the source paragraph
- Double newline between paragraphs, one trailing newline
- Empty document → empty content
- Output suffix: "-bionic.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from bionic_reader.core.ir import AnnotatedDocument
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput


class PlainTextFormatter(BaseFormatter):
    """Formatter that writes the reconstructed paragraphs as plain text."""

    @property
    def name(self) -> str:
        return "Plain Text"

    def format(self, document: AnnotatedDocument) -> List[FormatterOutput]:
        content = "\n\n".join(p.text for p in document.paragraphs)
        if content:
            content += "\n"

        return [
            FormatterOutput(
                suffix="-bionic.txt",
                content=content,
                media_type="text/plain",
            )
        ]
