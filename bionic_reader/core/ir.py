"""Value objects produced by the annotation engine.

WHY: Every rendering surface (HTML, Markdown, JSON, the HTTP API) needs
the same picture of an annotated text: paragraphs in order, each made of
segments whose beginning is emphasized. A small set of frozen dataclasses
gives all of them one stable contract, independent of how the engine
tokenizes.

HOW: Four dataclasses form a hierarchy:
  Segment           : one word (or pass-through span) split into
                      leading / bold / normal / trailing text
  Paragraph         : the segments of one newline-delimited paragraph
                      plus the mode that produced them
  ReadingSettings   : the enabled flag and strength used for a run
  AnnotatedDocument : paragraphs + settings + source name, for formatters

RULES:
- All value objects are frozen and hold tuples, never lists
- leading + bold + normal + trailing is always the exact source text
- Pass-through segments keep their whole text in ``leading``
- Segments of a paragraph are joined with ``Paragraph.separator``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class ParagraphMode(str, Enum):
    """Processing branch a paragraph went through.

    RULES:
    - LATIN: tokens split on single spaces, joined back with " "
    - CJK: word-segmenter pieces, joined back with ""
    - PLAIN: bionic disabled, one pass-through segment
    """

    LATIN = "latin"
    CJK = "cjk"
    PLAIN = "plain"


SEPARATORS = {
    ParagraphMode.LATIN: " ",
    ParagraphMode.CJK: "",
    ParagraphMode.PLAIN: "",
}


@dataclass(frozen=True)
class Segment:
    """The smallest annotatable unit of a paragraph.

    WHY: A renderer must know which characters to emphasize and which to
    leave alone, without re-tokenizing. Punctuation around a word is kept
    apart from the word body so it is never bolded.

    RULES:
    - leading: non-word characters before the core (or the whole text
      of a pass-through segment)
    - bold: emphasized prefix of the core
    - normal: rest of the core
    - trailing: non-word characters after the core
    """

    leading: str = ""
    bold: str = ""
    normal: str = ""
    trailing: str = ""

    @property
    def core(self) -> str:
        return self.bold + self.normal

    @property
    def bold_length(self) -> int:
        return len(self.bold)

    @property
    def text(self) -> str:
        return self.leading + self.bold + self.normal + self.trailing

    @property
    def is_passthrough(self) -> bool:
        return not self.core

    @classmethod
    def passthrough(cls, text: str) -> "Segment":
        """A segment that is rendered verbatim, with nothing bolded."""
        return cls(leading=text)


@dataclass(frozen=True)
class Paragraph:
    """An ordered, non-empty run of segments from one paragraph."""

    mode: ParagraphMode
    segments: Tuple[Segment, ...]

    @property
    def separator(self) -> str:
        return SEPARATORS[self.mode]

    @property
    def text(self) -> str:
        """The original paragraph text, rebuilt from its segments."""
        return self.separator.join(seg.text for seg in self.segments)


@dataclass(frozen=True)
class ReadingSettings:
    """Explicit reading parameters for one annotation run.

    WHY: The reading app kept a single mutable settings object that several
    views read. Passing a frozen value into every call removes that shared
    state; callers build a new value when the user changes a setting.
    """

    enabled: bool = True
    strength: int = 2


@dataclass(frozen=True)
class AnnotatedDocument:
    """Everything a formatter needs to render one annotated text.

    RULES:
    - paragraphs: in source order, never empty paragraphs
    - settings: the settings the paragraphs were produced with
    - source_filename: original file name, "" when text came from elsewhere
    """

    paragraphs: Tuple[Paragraph, ...]
    settings: ReadingSettings
    source_filename: str = ""
