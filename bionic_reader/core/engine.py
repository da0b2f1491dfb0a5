"""Bionic-reading annotation engine.

WHY: This is the heart of the package. It turns raw text into paragraphs
of segments whose leading characters are marked for emphasis, ready for
any rendering surface. Everything else (CLI, HTTP API, formatters) is a
thin layer over annotate().

HOW: The text is split into paragraphs on newline runs. With bionic
disabled, each paragraph becomes one pass-through segment. Otherwise each
paragraph is classified: with any CJK ideograph it is cut by the injected
word segmenter (or character by character when none is given), else it
is split on spaces and each token is peeled into prefix / core / suffix.
The bold-length policy then decides how much of each core is bolded.

RULES:
- Pure and stateless: no I/O, no logging, no shared mutable state
- Strength is validated on every call, even when bionic is disabled
- Reconstruction: joining every segment's text with the paragraph
  separator gives back the paragraph exactly
- Empty text -> empty tuple; empty paragraphs are never emitted
- Without a segmenter, CJK paragraphs are segmented per character
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from bionic_reader.core.ir import (
    AnnotatedDocument,
    Paragraph,
    ParagraphMode,
    ReadingSettings,
    Segment,
)
from bionic_reader.core.policy import cjk_bold_length, latin_bold_length, validate_strength
from bionic_reader.core.script import contains_cjk
from bionic_reader.core.segmenters import CharacterSegmenter, WordSegmenter
from bionic_reader.core.tokenizer import (
    is_cjk_passthrough,
    match_latin_token,
    split_latin_tokens,
    split_paragraphs,
)

CJK_LOCALE = "zh"

_FALLBACK_SEGMENTER = CharacterSegmenter()


def _split_core(core: str, bold_length: int) -> Tuple[str, str]:
    return core[:bold_length], core[bold_length:]


def annotate_latin(paragraph: str, strength: int) -> Paragraph:
    """Annotate a paragraph without CJK ideographs, token by token."""
    segments: List[Segment] = []
    for token in split_latin_tokens(paragraph):
        parts = match_latin_token(token)
        if parts is None:
            segments.append(Segment.passthrough(token))
            continue
        prefix, core, suffix = parts
        bold, normal = _split_core(core, latin_bold_length(len(core), strength))
        segments.append(Segment(leading=prefix, bold=bold, normal=normal, trailing=suffix))
    return Paragraph(mode=ParagraphMode.LATIN, segments=tuple(segments))


def annotate_cjk(
    paragraph: str,
    strength: int,
    segmenter: Optional[WordSegmenter] = None,
) -> Paragraph:
    """Annotate a paragraph containing CJK ideographs, piece by piece."""
    if segmenter is None:
        segmenter = _FALLBACK_SEGMENTER
    segments: List[Segment] = []
    for piece in segmenter.segment(paragraph, CJK_LOCALE):
        if is_cjk_passthrough(piece):
            segments.append(Segment.passthrough(piece))
            continue
        bold, normal = _split_core(piece, cjk_bold_length(len(piece), strength))
        segments.append(Segment(bold=bold, normal=normal))
    return Paragraph(mode=ParagraphMode.CJK, segments=tuple(segments))


def annotate(
    text: str,
    enabled: bool,
    strength: int,
    segmenter: Optional[WordSegmenter] = None,
) -> Tuple[Paragraph, ...]:
    """Annotate ``text`` for bionic reading.

    Args:
        text: Raw input text, any mix of Latin and CJK paragraphs.
        enabled: When False, paragraphs are returned as single
                 pass-through segments (plain paragraphing).
        strength: 1 (light), 2 (normal) or 3 (strong).
        segmenter: Word segmenter for CJK paragraphs. None means
                   one segment per character.

    Returns:
        Tuple of Paragraphs in source order.

    Raises:
        InvalidStrengthError: If strength is not 1, 2 or 3.
    """
    validate_strength(strength)
    paragraphs: List[Paragraph] = []
    for paragraph in split_paragraphs(text):
        if not enabled:
            paragraphs.append(Paragraph(
                mode=ParagraphMode.PLAIN,
                segments=(Segment.passthrough(paragraph),),
            ))
        elif contains_cjk(paragraph):
            paragraphs.append(annotate_cjk(paragraph, strength, segmenter))
        else:
            paragraphs.append(annotate_latin(paragraph, strength))
    return tuple(paragraphs)


def build_document(
    text: str,
    settings: ReadingSettings,
    segmenter: Optional[WordSegmenter] = None,
    source_filename: str = "",
) -> AnnotatedDocument:
    """Annotate ``text`` and wrap the result for the formatters."""
    paragraphs = annotate(text, settings.enabled, settings.strength, segmenter)
    return AnnotatedDocument(
        paragraphs=paragraphs,
        settings=settings,
        source_filename=source_filename,
    )
