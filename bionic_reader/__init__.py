"""Bionic Reader: bionic-reading annotation for mixed Latin/CJK text.

WHY: Emphasizing the first letters of each word helps many readers scan
text faster. This package computes that emphasis for plain text in any
mix of Latin-script and Chinese paragraphs, and renders it to HTML,
Markdown, JSON or plain text.

HOW: Three-stage pipeline: split (paragraphs and words), annotate
(bold-length policy into the IR), format (pluggable formatters). The
CLI and the HTTP API are thin wrappers around these stages.

RULES:
- All formatters consume the same AnnotatedDocument IR
- Adding a new output format = one new formatter module, no core changes
- The engine never performs I/O; word segmenters are injected
"""

__version__ = "0.1.0"
