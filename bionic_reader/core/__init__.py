"""Annotation engine and its value objects.

WHY: The core package is the stable heart of bionic_reader: the IR
dataclasses and the pure annotation engine. Formatters, the CLI and the
HTTP API only consume what it produces.

HOW: ir.py defines the data structures, script.py and tokenizer.py split
text into paragraphs and words, policy.py decides bold lengths,
segmenters.py provides CJK word segmentation, engine.py ties them
together in annotate().

RULES:
- IR dataclasses are the contract; change with care
- The engine does no I/O; segmenters are injected, never looked up
"""

from bionic_reader.core.engine import annotate, build_document
from bionic_reader.core.policy import InvalidStrengthError

__all__ = ["annotate", "build_document", "InvalidStrengthError"]
