"""JSON formatter: the full annotation structure for other renderers.

WHY: Web front-ends, e-book pipelines and the HTTP API need the raw
annotation rather than a finished rendering, so they can apply their own
styling. JSON keeps every segment's four parts and each paragraph's mode.

HOW: document_to_dict() walks the IR into plain dicts and lists;
JSONFormatter serializes it. The output is validated with jsonschema
against the bundled annotation_schema.json before returning.

RULES:
- Top-level keys: source, enabled, strength, paragraphs
- Each paragraph: mode, text (reconstructed), segments
- Each segment: leading, bold, normal, trailing (always all four)
- Non-ASCII text is written as-is (ensure_ascii=False), UTF-8
- Output suffix: "-bionic.json"
- Media type: "application/json"
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from bionic_reader.core.ir import AnnotatedDocument, Paragraph, Segment
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

SCHEMA_PATH = Path(__file__).resolve().parent / "annotation_schema.json"


def _load_schema() -> Dict[str, Any]:
    """Load the annotation JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: Optional[Dict[str, Any]] = None


def _get_schema() -> Dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


def segment_to_dict(segment: Segment) -> Dict[str, str]:
    return {
        "leading": segment.leading,
        "bold": segment.bold,
        "normal": segment.normal,
        "trailing": segment.trailing,
    }


def paragraph_to_dict(paragraph: Paragraph) -> Dict[str, Any]:
    return {
        "mode": paragraph.mode.value,
        "text": paragraph.text,
        "segments": [segment_to_dict(s) for s in paragraph.segments],
    }


def document_to_dict(document: AnnotatedDocument) -> Dict[str, Any]:
    """Convert the annotated document into JSON-ready primitives."""
    return {
        "source": document.source_filename,
        "enabled": document.settings.enabled,
        "strength": document.settings.strength,
        "paragraphs": [paragraph_to_dict(p) for p in document.paragraphs],
    }


class JSONFormatter(BaseFormatter):
    """Formatter that exports the annotation structure as JSON."""

    @property
    def name(self) -> str:
        return "JSON"

    def format(self, document: AnnotatedDocument) -> List[FormatterOutput]:
        data = document_to_dict(document)
        jsonschema.validate(instance=data, schema=_get_schema())
        content = json.dumps(data, ensure_ascii=False, indent=2)

        return [
            FormatterOutput(
                suffix="-bionic.json",
                content=content + "\n",
                media_type="application/json",
            )
        ]
