"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint has its own request and/or response model. Enums
represent closed sets like output format names. All models include
Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- strength must be a JSON integer in 1..3 (422 otherwise, no coercion
  from bools, floats or strings)
- Enum values match internal constants exactly (format keys)
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class OutputFormat(str, Enum):
    """Available output format identifiers.

    RULES:
    - Values match keys in bionic_reader.formatters.FORMATTERS exactly
    """

    html = "html"
    markdown = "markdown"
    json = "json"
    plain_text = "plain_text"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class AnnotationRequest(BaseModel):
    """Text and reading settings for one annotation.

    RULES:
    - enabled defaults to True
    - strength defaults to 2 and must be 1, 2 or 3
    - segmenter defaults to the server's configured segmenter
    """

    text: str = Field(description="Raw text to annotate. Paragraphs are separated by newlines.")
    enabled: bool = Field(
        default=True,
        description="Apply bionic emphasis. When false, only paragraphs are split.",
    )
    strength: int = Field(
        default=2,
        strict=True,
        ge=1,
        le=3,
        description="Emphasis strength: 1 light, 2 normal, 3 strong.",
    )
    segmenter: Optional[str] = Field(
        default=None,
        description="Word segmenter for Chinese paragraphs ('jieba' or 'characters').",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "text": "Hello world.\n你好世界。",
                "enabled": True,
                "strength": 2,
            }
        ]
    }}


class RenderRequest(AnnotationRequest):
    """Annotation request plus the output format to render."""

    format: OutputFormat = Field(
        default=OutputFormat.html,
        description="Output format to render the annotation into.",
    )


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class SegmentModel(BaseModel):
    """One annotated segment.

    RULES:
    - leading + bold + normal + trailing is the exact source text
    """

    leading: str = Field(description="Text before the word body (or a whole pass-through span).")
    bold: str = Field(description="Emphasized prefix of the word body.")
    normal: str = Field(description="Rest of the word body.")
    trailing: str = Field(description="Text after the word body.")


class ParagraphModel(BaseModel):
    """One annotated paragraph."""

    mode: str = Field(description="Processing mode: 'latin', 'cjk' or 'plain'.")
    text: str = Field(description="The paragraph text, rebuilt from its segments.")
    segments: List[SegmentModel] = Field(description="Segments in reading order.")


class AnnotationResponse(BaseModel):
    """The annotated document.

    RULES:
    - Same structure as the JSON formatter output
    - source is always "" for API requests
    """

    source: str = Field(description="Source filename, empty for API requests.")
    enabled: bool = Field(description="Whether bionic emphasis was applied.")
    strength: int = Field(description="Strength used for the annotation.")
    paragraphs: List[ParagraphModel] = Field(description="Paragraphs in source order.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-bionic.html').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
