"""FastAPI application exposing the annotation engine over HTTP.

WHY: Browser front-ends, e-reader plugins and automation tools need the
annotation without shelling out to the CLI. FastAPI provides automatic
OpenAPI documentation and request validation for free.

HOW: A single FastAPI app exposes 4 endpoints grouped by tags.
POST /annotations returns the annotation structure as JSON, POST /render
returns a finished rendering in the requested format, GET /formats lists
formatters and GET /health is a liveness check. Word segmenters are
resolved through the cached registry, so each is built once per process.

RULES:
- Error responses use a consistent ErrorResponse schema
- Invalid strength is rejected by the request model (422)
- Unknown segmenter → 400
- Annotation endpoints are plain functions so FastAPI runs them in its
  threadpool; segmentation is CPU-bound and jieba loads its dictionary
  on first use
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from bionic_reader import __version__
from bionic_reader.config import API_HOST, API_PORT, DEFAULT_SEGMENTER
from bionic_reader.core.engine import build_document
from bionic_reader.core.ir import AnnotatedDocument, ReadingSettings
from bionic_reader.core.segmenters import WordSegmenter, get_segmenter
from bionic_reader.formatters import FORMATTERS
from bionic_reader.formatters.json_export import document_to_dict
from bionic_reader.server.models import (
    AnnotationRequest,
    AnnotationResponse,
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    RenderRequest,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Bionic Reader API",
    description=(
        "REST API for bionic-reading annotation of mixed Latin and Chinese "
        "text. Submit text and reading settings; receive the annotated "
        "paragraphs as JSON or rendered as HTML, Markdown or plain text."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_segmenter(name: str) -> WordSegmenter:
    """Return the named segmenter or raise a 400."""
    try:
        return get_segmenter(name)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


def _annotate_request(request: AnnotationRequest) -> AnnotatedDocument:
    segmenter = _resolve_segmenter(request.segmenter or DEFAULT_SEGMENTER)
    settings = ReadingSettings(enabled=request.enabled, strength=request.strength)
    document = build_document(request.text, settings, segmenter)
    logger.info(
        "Annotated %d characters into %d paragraphs (strength %d, segmenter %s)",
        len(request.text),
        len(document.paragraphs),
        settings.strength,
        segmenter.name,
    )
    return document


# ---------------------------------------------------------------------------
# Endpoints: Annotation
# ---------------------------------------------------------------------------


@app.post(
    "/annotations",
    response_model=AnnotationResponse,
    tags=["annotation"],
    summary="Annotate text",
    description=(
        "Split the text into paragraphs and segments and mark the "
        "emphasized prefix of every word."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Unknown segmenter."},
    },
)
def create_annotation(request: AnnotationRequest) -> AnnotationResponse:
    document = _annotate_request(request)
    return AnnotationResponse(**document_to_dict(document))


@app.post(
    "/render",
    tags=["annotation"],
    summary="Annotate and render text",
    description="Annotate the text and return it rendered in the requested format.",
    responses={
        200: {"description": "Rendered content in the format's media type."},
        400: {"model": ErrorResponse, "description": "Unknown segmenter."},
    },
)
def render(request: RenderRequest) -> Response:
    document = _annotate_request(request)
    formatter = FORMATTERS[request.format.value]()
    output = formatter.format(document)[0]
    return Response(
        content=output.content,
        media_type="{}; charset=utf-8".format(output.media_type),
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description=(
        "Returns all supported output formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    empty = AnnotatedDocument(paragraphs=(), settings=ReadingSettings())
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        outputs = formatter.format(empty)
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=outputs[0].suffix if outputs else "",
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the bionic-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
