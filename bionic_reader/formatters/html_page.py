"""HTML formatter: a standalone page with bolded word prefixes.

WHY: The reading app painted annotated text in a browser. A standalone
HTML page is the closest portable equivalent: it opens anywhere, and
readers can restyle it with their own CSS (theme, font, spacing).

HOW: Every paragraph becomes a ``<p>`` tagged with its mode. Inside it,
each segment is written as escaped leading text, the bold prefix in
``<b>``, the remainder in ``<span class="bionic-rest">`` and the escaped
trailing text. The body is wrapped in a minimal HTML5 document whose
title is the source filename.

RULES:
- All source text is HTML-escaped
- Empty bold / remainder parts emit no element
- Paragraph class: "bionic-latin", "bionic-cjk" or "bionic-plain"
- Output suffix: "-bionic.html"
- Media type: "text/html"
"""

from __future__ import annotations

from html import escape
from typing import List

from bionic_reader.core.ir import AnnotatedDocument, Paragraph, Segment
from bionic_reader.formatters.base import BaseFormatter, FormatterOutput

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
.bionic p {{ margin: 0 0 1.5em 0; line-height: 1.6; }}
.bionic b {{ font-weight: 700; }}
.bionic .bionic-rest {{ opacity: 0.85; }}
</style>
</head>
<body>
<article class="bionic">
{body}
</article>
</body>
</html>
"""


def render_segment(segment: Segment) -> str:
    parts = [escape(segment.leading)]
    if segment.bold:
        parts.append("<b>{}</b>".format(escape(segment.bold)))
    if segment.normal:
        parts.append('<span class="bionic-rest">{}</span>'.format(escape(segment.normal)))
    parts.append(escape(segment.trailing))
    return "".join(parts)


def render_paragraph(paragraph: Paragraph) -> str:
    inner = paragraph.separator.join(render_segment(s) for s in paragraph.segments)
    return '<p class="bionic-{}">{}</p>'.format(paragraph.mode.value, inner)


class HTMLFormatter(BaseFormatter):
    """Formatter that produces a self-contained HTML page."""

    @property
    def name(self) -> str:
        return "HTML"

    def format(self, document: AnnotatedDocument) -> List[FormatterOutput]:
        body = "\n".join(render_paragraph(p) for p in document.paragraphs)
        content = _PAGE_TEMPLATE.format(
            title=escape(document.source_filename or "Bionic Reader"),
            body=body,
        )

        return [
            FormatterOutput(
                suffix="-bionic.html",
                content=content,
                media_type="text/html",
            )
        ]
