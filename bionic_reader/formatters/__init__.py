"""Output formatter registry for pluggable rendering surfaces.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["html"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API requests)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bionic_reader.formatters.html_page import HTMLFormatter
from bionic_reader.formatters.json_export import JSONFormatter
from bionic_reader.formatters.markdown import MarkdownFormatter
from bionic_reader.formatters.plain_text import PlainTextFormatter

if TYPE_CHECKING:
    from bionic_reader.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "html": HTMLFormatter,
    "markdown": MarkdownFormatter,
    "json": JSONFormatter,
    "plain_text": PlainTextFormatter,
}
