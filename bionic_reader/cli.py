"""Command-line interface for Bionic Reader.

WHY: Users need a simple way to turn a text file into a bionic-reading
version from the terminal. The CLI wires together the full pipeline:
file validation, reading settings, word segmenter selection, annotation
into the IR, pluggable formatter output, and file saving, behind a
single command.

HOW: Uses argparse to accept an input file, strength, bionic on/off,
segmenter name, output format selection, and output directory. Defaults
come from config.load_settings() (environment / .env). Status messages
go to stderr; output files are saved next to the source (or to
--output-dir), or the first format is printed to stdout with --stdout.

RULES:
- Positional argument: input text file path ("-" reads stdin)
- Validates file extension against SUPPORTED_TEXT_FORMATS
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-bionic-2.html)
- Status output goes to stderr (not stdout)
- User errors print "Error: ..." to stderr and exit with status 1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from bionic_reader.config import DEFAULT_SEGMENTER, SUPPORTED_TEXT_FORMATS, load_settings
from bionic_reader.core.engine import build_document
from bionic_reader.core.ir import ReadingSettings
from bionic_reader.core.policy import STRENGTHS
from bionic_reader.core.segmenters import SEGMENTERS, get_segmenter
from bionic_reader.formatters import FORMATTERS
from bionic_reader.formatters.base import FormatterOutput

STDIN_MARKER = "-"
STDIN_STEM = "stdin"


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    WHY: Users may run the annotator several times with different
    strengths. Overwriting previous output would lose work.

    RULES:
    - First attempt: {stem}{suffix} (e.g. article-bionic.html)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. article-bionic-2.html)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-bionic.html" → ("-bionic", ".html")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Save a single formatter output to disk as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _parse_formats(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(FORMATTERS.keys())
    format_keys = [f.strip() for f in raw.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            _fail("Unknown format '{}'. Available formats: {}".format(
                key, ", ".join(sorted(FORMATTERS.keys()))
            ))
    return format_keys


def _read_input(input_file: str) -> tuple:
    """Read the input text. Returns (text, stem, source_filename, parent_dir)."""
    if input_file == STDIN_MARKER:
        return sys.stdin.read(), STDIN_STEM, "", Path.cwd()

    input_path = Path(input_file).resolve()
    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_TEXT_FORMATS:
        _fail("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(SUPPORTED_TEXT_FORMATS))
        ))

    try:
        text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        _fail("Input file is not valid UTF-8: {}".format(input_path))
    return text, input_path.stem, input_path.name, input_path.parent


def run(args: argparse.Namespace) -> List[Path]:
    """Execute the annotation pipeline for parsed CLI arguments.

    RULES:
    - Settings: --strength / --bionic override the environment defaults
    - With --stdout, the first selected format is written to stdout and
      no files are saved
    - Returns the list of saved paths (empty with --stdout)
    """
    try:
        defaults = load_settings()
    except ValueError as e:
        _fail(str(e))

    settings = ReadingSettings(
        enabled=defaults.enabled if args.bionic is None else args.bionic,
        strength=defaults.strength if args.strength is None else args.strength,
    )
    format_keys = _parse_formats(args.formats)
    text, stem, source_filename, parent_dir = _read_input(args.input_file)

    output_dir = Path(args.output_dir).resolve() if args.output_dir else parent_dir
    if not args.stdout and not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    try:
        segmenter = get_segmenter(args.segmenter)
    except ValueError as e:
        _fail(str(e))

    _status("Annotating {} (strength {}, bionic {})...".format(
        source_filename or "stdin",
        settings.strength,
        "on" if settings.enabled else "off",
    ))
    document = build_document(text, settings, segmenter, source_filename)
    _status("  {} paragraphs".format(len(document.paragraphs)))

    if args.stdout:
        formatter = FORMATTERS[format_keys[0]]()
        for output in formatter.format(document):
            sys.stdout.write(output.content)
        sys.stdout.flush()
        return []

    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(document):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable; tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="bionic_reader",
        description="Annotate text for bionic reading and render it as "
                    "HTML, Markdown, JSON or plain text.",
    )

    parser.add_argument(
        "input_file",
        help="Path to a UTF-8 text file, or '-' to read from stdin.",
    )

    parser.add_argument(
        "--strength",
        type=int,
        choices=STRENGTHS,
        default=None,
        help="Emphasis strength: 1 light, 2 normal, 3 strong "
             "(default: BIONIC_STRENGTH or 2).",
    )

    parser.add_argument(
        "--bionic",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable bionic emphasis (default: BIONIC_ENABLED or true). "
             "--no-bionic only splits paragraphs.",
    )

    parser.add_argument(
        "--segmenter",
        choices=sorted(SEGMENTERS.keys()),
        default=DEFAULT_SEGMENTER,
        help="Word segmenter for Chinese paragraphs (default: %(default)s).",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as input file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the first selected format to stdout instead of saving files.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    run(args)


if __name__ == "__main__":
    main()
