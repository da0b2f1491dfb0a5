"""Configuration constants, reading defaults, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. Default strength, the word segmenter and the HTTP
bind address are plain values, not buried in logic, so deployments
can change them without touching code.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level values read from the environment. load_settings() reads
the reading defaults at call time and validates them, giving a clear
error when a value is malformed.

RULES:
- BIONIC_ENABLED: "true"/"false" (default "true")
- BIONIC_STRENGTH: 1, 2 or 3 (default 2)
- BIONIC_SEGMENTER: key in core.segmenters.SEGMENTERS (default "jieba")
- SUPPORTED_TEXT_FORMATS lists accepted input file extensions
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from bionic_reader.core.ir import ReadingSettings
from bionic_reader.core.policy import InvalidStrengthError, validate_strength

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Supported input file extensions
# ---------------------------------------------------------------------------

SUPPORTED_TEXT_FORMATS: set[str] = {".txt", ".text", ".md"}
"""Text file extensions accepted by the CLI (lowercase, with dot)."""

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_SEGMENTER = os.getenv("BIONIC_SEGMENTER", "jieba")

API_HOST = os.getenv("BIONIC_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("BIONIC_API_PORT", "8000"))


def load_settings() -> ReadingSettings:
    """Build the default ReadingSettings from the environment.

    WHY: The CLI and the HTTP API both fall back to deployment-wide
    defaults when the caller does not say otherwise.

    HOW: Reads BIONIC_ENABLED and BIONIC_STRENGTH from os.environ
    (populated by python-dotenv) at call time.

    RULES:
    - Raises ValueError if BIONIC_STRENGTH is not an integer
    - Raises ValueError (InvalidStrengthError) if it is not 1, 2 or 3
    - Never clamps a bad value into range
    """
    enabled = os.getenv("BIONIC_ENABLED", "true").strip().lower() == "true"
    raw = os.getenv("BIONIC_STRENGTH", "2").strip()
    try:
        strength = int(raw)
    except ValueError:
        raise ValueError(
            "BIONIC_STRENGTH must be 1, 2 or 3, got '{}'. "
            "Fix the value in the .env file.".format(raw)
        ) from None
    try:
        validate_strength(strength)
    except InvalidStrengthError as exc:
        raise InvalidStrengthError("BIONIC_STRENGTH: {}".format(exc)) from None
    return ReadingSettings(enabled=enabled, strength=strength)
