"""Bold-length policy: how much of a word to emphasize.

WHY: Bionic reading bolds the beginning of each word so the eye can
anchor on it. The strength setting (1 light, 2 normal, 3 strong) and the
word length decide how long that prefix is, with separate rules for
Latin words and CJK words.

HOW: Each function computes a length-based baseline, applies the strength
overrides in order, then clamps to the word length.

RULES:
- Latin: 1 for L <= 3, else ceil(L / 2); strength 3 overrides with
  ceil(L * 0.6) for every length. Strength 1 and 2 agree for L > 3.
- CJK: 1 for L == 1, else ceil(L / 2); strength 1 forces 1, strength 3
  overrides with ceil(L * 0.7)
- The result is always within [0, L]
- Strength must be exactly 1, 2 or 3; anything else raises
  InvalidStrengthError
"""

from __future__ import annotations

import math

STRENGTHS = (1, 2, 3)

LATIN_STRONG_RATIO = 0.6
CJK_STRONG_RATIO = 0.7


class InvalidStrengthError(ValueError):
    """Raised when a strength outside {1, 2, 3} reaches the engine."""


def validate_strength(strength: int) -> int:
    """Return ``strength`` unchanged if it is 1, 2 or 3.

    RULES:
    - bool is rejected even though True == 1
    - No clamping: out-of-range values fail fast
    """
    if isinstance(strength, bool) or not isinstance(strength, int) or strength not in STRENGTHS:
        raise InvalidStrengthError(
            "Invalid bionic strength {!r}: expected one of {}".format(
                strength, ", ".join(str(s) for s in STRENGTHS)
            )
        )
    return strength


def _clamp(value: int, length: int) -> int:
    return max(0, min(value, length))


def latin_bold_length(length: int, strength: int) -> int:
    """Number of leading characters to bold in a Latin word core."""
    validate_strength(strength)
    bold = 1
    if length > 3:
        bold = math.ceil(length / 2)
    if length <= 3 and strength >= 2:
        bold = 1
    if strength == 3:
        bold = math.ceil(length * LATIN_STRONG_RATIO)
    return _clamp(bold, length)


def cjk_bold_length(length: int, strength: int) -> int:
    """Number of leading characters to bold in a CJK word segment."""
    validate_strength(strength)
    bold = 1
    if length >= 2:
        bold = math.ceil(length / 2)
    if strength == 1:
        bold = 1
    if strength == 3:
        bold = math.ceil(length * CJK_STRONG_RATIO)
    return _clamp(bold, length)
