"""
Answer text normalization.

Student input and canonical answers are compared as text, never parsed as
mathematics. Two forms are used:

- normalize(): case-folded with every whitespace run removed, so that
  "x + 1" and "X+1" compare equal
- fold(): case-folded and trimmed, inner spacing kept, for phrase lookups
  where word boundaries matter ("n is odd")
"""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """
    Lower-case, trim and strip all whitespace from text.

    Total and idempotent: normalize(normalize(s)) == normalize(s).

    Args:
        text: Raw answer text

    Returns:
        Normalized comparison key (may be empty)
    """
    return _WHITESPACE.sub("", text.strip().lower())


def fold(text: str) -> str:
    """Lower-case and trim text, keeping inner whitespace."""
    return text.strip().lower()
