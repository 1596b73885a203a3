"""Canonical text form used for hashing and term vectors."""

import re

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str | None) -> str | None:
    """Lowercase, replace punctuation runs with a space, collapse whitespace, trim.

    Returns None instead of an empty string when nothing comparable is left.
    """
    if not text:
        return None
    normalized = _NON_ALNUM_RE.sub(" ", text.lower())
    normalized = _WHITESPACE_RE.sub(" ", normalized).strip()
    return normalized or None
