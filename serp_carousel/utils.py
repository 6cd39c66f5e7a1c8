"""Utility helpers for string normalization and path handling."""

from __future__ import annotations

import re
from typing import Optional, Tuple

SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
TRAILING_YEAR_PATTERN = re.compile(r"^(.+?)(\d{4})$", re.DOTALL)
YEAR_ONLY_PATTERN = re.compile(r"^\d{4}$")
EMBEDDED_YEAR_PATTERN = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")


def slugify(value: str, fallback: str = "page") -> str:
    """Generate a filesystem-friendly slug using ASCII characters only."""
    normalized = value.encode("ascii", "ignore").decode("ascii")
    normalized = normalized.lower()
    normalized = SLUG_PATTERN.sub("-", normalized).strip("-")
    return normalized or fallback


def clean_text(text: str) -> str:
    """Trim and collapse runs of whitespace to single spaces."""
    return WHITESPACE_PATTERN.sub(" ", text.strip())


def split_trailing_year(text: str) -> Tuple[str, Optional[str]]:
    """Split ``"Title1889"`` into ``("Title", "1889")``.

    The year is only removed when what is left keeps more than two
    characters; otherwise the text is returned untouched with no year.
    """
    match = TRAILING_YEAR_PATTERN.match(text)
    if not match:
        return text, None
    candidate = text[: -4].strip()
    if len(candidate) > 2:
        return candidate, match.group(2)
    return text, None


def is_year_only(text: str) -> bool:
    return bool(YEAR_ONLY_PATTERN.match(text))


def find_year(text: str) -> Optional[str]:
    """Return a bare four-digit year or the first 19xx/20xx token in ``text``."""
    if is_year_only(text):
        return text
    match = EMBEDDED_YEAR_PATTERN.search(text)
    return match.group(0) if match else None
