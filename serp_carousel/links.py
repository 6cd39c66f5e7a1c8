"""Canonical search links for carousel items."""

from __future__ import annotations

from typing import Optional

from bs4 import Tag

from .config import ExtractionConfig


def extract_link(tag: Tag, config: ExtractionConfig) -> Optional[str]:
    """Prefix the host to the first relative search link in ``tag``."""
    anchor = tag.select_one(f'a[href^="{config.search_path_prefix}"]')
    if anchor is None:
        return None
    return f"{config.search_host}{anchor['href']}"
