"""Pick the extraction profile that matches a page's carousel type."""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from bs4 import BeautifulSoup

from .config import KC_ATTRIBUTE, KC_ROOT_SELECTOR
from .models import ExtractionProfile

logger = logging.getLogger("serp_carousel")


def _scoped_root(kc_type: str) -> str:
    return f'div[{KC_ATTRIBUTE}^="kc:{kc_type}"], {KC_ROOT_SELECTOR}'


ARTWORKS = ExtractionProfile(
    kind="artworks",
    results_key="artworks",
    root_selector=_scoped_root("/visual_art/"),
    split_date=True,
)
ALBUMS = ExtractionProfile(
    kind="albums",
    results_key="albums",
    root_selector=_scoped_root("/music/"),
)
BOOKS = ExtractionProfile(
    kind="books",
    results_key="books",
    root_selector=_scoped_root("/book/"),
)
FILMS = ExtractionProfile(
    kind="films",
    results_key="films",
    root_selector=_scoped_root("/film/"),
)
DEFAULT = ExtractionProfile(
    kind="default",
    results_key="items",
    root_selector=KC_ROOT_SELECTOR,
)

# Checked in order; the first marker substring found wins.
KC_TYPE_PROFILES: Tuple[Tuple[str, ExtractionProfile], ...] = (
    ("/visual_art/", ARTWORKS),
    ("/music/", ALBUMS),
    ("/book/", BOOKS),
    ("/film/", FILMS),
)

PROFILES: Dict[str, ExtractionProfile] = {
    profile.kind: profile for profile in (ARTWORKS, ALBUMS, BOOKS, FILMS, DEFAULT)
}


def get_profile(kind: str) -> ExtractionProfile:
    """Look a profile up by name, e.g. ``"albums"``."""
    try:
        return PROFILES[kind]
    except KeyError:
        choices = ", ".join(sorted(PROFILES))
        raise ValueError(f"Unknown profile {kind!r} (expected one of: {choices})") from None


def classify_marker(marker: str) -> ExtractionProfile:
    """Map a ``data-attrid`` value such as ``kc:/music/artist:albums``."""
    for kc_type, profile in KC_TYPE_PROFILES:
        if kc_type in marker:
            return profile
    return DEFAULT


def classify_document(soup: BeautifulSoup) -> ExtractionProfile:
    """Return the profile for the first carousel marker, or the default one."""
    kc_div = soup.select_one(KC_ROOT_SELECTOR)
    if kc_div is None:
        logger.debug("No carousel marker found; using %s profile", DEFAULT.kind)
        return DEFAULT
    marker = kc_div.get(KC_ATTRIBUTE) or ""
    profile = classify_marker(marker)
    logger.debug("Carousel marker %r selects %s profile", marker, profile.kind)
    return profile
