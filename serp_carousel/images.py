"""Image source resolution, including deferred images embedded in scripts."""

from __future__ import annotations

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger("serp_carousel")

DEFERRED_ATTRIBUTE = "data-deferred"
DEFERRED_SOURCE_ATTRIBUTE = "data-src"
DATA_URI_PATTERN = re.compile(r"(data:image/[^'\"\s}\]]+)")


class ScriptCorpus:
    """Joined text of every ``<script>`` in a document, built on first use."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup
        self._text: Optional[str] = None

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = "\n".join(
                script.get_text() for script in self._soup.find_all("script")
            )
            logger.debug("Joined script corpus (%d characters)", len(self._text))
        return self._text

    def lookup(self, identifier: Optional[str]) -> Optional[str]:
        """Return the data URI stored next to ``identifier`` in a script block.

        Only the innermost ``{...}`` block without nested braces is searched.
        """
        if not identifier:
            return None
        block_pattern = re.compile(r"\{[^{}]*" + re.escape(identifier) + r"[^{}]*\}")
        block = block_pattern.search(self.text)
        if block is None:
            logger.debug("No script block references image id %s", identifier)
            return None
        match = DATA_URI_PATTERN.search(block.group(0))
        return match.group(1) if match else None


def find_image_tag(tag: Tag) -> Optional[Tag]:
    """Prefer an image with a deferred ``data-src`` over a plain one."""
    return tag.select_one(f"img[{DEFERRED_SOURCE_ATTRIBUTE}]") or tag.select_one(
        f"img:not([{DEFERRED_SOURCE_ATTRIBUTE}])"
    )


def normalize_image_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    if url.startswith("//"):
        return f"https:{url}"
    return url


def resolve_image(tag: Tag, corpus: ScriptCorpus) -> Optional[str]:
    """Resolve the displayed image of an item container, if any."""
    img = find_image_tag(tag)
    if img is None:
        return None
    if img.get(DEFERRED_ATTRIBUTE) == "1":
        url = corpus.lookup(img.get("id"))
    else:
        url = img.get(DEFERRED_SOURCE_ATTRIBUTE) or img.get("src")
    return normalize_image_url(url)
