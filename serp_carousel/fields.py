"""Heuristics that pull a name, a year and short tags out of an item container."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from bs4 import NavigableString, Tag
from bs4.element import PreformattedString

from .config import SEPARATOR
from .utils import clean_text, find_year, is_year_only, split_trailing_year

NameAndDate = Tuple[Optional[str], Optional[str]]

_MIN_NAME_CHARS = 3


def _from_anchor(tag: Tag) -> NameAndDate:
    anchor = tag.find("a")
    if anchor is None:
        return None, None
    text = clean_text(anchor.get_text())
    if not text:
        return None, None
    return split_trailing_year(text)


def _from_img_alt(tag: Tag) -> NameAndDate:
    img = tag.find("img")
    if img is None:
        return None, None
    text = clean_text(img.get("alt") or "")
    if not text:
        return None, None
    return split_trailing_year(text)


def _from_div_text(tag: Tag) -> NameAndDate:
    # Only the first usable div is considered; later ones are never scanned.
    for div in tag.find_all("div"):
        text = clean_text(div.get_text())
        if len(text) < _MIN_NAME_CHARS or is_year_only(text):
            continue
        return split_trailing_year(text)
    return None, None


def extract_name_and_date(tag: Tag) -> NameAndDate:
    """Return ``(name, year)`` using the anchor, image alt, then div text.

    ``year`` is only set when a trailing year was stripped off the name.
    """
    for strategy in (_from_anchor, _from_img_alt, _from_div_text):
        name, year = strategy(tag)
        if name:
            return name, year
    return None, None


def extract_name(tag: Tag) -> Optional[str]:
    return extract_name_and_date(tag)[0]


def extract_date(tag: Tag, stripped_year: Optional[str] = None) -> Optional[str]:
    """Return the year split off the name, else the first year found in a div."""
    if stripped_year:
        return stripped_year
    for div in tag.find_all("div"):
        year = find_year(clean_text(div.get_text()))
        if year:
            return year
    return None


def _is_plain_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def _keep(text: str, excluded: Iterable[Optional[str]]) -> bool:
    return bool(text) and text != SEPARATOR and text not in excluded


def extract_extensions(
    tag: Tag,
    name: Optional[str],
    max_chars: int = 20,
    exclude: Iterable[Optional[str]] = (),
) -> List[str]:
    """Collect short descriptive strings such as durations or genres.

    Divs with several children contribute each of their own text nodes;
    leaf-like divs contribute their whole text when it is shorter than
    ``max_chars``. The name, any ``exclude`` value and the ``·`` separator
    are never returned.
    """
    excluded = {name, *exclude}
    extensions: List[str] = []
    for div in tag.find_all("div"):
        children = list(div.children)
        if len(children) > 1:
            for child in children:
                if not _is_plain_text(child):
                    continue
                text = child.strip()
                if _keep(text, excluded):
                    extensions.append(text)
        else:
            text = div.get_text().strip()
            if _keep(text, excluded) and len(text) < max_chars:
                extensions.append(text)
    return list(dict.fromkeys(extension for extension in extensions if extension))
