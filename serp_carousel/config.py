"""Configuration objects and constants for carousel extraction."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SEARCH_HOST = "https://www.google.com"
DEFAULT_SEARCH_PATH_PREFIX = "/search"
DEFAULT_PARSER = "html.parser"

KC_ATTRIBUTE = "data-attrid"
KC_PREFIX = "kc:"
KC_ROOT_SELECTOR = f'div[{KC_ATTRIBUTE}^="{KC_PREFIX}"]'

SEPARATOR = "·"


@dataclass
class ExtractionConfig:
    """Settings shared by every extraction profile."""

    search_host: str = DEFAULT_SEARCH_HOST
    search_path_prefix: str = DEFAULT_SEARCH_PATH_PREFIX
    parser: str = DEFAULT_PARSER
    max_extension_chars: int = 20
