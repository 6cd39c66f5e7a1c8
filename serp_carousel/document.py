"""Turn raw markup or a saved results page into a parsed document."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from bs4 import BeautifulSoup

from .config import DEFAULT_PARSER

MISSING_INPUT_MESSAGE = "Must provide either html_content or file_path"


def load_document(
    html_content: Optional[Union[str, bytes]] = None,
    file_path: Optional[Union[str, Path]] = None,
    parser: str = DEFAULT_PARSER,
) -> BeautifulSoup:
    """Parse ``html_content`` or the file at ``file_path``.

    ``file_path`` wins when both are given. Raises ``ValueError`` when
    neither is supplied and ``FileNotFoundError`` for a missing file.
    """
    if file_path is not None:
        path = Path(file_path).expanduser()
        if not path.is_file():
            raise FileNotFoundError(f"HTML file does not exist: {path}")
        with path.open("rb") as handle:
            return BeautifulSoup(handle, parser)
    if html_content is None:
        raise ValueError(MISSING_INPUT_MESSAGE)
    return BeautifulSoup(html_content, parser)
