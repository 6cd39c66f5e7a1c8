"""MCP server exposing carousel extraction tools."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .classifier import classify_document
from .document import load_document
from .extractor import extract_carousel

logger = logging.getLogger("serp_carousel.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="serp-carousel")


@mcp.tool()
def extract(html: str, profile: Optional[str] = None) -> str:
    """Extract knowledge-carousel items from raw search page HTML as JSON."""
    return json.dumps(extract_carousel(html, profile=profile), ensure_ascii=False)


@mcp.tool()
def extract_file(path: str, profile: Optional[str] = None) -> str:
    """Extract knowledge-carousel items from a saved search page as JSON."""
    source = Path(path).expanduser()
    results = extract_carousel(file_path=source, profile=profile)
    return json.dumps(results, ensure_ascii=False)


@mcp.tool()
def classify(html: str) -> str:
    """Return the extraction profile name a search page would use."""
    return classify_document(load_document(html)).kind


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
