"""
Tests for the MCP tool functions.
"""

import json

import pytest

from serp_carousel import mcp_server


class TestTools:
    """The decorated tools stay callable as plain functions."""

    def test_extract(self, films_html):
        results = json.loads(mcp_server.extract(films_html))
        assert results["films"][0]["name"] == "Dune"

    def test_extract_with_profile(self, films_html):
        results = json.loads(mcp_server.extract(films_html, profile="default"))
        assert list(results) == ["items"]

    def test_extract_file(self, artworks_file):
        results = json.loads(mcp_server.extract_file(str(artworks_file)))
        assert len(results["artworks"]) == 3

    def test_extract_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            mcp_server.extract_file(str(tmp_path / "missing.html"))

    def test_classify(self, albums_html, no_carousel_html):
        assert mcp_server.classify(albums_html) == "albums"
        assert mcp_server.classify(no_carousel_html) == "default"
