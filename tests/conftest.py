"""
Pytest Configuration and Shared Fixtures

Inline search-result pages used across the test suite. Each page embeds a
knowledge carousel of a different type.
"""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup


ARTWORKS_HTML = """
<html>
  <head><title>van gogh paintings - Search</title></head>
  <body>
    <div id="search">
      <div data-attrid="kc:/visual_art/visual_artist:works" class="kc">
        <div class="carousel">
          <div class="item">
            <a href="/search?q=The+Starry+Night"><div>The Starry Night</div><div>1889</div></a>
            <img id="img_1" src="//images.example.com/starry.jpg" alt="The Starry Night">
            <div>Oil paint<span>·</span>Museum of Modern Art</div>
          </div>
          <div class="item">
            <a href="/search?q=Wheatfield+with+Crows">Wheatfield with Crows</a>
            <img id="img_7" data-deferred="1" src="data:image/gif;base64,R0lGODlhAQABAIAAAP">
            <div><div>1890</div><div>Painting</div></div>
          </div>
          <div class="item">
            <a href="/search?q=Irises">  Irises  </a>
            <img data-src="//images.example.com/irises.jpg" src="data:image/gif;base64,R0lGODlhAQABAIAAAP">
            <div>1889</div>
            <div>Oil on canvas</div>
          </div>
          <div class="item">
            <a href="/search?q=Untitled"><img src="https://images.example.com/blank.jpg"></a>
          </div>
        </div>
      </div>
    </div>
    <script>(function(){var s='data:image/png;base64,ABC';var ii=['img_7'];_setImagesSrc(ii,s);})();</script>
  </body>
</html>
"""

ALBUMS_HTML = """
<html>
  <body>
    <div data-attrid="kc:/music/artist:albums">
      <div class="wrapper">
        <div class="album"><div class="inner"><a href="/search?q=Nevermind"><img src="https://img.example.com/nevermind.jpg" alt="Nevermind"></a><div class="meta"><div>Nevermind</div><div>1991</div></div></div></div>
        <div class="album"><div class="inner"><a href="/search?q=In+Utero"><img alt="In Utero" src="https://img.example.com/in-utero.jpg"></a><div class="meta"><div>In Utero</div><div>1993</div></div></div></div>
      </div>
    </div>
  </body>
</html>
"""

FILMS_HTML = """
<html>
  <body>
    <div data-attrid="kc:/film/film_series:films">
      <div class="item">
        <a href="/search?q=Dune+2021"><img src="//img.example.com/dune.jpg" alt="Dune"></a>
        <div class="title">Dune</div>
        <div class="meta">2021 <span>·</span> Sci-fi <span>·</span> 2h 35m</div>
        <div class="rating">PG-13<span></span>·<span></span>Drama</div>
        <div>Drama</div>
        <div>Paul Atreides leads nomadic tribes in a battle</div>
      </div>
    </div>
  </body>
</html>
"""

DEFAULT_HTML = """
<html>
  <body>
    <div data-attrid="kc:/unknown/type:items">
      <div class="item"><a href="/search?q=Thing+One">Thing One</a><img src="http://img.example.com/thing.png"></div>
    </div>
  </body>
</html>
"""

NO_CAROUSEL_HTML = "<html><body><div>No KC div here</div></body></html>"


# ============================================================================
# Raw pages
# ============================================================================

@pytest.fixture
def artworks_html() -> str:
    return ARTWORKS_HTML


@pytest.fixture
def albums_html() -> str:
    return ALBUMS_HTML


@pytest.fixture
def films_html() -> str:
    return FILMS_HTML


@pytest.fixture
def default_html() -> str:
    return DEFAULT_HTML


@pytest.fixture
def no_carousel_html() -> str:
    return NO_CAROUSEL_HTML


@pytest.fixture
def all_pages() -> dict:
    """Every sample page keyed by the results key it should produce."""
    return {
        "artworks": ARTWORKS_HTML,
        "albums": ALBUMS_HTML,
        "films": FILMS_HTML,
        "items": DEFAULT_HTML,
    }


# ============================================================================
# Parsed documents and files
# ============================================================================

@pytest.fixture
def make_soup():
    """Parse an HTML snippet with the same backend the extractor uses."""
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return _make


@pytest.fixture
def make_tag(make_soup):
    """Parse a snippet and return its first ``div``."""
    def _make(html: str):
        return make_soup(html).div

    return _make


@pytest.fixture
def artworks_file(tmp_path: Path) -> Path:
    path = tmp_path / "Van Gogh Paintings.html"
    path.write_text(ARTWORKS_HTML, encoding="utf-8")
    return path
