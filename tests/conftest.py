import json
from pathlib import Path

import pytest

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Cypherpunk Handbook</title>
    <link>https://example.org/</link>
    <description>Articles</description>
    <pubDate>Thu, 01 Jan 1970 00:00:00 GMT</pubDate>
    <lastBuildDate>Thu, 01 Jan 1970 00:00:00 GMT</lastBuildDate>
  </channel>
</rss>
<!-- hand-written trailer -->
"""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
<body>
  <section id="articles">
    <div class="column">
      <h3>Desktop Systems</h3>
      <ul class="article-list">
            <li>
              <a href="./articles/openbsd.html" target="_blank" rel="noopener noreferrer">OpenBSD</a>
            </li>
      </ul>
    </div>
    <div class="column">
      <h3>Mobile Systems</h3>
      <ul class="article-list">
        <li>
          <a href="./articles/mobile-overview.html">Overview</a>
          <ul class="topic-list">
                <li><a href="./articles/grapheneos.html">GrapheneOS</a></li>
          </ul>
        </li>
      </ul>
    </div>
  </section>
</body>
</html>
"""


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site directory with a config, an empty store, a feed template and an index page."""
    (tmp_path / "data").mkdir()
    (tmp_path / "feeds").mkdir()
    (tmp_path / "articles").mkdir()
    (tmp_path / "data" / "articles.json").write_text(json.dumps({}), encoding="utf-8")
    (tmp_path / "feeds" / "articles.xml").write_text(FEED_TEMPLATE, encoding="utf-8")
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (tmp_path / "config.yml").write_text(
        "color: false\n"
        "rebuild_after_update: true\n"
        "rebuild_command: [handbook-feeds-missing-rebuild-command]\n",
        encoding="utf-8",
    )
    return tmp_path


def write_article(site: Path, slug: str, body: str) -> Path:
    path = site / "articles" / f"{slug}.html"
    path.write_text(body, encoding="utf-8")
    return path
