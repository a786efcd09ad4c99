"""Article catalog, RSS feed and index page maintenance for a static site."""

__version__ = "0.3.0"
