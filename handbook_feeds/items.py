from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .dates import DEFAULT_LOCALE, file_mtime, format_rfc2822, parse_timestamp, utc_now
from .extract import first_paragraph
from .textio import xml_escape


def article_link(slug: str) -> str:
    """Feed link (and guid) for an article, relative to the feeds/ directory."""
    return f"./../articles/{slug}.html"


@dataclass
class FeedItem:
    title: str
    link: str
    description: str
    published: datetime
    guid: str

    def render(self, locale: str = DEFAULT_LOCALE) -> str:
        """Render as an indented <item> block ending in a newline."""
        return (
            "    <item>\n"
            f"      <title>{xml_escape(self.title)}</title>\n"
            f"      <link>{self.link}</link>\n"
            f"      <description>{xml_escape(self.description)}</description>\n"
            f"      <pubDate>{format_rfc2822(self.published, locale)}</pubDate>\n"
            f"      <guid>{self.guid}</guid>\n"
            "    </item>\n"
        )


def first_available(sources):
    """Call each source in order and return the first result that is not None."""
    for source in sources:
        value = source()
        if value is not None:
            return value
    return None


def resolve_timestamp(record: dict, article_path: Path, now=None) -> datetime:
    """
    Publication instant for a record. First success wins:

      1. the record's "pubdate" field
      2. the article file's modification time
      3. the current time
    """
    return first_available([
        lambda: parse_timestamp(record.get("pubdate")),
        lambda: file_mtime(article_path),
        lambda: now or utc_now(),
    ])


def build_item(record: dict, article_dir: Path, locale: str = DEFAULT_LOCALE, now=None):
    """
    Build the FeedItem for one store record, or None if the record has no
    filename for `locale`.
    """
    if not isinstance(record, dict):
        return None
    filename = record.get(locale)
    if not filename or not isinstance(filename, str):
        return None

    slug = filename[:-len(".html")] if filename.endswith(".html") else filename
    title = record.get(f"title_{locale}") or slug
    article_path = Path(article_dir) / f"{slug}.html"
    link = article_link(slug)

    return FeedItem(
        title=title,
        link=link,
        description=first_paragraph(article_path),
        published=resolve_timestamp(record, article_path, now=now),
        guid=link,
    )


def build_all_items(mapping: dict, article_dir: Path, locale: str = DEFAULT_LOCALE, now=None):
    """
    Render feed items for every usable record, newest first.

    Records are visited in ascending slug order and the sort by date is
    stable, so items with the same date stay in slug order.
    """
    items = []
    for slug in sorted(mapping):
        item = build_item(mapping[slug], article_dir, locale=locale, now=now)
        if item is not None:
            items.append(item)

    items.sort(key=lambda x: x.published, reverse=True)
    # Feed dates are always rendered in English.
    return [item.render() for item in items]
