"""
Rebuild feeds/articles.xml from data/articles.json.

- Rewrites articles.json in canonical form (keys sorted)
- Takes each item's description from the first <p> of its article
- Orders items newest first, with RFC 2822 pubDates
- Leaves everything else in the feed template as it is

Usage:
  rebuild-feeds [config.yml]
"""
import sys

from . import store
from .cli import configure, make_console, make_parser
from .dates import utc_now
from .errors import FeedTemplateError, ToolError
from .items import build_all_items
from .splice import rebuild_document
from .textio import read_text, write_text


def run(cfg: dict, console, now=None):
    now = now or utc_now()

    articles = store.load(cfg["data_file"])
    store.save(cfg["data_file"], articles)

    content = read_text(cfg["feed_file"])
    if content is None:
        raise FeedTemplateError(f"Feed template not found: {cfg['feed_file']}")

    items = build_all_items(articles, cfg["articles_dir"], locale=cfg["locale"], now=now)
    write_text(cfg["feed_file"], rebuild_document(content, items, now))
    console.info(f"Wrote {cfg['feed_file']} ({len(items)} items)")


def main(argv=None) -> int:
    args = make_parser("Rebuild the article feed from the metadata store.").parse_args(argv)
    console = make_console(args)
    try:
        cfg = configure(args, console)
        run(cfg, console)
    except ToolError as exc:
        console.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
