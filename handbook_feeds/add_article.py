"""
Add a new article everywhere in one go: index.html link, feed item and
metadata record, followed by a full feed rebuild.

Usage:
  add-article [config.yml] [--no-rebuild]
"""
import sys

from . import update_articles, update_feeds
from .cli import configure, make_console, make_parser
from .errors import ToolError


def main(argv=None) -> int:
    args = make_parser("Register a new article on the index page and in the feed.", rebuild_flag=True).parse_args(argv)
    console = make_console(args)
    try:
        cfg = configure(args, console)
        submission = update_articles.collect_submission()
        update_feeds.ask_details(cfg, submission, ask_title=False)
        update_articles.run(cfg, console, submission)
        update_feeds.run(cfg, console, submission, rebuild=not args.no_rebuild)
    except ToolError as exc:
        console.error(str(exc))
        return 1
    console.info(f"Added {submission.slug}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
