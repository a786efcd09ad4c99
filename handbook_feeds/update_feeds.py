"""
Register a new article in data/articles.json and feeds/articles.xml.

- Prompts for slug, title, description and publication date (defaulting
  to the article's first <p> and <time datetime="...">)
- Inserts one new <item> right after the feed's lastBuildDate (not sorted)
- Adds the record to articles.json and rewrites it in canonical form
- Runs a full rebuild afterwards unless --no-rebuild is given

Usage:
  update-feeds [config.yml] [--no-rebuild]
"""
import subprocess
import sys
from pathlib import Path

from . import store
from .cli import configure, make_console, make_parser
from .dates import format_rfc2822, parse_timestamp, utc_now
from .errors import FeedTemplateError, ToolError
from .extract import first_paragraph, time_datetime
from .items import FeedItem, article_link, first_available
from .prompt import ArticleSubmission, ask_slug, prompt
from .splice import insert_item
from .textio import read_text, write_text


def article_path(cfg: dict, slug: str) -> Path:
    return Path(cfg["articles_dir"]) / f"{slug}.html"


def ask_details(cfg: dict, submission: ArticleSubmission, ask_title: bool = True) -> ArticleSubmission:
    """Fill in the feed fields of a submission whose slug is already known."""
    path = article_path(cfg, submission.slug)
    if ask_title:
        submission.title = prompt("Title", submission.title)
    submission.description = prompt("Description", submission.description or first_paragraph(path))
    submission.pubdate = prompt(
        "Publication date ISO (YYYY-MM-DDTHH:MM:SSZ)", submission.pubdate or time_datetime(path) or ""
    )
    return submission


def collect_submission(cfg: dict) -> ArticleSubmission:
    return ask_details(cfg, ArticleSubmission(slug=ask_slug()))


def resolve_pubdate(submission: ArticleSubmission, path: Path, now=None):
    """
    Pick the publication date for a new article.

    Returns (iso_string, instant). A date typed in wins; otherwise the
    article's <time datetime="..."> is used; with neither, the instant is now and
    the string is empty.
    """
    pub_iso = submission.pubdate or time_datetime(path) or ""
    instant = first_available([
        lambda: parse_timestamp(pub_iso),
        lambda: now or utc_now(),
    ])
    return pub_iso, instant


def trigger_rebuild(cfg: dict, console) -> bool:
    """Run the rebuild command. Failure is reported but not fatal."""
    try:
        result = subprocess.run(cfg["rebuild_command"], check=False)
    except OSError as exc:
        console.warn(f"Rebuild helper could not be started: {exc}")
        return False
    if result.returncode != 0:
        console.warn(f"Rebuild failed (exit status {result.returncode})")
        return False
    return True


def run(cfg: dict, console, submission: ArticleSubmission, rebuild: bool = True, now=None):
    slug = submission.slug.strip()
    if not slug:
        raise ToolError("Slug is required.")
    locale = cfg["locale"]

    pub_iso, instant = resolve_pubdate(submission, article_path(cfg, slug), now=now)
    if pub_iso and parse_timestamp(pub_iso) is None:
        console.warn(f"Could not parse publication date {pub_iso!r}; using the current time")

    link = article_link(slug)
    item = FeedItem(
        title=submission.title,
        link=link,
        description=submission.description,
        published=instant,
        guid=link,
    )

    content = read_text(cfg["feed_file"])
    if content is None:
        raise FeedTemplateError(f"Feed template missing: {cfg['feed_file']}")
    write_text(cfg["feed_file"], insert_item(content, item.render(), format_rfc2822(instant, "en")))
    console.info(f"Inserted {link} into {cfg['feed_file']}")

    articles = store.load(cfg["data_file"])
    record = articles.get(slug)
    if not isinstance(record, dict):
        record = {}
    record[locale] = f"{slug}.html"
    record[f"title_{locale}"] = submission.title
    if pub_iso:
        record["pubdate"] = pub_iso
    articles[slug] = record
    store.save(cfg["data_file"], articles)
    console.info(f"Wrote {cfg['data_file']}")

    if rebuild and cfg["rebuild_after_update"]:
        trigger_rebuild(cfg, console)


def main(argv=None) -> int:
    args = make_parser("Add an article to the feed and metadata store.", rebuild_flag=True).parse_args(argv)
    console = make_console(args)
    try:
        cfg = configure(args, console)
        submission = collect_submission(cfg)
        run(cfg, console, submission, rebuild=not args.no_rebuild)
    except ToolError as exc:
        console.error(str(exc))
        return 1
    console.info("Updated feed and data mapping.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
