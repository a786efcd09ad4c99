"""
Add an article link to the Articles section of index.html.

Prompts for category (desktop/mobile), link title, slug and where in the
list to insert. A page that already links to the article is left unchanged.

Usage:
  update-articles [config.yml]
"""
import sys

from .cli import configure, make_console, make_parser
from .errors import IndexPageError, ToolError
from .index_page import article_href, insert_link
from .prompt import ArticleSubmission, ask_category, ask_position, ask_slug, prompt
from .textio import read_text, write_text

LIST_NAMES = {
    "desktop": "Desktop Systems list",
    "mobile": "Mobile Systems",
}


def collect_submission() -> ArticleSubmission:
    category = ask_category()
    title = prompt("Link text/title", "New Article")
    slug = ask_slug()
    position = ask_position(category, title)
    return ArticleSubmission(slug=slug, title=title, category=category, position=position)


def run(cfg: dict, console, submission: ArticleSubmission) -> bool:
    """Insert the link. Returns False if the page already had it."""
    index_file = cfg["index_file"]
    content = read_text(index_file)
    if content is None:
        raise IndexPageError(f"Could not open {index_file}")

    try:
        updated = insert_link(
            content,
            submission.category,
            submission.title,
            submission.slug,
            position=submission.position or None,
        )
    except IndexPageError as exc:
        raise IndexPageError(f"{exc} ({index_file})") from exc

    if updated is None:
        console.warn(f"A link to {article_href(submission.slug)} already exists in {index_file}. No change made.")
        return False

    write_text(index_file, updated)
    console.info(f"Inserted link into {LIST_NAMES[submission.category.strip().lower()]}.")
    return True


def main(argv=None) -> int:
    args = make_parser("Insert an article link into the index page.").parse_args(argv)
    console = make_console(args)
    try:
        cfg = configure(args, console)
        console.info(f"This will insert a new article link into {cfg['index_file']}")
        run(cfg, console, collect_submission())
    except ToolError as exc:
        console.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
