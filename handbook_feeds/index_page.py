"""
Insert article links into the site's index.html.

The page is patched as text. Each target list is found by its heading and
class, e.g.

    <h3>Desktop Systems</h3>
    <ul class="article-list">
      <li>...</li>
    </ul>

and for mobile topics, the nested <ul class="topic-list"> inside the Mobile
Systems article list.
"""
import re

from .errors import IndexPageError
from .textio import xml_escape

CATEGORIES = ("desktop", "mobile")
POSITIONS = ("first", "last")

DESKTOP_LIST_RE = re.compile(
    r'<h3>Desktop Systems</h3>.*?<ul[^>]*class="article-list"[^>]*>',
    re.DOTALL,
)
MOBILE_LIST_RE = re.compile(
    r'<h3>Mobile Systems</h3>.*?<ul[^>]*class="article-list"[^>]*>',
    re.DOTALL,
)
MOBILE_TOPIC_LIST_RE = re.compile(
    r'<h3>Mobile Systems</h3>.*?<ul[^>]*class="article-list"[^>]*>'
    r'.*?<ul[^>]*class="topic-list"[^>]*>',
    re.DOTALL,
)
UL_TAG_RE = re.compile(r"<ul\b[^>]*>|</ul>")

# Indentation of <li> children in each list
LIST_INDENT = "\n            "
TOPIC_INDENT = "\n                "


def article_href(slug: str) -> str:
    return f"./articles/{slug}.html"


def render_link(href: str, title: str) -> str:
    return (
        f'<li>\n              <a href="{href}" target="_blank" rel="noopener noreferrer">'
        f"{xml_escape(title)}</a>\n            </li>\n\n"
    )


def default_position(category: str, title: str) -> str:
    """Mobile overview links open the list; everything else is appended."""
    if category == "mobile" and title.strip().lower() == "overview":
        return "first"
    return "last"


def list_contents(content: str, opening_re):
    """
    Find the list whose opening tag `opening_re` matches and return the
    (start, end) span of its children, up to its own closing </ul>.
    Nested lists are skipped over. None if the list is not there.
    """
    m = opening_re.search(content)
    if not m:
        return None
    depth = 1
    for tag in UL_TAG_RE.finditer(content, m.end()):
        depth += -1 if tag.group().startswith("</") else 1
        if depth == 0:
            return m.end(), tag.start()
    return None


def _splice(content: str, span, link_html: str, indent: str, position: str) -> str:
    start, end = span
    inner = content[start:end]
    if position == "first":
        inner = indent + link_html + inner
    else:
        inner = inner + indent + link_html
    return content[:start] + inner + content[end:]


def insert_link(content: str, category: str, title: str, slug: str, position=None):
    """
    Return `content` with a link to the article added, or None if the page
    already links to it.

    desktop  -> Desktop Systems article list
    mobile   -> Mobile Systems article list for an "Overview" title,
                otherwise the nested topic list
    """
    category = category.strip().lower()
    if category not in CATEGORIES:
        raise IndexPageError("Category must be 'desktop' or 'mobile'.")
    position = position or default_position(category, title)
    if position not in POSITIONS:
        raise IndexPageError("Position must be 'first' or 'last'.")

    href = article_href(slug)
    if href in content:
        return None

    link_html = render_link(href, title)

    if category == "desktop":
        span = list_contents(content, DESKTOP_LIST_RE)
        if not span:
            raise IndexPageError("Could not locate Desktop Systems list.")
        return _splice(content, span, link_html, LIST_INDENT, position)

    if title.strip().lower() == "overview":
        span = list_contents(content, MOBILE_LIST_RE)
        if span:
            return _splice(content, span, link_html, LIST_INDENT, position)

    span = list_contents(content, MOBILE_TOPIC_LIST_RE)
    if not span:
        raise IndexPageError("Could not locate Mobile Systems topic list.")
    return _splice(content, span, link_html, TOPIC_INDENT, position)
