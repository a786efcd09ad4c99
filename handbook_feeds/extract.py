import re
from pathlib import Path

from bs4 import BeautifulSoup

from .textio import read_text

# First paragraph only; not a general HTML parse.
FIRST_PARAGRAPH_RE = re.compile(r"<p>(.*?)</p>", re.DOTALL)
WHITESPACE_RE = re.compile(r"\s+")


def first_paragraph(path: Path) -> str:
    """
    Return the text of the first <p>...</p> in an article file.

    Nested tags are stripped, whitespace runs (newlines included) collapse to
    single spaces and the result is trimmed:

      <p>Hello <b>world</b>.</p>  ->  "Hello world."

    Returns "" when the file is missing or has no paragraph.
    """
    html_text = read_text(path)
    if not html_text:
        return ""

    m = FIRST_PARAGRAPH_RE.search(html_text)
    if not m:
        return ""

    text = BeautifulSoup(m.group(1), "html.parser").get_text()
    return WHITESPACE_RE.sub(" ", text).strip()


def time_datetime(path: Path):
    """Return the datetime attribute of the first <time datetime="..."> in the file, if any."""
    html_text = read_text(path)
    if not html_text:
        return None

    soup = BeautifulSoup(html_text, "html.parser")
    tag = soup.find("time", attrs={"datetime": True})
    if tag is None:
        return None
    value = tag["datetime"].strip()
    return value or None
