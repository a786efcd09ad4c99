from dataclasses import dataclass

from .errors import ToolError
from .index_page import CATEGORIES, POSITIONS, default_position


@dataclass
class ArticleSubmission:
    slug: str
    title: str = ""
    description: str = ""
    pubdate: str = ""
    category: str = "desktop"
    position: str = ""


def prompt(msg: str, default: str = "") -> str:
    """Ask for one value; an empty answer gives `default`."""
    suffix = f" [{default}]" if default else ""
    try:
        answer = input(f"{msg}{suffix}: ")
    except EOFError as exc:
        raise ToolError("Could not read input.") from exc
    answer = answer.strip()
    return answer if answer else default


def ask_category() -> str:
    category = prompt("Category (desktop/mobile)", "desktop").lower()
    if category not in CATEGORIES:
        raise ToolError("Category must be 'desktop' or 'mobile'.")
    return category


def ask_slug() -> str:
    slug = prompt("Slug (filename without .html, e.g. android-privacy)")
    if slug.endswith(".html"):
        slug = slug[:-len(".html")]
    if not slug:
        raise ToolError("Slug is required.")
    return slug


def ask_position(category: str, title: str) -> str:
    position = prompt("Insert position (first/last)", default_position(category, title)).lower()
    if position not in POSITIONS:
        raise ToolError("Position must be 'first' or 'last'.")
    return position
