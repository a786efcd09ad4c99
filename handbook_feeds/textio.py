import html
from pathlib import Path

from .errors import ToolError


def read_text(path: Path):
    """Return the whole file as UTF-8 text, or None if it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def write_text(path: Path, text: str):
    """Overwrite the file with `text`, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ToolError(f"Could not write {path}: {exc}") from exc


def xml_escape(s) -> str:
    """Escape &, < and > for embedding in XML text. Quotes are left alone."""
    if s is None:
        return ""
    return html.escape(str(s), quote=False)
