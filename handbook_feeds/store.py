"""
The article metadata store: a JSON object mapping slugs to records.

    {
      "alpha": {
        "en": "alpha.html",
        "title_en": "Alpha",
        "pubdate": "2024-01-01T00:00:00Z"
      }
    }

The file is always written in canonical form: keys sorted at every level,
two-space indentation, trailing newline. Loading and saving canonical output
again is byte-identical.
"""
import json
from pathlib import Path

from .textio import read_text, write_text


def load(path: Path) -> dict:
    """Load the store. A missing, unreadable or malformed file gives {}."""
    text = read_text(path)
    if text is None:
        return {}
    try:
        data = json.loads(text)
    except ValueError:
        return {}
    if not isinstance(data, dict):
        return {}
    return data


def canonicalize(mapping: dict) -> dict:
    return {key: mapping[key] for key in sorted(mapping)}


def dumps(mapping: dict) -> str:
    return json.dumps(canonicalize(mapping), ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def save(path: Path, mapping: dict):
    write_text(path, dumps(mapping))
