import sys
from pathlib import Path

import yaml

from .errors import ToolError

CONFIG_FILENAME = "config.yml"


def get_config_path(arg=None) -> Path:
    """
    Determine which config file to use.

    - If a path is passed on the command line, use that.
    - Otherwise, config.yml in the working directory.
    """
    if arg:
        return Path(arg).resolve()
    return (Path.cwd() / CONFIG_FILENAME).resolve()


def load_config(config_path: Path, explicit: bool = False) -> dict:
    """
    Load the YAML config and apply defaults.

    Paths are resolved relative to the directory holding the config file. A
    missing default config.yml is fine (all defaults, rooted at that
    directory); a missing config that was asked for by name is not.
    """
    config_path = Path(config_path)
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ToolError(f"Invalid config file {config_path}: {exc}") from exc
    elif explicit:
        raise ToolError(f"Config file not found: {config_path}")
    else:
        data = {}

    if not isinstance(data, dict):
        raise ToolError(f"Invalid config file {config_path}: expected a mapping")

    root = config_path.parent

    # color can be "auto", true or false
    color = data.get("color", "auto")
    if isinstance(color, str):
        color = color.strip().lower()
        if color in ("true", "yes", "on", "always"):
            color = True
        elif color in ("false", "no", "off", "never"):
            color = False
        else:
            color = "auto"

    rebuild_command = data.get("rebuild_command")
    if isinstance(rebuild_command, str):
        rebuild_command = rebuild_command.split()
    if not rebuild_command:
        rebuild_command = [sys.executable, "-m", "handbook_feeds.rebuild"]
        if config_path.exists():
            rebuild_command.append(str(config_path))

    cfg = {
        "config_path": config_path,
        "root": root,
        "data_file": (root / data.get("data_file", "data/articles.json")).resolve(),
        "feed_file": (root / data.get("feed_file", "feeds/articles.xml")).resolve(),
        "articles_dir": (root / data.get("articles_dir", "articles")).resolve(),
        "index_file": (root / data.get("index_file", "index.html")).resolve(),
        # locale of the filename/title fields read from each record
        "locale": str(data.get("locale", "en")),
        "color": color,
        "rebuild_after_update": bool(data.get("rebuild_after_update", True)),
        "rebuild_command": [str(x) for x in rebuild_command],
    }
    return cfg
