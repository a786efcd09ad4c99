import argparse

from .config import get_config_path, load_config
from .console import Console, resolve_color


def make_parser(description: str, rebuild_flag: bool = False) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("config", nargs="?", help="path to config.yml (default: ./config.yml)")
    parser.add_argument("--no-color", action="store_true", help="disable colored output")
    if rebuild_flag:
        parser.add_argument(
            "--no-rebuild", action="store_true", help="skip the full feed rebuild afterwards"
        )
    return parser


def make_console(args) -> Console:
    if args.no_color:
        return Console(use_color=False)
    return Console(use_color=resolve_color("auto"))


def configure(args, console: Console) -> dict:
    """Load the config named on the command line and apply its color setting."""
    cfg = load_config(get_config_path(args.config), explicit=bool(args.config))
    if not args.no_color:
        console.use_color = resolve_color(cfg["color"])
    return cfg
