import sys

GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
RESET = "\033[0m"


def resolve_color(setting, stream=None) -> bool:
    """True/False are taken as given; "auto" means color only on a terminal."""
    if setting is True or setting is False:
        return setting
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class Console:
    """Status messages: info to stdout, warnings and errors to stderr."""

    def __init__(self, use_color: bool = False):
        self.use_color = use_color

    def _tag(self, label: str, color: str) -> str:
        if self.use_color:
            return f"{color}[{label}]{RESET}"
        return f"[{label}]"

    def info(self, msg: str):
        print(f"{self._tag('INFO', GREEN)} {msg}")

    def warn(self, msg: str):
        print(f"{self._tag('WARN', YELLOW)} {msg}", file=sys.stderr)

    def error(self, msg: str):
        print(f"{self._tag('ERROR', RED)} {msg}", file=sys.stderr)
