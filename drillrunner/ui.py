"""Terminal styling and the warning and success messages."""

from __future__ import annotations

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _colors_enabled() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force and force != "0":
        return True
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _style(text: object, code: str) -> str:
    text = str(text)
    if not _colors_enabled():
        return text
    return f"\x1b[{code}m{text}{_RESET}"


def no_emoji() -> bool:
    """Whether the NO_EMOJI environment variable asks for plain symbols."""
    return "NO_EMOJI" in os.environ


def bold(text: object) -> str:
    """Return text styled bold when the terminal shows colours."""
    return _style(text, _BOLD)


def blue(text: object) -> str:
    """Return text styled blue when the terminal shows colours."""
    return _style(text, _BLUE)


def warn(message: str) -> None:
    """Print a warning line in red."""
    symbol = "!" if no_emoji() else "⚠️ "
    print(f"{_style(symbol, _RED)} {_style(message, _RED)}")


def success(message: str) -> None:
    """Print a success line in green."""
    symbol = "✓" if no_emoji() else "✅"
    print(f"{_style(symbol, _GREEN)} {_style(message, _GREEN)}")