"""ANSI escape sequences for colored Text output."""

from __future__ import annotations

from woof.core import Level

RESET = "\033[0m"
DIM = "\033[2m"

LEVEL_COLORS: dict[Level, str] = {
    Level.DEBUG: "\033[90m",   # grey
    Level.INFO: "\033[34m",    # blue
    Level.WARNING: "\033[33m",  # yellow
    Level.ERROR: "\033[1;31m",  # bold red
}


def paint(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"
