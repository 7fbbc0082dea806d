"""Colored console output for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

_console: Console | None = None


def get_console() -> Console:
    """Return the shared console instance, creating it on first use."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def set_console(console: Console | None) -> None:
    """Replace the shared console (None restores lazy creation)."""
    global _console
    _console = console


def info(label: str, value: object) -> None:
    get_console().print(Text.assemble((label, "blue"), " ", str(value)), soft_wrap=True)


def success(message: str) -> None:
    get_console().print(Text(message, style="green"), soft_wrap=True)


def warning(message: str) -> None:
    get_console().print(Text(message, style="yellow"), soft_wrap=True)


def error(message: str) -> None:
    get_console().print(Text(message, style="red"), soft_wrap=True)


def show_json(text: str) -> None:
    """Print a JSON document with syntax highlighting."""
    get_console().print_json(text, indent=2)


__all__ = ["error", "get_console", "info", "set_console", "show_json", "success", "warning"]
