from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..config.theme import get_theme

DEFAULT_RULE_WIDTH = 80


def rule_text(char: str = "-", width: int = DEFAULT_RULE_WIDTH, text: str = "") -> str:
    """A separator line, optionally with ``text`` centered in it."""
    char = (char or "-")[0]
    if width <= 0:
        width = DEFAULT_RULE_WIDTH
    if not text:
        return char * width
    side = max((width - len(text) - 2) // 2, 1)
    return f"{char * side} {text} {char * side}"


class Message:
    """Status lines for command output, styled with the current theme."""

    def __init__(self, verbose: bool = False, console: Optional[Console] = None) -> None:
        self.verbose = verbose
        self.console = console or Console()

    def info(self, message: str) -> None:
        self._emit("ℹ", message, get_theme().info_style)

    def success(self, message: str) -> None:
        self._emit("✓", message, get_theme().success_style)

    def warning(self, message: str) -> None:
        theme = get_theme()
        self._emit(theme.prefix_warn or "⚠", message, theme.warn_style)

    def error(self, message: str) -> None:
        theme = get_theme()
        self._emit(theme.prefix_error or "✗", message, theme.error_style)

    def debug(self, message: str) -> None:
        if self.verbose:
            self._emit("DEBUG:", message, get_theme().debug_style)

    def print(self, message: str = "") -> None:
        self.console.print(message, markup=False, highlight=False)

    def rule(self, char: str = "-", width: int = DEFAULT_RULE_WIDTH, text: str = "") -> None:
        self.print(rule_text(char, width, text))

    def _emit(self, prefix: str, message: str, style: Style) -> None:
        theme = get_theme()
        line = f"{prefix} {message}" if prefix else message
        self.console.print(Text(line, style=style if theme.enable_color else ""), highlight=False)
