from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from rich.color import ColorSystem
from rich.style import Style

from .prompt_config import PromptConfig
from .rwlock import ReadWriteLock


@dataclass(frozen=True)
class Theme:
    info_style: Style = field(default_factory=lambda: Style(color="color(51)"))
    warn_style: Style = field(default_factory=lambda: Style(color="color(226)"))
    error_style: Style = field(default_factory=lambda: Style(color="color(196)", bold=True))
    success_style: Style = field(default_factory=lambda: Style(color="color(46)"))
    debug_style: Style = field(default_factory=lambda: Style(color="color(244)"))
    prompt_style: Style = field(default_factory=lambda: Style(color="color(51)"))
    answer_style: Style = field(default_factory=lambda: Style(color="color(46)"))
    hint_style: Style = field(default_factory=lambda: Style(color="color(240)"))
    title_style: Style = field(default_factory=lambda: Style(bold=True))
    border_style: Style = field(default_factory=lambda: Style(color="color(240)"))

    prefix_info: str = ""
    prefix_warn: str = "!"
    prefix_error: str = "x"

    input_bracket_left: str = "["
    input_bracket_right: str = "]"

    enable_color: bool = True

    @classmethod
    def from_env(cls) -> "Theme":
        """Default theme with colors off when ``NO_COLOR`` is set."""
        return cls(enable_color=not os.getenv("NO_COLOR"))

    def render(self, text: str, style: Style) -> str:
        if not self.enable_color or not text:
            return text
        return style.render(text, color_system=ColorSystem.EIGHT_BIT)


DEFAULT_THEME = Theme()

_theme_lock = ReadWriteLock()
_current_theme = DEFAULT_THEME


def set_theme(theme: Theme) -> None:
    global _current_theme
    with _theme_lock.write():
        _current_theme = theme


def get_theme() -> Theme:
    with _theme_lock.read():
        return _current_theme


def reset_theme() -> None:
    set_theme(DEFAULT_THEME)


def format_prompt(message: str) -> str:
    theme = get_theme()
    return theme.render(message, theme.prompt_style)


def format_answer(value: str) -> str:
    theme = get_theme()
    return theme.render(value, theme.answer_style)


def format_error(message: str) -> str:
    theme = get_theme()
    return theme.render(f"* {message}", theme.error_style)


def format_hint(message: str) -> str:
    theme = get_theme()
    return theme.render(message, theme.hint_style)


def format_placeholder(text: str) -> str:
    theme = get_theme()
    return theme.render(text, theme.hint_style + Style(italic=True))


def format_message(prefix: str, message: str, style: Style) -> str:
    if prefix and message:
        text = f"{prefix} {message}"
    else:
        text = f"{prefix}{message}"
    return get_theme().render(text, style)


def theme_prompt_config() -> PromptConfig:
    """System default formatters, reading the current theme on every call."""
    return PromptConfig(
        format_prompt=format_prompt,
        format_answer=format_answer,
        format_error=format_error,
        format_hint=format_hint,
    )


def without_color(theme: Theme) -> Theme:
    return replace(theme, enable_color=False)
