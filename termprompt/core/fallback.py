"""Line-mode fallbacks used when raw mode is unavailable.

Bad input never raises here: unparseable answers and unreadable streams
both resolve to the configured defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from ..config.prompt_config import PromptConfig
from ..terminal.base import TerminalIO
from .errors import PromptReadError
from .render import prompt_with_prefix
from .session_log import log_warn


@dataclass
class SelectFallbackOptions:
    format_option_line: Callable[[int, str, bool], str]
    default_index: int
    parse_input: Callable[[str], int | None]
    format_selected: Callable[[int], str]
    input_prompt: str = ""
    result_prefix: str = ""


@dataclass
class MultiSelectFallbackOptions:
    format_option_line: Callable[[int, str, bool], str]
    default_selected: set[int]
    parse_input: Callable[[str], list[int]]
    format_selected: Callable[[list[int]], str]
    instructions: str = ""
    input_prompt: str = ""
    result_prefix: str = ""
    empty_result_text: str = ""


def read_line_or_none(terminal: TerminalIO, source: str) -> str | None:
    try:
        return terminal.read_line()
    except (EOFError, OSError, PromptReadError) as exc:
        log_warn(source, "fallback.read_failed", {"error": str(exc)})
        return None


def execute_select_fallback(
    terminal: TerminalIO,
    message: str,
    config: PromptConfig,
    options: Sequence[str],
    fallback: SelectFallbackOptions,
) -> int:
    terminal.println(prompt_with_prefix(config.format_prompt(message), config))
    for index, option in enumerate(options):
        is_default = index == fallback.default_index
        terminal.print(fallback.format_option_line(index, option, is_default))
    if fallback.input_prompt:
        terminal.print(fallback.input_prompt)

    line = read_line_or_none(terminal, "select")
    if line is None:
        return fallback.default_index
    selected = fallback.parse_input(line)
    if selected is None:
        return fallback.default_index
    terminal.println(fallback.result_prefix + fallback.format_selected(selected))
    return selected


def execute_multiselect_fallback(
    terminal: TerminalIO,
    message: str,
    config: PromptConfig,
    options: Sequence[str],
    fallback: MultiSelectFallbackOptions,
) -> list[int]:
    terminal.println(prompt_with_prefix(config.format_prompt(message), config))
    if fallback.instructions:
        terminal.println(fallback.instructions)
        terminal.println("")
    for index, option in enumerate(options):
        is_selected = index in fallback.default_selected
        terminal.print(fallback.format_option_line(index, option, is_selected))
    if fallback.input_prompt:
        terminal.print(fallback.input_prompt)

    line = read_line_or_none(terminal, "multiselect")
    if line is None:
        return sorted(fallback.default_selected)
    selected = fallback.parse_input(line)
    if selected:
        terminal.println(fallback.result_prefix + fallback.format_selected(selected))
    elif fallback.empty_result_text:
        terminal.println(fallback.empty_result_text)
    return selected
