from __future__ import annotations

from typing import Callable, NoReturn

from ..config.prompt_config import PromptConfig, answer_prefix, question_prefix
from ..terminal.base import TerminalIO
from ..terminal.keys import Key, KeyParser
from ..terminal.renderer import InteractiveRenderer, RenderFn
from .errors import PromptCancelled
from .navigation import NavigationHandler
from .session_log import log_prompt_event

FormatOptionLine = Callable[[int, int], tuple[str, bool]]


class Cursor:
    """Mutable highlighted index shared by a key loop and its renderer."""

    def __init__(self, index: int = 0) -> None:
        self.index = index


def prompt_with_prefix(prompt_msg: str, config: PromptConfig) -> str:
    return f"{question_prefix(config)}{prompt_msg}"


def resolved_line(config: PromptConfig, message: str, value: str) -> str:
    """The single line that replaces a prompt once it has an answer."""
    if config.format_result_title is not None:
        title = config.format_result_title(message, value)
    else:
        title = config.format_prompt(message)
    return f"{answer_prefix(config)}{title} {config.format_answer(value)}"


def cancel_prompt(terminal: TerminalIO, source: str = "prompt") -> NoReturn:
    """Wipe the interactive region and raise ``PromptCancelled``."""
    terminal.restore_cursor()
    terminal.clear_to_end()
    terminal.println("")
    log_prompt_event(source, "prompt.cancel")
    raise PromptCancelled()


def write_result_over_prompt(terminal: TerminalIO, line: str) -> None:
    """Replace the prompt line rendered by ``render_with_prompt``.

    The saved anchor sits two rows below the prompt, so the cursor moves up
    from there, rewrites that row, and clears everything under it.
    """
    terminal.restore_cursor()
    terminal.move_up(2)
    terminal.move_to_start()
    terminal.clear_line()
    terminal.print(line)
    terminal.clear_to_end()
    terminal.print("\r\n")
    terminal.reset_format()


def render_options(
    terminal: TerminalIO,
    renderer: InteractiveRenderer,
    options_count: int,
    cursor: Cursor,
    format_line: FormatOptionLine,
    hint_text: str,
    config: PromptConfig,
) -> RenderFn:
    def draw() -> None:
        for index in range(options_count):
            terminal.move_to_start()
            line, highlighted = format_line(index, cursor.index)
            terminal.print(config.format_answer(line) if highlighted else line)
            terminal.clear_line()
            terminal.print("\r\n")
        terminal.move_to_start()
        terminal.print("\r\n")
        terminal.move_to_start()
        terminal.print(config.format_hint(hint_text))
        terminal.print("\r\n")
        terminal.hide_cursor()

    def render(is_first: bool) -> None:
        if is_first:
            draw()
            return
        renderer.rerender(lambda _is_first: draw())

    return render


def handle_interactive_input(
    parser: KeyParser,
    terminal: TerminalIO,
    navigator: NavigationHandler,
    cursor: Cursor,
    on_enter: Callable[[], bool],
    on_render: Callable[[], None],
    on_space: Callable[[], bool] | None = None,
    source: str = "prompt",
) -> None:
    """Key loop for list prompts; returns once ``on_enter`` accepts."""
    while True:
        event = parser.read_key()
        if event.key in (Key.UP, Key.DOWN):
            new_index, should_render = navigator.process_arrow_key(cursor.index, event.key)
            if should_render:
                cursor.index = new_index
                on_render()
            continue
        if event.key == Key.SPACE and on_space is not None:
            if on_space():
                on_render()
            continue
        if event.key == Key.ENTER:
            if on_enter():
                return
            continue
        if event.key == Key.CTRL_C:
            cancel_prompt(terminal, source)
