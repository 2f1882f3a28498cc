from __future__ import annotations

from dataclasses import dataclass, field

from ..config.manager import build_config
from ..config.prompt_config import PromptConfig, with_result_title
from ..core.errors import PromptConfigError
from ..core.fallback import SelectFallbackOptions, execute_select_fallback
from ..core.navigation import NavigationHandler
from ..core.render import (
    Cursor,
    handle_interactive_input,
    prompt_with_prefix,
    render_options,
    resolved_line,
    write_result_over_prompt,
)
from ..core.session_log import log_prompt_event
from ..terminal.base import StdTerminal, TerminalIO
from ..terminal.keys import KeyParser
from ..terminal.rawmode import RawModeManager
from ..terminal.renderer import InteractiveRenderer

SELECT_HINT = "Use ↑/↓ to move, Enter to confirm"


class SelectHandler:
    def __init__(
        self,
        options: list[str],
        default_index: int,
        config: PromptConfig,
        cyclic: bool = False,
    ) -> None:
        self.options = options
        self.config = config
        self.navigator = NavigationHandler(len(options), cyclic)
        self.default_index = self.navigator.validate_index(default_index)

    def process_arrow_key(self, current_index: int, direction: str) -> tuple[int, bool]:
        return self.navigator.process_arrow_key(current_index, direction)

    def format_option_line(self, index: int, current_index: int) -> tuple[str, bool]:
        if index == current_index:
            return f"> {self.options[index]}", True
        return f"  {self.options[index]}", False

    def format_selected_option(self, index: int) -> str:
        return self.config.format_answer(self.options[index])

    def parse_numeric_input(self, text: str) -> int | None:
        """1-based choice to an index; ``None`` for anything unusable."""
        try:
            number = int(text.strip())
        except ValueError:
            return None
        if number < 1 or number > len(self.options):
            return None
        return number - 1

    def format_fallback_line(self, index: int, option: str, is_default: bool) -> str:
        marker = "*" if is_default else " "
        return f"  {marker} {index + 1}. {option}\n"


@dataclass(frozen=True)
class SelectRequest:
    message: str
    options: list[str] = field(default_factory=list)
    default: int = 0
    config: PromptConfig | None = None
    result_title: str | None = None
    cyclic: bool = False

    def run(self, terminal: TerminalIO | None = None) -> int:
        if not self.options:
            raise PromptConfigError("select needs at least one option")
        terminal = terminal or StdTerminal()
        config = with_result_title(build_config(self.config), self.result_title)
        options = list(self.options)
        handler = SelectHandler(options, self.default, config, self.cyclic)
        log_prompt_event("select", "prompt.start", {"message": self.message, "options": options})

        def interactive() -> int:
            parser = KeyParser(terminal)
            renderer = InteractiveRenderer(terminal)
            cursor = Cursor(handler.default_index)
            render = render_options(
                terminal,
                renderer,
                len(options),
                cursor,
                handler.format_option_line,
                SELECT_HINT,
                config,
            )
            prompt_msg = prompt_with_prefix(config.format_prompt(self.message), config)
            renderer.render_with_prompt(prompt_msg, render)

            def on_enter() -> bool:
                value = options[cursor.index]
                write_result_over_prompt(terminal, resolved_line(config, self.message, value))
                return True

            handle_interactive_input(
                parser,
                terminal,
                handler.navigator,
                cursor,
                on_enter=on_enter,
                on_render=lambda: render(False),
                source="select",
            )
            return cursor.index

        def fallback() -> int:
            return execute_select_fallback(
                terminal,
                self.message,
                config,
                options,
                SelectFallbackOptions(
                    format_option_line=handler.format_fallback_line,
                    default_index=handler.default_index,
                    parse_input=handler.parse_numeric_input,
                    format_selected=handler.format_selected_option,
                    input_prompt=f"Choose (1-{len(options)}): ",
                    result_prefix="Selected: ",
                ),
            )

        index = RawModeManager(terminal).run(interactive, fallback)
        log_prompt_event("select", "prompt.resolve", {"index": index})
        return index


def ask_select(
    message: str,
    options: list[str],
    default: int = 0,
    *,
    config: PromptConfig | None = None,
    result_title: str | None = None,
    cyclic: bool = False,
    terminal: TerminalIO | None = None,
) -> int:
    request = SelectRequest(
        message=message,
        options=list(options),
        default=default,
        config=config,
        result_title=result_title,
        cyclic=cyclic,
    )
    return request.run(terminal)
