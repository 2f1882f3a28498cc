from __future__ import annotations

from dataclasses import dataclass, field

from ..config.manager import build_config
from ..config.prompt_config import PromptConfig, with_result_title
from ..core.errors import PromptConfigError
from ..core.fallback import MultiSelectFallbackOptions, execute_multiselect_fallback
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

MULTISELECT_HINT = "Use ↑/↓ to move, Space to toggle, Enter to confirm"
EMPTY_SELECTION_TEXT = "(none)"


class MultiSelectHandler:
    def __init__(
        self,
        options: list[str],
        default_selected: list[int],
        config: PromptConfig,
        cyclic: bool = False,
    ) -> None:
        self.options = options
        self.default_selected = list(default_selected)
        self.config = config
        self.navigator = NavigationHandler(len(options), cyclic)

    def clean_defaults(self) -> set[int]:
        return {idx for idx in self.default_selected if 0 <= idx < len(self.options)}

    def initial_index(self) -> int:
        for idx in self.default_selected:
            if 0 <= idx < len(self.options):
                return idx
        return 0

    def process_arrow_key(self, current_index: int, direction: str) -> tuple[int, bool]:
        return self.navigator.process_arrow_key(current_index, direction)

    @staticmethod
    def toggle(selected: set[int], index: int) -> None:
        if index in selected:
            selected.discard(index)
        else:
            selected.add(index)

    def format_option_line(self, index: int, current_index: int, selected: set[int]) -> tuple[str, bool]:
        prefix = "> " if index == current_index else "  "
        marker = "[x]" if index in selected else "[ ]"
        return f"{prefix}{marker} {self.options[index]}", index == current_index

    def selected_labels(self, indices: list[int]) -> str:
        labels = [self.options[idx] for idx in indices if 0 <= idx < len(self.options)]
        if not labels:
            return EMPTY_SELECTION_TEXT
        return ", ".join(labels)

    def format_selected_options(self, indices: list[int]) -> str:
        text = self.selected_labels(indices)
        if text == EMPTY_SELECTION_TEXT:
            return text
        return self.config.format_answer(text)

    def parse_comma_separated_input(self, text: str) -> list[int]:
        """Lenient ``"1,3"`` parsing; bad or out-of-range tokens are dropped."""
        text = text.strip()
        if not text:
            return sorted(self.clean_defaults())
        selected: set[int] = set()
        for part in text.split(","):
            try:
                number = int(part.strip())
            except ValueError:
                continue
            if 1 <= number <= len(self.options):
                selected.add(number - 1)
        return sorted(selected)

    def format_fallback_line(self, index: int, option: str, is_selected: bool) -> str:
        marker = "[x]" if is_selected else "[ ]"
        return f"  {marker} {index + 1}. {option}\n"


@dataclass(frozen=True)
class MultiSelectRequest:
    message: str
    options: list[str] = field(default_factory=list)
    defaults: list[int] = field(default_factory=list)
    config: PromptConfig | None = None
    result_title: str | None = None
    cyclic: bool = False

    def run(self, terminal: TerminalIO | None = None) -> list[int]:
        if not self.options:
            raise PromptConfigError("multi-select needs at least one option")
        terminal = terminal or StdTerminal()
        config = with_result_title(build_config(self.config), self.result_title)
        options = list(self.options)
        handler = MultiSelectHandler(options, self.defaults, config, self.cyclic)
        log_prompt_event(
            "multiselect", "prompt.start", {"message": self.message, "options": options}
        )

        def interactive() -> list[int]:
            parser = KeyParser(terminal)
            renderer = InteractiveRenderer(terminal)
            cursor = Cursor(handler.initial_index())
            selected = handler.clean_defaults()
            render = render_options(
                terminal,
                renderer,
                len(options),
                cursor,
                lambda index, current: handler.format_option_line(index, current, selected),
                MULTISELECT_HINT,
                config,
            )
            prompt_msg = prompt_with_prefix(config.format_prompt(self.message), config)
            renderer.render_with_prompt(prompt_msg, render)

            def on_space() -> bool:
                handler.toggle(selected, cursor.index)
                return True

            def on_enter() -> bool:
                label = handler.selected_labels(sorted(selected))
                write_result_over_prompt(terminal, resolved_line(config, self.message, label))
                return True

            handle_interactive_input(
                parser,
                terminal,
                handler.navigator,
                cursor,
                on_enter=on_enter,
                on_render=lambda: render(False),
                on_space=on_space,
                source="multiselect",
            )
            return sorted(selected)

        def fallback() -> list[int]:
            return execute_multiselect_fallback(
                terminal,
                self.message,
                config,
                options,
                MultiSelectFallbackOptions(
                    format_option_line=handler.format_fallback_line,
                    default_selected=handler.clean_defaults(),
                    parse_input=handler.parse_comma_separated_input,
                    format_selected=handler.format_selected_options,
                    instructions="Enter option numbers separated by commas, e.g. 1,3,5",
                    input_prompt="Choose (e.g. 1,3,5): ",
                    result_prefix="Selected: ",
                    empty_result_text="Nothing selected",
                ),
            )

        indices = RawModeManager(terminal).run(interactive, fallback)
        log_prompt_event("multiselect", "prompt.resolve", {"indices": indices})
        return indices


def ask_multiselect(
    message: str,
    options: list[str],
    defaults: list[int] | None = None,
    *,
    config: PromptConfig | None = None,
    result_title: str | None = None,
    cyclic: bool = False,
    terminal: TerminalIO | None = None,
) -> list[int]:
    request = MultiSelectRequest(
        message=message,
        options=list(options),
        defaults=list(defaults or []),
        config=config,
        result_title=result_title,
        cyclic=cyclic,
    )
    return request.run(terminal)
