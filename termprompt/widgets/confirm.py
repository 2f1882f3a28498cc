from __future__ import annotations

from dataclasses import dataclass

from ..config.manager import build_config
from ..config.prompt_config import PromptConfig, with_result_title
from ..core.errors import PromptCancelled
from ..core.fallback import read_line_or_none
from ..core.render import prompt_with_prefix, resolved_line
from ..core.session_log import log_prompt_event
from ..terminal.base import StdTerminal, TerminalIO
from ..terminal.keys import Key, KeyEvent, KeyParser
from ..terminal.rawmode import RawModeManager

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


class ConfirmHandler:
    """Yes/no resolution rules shared by the raw and line-mode paths."""

    def __init__(self, default_yes: bool, config: PromptConfig) -> None:
        self.default_yes = default_yes
        self.config = config

    def process_key(self, event: KeyEvent) -> tuple[bool | None, bool]:
        """Return ``(result, keep_waiting)`` for one key press."""
        if event.key == Key.ENTER:
            return self.default_yes, False
        if event.key == Key.CTRL_C:
            raise PromptCancelled()
        if event.key == Key.CHAR:
            char = chr(event.char).lower()
            if char == "y":
                return True, False
            if char == "n":
                return False, False
        return None, True

    def process_line(self, line: str) -> bool:
        answer = line.strip().lower()
        if answer in YES_ANSWERS:
            return True
        if answer in NO_ANSWERS:
            return False
        return self.default_yes

    def hint_text(self) -> str:
        return "[Y/n]" if self.default_yes else "[y/N]"

    def format_prompt_text(self, message: str) -> str:
        prompt_msg = prompt_with_prefix(self.config.format_prompt(message), self.config)
        return f"{prompt_msg} {self.config.format_hint(self.hint_text())} "

    @staticmethod
    def answer_text(value: bool) -> str:
        return "yes" if value else "no"


@dataclass(frozen=True)
class ConfirmRequest:
    message: str
    default: bool = False
    config: PromptConfig | None = None
    result_title: str | None = None

    def run(self, terminal: TerminalIO | None = None) -> bool:
        terminal = terminal or StdTerminal()
        config = with_result_title(build_config(self.config), self.result_title)
        handler = ConfirmHandler(self.default, config)
        prompt_text = handler.format_prompt_text(self.message)
        parser = KeyParser(terminal)
        log_prompt_event("confirm", "prompt.start", {"message": self.message})

        def show_result(value: bool) -> bool:
            terminal.move_to_start()
            terminal.clear_line()
            terminal.print(resolved_line(config, self.message, handler.answer_text(value)))
            terminal.print("\r\n")
            terminal.reset_format()
            log_prompt_event("confirm", "prompt.resolve", {"value": value})
            return value

        def interactive() -> bool:
            terminal.print(prompt_text)
            while True:
                event = parser.read_key()
                try:
                    result, keep_waiting = handler.process_key(event)
                except PromptCancelled:
                    terminal.move_to_start()
                    terminal.clear_line()
                    terminal.print(prompt_text)
                    terminal.print("\r\n")
                    log_prompt_event("confirm", "prompt.cancel")
                    raise
                if keep_waiting or result is None:
                    continue
                return show_result(result)

        def fallback() -> bool:
            terminal.print(prompt_text)
            line = read_line_or_none(terminal, "confirm")
            if line is None:
                terminal.println("")
                value = self.default
            else:
                value = handler.process_line(line)
            terminal.println(resolved_line(config, self.message, handler.answer_text(value)))
            log_prompt_event("confirm", "prompt.resolve", {"value": value})
            return value

        return RawModeManager(terminal).run(interactive, fallback)


def ask_confirm(
    message: str,
    default: bool = False,
    *,
    config: PromptConfig | None = None,
    result_title: str | None = None,
    terminal: TerminalIO | None = None,
) -> bool:
    request = ConfirmRequest(
        message=message,
        default=default,
        config=config,
        result_title=result_title,
    )
    return request.run(terminal)
