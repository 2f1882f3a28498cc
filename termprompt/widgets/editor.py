"""Single-line editor shared by the text and password prompts.

The editor owns one terminal row. Every mutation redraws that row from
column zero and walks the cursor back with backspaces, so the same code
path serves plain and masked echo. A failing validator is reported on the
row below, which is wiped again once the input becomes valid.
"""

from __future__ import annotations

import codecs
from typing import Callable, NoReturn

from prompt_toolkit.utils import get_cwidth

from ..config.theme import format_error as theme_format_error
from ..config.theme import format_placeholder as theme_format_placeholder
from ..core.errors import PromptCancelled, PromptReadError
from ..core.session_log import log_prompt_event
from ..terminal.base import TerminalIO
from ..terminal.keys import Key, KeyParser
from ..terminal.rawmode import RawModeManager

Echo = Callable[[str], str]
Validator = Callable[[str], None]


def plain_echo(text: str) -> str:
    return text


def mask_echo(text: str) -> str:
    return "*" * len(text)


def display_width(text: str) -> int:
    return sum(get_cwidth(char) for char in text)


def validation_message(validator: Validator | None, value: str) -> str | None:
    """Run ``validator`` and return its complaint, or ``None`` when it passes."""
    if validator is None:
        return None
    try:
        validator(value)
    except ValueError as exc:
        return str(exc)
    return None


class EditorBuffer:
    def __init__(self, text: str = "") -> None:
        self.chars = list(text)
        self.cursor = len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def insert(self, char: str) -> None:
        self.chars.insert(self.cursor, char)
        self.cursor += 1

    def backspace(self) -> bool:
        if self.cursor == 0:
            return False
        del self.chars[self.cursor - 1]
        self.cursor -= 1
        return True

    def move_left(self) -> bool:
        if self.cursor == 0:
            return False
        self.cursor -= 1
        return True

    def move_right(self) -> bool:
        if self.cursor >= len(self.chars):
            return False
        self.cursor += 1
        return True

    def tail_width(self, echo: Echo = plain_echo) -> int:
        """Display columns between the cursor and the end of the echoed text."""
        shown = echo(self.text)
        return display_width(shown[self.cursor:])


class LineEditor:
    def __init__(
        self,
        terminal: TerminalIO,
        prompt_text: str,
        validator: Validator | None = None,
        echo: Echo = plain_echo,
        placeholder: str = "",
        format_error: Callable[[str], str] | None = None,
        format_placeholder: Callable[[str], str] | None = None,
    ) -> None:
        self.terminal = terminal
        self.prompt_text = prompt_text
        self.validator = validator
        self.echo = echo
        self.placeholder = placeholder
        self.format_error = format_error or theme_format_error
        self.format_placeholder = format_placeholder or theme_format_placeholder
        self.buffer = EditorBuffer()
        self.placeholder_shown = False
        self.error_shown = False
        self.line_mode = False

    def run(self) -> str:
        return RawModeManager(self.terminal).run(self.read_raw, self.read_line_mode)

    def read_line_mode(self) -> str:
        self.line_mode = True
        self.terminal.print(self.prompt_text)
        try:
            line = self.terminal.read_line()
        except (EOFError, OSError) as exc:
            raise PromptReadError(f"failed to read input: {exc}") from exc
        return line.strip()

    def read_raw(self) -> str:
        parser = KeyParser(self.terminal)
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.terminal.show_cursor()
        self.placeholder_shown = bool(self.placeholder)
        self.redraw()

        while True:
            try:
                event = parser.read_key()
            except PromptReadError:
                if len(self.buffer):
                    self.terminal.print("\r\n")
                    return self.buffer.text.strip()
                raise

            if event.key == Key.ENTER:
                if self.submit():
                    return self.buffer.text.strip()
                continue
            if event.key == Key.CTRL_C:
                self.cancel()
            if event.key == Key.RIGHT:
                if self.placeholder_shown:
                    self.placeholder_shown = False
                    self.buffer.cursor = 0
                    self.redraw()
                elif self.buffer.move_right():
                    self.redraw()
                continue
            if event.key == Key.LEFT:
                if not self.placeholder_shown and self.buffer.move_left():
                    self.redraw()
                continue
            if event.key == Key.BACKSPACE:
                if self.placeholder_shown or not self.buffer.backspace():
                    continue
                if not len(self.buffer) and self.placeholder:
                    self.placeholder_shown = True
                self.refresh()
                continue
            if event.key in (Key.SPACE, Key.CHAR):
                if event.key == Key.CHAR and event.char < 0x20:
                    continue
                text = decoder.decode(bytes([event.char or 0x20]))
                if not text:
                    continue
                self.placeholder_shown = False
                for char in text:
                    self.buffer.insert(char)
                self.refresh()

    def redraw(self) -> None:
        terminal = self.terminal
        terminal.move_to_start()
        terminal.clear_line()
        terminal.print(self.prompt_text)
        if self.placeholder_shown:
            terminal.print(self.format_placeholder(self.placeholder))
            terminal.print("\b" * display_width(self.placeholder))
            return
        terminal.print(self.echo(self.buffer.text))
        terminal.print("\b" * self.buffer.tail_width(self.echo))

    def refresh(self) -> None:
        """Redraw after a mutation and re-run live validation."""
        if self.error_shown:
            self.clear_error_line()
        self.redraw()
        message = validation_message(self.validator, self.buffer.text)
        if message is not None:
            self.show_error(message)

    def show_error(self, message: str) -> None:
        terminal = self.terminal
        terminal.print("\n")
        terminal.move_to_start()
        terminal.clear_line()
        terminal.print(self.format_error(message))
        terminal.reset_format()
        terminal.move_up(1)
        self.redraw()
        self.error_shown = True

    def clear_error_line(self) -> None:
        terminal = self.terminal
        terminal.print("\n")
        terminal.move_to_start()
        terminal.clear_line()
        terminal.move_up(1)
        self.error_shown = False

    def submit(self) -> bool:
        message = validation_message(self.validator, self.buffer.text)
        if message is not None:
            if self.error_shown:
                self.clear_error_line()
            self.show_error(message)
            return False
        if self.error_shown:
            self.clear_error_line()
        self.terminal.move_to_start()
        self.terminal.clear_line()
        self.terminal.print(self.prompt_text)
        if len(self.buffer):
            self.terminal.print(self.echo(self.buffer.text))
        self.terminal.print("\r\n")
        return True

    def cancel(self) -> NoReturn:
        if self.error_shown:
            self.clear_error_line()
        self.terminal.move_to_start()
        self.terminal.clear_line()
        self.terminal.print(self.prompt_text)
        self.terminal.print("\r\n")
        log_prompt_event("editor", "prompt.cancel")
        raise PromptCancelled()
