from __future__ import annotations

import io
from typing import Any, Iterable

from ..core.errors import RawModeUnavailable
from .base import TerminalIO


class ScriptedTerminal(TerminalIO):
    """In-memory terminal fed from a byte script and a list of lines.

    Every control call is recorded so callers can assert on terminal state
    after a prompt returns. Set ``raw_available=False`` to exercise the
    line-mode fallbacks.
    """

    def __init__(
        self,
        input_bytes: bytes = b"",
        lines: Iterable[str] | None = None,
        *,
        raw_available: bool = True,
    ) -> None:
        self.input_bytes = bytes(input_bytes)
        self.read_index = 0
        self.lines = list(lines or [])
        self.line_index = 0
        self.raw_available = raw_available
        self._output = io.StringIO()
        self.raw_enabled = False
        self.make_raw_calls = 0
        self.restore_calls = 0
        self.hide_cursor_called = False
        self.show_cursor_called = False
        self.save_cursor_called = False
        self.restore_cursor_called = False
        self.clear_to_end_called = False
        self.reset_format_called = False
        self.clear_line_calls = 0
        self.move_to_start_calls = 0

    @classmethod
    def with_lines(cls, *lines: str) -> "ScriptedTerminal":
        return cls(lines=lines, raw_available=False)

    def read_byte(self) -> int:
        if self.read_index >= len(self.input_bytes):
            raise EOFError("end of scripted input")
        value = self.input_bytes[self.read_index]
        self.read_index += 1
        return value

    def read_line(self) -> str:
        if self.line_index >= len(self.lines):
            raise EOFError("end of scripted lines")
        line = self.lines[self.line_index]
        self.line_index += 1
        return line

    def print(self, text: str) -> None:
        self._output.write(text)

    def make_raw(self) -> Any:
        self.make_raw_calls += 1
        if not self.raw_available:
            raise RawModeUnavailable("scripted terminal has no raw mode")
        self.raw_enabled = True
        return {"raw": False}

    def restore(self, state: Any) -> None:
        self.restore_calls += 1
        self.raw_enabled = False

    def hide_cursor(self) -> None:
        self.hide_cursor_called = True
        super().hide_cursor()

    def show_cursor(self) -> None:
        self.show_cursor_called = True
        super().show_cursor()

    def save_cursor(self) -> None:
        self.save_cursor_called = True
        super().save_cursor()

    def restore_cursor(self) -> None:
        self.restore_cursor_called = True
        super().restore_cursor()

    def clear_to_end(self) -> None:
        self.clear_to_end_called = True
        super().clear_to_end()

    def reset_format(self) -> None:
        self.reset_format_called = True
        super().reset_format()

    def clear_line(self) -> None:
        self.clear_line_calls += 1
        super().clear_line()

    def move_to_start(self) -> None:
        self.move_to_start_calls += 1
        super().move_to_start()

    @property
    def output(self) -> str:
        return self._output.getvalue()

    def clear_output(self) -> None:
        self._output = io.StringIO()
