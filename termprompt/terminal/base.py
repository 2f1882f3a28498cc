from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, TextIO

from ..core.errors import PromptReadError, RawModeUnavailable
from . import platform

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_LINE = "\033[K"
MOVE_TO_START = "\r"
SAVE_CURSOR = "\033[s"
RESTORE_CURSOR = "\033[u"
CLEAR_TO_END = "\033[J"
RESET_FORMAT = "\033[0m"


def move_up_sequence(lines: int) -> str:
    return f"\033[{lines}A"


class TerminalIO(ABC):
    """The single handle through which prompts read, write and switch modes.

    Subclasses implement the raw I/O and mode primitives; the ANSI helpers
    are shared and go through :meth:`print`.
    """

    @abstractmethod
    def read_byte(self) -> int:
        """Return the next input byte; raise ``EOFError`` at end of stream."""

    @abstractmethod
    def read_line(self) -> str:
        """Return the next input line without its newline."""

    @abstractmethod
    def print(self, text: str) -> None:
        ...

    @abstractmethod
    def make_raw(self) -> Any:
        """Enter raw mode and return the state needed by :meth:`restore`.

        Raises ``RawModeUnavailable`` when stdin is not an interactive TTY.
        """

    @abstractmethod
    def restore(self, state: Any) -> None:
        ...

    def fileno(self) -> int:
        return -1

    def println(self, text: str = "") -> None:
        self.print(f"{text}\n")

    def write(self, data: bytes) -> int:
        self.print(data.decode("utf-8", errors="replace"))
        return len(data)

    def hide_cursor(self) -> None:
        self.print(HIDE_CURSOR)

    def show_cursor(self) -> None:
        self.print(SHOW_CURSOR)

    def clear_line(self) -> None:
        self.print(CLEAR_LINE)

    def move_to_start(self) -> None:
        self.print(MOVE_TO_START)

    def save_cursor(self) -> None:
        self.print(SAVE_CURSOR)

    def restore_cursor(self) -> None:
        self.print(RESTORE_CURSOR)

    def clear_to_end(self) -> None:
        self.print(CLEAR_TO_END)

    def move_up(self, lines: int = 1) -> None:
        if lines > 0:
            self.print(move_up_sequence(lines))

    def reset_format(self) -> None:
        self.print(RESET_FORMAT)


class StdTerminal(TerminalIO):
    """Terminal bound to the process stdin/stdout."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self._raw = False

    def fileno(self) -> int:
        try:
            return self.stdin.fileno()
        except (AttributeError, OSError, ValueError):
            return -1

    def read_byte(self) -> int:
        fd = self.fileno()
        try:
            if fd >= 0:
                data = platform.getbyte(fd)
            else:
                data = self.stdin.read(1).encode("utf-8")
        except OSError as exc:
            raise PromptReadError(f"failed to read input: {exc}") from exc
        if not data:
            raise EOFError("end of input")
        return data[0]

    def read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except OSError as exc:
            raise PromptReadError(f"failed to read input: {exc}") from exc
        if not line:
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def print(self, text: str) -> None:
        if self._raw:
            # Output post-processing is off in raw mode.
            text = text.replace("\r\n", "\n").replace("\n", "\r\n")
        self.stdout.write(text)
        self.stdout.flush()

    def make_raw(self) -> Any:
        fd = self.fileno()
        if fd < 0 or not platform.isatty(fd):
            raise RawModeUnavailable("stdin is not an interactive terminal")
        try:
            state = platform.tcgetattr(fd)
            platform.setraw(fd)
        except Exception as exc:
            raise RawModeUnavailable(f"failed to enter raw mode: {exc}") from exc
        self._raw = True
        return state

    def restore(self, state: Any) -> None:
        fd = self.fileno()
        self._raw = False
        if fd < 0 or state is None:
            return
        platform.tcsetattr(fd, platform.TCSADRAIN, state)
