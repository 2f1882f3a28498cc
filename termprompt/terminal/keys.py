from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import PromptReadError
from .base import TerminalIO

ESC = 0x1B
CTRL_C = 0x03
BACKSPACE = 0x7F
CTRL_H = 0x08

_ARROWS = {
    ord("A"): "up",
    ord("B"): "down",
    ord("C"): "right",
    ord("D"): "left",
}


class Key:
    """Logical key names produced by :class:`KeyParser`."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    SPACE = "space"
    BACKSPACE = "backspace"
    CTRL_C = "ctrl+c"
    CHAR = "char"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    key: str
    char: int = 0

    @property
    def text(self) -> str:
        if self.key == Key.SPACE:
            return " "
        if self.key != Key.CHAR:
            return ""
        return chr(self.char)


class KeyParser:
    """Turn the terminal byte stream into key events.

    ``ESC [ A`` and ``ESC O A`` (and B/C/D) are the arrow keys; any other
    sequence after ESC, including a read failure inside it, is swallowed as
    ``Key.UNKNOWN``. Only a failure on the first byte is an error.
    """

    def __init__(self, terminal: TerminalIO) -> None:
        self.terminal = terminal

    def read_key(self) -> KeyEvent:
        try:
            byte = self.terminal.read_byte()
        except PromptReadError:
            raise
        except (EOFError, OSError) as exc:
            raise PromptReadError(f"failed to read input: {exc}") from exc

        if byte == ESC:
            return self._parse_escape_sequence()
        if byte in (0x0D, 0x0A):
            return KeyEvent(Key.ENTER)
        if byte == 0x20:
            return KeyEvent(Key.SPACE)
        if byte == CTRL_C:
            return KeyEvent(Key.CTRL_C)
        if byte in (BACKSPACE, CTRL_H):
            return KeyEvent(Key.BACKSPACE)
        return KeyEvent(Key.CHAR, byte)

    def _parse_escape_sequence(self) -> KeyEvent:
        try:
            second = self.terminal.read_byte()
            if second not in (ord("["), ord("O")):
                return KeyEvent(Key.UNKNOWN)
            third = self.terminal.read_byte()
        except (EOFError, OSError, PromptReadError):
            return KeyEvent(Key.UNKNOWN)
        direction = _ARROWS.get(third)
        if direction is None:
            return KeyEvent(Key.UNKNOWN)
        return KeyEvent(direction)
