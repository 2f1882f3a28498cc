from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, Iterator, TypeVar

from ..core.errors import RawModeUnavailable
from ..core.session_log import log_info
from .base import TerminalIO

T = TypeVar("T")


class RawModeManager:
    """Run interactive code in raw mode and always put the terminal back."""

    def __init__(self, terminal: TerminalIO) -> None:
        self.terminal = terminal

    @contextmanager
    def raw_mode(self) -> Iterator[TerminalIO]:
        state = self.terminal.make_raw()
        try:
            self.terminal.hide_cursor()
            yield self.terminal
        finally:
            self.terminal.show_cursor()
            self.terminal.restore(state)

    def run_raw(self, body: Callable[[], T]) -> T:
        with self.raw_mode():
            return body()

    def run(self, body: Callable[[], T], fallback: Callable[[], T]) -> T:
        """Run ``body`` in raw mode, or ``fallback`` when raw mode is refused.

        The fallback path makes no terminal mode changes at all.
        """
        try:
            state = self.terminal.make_raw()
        except RawModeUnavailable as exc:
            log_info("rawmode", "rawmode.fallback", {"reason": str(exc)})
            return fallback()
        try:
            self.terminal.hide_cursor()
            return body()
        finally:
            self.terminal.show_cursor()
            self.terminal.restore(state)
