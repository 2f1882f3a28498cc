from __future__ import annotations

import sys
import threading
from typing import Callable, Optional, Sequence, TextIO, TypeVar

from rich.spinner import SPINNERS
from rich.style import Style

from ..config.theme import format_message, get_theme
from ..terminal.base import HIDE_CURSOR, SHOW_CURSOR

T = TypeVar("T")

DEFAULT_FRAMES = tuple(SPINNERS["dots"]["frames"])
CLEAR_WHOLE_LINE = "\033[2K\r"


class Spinner:
    """Loading indicator redrawn in place by a background thread."""

    def __init__(
        self,
        message: str = "",
        frames: Sequence[str] = DEFAULT_FRAMES,
        interval: float = 0.1,
        style: Optional[Style] = None,
        writer: Optional[TextIO] = None,
    ) -> None:
        self.frames = tuple(frames) or DEFAULT_FRAMES
        self.interval = interval if interval > 0 else 0.1
        self.style = style
        self.writer = writer or sys.stdout
        self._message = message
        self._frame = 0
        self._stopped = True
        self._cursor_hidden = False
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def message(self) -> str:
        with self._lock:
            return self._message

    @property
    def running(self) -> bool:
        with self._lock:
            return not self._stopped

    def start(self) -> None:
        with self._lock:
            if not self._stopped:
                return
            self._stopped = False
            self._frame = 0
            self._stop_event = threading.Event()
            self._hide_cursor()
            stop_event = self._stop_event
        self._thread = threading.Thread(
            target=self._tick, args=(stop_event,), name="termprompt-spinner", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        with self._lock:
            if self._stopped:
                return
            self._stopped = True
            self._stop_event.set()
            self._write(CLEAR_WHOLE_LINE)
            self._show_cursor()
            thread = self._thread
            self._thread = None
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=max(self.interval * 2, 0.2))

    def update_message(self, message: str) -> None:
        with self._lock:
            self._message = message

    def success(self, message: str) -> None:
        self._finish("✓", message, get_theme().success_style)

    def error(self, message: str) -> None:
        self._finish("✗", message, get_theme().error_style)

    def info(self, message: str) -> None:
        self._finish("ℹ", message, get_theme().info_style)

    def run(self, fn: Callable[[], T]) -> T:
        """Call ``fn`` with the spinner running; it stops even if ``fn`` raises."""
        self.start()
        try:
            return fn()
        finally:
            self.stop()

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def render_frame(self) -> str:
        """Advance one frame and return the text written for it."""
        with self._lock:
            return self._render_locked()

    def _tick(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            with self._lock:
                if self._stopped:
                    return
                self._write(CLEAR_WHOLE_LINE)
                self._write(self._render_locked() + "\r")

    def _render_locked(self) -> str:
        frame = self.frames[self._frame % len(self.frames)]
        self._frame += 1
        theme = get_theme()
        style = self.style or theme.info_style
        text = theme.render(frame, style)
        if self._message:
            text = f"{text} {theme.render(self._message, style)}"
        return text

    def _finish(self, prefix: str, message: str, style: Style) -> None:
        self.stop()
        with self._lock:
            self._write(format_message(prefix, message, style) + "\n")

    def _hide_cursor(self) -> None:
        if not self._cursor_hidden:
            self._write(HIDE_CURSOR)
            self._cursor_hidden = True

    def _show_cursor(self) -> None:
        if self._cursor_hidden:
            self._write(SHOW_CURSOR)
            self._cursor_hidden = False

    def _write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()
