"""
Cross-platform terminal mode control.

Provides the raw-mode primitives used by ``StdTerminal``.
On Unix systems, uses termios/tty.
On Windows, uses console modes through kernel32.
"""

import sys
from dataclasses import dataclass
from typing import Any

if sys.platform == "win32":
    import ctypes
    import msvcrt
    from ctypes import wintypes

    kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)

    STD_INPUT_HANDLE = -10
    ENABLE_PROCESSED_INPUT = 0x0001
    ENABLE_LINE_INPUT = 0x0002
    ENABLE_ECHO_INPUT = 0x0004
    ENABLE_EXTENDED_FLAGS = 0x0080
    ENABLE_QUICK_EDIT_MODE = 0x0040
    ENABLE_VIRTUAL_TERMINAL_INPUT = 0x0200

    kernel32.GetStdHandle.argtypes = [wintypes.DWORD]
    kernel32.GetStdHandle.restype = wintypes.HANDLE
    kernel32.GetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.LPDWORD]
    kernel32.GetConsoleMode.restype = wintypes.BOOL
    kernel32.SetConsoleMode.argtypes = [wintypes.HANDLE, wintypes.DWORD]
    kernel32.SetConsoleMode.restype = wintypes.BOOL

    @dataclass(frozen=True)
    class _TerminalSettings:
        handle: int
        mode: int

    def _input_handle() -> int:
        handle = kernel32.GetStdHandle(STD_INPUT_HANDLE)
        if handle is None or handle == wintypes.HANDLE(-1).value:
            raise OSError("Failed to get Windows console handle")
        return int(handle)

    def tcgetattr(fd: int) -> _TerminalSettings:
        """Get terminal settings (Windows)."""
        handle = _input_handle()
        mode = wintypes.DWORD()
        if not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            raise OSError("Failed to read Windows console mode")
        return _TerminalSettings(handle=handle, mode=mode.value)

    def tcsetattr(fd: int, when: int, settings: _TerminalSettings) -> None:
        """Set terminal settings (Windows)."""
        if not kernel32.SetConsoleMode(settings.handle, settings.mode):
            raise OSError("Failed to restore Windows console mode")

    def setraw(fd: int) -> None:
        """Set terminal to raw mode (Windows).

        Ctrl+C must arrive as a byte, so processed input is switched off
        together with line input and echo.
        """
        settings = tcgetattr(fd)
        mode = settings.mode
        mode &= ~(
            ENABLE_LINE_INPUT
            | ENABLE_ECHO_INPUT
            | ENABLE_PROCESSED_INPUT
            | ENABLE_QUICK_EDIT_MODE
        )
        mode |= ENABLE_EXTENDED_FLAGS | ENABLE_VIRTUAL_TERMINAL_INPUT
        if not kernel32.SetConsoleMode(settings.handle, mode):
            raise OSError("Failed to set Windows console mode")

    TCSADRAIN = 0  # Dummy value for Windows compatibility

    def isatty(fd: int) -> bool:
        try:
            tcgetattr(fd)
        except OSError:
            return False
        return True

    def getbyte(fd: int) -> bytes:
        """Read a single byte from the console (Windows)."""
        return msvcrt.getch()

else:
    import os
    import termios
    import tty

    _TerminalSettings = Any  # type: ignore[misc]
    tcgetattr = termios.tcgetattr  # type: ignore[assignment]
    tcsetattr = termios.tcsetattr  # type: ignore[assignment]
    TCSADRAIN = termios.TCSADRAIN
    setraw = tty.setraw  # type: ignore[assignment]

    def isatty(fd: int) -> bool:
        return os.isatty(fd)

    def getbyte(fd: int) -> bytes:
        """Read a single byte from stdin (Unix)."""
        return os.read(fd, 1)


__all__ = [
    "tcgetattr",
    "tcsetattr",
    "TCSADRAIN",
    "setraw",
    "isatty",
    "getbyte",
    "_TerminalSettings",
]
