"""Terminal capability, key parsing, raw-mode lifecycle and redraws."""

from .base import StdTerminal, TerminalIO
from .keys import Key, KeyEvent, KeyParser
from .rawmode import RawModeManager
from .renderer import InteractiveRenderer
from .scripted import ScriptedTerminal

__all__ = [
    "InteractiveRenderer",
    "Key",
    "KeyEvent",
    "KeyParser",
    "RawModeManager",
    "ScriptedTerminal",
    "StdTerminal",
    "TerminalIO",
]
