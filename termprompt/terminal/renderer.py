from __future__ import annotations

from typing import Callable

from .base import TerminalIO

RenderFn = Callable[[bool], None]


class InteractiveRenderer:
    """Owns the redraw anchor for list-style prompts.

    The prompt is printed once followed by two line breaks and the cursor
    position is saved. Every redraw restores that anchor and clears to the
    end of the screen, so the region never grows while the user navigates.
    """

    def __init__(self, terminal: TerminalIO) -> None:
        self.terminal = terminal

    def render_with_prompt(self, prompt_text: str, render_fn: RenderFn) -> None:
        self.terminal.print(prompt_text)
        self.terminal.reset_format()
        self.terminal.print("\r\n")
        self.terminal.print("\r\n")
        self.terminal.save_cursor()
        render_fn(True)

    def rerender(self, render_fn: RenderFn) -> None:
        self.terminal.restore_cursor()
        self.terminal.reset_format()
        self.terminal.clear_to_end()
        render_fn(False)
