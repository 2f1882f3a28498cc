from __future__ import annotations

from typing import Iterable, List, Optional

from rich import box
from rich.console import Console
from rich.table import Table as RichTable
from rich.text import Text

from ..config.theme import get_theme


class Alignment:
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def cell_width(cell: str) -> int:
    """Display width of ``cell`` with any ANSI styling stripped."""
    return Text.from_ansi(cell).cell_len


class Table:
    """Column table with a header row, rendered through rich."""

    def __init__(self, headers: Iterable[str]) -> None:
        self.headers: List[str] = [str(header) for header in headers]
        self.rows: List[List[str]] = []
        self.border = True
        self.row_lines = False
        self.alignment = Alignment.LEFT

    def add_row(self, *cells: object) -> "Table":
        row = [str(cell) for cell in cells]
        if len(row) < len(self.headers):
            row.extend([""] * (len(self.headers) - len(row)))
        self.rows.append(row)
        return self

    def set_border(self, enabled: bool) -> "Table":
        self.border = enabled
        return self

    def set_row_line(self, enabled: bool) -> "Table":
        self.row_lines = enabled
        return self

    def set_alignment(self, alignment: str) -> "Table":
        if alignment not in (Alignment.LEFT, Alignment.CENTER, Alignment.RIGHT):
            raise ValueError(f"unknown alignment: {alignment}")
        self.alignment = alignment
        return self

    def column_widths(self) -> List[int]:
        count = max([len(self.headers)] + [len(row) for row in self.rows])
        widths = [0] * count
        for row in [self.headers, *self.rows]:
            for index, cell in enumerate(row):
                widths[index] = max(widths[index], cell_width(cell))
        return widths

    def build(self) -> RichTable:
        theme = get_theme()
        table = RichTable(
            show_header=bool(self.headers),
            box=box.SQUARE if self.border else None,
            show_lines=self.row_lines,
            header_style=theme.title_style if theme.enable_color else "",
            border_style=theme.border_style if theme.enable_color else "",
            pad_edge=self.border,
        )
        widths = self.column_widths()
        for index, width in enumerate(widths):
            header = self.headers[index] if index < len(self.headers) else ""
            table.add_column(header, justify=self.alignment, min_width=width, no_wrap=True)
        for row in self.rows:
            cells = row + [""] * (len(widths) - len(row))
            table.add_row(*(Text.from_ansi(cell) for cell in cells))
        return table

    def render(self, console: Optional[Console] = None) -> None:
        console = console or Console()
        console.print(self.build())
