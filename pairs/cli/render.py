"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..board import EMPTY_CELL, FACE_DOWN, Board
from ..cards import Card, SuitColor
from ..session import PopupMessage, PopupSeverity

_SUIT_COLORS = {
    SuitColor.RED: "red",
    SuitColor.BLACK: "bright_white",
}

_POPUP_STYLES = {
    PopupSeverity.INFO: ("Hint", "bright_blue"),
    PopupSeverity.WARN: ("Warning", "yellow"),
    PopupSeverity.ERROR: ("Error", "red"),
}


def format_card(card: Card) -> str:
    """Return a Rich-rendered label for ``card``."""

    color = _SUIT_COLORS[card.color]
    return f"[{color}]{card.label()}[/{color}]"


def render_board(
    board: Board,
    *,
    cursor: tuple[int, int] | None = None,
    title: str = "Board",
) -> RenderableType:
    """Return a Rich panel painting ``board``; ``cursor`` is highlighted."""

    grid = Table.grid(padding=(0, 1))
    for _ in range(board.cols):
        grid.add_column(justify="center")
    for row_idx, row in enumerate(board.grid):
        cells = []
        for col_idx, cell in enumerate(row):
            if cell is None:
                markup = EMPTY_CELL
            elif cell.flipped:
                markup = f"[bright_blue]{FACE_DOWN}[/bright_blue]"
            else:
                markup = format_card(cell.card)
            if cursor == (row_idx, col_idx):
                markup = f"[reverse]{markup}[/reverse]"
            cells.append(Text.from_markup(markup))
        grid.add_row(*cells)
    rows, cols = board.dimensions
    return Panel(grid, title=title, subtitle=f"{rows}x{cols}", border_style="cyan", box=box.ROUNDED, expand=False)


def render_popup(popup: PopupMessage) -> RenderableType:
    title, color = _POPUP_STYLES[popup.severity]
    return Panel(Text(popup.text), title=title, border_style=color, box=box.ROUNDED)
