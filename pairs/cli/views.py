"""Composable view primitives for the Pairs CLI."""

from __future__ import annotations

from dataclasses import dataclass

from rich import box
from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..layout import squarest_rect_with_even_area
from ..session import TITLE_BUTTONS, InputMode, Screen, Session
from .render import render_board, render_popup

BANNER = r"""
                          _/
     _/_/_/      _/_/_/      _/  _/_/    _/_/_/
    _/    _/  _/    _/  _/  _/_/      _/_/
   _/    _/  _/    _/  _/  _/            _/_/
  _/_/_/      _/_/_/  _/  _/        _/_/_/
 _/
_/
"""

_SCREEN_TITLES = {
    Screen.PLAYER_COUNT_INPUT: "Player Count",
    Screen.PLAYER_NAME_INPUT: "Players",
}


@dataclass(slots=True)
class SessionView:
    """Renderable for whichever screen ``session`` is currently on."""

    session: Session

    def _title(self) -> RenderableType:
        buttons = Table.grid(padding=(0, 0))
        buttons.add_column(justify="center")
        for idx, button in enumerate(TITLE_BUTTONS):
            selected = idx == self.session.cursor
            style = "bold bright_blue" if selected else "dim"
            buttons.add_row(
                Panel(Text(button.value, style=style, justify="center"), border_style=style, width=20)
            )
        banner = Text(BANNER, style="bold bright_blue")
        return Panel(
            Group(Align.center(banner), Align.center(buttons)),
            title="Pairs",
            border_style="dim",
            box=box.ROUNDED,
        )

    def _help_line(self) -> Text:
        if self.session.input_mode is InputMode.NORMAL:
            hint = "Press [bold]q[/bold] to quit, [bold]e[/bold] to start typing, [bold]n[/bold] to continue."
        else:
            hint = "Press [bold]Esc[/bold] to stop typing, [bold]Enter[/bold] to submit."
        return Text.from_markup(hint)

    def _text_input(self) -> RenderableType:
        session = self.session
        typing = session.input_mode is InputMode.TEXT_ENTRY
        caret = "▏" if typing else ""
        field_panel = Panel(
            Text(session.input_buffer + caret, style="bright_blue" if typing else ""),
            title="Input",
            box=box.SQUARE,
        )
        names = Table.grid(padding=(0, 1))
        names.add_column(justify="left")
        names.add_column(justify="left")
        for idx, name in enumerate(session.player_names, start=1):
            names.add_row(Text(f"P{idx}:", style="bold bright_blue"), Text(name))
        if not session.player_names:
            names.add_row(Text("—", style="dim"), "")
        return Panel(
            Group(self._help_line(), field_panel, Panel(names, title="Player Names List", box=box.SQUARE)),
            title=_SCREEN_TITLES[session.screen],
            border_style="dim",
        )

    def _gameplay(self) -> RenderableType:
        session = self.session
        if session.board is None:
            return Panel(Text("No board dealt", style="red"), title="Gameplay")
        players = ", ".join(session.player_names) or "—"
        footer = Text.from_markup(
            f"[cyan]Players[/cyan]: {players}  •  arrows move, [bold]Enter[/bold] flips, [bold]q[/bold] quits"
        )
        return Group(render_board(session.board, cursor=session.board_cursor), footer)

    def _options(self) -> RenderableType:
        size = self.session.config.board_size
        width, height = squarest_rect_with_even_area(size)
        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="left")
        grid.add_row(f"[cyan]Pairs[/cyan]: ◀ {size} ▶")
        grid.add_row(f"[cyan]Cards[/cyan]: {size * 2} ({height}x{width})")
        grid.add_row("[dim]Left/Right to adjust, Esc to return[/dim]")
        return Panel(grid, title="Options", border_style="green", box=box.ROUNDED)

    def render(self) -> RenderableType:
        screen = self.session.screen
        if screen is Screen.TITLE:
            body = self._title()
        elif screen is Screen.GAMEPLAY:
            body = self._gameplay()
        elif screen is Screen.OPTIONS:
            body = self._options()
        else:
            body = self._text_input()
        if self.session.popup is None:
            return body
        return Group(render_popup(self.session.popup), body)
