"""Typer entry-point wiring for the Pairs CLI."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..board import Board
from ..deck import Deck
from ..layout import InvalidBoardSizeError
from ..session import DEFAULT_BOARD_SIZE, SessionConfig
from .render import render_board
from .textual import run_textual_app

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()
err_console = Console(stderr=True)


def _configure_logging(level: str, log_file: Path | None) -> None:
    """Send logs to ``log_file`` when given, otherwise to stderr via Rich."""

    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=err_console, show_path=False)
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


def _logging_to_file() -> bool:
    return any(isinstance(handler, logging.FileHandler) for handler in logging.getLogger().handlers)


def _quiet_console_logging() -> None:
    """Raise the root level to ERROR unless logs go to a file.

    stderr belongs to the terminal UI while it runs.
    """

    if _logging_to_file():
        return
    root = logging.getLogger()
    if root.level < logging.WARNING:
        err_console.print(
            f"[yellow]--log-level {logging.getLevelName(root.level).lower()} ignored without --log-file[/yellow]"
        )
    root.setLevel(max(root.level, logging.ERROR))


def _parse_coordinate(value: str) -> tuple[int, int]:
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError as exc:
        raise typer.BadParameter(f"expected ROW,COL, got {value!r}") from exc
    return row, col


def _fail(exc: Exception) -> typer.Exit:
    err_console.print(f"[bold red]Error:[/bold red] {exc}")
    return typer.Exit(code=1)


@app.callback()
def configure(
    log_level: str = typer.Option(
        "warning",
        help="Logging level (debug, info, warning, error). [b]play[/b] only honours it with --log-file.",
    ),
    log_file: Path | None = typer.Option(None, help="Write logs to this file instead of stderr."),
) -> None:
    """Pairs: a terminal memory card game."""

    _configure_logging(log_level, log_file)


@app.command()
def play(
    size: int = typer.Option(DEFAULT_BOARD_SIZE, help="Number of pairs to deal (1-26)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
) -> None:
    """Start the interactive game."""

    _quiet_console_logging()
    try:
        config = SessionConfig(board_size=size, seed=seed)
    except InvalidBoardSizeError as exc:
        raise _fail(exc) from exc
    code = run_textual_app(config=config)
    raise typer.Exit(code=code)


@app.command()
def board(
    size: int = typer.Option(DEFAULT_BOARD_SIZE, help="Number of pairs to deal (1-26)."),
    seed: int | None = typer.Option(None, help="Random seed for reproducible deals (omit for randomness)."),
    flip: List[str] = typer.Option([], help="Reveal the slot at ROW,COL; may be repeated."),
    plain: bool = typer.Option(False, "--plain", help="Print plain text without colours."),
) -> None:
    """Deal a board and print it."""

    rng = random.Random(seed)
    coordinates = [_parse_coordinate(value) for value in flip]
    try:
        dealt = Board.build(Deck.paired_shuffled(rng), size, rng)
    except InvalidBoardSizeError as exc:
        raise _fail(exc) from exc

    for row, col in coordinates:
        if not (0 <= row < dealt.rows and 0 <= col < dealt.cols):
            raise typer.BadParameter(f"coordinate {row},{col} is outside the {dealt.rows}x{dealt.cols} board")
        dealt.flip(row, col)
    logger.info("dealt %d pairs, flipped %d slot(s)", size, len(coordinates))

    if plain:
        typer.echo(dealt.render_text())
    else:
        console.print(render_board(dealt))


def main() -> None:
    """Entry-point for ``python -m pairs``."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
