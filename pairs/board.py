"""Board construction and flipping."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .cards import Card
from .deck import Deck
from .layout import squarest_rect_with_even_area, validate_board_size

__all__ = ["CardSlot", "Board", "generate_board", "FACE_DOWN", "EMPTY_CELL"]

logger = logging.getLogger(__name__)

FACE_DOWN = "---"
EMPTY_CELL = "   "


@dataclass(slots=True)
class CardSlot:
    """A placed card plus its face-down flag; only ``flipped`` ever changes."""

    card: Card
    flipped: bool = True

    @property
    def face_up(self) -> bool:
        return not self.flipped

    def toggle(self) -> None:
        self.flipped = not self.flipped


Cell = Optional[CardSlot]


class Board:
    """Rectangular grid of optional card slots."""

    def __init__(self, grid: Sequence[Sequence[Cell]]) -> None:
        self._grid: list[list[Cell]] = [list(row) for row in grid]

    @classmethod
    def build(cls, deck: Deck, size: int, rng: random.Random | None = None) -> "Board":
        """Deal the first ``size`` pairs of ``deck`` face-down onto a grid.

        ``deck`` is expected to be pair-adjacent (see :meth:`Deck.paired_shuffled`).
        The drawn slots are shuffled again so matching cards are not placed
        next to each other.
        """

        validate_board_size(size)
        width, _ = squarest_rect_with_even_area(size)
        slots: list[Cell] = [CardSlot(card) for card in deck[: size * 2]]
        (rng or random).shuffle(slots)
        grid = [slots[idx : idx + width] for idx in range(0, len(slots), width)]
        logger.debug("built %dx%d board for %d pairs", len(grid), width, size)
        return cls(grid)

    @property
    def rows(self) -> int:
        return len(self._grid)

    @property
    def cols(self) -> int:
        return max((len(row) for row in self._grid), default=0)

    @property
    def dimensions(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def grid(self) -> tuple[tuple[Cell, ...], ...]:
        """Read-only snapshot of the grid for presentation code."""

        return tuple(tuple(row) for row in self._grid)

    def __iter__(self) -> Iterator[tuple[Cell, ...]]:
        return iter(self.grid)

    def __len__(self) -> int:
        return self.rows

    def slot(self, row: int, col: int) -> CardSlot:
        """Return the slot at ``(row, col)``.

        Out-of-range coordinates or an empty cell are caller errors and raise
        :class:`IndexError`.
        """

        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} out of range for board with {self.rows} rows")
        cells = self._grid[row]
        if not 0 <= col < len(cells):
            raise IndexError(f"column {col} out of range for row of width {len(cells)}")
        cell = cells[col]
        if cell is None:
            raise IndexError(f"no card at ({row}, {col})")
        return cell

    def flip(self, row: int, col: int) -> None:
        """Toggle the face-down state of the slot at ``(row, col)``."""

        self.slot(row, col).toggle()

    def occupied(self) -> list[CardSlot]:
        return [cell for row in self._grid for cell in row if cell is not None]

    def matches(self, first: tuple[int, int], second: tuple[int, int]) -> bool:
        """Return ``True`` when two distinct coordinates hold equal-rank cards."""

        if first == second:
            return False
        return self.slot(*first).card.rank == self.slot(*second).card.rank

    def render_text(self) -> str:
        lines = []
        for row in self._grid:
            cells = []
            for cell in row:
                if cell is None:
                    cells.append(EMPTY_CELL)
                elif cell.flipped:
                    cells.append(FACE_DOWN)
                else:
                    cells.append(cell.card.label())
            lines.append(" ".join(cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render_text()


def generate_board(size: int, rng: random.Random | None = None) -> Board:
    """Build a board from a freshly paired and shuffled deck."""

    validate_board_size(size)
    return Board.build(Deck.paired_shuffled(rng), size, rng)
