"""Board dimension solver."""

from __future__ import annotations

from typing import Final

__all__ = [
    "MIN_PAIRS",
    "MAX_PAIRS",
    "InvalidBoardSizeError",
    "factors_of",
    "validate_board_size",
    "squarest_rect_with_even_area",
]

MIN_PAIRS: Final[int] = 1
MAX_PAIRS: Final[int] = 26


class InvalidBoardSizeError(ValueError):
    """Raised when the requested pair count is outside ``[1, 26]``."""

    def __init__(self, size: int) -> None:
        super().__init__(f"board size must be between {MIN_PAIRS} and {MAX_PAIRS} pairs, got {size}")
        self.size = size


def factors_of(n: int) -> list[int]:
    """Return the divisors of ``n`` in ascending order."""

    return [x for x in range(1, n + 1) if n % x == 0]


def validate_board_size(size: int) -> int:
    if not MIN_PAIRS <= size <= MAX_PAIRS:
        raise InvalidBoardSizeError(size)
    return size


def squarest_rect_with_even_area(size: int) -> tuple[int, int]:
    """Return the most square ``(width, height)`` holding ``2 * size`` cards.

    The first value is never larger than the second.
    """

    area = 2 * validate_board_size(size)
    factors = factors_of(area)
    if not factors:
        return 0, 0
    mid = len(factors) // 2
    if len(factors) % 2 == 0:
        return factors[mid - 1], factors[mid]
    return factors[mid], factors[mid]
